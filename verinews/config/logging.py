"""Component logging for the analysis engine using loguru.

Each engine component logs through a logger bound to its component name
(FeatureExtractor, SuspicionScorer, PipelineController, cli, ...). Records
never carry the analysed text: ``redact_input_text`` swaps it for its length
before any sink sees the record.
"""

import sys
from typing import Any, Dict, Optional

from loguru import logger

from verinews.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> | <level>{message}</level>"
)

# Extra keys that may hold analysed text
TEXT_KEYS = ("text", "input_text")


def redact_input_text(record: Dict[str, Any]) -> None:
    """
    loguru patcher replacing analysed text in ``extra`` with its length.

    Also guarantees a ``component`` key so the console format never fails
    on records logged through the bare logger.
    """
    extra = record["extra"]
    for key in TEXT_KEYS:
        if key in extra:
            value = extra.pop(key)
            extra.setdefault("text_length", len(value) if isinstance(value, str) else 0)
    extra.setdefault("component", "verinews")


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Configure loguru sinks for the engine.

    Behavior:
    - Development (TTY + console format): colorized, one line per event
    - Production (non-TTY or json format): JSON records on stderr, keeping
      stdout free for command output such as ``analyze --json``
    - Level and format default to settings; explicit arguments override them

    Args:
        level: Log level override (e.g. "DEBUG")
        log_format: "console" or "json" override
    """
    level = (level or settings.log_level).upper()
    use_console_format = (log_format or settings.log_format).lower() == "console"

    logger.remove()
    logger.configure(patcher=redact_input_text)

    if sys.stderr.isatty() and use_console_format:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)
    else:
        logger.add(
            sys.stderr,
            format="{message}",
            level=level,
            serialize=True,
            diagnose=False,
        )


def get_logger(component: str):
    """
    Get a logger bound to an engine component.

    Example:
        >>> log = get_logger("cli")
        >>> log.info("Analysis requested", text=user_text)  # logged as text_length
    """
    return logger.bind(component=component)


# Configure logging on module import
configure_logging()

__all__ = ["logger", "get_logger", "configure_logging", "redact_input_text", "TEXT_KEYS"]
