"""Structured logging for analysis runs using structlog.

Pipeline events carry ``run_id`` and, inside a stage, ``stage`` and
``stage_index``. Raw input text never reaches a log record: the
``drop_input_text`` processor strips it and leaves only its length.
"""

import os
import sys
import uuid
from typing import Any, MutableMapping, Optional
import structlog
from structlog.processors import JSONRenderer
from structlog.contextvars import merge_contextvars

# Check if we're in development mode (TTY and LOG_FORMAT=console)
IS_TTY = sys.stderr.isatty()
LOG_FORMAT = os.getenv("VERINEWS_LOG_FORMAT", "console").lower()
LOG_LEVEL = os.getenv("VERINEWS_LOG_LEVEL", "INFO").upper()

# Event keys that may hold analysed text
TEXT_KEYS = ("text", "input_text")


def drop_input_text(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """
    structlog processor replacing analysed text with its length.

    Example:
        >>> drop_input_text(None, "info", {"event": "run_started", "text": "abc"})
        {'event': 'run_started', 'text_length': 3}
    """
    for key in TEXT_KEYS:
        if key in event_dict:
            value = event_dict.pop(key)
            event_dict.setdefault("text_length", len(value) if isinstance(value, str) else 0)
    return event_dict


def configure_structured_logging() -> None:
    """
    Configure structlog for pipeline run events.

    Uses:
    - Console renderer for development (colorized, human-readable)
    - JSON renderer for production (structured, machine-readable)
    - drop_input_text ahead of rendering so no renderer sees raw input
    """
    processors = [
        merge_contextvars,
        drop_input_text,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if IS_TTY and LOG_FORMAT == "console":
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    else:
        processors.append(JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_structured_logger(
    name: str,
    run_id: Optional[str] = None,
    **additional_context: Any,
) -> structlog.BoundLogger:
    """
    Get a structured logger, optionally bound to one analysis run.

    Args:
        name: Logger name (typically module name)
        run_id: Analysis run ID to bind
        **additional_context: Additional context to bind

    Example:
        >>> log = get_structured_logger("pipeline", run_id="abc-123")
        >>> log.info("run_started", stages=6)
    """
    logger = structlog.get_logger(name)

    if run_id:
        logger = logger.bind(run_id=run_id)

    if additional_context:
        logger = logger.bind(**additional_context)

    return logger


def bind_stage_context(logger: Any, stage_name: str, stage_index: int, stage_total: int) -> Any:
    """
    Bind the stage a pipeline is currently executing.

    Example:
        >>> stage_log = bind_stage_context(run_log, "pattern", 2, 6)
        >>> stage_log.debug("stage_started")  # stage="pattern", stage_index="3/6"
    """
    return logger.bind(stage=stage_name, stage_index=f"{stage_index + 1}/{stage_total}")


def new_run_id() -> str:
    """Generate an ID for one analysis run; also the controller's supersede token."""
    return str(uuid.uuid4())


# Configure on module import
configure_structured_logging()


__all__ = [
    "TEXT_KEYS",
    "bind_stage_context",
    "configure_structured_logging",
    "drop_input_text",
    "get_structured_logger",
    "new_run_id",
]
