"""Tests for log redaction of analysed text."""

from loguru import logger

from verinews.config.logging import get_logger, redact_input_text
from verinews.utils.logging import bind_stage_context, drop_input_text


class TestLoguruRedaction:
    """Component loggers never emit analysed text."""

    def test_patcher_replaces_text_with_length(self):
        record = {"extra": {"component": "cli", "text": "shocking words"}}

        redact_input_text(record)

        assert "text" not in record["extra"]
        assert record["extra"]["text_length"] == 14

    def test_patcher_adds_missing_component(self):
        record = {"extra": {}}

        redact_input_text(record)

        assert record["extra"]["component"] == "verinews"

    def test_component_logger_record_is_redacted(self):
        records = []
        handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
        try:
            get_logger("PipelineController").info("Analysis started", text="leaked memo")
        finally:
            logger.remove(handler_id)

        extra = records[-1]["extra"]
        assert extra["component"] == "PipelineController"
        assert extra["text_length"] == 11
        assert "text" not in extra
        assert "leaked memo" not in records[-1]["message"]


class TestStructlogRedaction:
    """Pipeline events never carry analysed text."""

    def test_processor_replaces_text_with_length(self):
        event = drop_input_text(None, "info", {"event": "run_started", "text": "abc"})

        assert event == {"event": "run_started", "text_length": 3}

    def test_processor_leaves_other_events_untouched(self):
        event = {"event": "stage_completed", "stage": "pattern"}

        assert drop_input_text(None, "debug", dict(event)) == event

    def test_explicit_length_wins(self):
        event = drop_input_text(None, "info", {"input_text": "abcdef", "text_length": 2})

        assert event == {"text_length": 2}


class TestStageContext:
    """Stage context binding for pipeline logs."""

    def test_binds_stage_name_and_position(self):
        class BindRecorder:
            def __init__(self):
                self.context = {}

            def bind(self, **kwargs):
                self.context.update(kwargs)
                return self

        recorder = bind_stage_context(BindRecorder(), "credibility", 3, 6)

        assert recorder.context == {"stage": "credibility", "stage_index": "4/6"}
