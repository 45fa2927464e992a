"""
Unit tests for structured logging helpers.
"""
import logging

from string_suggestion.utils.logger import StructuredFormatter, get_logger


class TestStructuredFormatter:
    """Tests for StructuredFormatter output."""

    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            name="string_suggestion.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Suggestion computed",
            args=(),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_base_format(self):
        line = StructuredFormatter().format(self._record())
        parts = line.split(" | ")
        assert parts[1].strip() == "INFO"
        assert parts[2] == "string_suggestion.test"
        assert parts[3] == "Suggestion computed"

    def test_extra_fields_appended(self):
        """Test extra fields are rendered as key=value pairs."""
        line = StructuredFormatter().format(self._record(word="teh", suggestion="the"))
        assert line.endswith("| word=teh suggestion=the")


class TestStructuredLogger:
    """Tests for get_logger()."""

    def test_namespace(self):
        assert get_logger("services.corrector").name == "string_suggestion.services.corrector"

    def test_reserved_fields_prefixed(self, caplog):
        """Test keyword fields that clash with LogRecord attributes get a ctx_ prefix."""
        logger = get_logger("tests")
        package_logger = logging.getLogger("string_suggestion")
        package_logger.addHandler(caplog.handler)
        try:
            with caplog.at_level(logging.INFO, logger="string_suggestion"):
                logger.info("Checked", name="teh", issue_count=1)
        finally:
            package_logger.removeHandler(caplog.handler)

        record = caplog.records[-1]
        assert record.ctx_name == "teh"
        assert record.issue_count == 1
