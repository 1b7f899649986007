"""
Unit tests for tinct logging.
"""

import json
import logging
from pathlib import Path

from tinct.core.errors import ThemeFetchError
from tinct.core.logging import (
    JSONLFormatter,
    error_fetch_failed,
    get_logger,
    log_with_context,
    setup_logging,
    warn_validation,
)
from tinct.runtime import ValidationWarning, WarningKind
from tinct.tokens import ModeVariant


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_console_only(self):
        """Without a log directory no file is written."""
        assert setup_logging("DEBUG") is None
        assert logging.getLogger("tinct").level == logging.DEBUG

    def test_jsonl_file(self, tmp_path: Path):
        """With a log directory records are written as JSON lines."""
        log_file = setup_logging(logging.INFO, log_dir=tmp_path)
        log_with_context(get_logger("Theme"), logging.WARNING, "hello", brand="acme")
        for handler in logging.getLogger("tinct").handlers:
            handler.flush()

        assert log_file == tmp_path / "tinct.log"
        entry = json.loads(log_file.read_text().splitlines()[-1])
        assert entry["message"] == "hello"
        assert entry["component"] == "Theme"
        assert entry["context"] == {"brand": "acme"}


class TestJSONLFormatter:
    """Tests for JSONLFormatter."""

    def test_exception_info(self):
        """Exceptions are summarized by type and message."""
        error = ValueError("boom")
        record = logging.LogRecord(
            "tinct.test", logging.ERROR, __file__, 1, "failed", None, (ValueError, error, None)
        )
        entry = json.loads(JSONLFormatter().format(record))
        assert entry["exception"] == {"type": "ValueError", "message": "boom"}
        assert entry["component"] == "tinct"


class TestThemeHelpers:
    """Tests for the theme logger helpers."""

    def test_warn_validation_groups_by_kind(self, caplog):
        """Warnings are logged once per kind."""
        warnings = [
            ValidationWarning(kind=WarningKind.MISSING, category="shadow", token="raised"),
            ValidationWarning(
                kind=WarningKind.MISSING,
                category="color",
                token="primary",
                mode=ModeVariant.DARK,
            ),
            ValidationWarning(
                kind=WarningKind.MALFORMED, category="font", token="body", raw="<b>"
            ),
            ValidationWarning(kind=WarningKind.UNKNOWN, category="gradient"),
        ]
        with caplog.at_level(logging.INFO, logger="tinct"):
            warn_validation("acme", warnings)

        messages = [record.getMessage() for record in caplog.records]
        assert 'Missing 2 token(s) in "acme" - using fallbacks' in messages
        assert 'Malformed 1 token(s) in "acme" - using fallbacks' in messages
        assert 'Ignoring 1 unknown token(s) in "acme"' in messages
        missing = next(r for r in caplog.records if r.getMessage().startswith("Missing"))
        assert missing.context == {"tokens": ["shadow.raised", "color.primary.dark"]}

    def test_no_warnings_logs_nothing(self, caplog):
        """An empty warning list is silent."""
        with caplog.at_level(logging.DEBUG, logger="tinct"):
            warn_validation("acme", [])
        assert caplog.records == []

    def test_fetch_failed_hint(self, caplog):
        """404s get a deployment hint."""
        error = ThemeFetchError("acme", "HTTP 404", url="https://cdn/themes/acme.json", status=404)
        with caplog.at_level(logging.ERROR, logger="tinct"):
            error_fetch_failed("acme", error)

        record = caplog.records[0]
        assert record.levelno == logging.ERROR
        assert record.context["status"] == 404
        assert "not found" in record.context["hint"]
