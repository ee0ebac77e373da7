"""Tests for configuration, logging and time utilities."""

import logging
from datetime import datetime, timezone

import pytest

from stoolpool.core.config import Settings
from stoolpool.core.logging import AuditLogger, StructuredFormatter, get_logger, setup_logging
from stoolpool.utils.time import (
    coerce_datetime,
    format_datetime,
    format_short_date,
    parse_datetime,
)


class TestSettings:
    """Tests for settings defaults and environment overrides."""

    def test_defaults(self) -> None:
        """Test statistics defaults."""
        settings = Settings()
        assert settings.stats_window_days == 7
        assert settings.stats_trend_size == 7

    def test_env_override(self, monkeypatch) -> None:
        """Test values are read from the environment."""
        monkeypatch.setenv("STATS_WINDOW_DAYS", "14")
        monkeypatch.setenv("ENV", "prod")

        settings = Settings()

        assert settings.stats_window_days == 14
        assert settings.is_prod is True
        assert settings.is_dev is False


class TestLogging:
    """Tests for log formatting."""

    def test_structured_formatter(self) -> None:
        """Test records are rendered as key=value pairs."""
        record = logging.LogRecord("audit", logging.INFO, __file__, 1, "hello", None, None)
        record.action = "entry_recorded"

        output = StructuredFormatter().format(record)

        assert "level=INFO" in output
        assert "logger=audit" in output
        assert "message=hello" in output
        assert "action=entry_recorded" in output

    def test_setup_logging_installs_single_handler(self) -> None:
        """Test repeated setup does not stack handlers."""
        root = logging.getLogger()
        saved = root.handlers[:]
        try:
            setup_logging()
            setup_logging()
            assert len(root.handlers) == 1
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in saved:
                root.addHandler(handler)

    def test_audit_logger(self, caplog) -> None:
        """Test audit lines name the action and entity."""
        with caplog.at_level(logging.INFO, logger="audit"):
            AuditLogger().log("entry_deleted", "health_entry", "3", {"index": 3})

        assert "AUDIT: action=entry_deleted entity=health_entry:3" in caplog.text

    def test_audit_record_carries_entry_id(self, caplog) -> None:
        """Test audit records expose the entry id to the structured formatter."""
        with caplog.at_level(logging.INFO, logger="audit"):
            AuditLogger().log("entry_recorded", "health_entry", "7")

        output = StructuredFormatter().format(caplog.records[-1])

        assert "action=entry_recorded" in output
        assert "entry_id=7" in output

    def test_get_logger(self) -> None:
        """Test loggers are returned by name."""
        assert get_logger("stoolpool.test").name == "stoolpool.test"


class TestTimeUtils:
    """Tests for date parsing and formatting."""

    @pytest.mark.parametrize(
        "text",
        [
            "2026-10-17T08:05:13Z",
            "2026-10-17T08:05:13.000Z",
            "2026-10-17T08:05:13+00:00",
            "10/17/2026, 8:05:13 AM",
            "10/17/2026, 8:05:13\u202fAM",
        ],
    )
    def test_parse_known_formats(self, text: str) -> None:
        """Test ISO and device locale formats parse to the same instant."""
        assert parse_datetime(text) == datetime(2026, 10, 17, 8, 5, 13, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "text", ["2026-10-05T08:00:00.123456", "2026-10-05 08:00:00.123456"]
    )
    def test_parse_fractional_without_offset(self, text: str) -> None:
        """Test naive isoformat output with microseconds is read as UTC."""
        assert parse_datetime(text) == datetime(
            2026, 10, 5, 8, 0, 0, 123456, tzinfo=timezone.utc
        )

    def test_parse_pm(self) -> None:
        """Test afternoon times from the device locale format."""
        assert parse_datetime("10/17/2026, 1:05:13 PM").hour == 13

    def test_parse_invalid(self) -> None:
        """Test unknown formats raise."""
        with pytest.raises(ValueError):
            parse_datetime("Invalid Date")

    def test_coerce_datetime(self) -> None:
        """Test coercion never raises."""
        naive = datetime(2026, 10, 17, 8, 0)

        assert coerce_datetime(naive).tzinfo == timezone.utc
        assert coerce_datetime("Invalid Date") is None
        assert coerce_datetime("") is None
        assert coerce_datetime(None) is None
        assert coerce_datetime(12345) is None

    def test_format(self) -> None:
        """Test ISO and short chart formatting."""
        dt = datetime(2026, 10, 5, 8, 0, tzinfo=timezone.utc)

        assert format_datetime(dt) == "2026-10-05T08:00:00Z"
        assert format_short_date(dt) == "Oct 5"


class TestSession:
    """Tests for the session dependency."""

    async def test_get_db_yields_session(self) -> None:
        """Test a session is yielded from the configured factory."""
        from sqlalchemy.ext.asyncio import AsyncSession

        from stoolpool.db.session import get_db

        async for session in get_db():
            assert isinstance(session, AsyncSession)
