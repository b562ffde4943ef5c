"""Tests for the scheduling log.

The logger records structured entries for scheduling events so that
the front ends can decide what to show.
"""

from disk_scheduling.logging import LogEntry, Logger, LogLevel


class TestLogLevel:
    """Verify log level ordering."""

    def test_levels_are_ordered(self) -> None:
        """DEBUG < INFO < WARNING < ERROR."""
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR


class TestLogEntry:
    """Verify log entry structure."""

    def test_entry_has_fields(self) -> None:
        """A log entry should store level, message and source."""
        entry = LogEntry(level=LogLevel.INFO, message="ran SCAN", source="scheduler")
        assert entry.level is LogLevel.INFO
        assert entry.message == "ran SCAN"
        assert entry.source == "scheduler"

    def test_entry_str(self) -> None:
        """String form is ``[LEVEL] source: message``."""
        entry = LogEntry(level=LogLevel.ERROR, message="bad track", source="cli")
        assert str(entry) == "[ERROR] cli: bad track"


class TestLogger:
    """Verify the logger."""

    def test_log_stores_entries(self) -> None:
        """Logged entries should be retrievable."""
        logger = Logger()
        logger.log(LogLevel.INFO, "queued", source="scheduler")
        assert len(logger) == 1
        assert logger.entries[0].message == "queued"

    def test_log_returns_entry(self) -> None:
        """The new entry is handed back to the caller."""
        logger = Logger()
        entry = logger.log(LogLevel.WARNING, "odd input", source="web")
        assert entry is logger.entries[0]

    def test_entries_are_ordered(self) -> None:
        """Entries should be in chronological order."""
        logger = Logger()
        logger.log(LogLevel.INFO, "first", source="test")
        logger.log(LogLevel.INFO, "second", source="test")
        assert [e.message for e in logger.entries] == ["first", "second"]

    def test_entries_returns_copy(self) -> None:
        """Mutating the returned list does not change the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "kept", source="test")
        logger.entries.clear()
        assert len(logger) == 1

    def test_filter_by_level(self) -> None:
        """Filtering by minimum level drops quieter entries."""
        logger = Logger()
        logger.log(LogLevel.DEBUG, "noise", source="scheduler")
        logger.log(LogLevel.ERROR, "failure", source="scheduler")
        result = logger.filter(min_level=LogLevel.WARNING)
        assert [e.message for e in result] == ["failure"]

    def test_filter_by_source(self) -> None:
        """Filtering by source keeps only that component."""
        logger = Logger()
        logger.log(LogLevel.INFO, "a", source="cli")
        logger.log(LogLevel.INFO, "b", source="web")
        assert [e.message for e in logger.filter(source="web")] == ["b"]

    def test_filter_without_criteria_returns_copy(self) -> None:
        """An unfiltered result is a fresh list."""
        logger = Logger()
        logger.log(LogLevel.INFO, "a", source="cli")
        result = logger.filter()
        result.clear()
        assert len(logger) == 1

    def test_clear(self) -> None:
        """Clearing empties the log."""
        logger = Logger()
        logger.log(LogLevel.INFO, "a", source="cli")
        logger.clear()
        assert logger.entries == []
