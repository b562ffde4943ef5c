"""Scheduling log — a structured record of what the scheduler did.

The logger records structured entries for scheduling events: which
requests were queued, which policy ran, how far the arm travelled and
which inputs were rejected.  It is an in-memory, append-only buffer,
so the core never writes to a stream on its own; the command-line
front end decides which entries reach the terminal.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single immutable record (level, message, source).
- **Logger** — an append-only log with filtering and clearing.
"""

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """How serious a scheduling event is; higher values are more severe."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The component that generated the event (e.g. "scheduler").

    """

    level: LogLevel
    message: str
    source: str

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only buffer of scheduling events.

    Nothing is written anywhere until a caller asks for the entries.
    """

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str) -> LogEntry:
        """Append a new entry to the log and return it.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Component that generated the event.

        """
        entry = LogEntry(level=level, message=message, source=source)
        self._entries.append(entry)
        return entry

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        Returns:
            A filtered list of log entries.

        """
        return [
            entry
            for entry in self._entries
            if (min_level is None or entry.level >= min_level)
            and (source is None or entry.source == source)
        ]

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)
