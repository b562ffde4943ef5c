"""Report formatting — turn schedule results into terminal text.

The scheduler core returns data; this module decides how it looks.
All helpers are pure and return strings, so the caller chooses where
the text goes.  Colour is opt-in: ``use_color`` decides whether a
stream should get ANSI escape codes, honouring the ``NO_COLOR``
convention.
"""

from collections.abc import Iterable, Mapping
from typing import TextIO

from disk_scheduling.config import RunConfig
from disk_scheduling.scheduler import ScheduleResult

_RESET = "\033[0m"
_BOLD = "\033[1m"
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"


def use_color(stream: TextIO, environ: Mapping[str, str]) -> bool:
    """Return True if ``stream`` is a terminal and ``NO_COLOR`` is not set."""
    if environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _paint(text: str, code: str, *, color: bool) -> str:
    return f"{code}{text}{_RESET}" if color else text


def format_order(order: Iterable[int]) -> str:
    """Format a visit order as ``[100, 90, 58]``."""
    return "[" + ", ".join(str(track) for track in order) + "]"


def format_header(config: RunConfig, *, color: bool = False) -> str:
    """Format the inputs of a run."""
    lines = [
        f"Locations requested: {config.requests_text}",
        f"Starting location: {config.start}",
        f"Number of tracks: {config.number_of_tracks}",
    ]
    return _paint("\n".join(lines), _BOLD, color=color)


def format_result(result: ScheduleResult, *, color: bool = False) -> str:
    """Format one policy's visit order and distances.

    Example::

        SSTF order: [100, 90, 58, 55, 39, 38, 18, 150, 160, 184]
        Sum of distances: 248
        Average tracks traversed per request: 27.555556

    """
    name = _paint(str(result.policy), _CYAN, color=color)
    total = _paint(str(result.total_distance), _GREEN, color=color)
    average = _paint(f"{result.average_distance:f}", _YELLOW, color=color)
    return (
        f"{name} order: {format_order(result.visit_order)}\n"
        f"Sum of distances: {total}\n"
        f"Average tracks traversed per request: {average}"
    )


def format_report(
    config: RunConfig,
    results: Iterable[ScheduleResult],
    *,
    color: bool = False,
) -> str:
    """Format the header followed by every result, separated by blank lines."""
    sections = [format_header(config, color=color)]
    sections.extend(format_result(result, color=color) for result in results)
    return "\n\n".join(sections) + "\n"
