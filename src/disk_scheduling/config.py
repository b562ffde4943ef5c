"""Run configuration — built-in defaults and command-line arguments.

There are no configuration files.  A run is described entirely by three
values: the requested tracks, the arm's starting track and the number
of tracks on the disk.  They come either from the command line or,
when no arguments are given, from the textbook defaults below.
"""

from dataclasses import dataclass

from disk_scheduling.policies import Policy, SchedulingError
from disk_scheduling.scheduler import parse_requests

DEFAULT_REQUESTS = "55 58 39 18 90 160 150 38 184"
DEFAULT_START = 100
DEFAULT_NUMBER_OF_TRACKS = 200

USAGE = "Usage: disk-scheduling-policies <requests> <starting location> <number of tracks>"

_ARG_COUNT = 3


class UsageError(Exception):
    """Raise when the command line has the wrong shape."""


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text)
    except ValueError:
        msg = f"Invalid {what} '{text}'"
        raise SchedulingError(msg) from None


@dataclass(frozen=True)
class RunConfig:
    """Everything one run of the scheduler needs.

    Attributes:
        requests: Requested tracks, in submission order.
        start: The arm's starting track.
        number_of_tracks: Number of tracks on the disk.
        policies: The policies to compare, in report order.
        defaults: True when the values came from the built-in defaults.

    """

    requests: tuple[int, ...]
    start: int
    number_of_tracks: int
    policies: tuple[Policy, ...] = tuple(Policy)
    defaults: bool = False

    @classmethod
    def default(cls) -> "RunConfig":
        """Return the textbook configuration."""
        return cls(
            requests=tuple(parse_requests(DEFAULT_REQUESTS)),
            start=DEFAULT_START,
            number_of_tracks=DEFAULT_NUMBER_OF_TRACKS,
            defaults=True,
        )

    @classmethod
    def from_args(cls, args: list[str]) -> "RunConfig":
        """Build a configuration from positional command-line arguments.

        Args:
            args: Either nothing, or exactly ``[requests, start, tracks]``
                where ``requests`` is a whitespace-separated list.

        Raises:
            UsageError: If the number of arguments is wrong.
            SchedulingError: If a value is not a valid integer.

        """
        if not args:
            return cls.default()
        if len(args) != _ARG_COUNT:
            msg = f"Invalid arguments. {USAGE}"
            raise UsageError(msg)
        requests_text, start_text, tracks_text = args
        return cls(
            requests=tuple(parse_requests(requests_text)),
            start=_parse_int(start_text, "starting location"),
            number_of_tracks=_parse_int(tracks_text, "number of tracks"),
        )

    @property
    def requests_text(self) -> str:
        """Return the requests as a space-separated string."""
        return " ".join(str(track) for track in self.requests)
