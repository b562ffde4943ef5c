"""Scheduling results — visit orders, seek distances and a request queue.

The policies in ``disk_scheduling.policies`` only decide the *order* of
the arm's visits.  This module turns an order into the numbers that
matter:

- **total distance** — the sum of the seek distances between
  consecutive visits, including the start and any forced trip to the
  end of the disk.
- **average distance** — the total divided by the number of tracks
  that were actually requested.  The starting location and the end of
  the disk don't count as requests.

``schedule`` runs one policy and packs everything into an immutable
``ScheduleResult``; ``schedule_all`` does the same for several policies
so they can be compared side by side.  ``DiskScheduler`` keeps a queue
of requests and remembers where the arm stopped between batches.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import pairwise
from typing import Any

from disk_scheduling.logging import Logger, LogLevel
from disk_scheduling.policies import Policy, SchedulingError, policy_for

_SOURCE = "scheduler"


@dataclass(frozen=True)
class ScheduleResult:
    """The outcome of scheduling one batch of requests with one policy.

    Attributes:
        policy: The policy that produced the visit order.
        start: The arm's starting track.
        requests: The requested tracks, in submission order.
        visit_order: Every track the arm visits, starting with ``start``.
        total_distance: Sum of the seek distances along ``visit_order``.
        average_distance: ``total_distance`` per requested track.

    """

    policy: Policy
    start: int
    requests: tuple[int, ...]
    visit_order: tuple[int, ...]
    total_distance: int
    average_distance: float

    @property
    def requested_count(self) -> int:
        """Return the number of requested tracks (start and ends excluded)."""
        return len(self.requests)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the result."""
        return {
            "policy": str(self.policy),
            "start": self.start,
            "requests": list(self.requests),
            "visit_order": list(self.visit_order),
            "requested_count": self.requested_count,
            "total_distance": self.total_distance,
            "average_distance": self.average_distance,
        }


def total_distance(order: Sequence[int]) -> int:
    """Return the sum of seek distances between consecutive visits."""
    return sum(abs(b - a) for a, b in pairwise(order))


def average_distance(total: int, requested_count: int) -> float:
    """Return the distance travelled per request, or 0 when nothing was requested."""
    if requested_count == 0:
        return 0.0
    return total / requested_count


def parse_requests(text: str) -> list[int]:
    """Parse a whitespace-separated list of track numbers.

    Args:
        text: Tracks such as ``"55 58 39 18"``.  Blank text means no
            requests.

    Returns:
        The track numbers in the order given.

    Raises:
        SchedulingError: If a token is not an integer or is negative.

    """
    tracks: list[int] = []
    for token in text.split():
        try:
            track = int(token)
        except ValueError:
            msg = f"Invalid track number '{token}'"
            raise SchedulingError(msg) from None
        if track < 0:
            msg = f"Requested track must be non-negative, got {track}"
            raise SchedulingError(msg)
        tracks.append(track)
    return tracks


def schedule(
    requests: Sequence[int],
    *,
    start: int,
    policy: Policy,
    number_of_tracks: int | None = None,
) -> ScheduleResult:
    """Schedule ``requests`` with ``policy`` and measure the arm's travel.

    Args:
        requests: Requested tracks, in submission order.
        start: The arm's starting track.
        policy: Which policy to run.
        number_of_tracks: Size of the disk, required by the sweeping
            policies.

    Returns:
        The visit order together with its total and average distance.

    Raises:
        SchedulingError: If the policy cannot run on these inputs.

    """
    strategy = policy_for(policy, number_of_tracks=number_of_tracks)
    order = strategy.schedule(list(requests), head=start)
    total = total_distance(order)
    return ScheduleResult(
        policy=policy,
        start=start,
        requests=tuple(requests),
        visit_order=tuple(order),
        total_distance=total,
        average_distance=average_distance(total, len(requests)),
    )


def schedule_all(
    requests: Sequence[int],
    *,
    start: int,
    number_of_tracks: int,
    policies: Iterable[Policy] = tuple(Policy),
) -> list[ScheduleResult]:
    """Schedule the same requests under several policies, in the order given."""
    return [
        schedule(requests, start=start, policy=policy, number_of_tracks=number_of_tracks)
        for policy in policies
    ]


class DiskScheduler:
    """Disk scheduler — ties a policy to a request queue.

    The scheduler accepts requests one at a time, then runs the selected
    policy over the whole batch.  The arm stays where the batch left it,
    so the next batch starts from there.
    """

    def __init__(
        self,
        *,
        policy: Policy,
        head: int = 0,
        number_of_tracks: int | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Create a disk scheduler with a policy and initial head position."""
        if head < 0:
            msg = f"Starting location must be non-negative, got {head}"
            raise SchedulingError(msg)
        self._policy = policy
        self._head = head
        self._number_of_tracks = number_of_tracks
        self._logger = logger
        self._queue: list[int] = []

    @property
    def head(self) -> int:
        """Return current head position."""
        return self._head

    @property
    def number_of_tracks(self) -> int | None:
        """Return the size of the disk, if known."""
        return self._number_of_tracks

    @property
    def policy(self) -> Policy:
        """Return the current scheduling policy."""
        return self._policy

    @policy.setter
    def policy(self, value: Policy) -> None:
        """Swap the scheduling policy (Strategy pattern)."""
        self._policy = value

    @property
    def pending(self) -> list[int]:
        """Return the current request queue."""
        return list(self._queue)

    def add_request(self, track: int) -> None:
        """Add a request for a track.

        Raises:
            SchedulingError: If the track is negative.

        """
        if track < 0:
            msg = f"Requested track must be non-negative, got {track}"
            raise SchedulingError(msg)
        self._queue.append(track)
        self._log(LogLevel.DEBUG, f"queued track {track}")

    def run(self) -> ScheduleResult:
        """Run the scheduling policy on queued requests.

        Moves the head to the last visited track and clears the queue.
        An empty queue leaves the arm where it is.

        Returns:
            The result of scheduling the queued requests.

        Raises:
            SchedulingError: If the policy cannot run on the queue.  The
                queue is left untouched.

        """
        if not self._queue:
            return ScheduleResult(
                policy=self._policy,
                start=self._head,
                requests=(),
                visit_order=(self._head,),
                total_distance=0,
                average_distance=0.0,
            )
        try:
            result = schedule(
                self._queue,
                start=self._head,
                policy=self._policy,
                number_of_tracks=self._number_of_tracks,
            )
        except SchedulingError as e:
            self._log(LogLevel.ERROR, str(e))
            raise
        self._head = result.visit_order[-1]
        self._queue.clear()
        self._log(
            LogLevel.INFO,
            f"{result.policy} serviced {result.requested_count} requests, "
            f"travelled {result.total_distance} tracks",
        )
        return result

    def _log(self, level: LogLevel, message: str) -> None:
        if self._logger is not None:
            self._logger.log(level, message, source=_SOURCE)
