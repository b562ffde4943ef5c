"""Disk scheduling policies — ordering the arm's visits across tracks.

When several requests are waiting for the disk, the arm has to move
between tracks to service them.  The dominant cost is **seek distance**,
how far the arm travels.  A disk scheduling policy decides the
*order* in which the tracks are visited.

Think of the arm like an elevator in a building:
    - **FIFO** — stop at every floor in the order buttons were pressed.
    - **SSTF** — always go to the nearest requested floor (greedy).
    - **SCAN** — go all the way up, then all the way down.
    - **C-SCAN** — go all the way up, jump to the ground floor, go up again.
    - **LOOK** / **C-LOOK** — like SCAN / C-SCAN, but turn around at the
      last request instead of the top or bottom of the building.

Every policy returns the complete *visit order*: the arm's starting
track first, then each track the arm stops at, including the end of
the disk for SCAN and C-SCAN.

All policies implement the ``DiskPolicy`` protocol (the Strategy
pattern).  ``Policy`` is the plain selector used by callers, and
``policy_for`` turns a selector into a strategy.
"""

from bisect import bisect_left
from enum import StrEnum
from typing import Protocol


class SchedulingError(Exception):
    """Raise when a policy is given an invalid argument."""


class Policy(StrEnum):
    """Selector for the available disk scheduling policies."""

    FIFO = "FIFO"
    SSTF = "SSTF"
    SCAN = "SCAN"
    C_SCAN = "C-SCAN"
    LOOK = "LOOK"
    C_LOOK = "C-LOOK"

    @property
    def needs_tracks(self) -> bool:
        """Return True if the policy needs to know the number of tracks."""
        return self in _SWEEPING


_SWEEPING = frozenset({Policy.SCAN, Policy.C_SCAN, Policy.LOOK, Policy.C_LOOK})


class DiskPolicy(Protocol):
    """Protocol for disk scheduling policies (Strategy pattern)."""

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return the order in which the arm visits tracks.

        Args:
            requests: List of track numbers to visit.
            head: Current position of the disk arm.

        Returns:
            Ordered list of track numbers, starting with ``head``.

        """
        ...  # pragma: no cover


def _check_tracks(requests: list[int], head: int) -> None:
    """Reject negative track numbers."""
    if head < 0:
        msg = f"Starting location must be non-negative, got {head}"
        raise SchedulingError(msg)
    for track in requests:
        if track < 0:
            msg = f"Requested track must be non-negative, got {track}"
            raise SchedulingError(msg)


def starting_rank(locations: list[int], head: int) -> int:
    """Return the index of ``head`` in sorted ``locations``.

    The insertion point is taken on the left, so when ``head`` occurs
    more than once the first occurrence wins and every duplicate sits
    above the returned index.
    """
    return bisect_left(locations, head)


class FIFOPolicy:
    """First In, First Out — service in arrival order.

    The simplest policy.  Fair (no starvation), but the arm zigzags
    wildly across the disk, producing a high total seek distance.
    """

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return the head followed by the requests in their original order."""
        _check_tracks(requests, head)
        return [head, *requests]


class SSTFPolicy:
    """Shortest Seek Time First — always go to the nearest request.

    A greedy algorithm that minimises the immediate seek distance.
    Better total movement than FIFO, but distant requests can starve
    while the arm hovers near a busy region.

    Since the visited tracks always form a contiguous run of the sorted
    locations, the nearest unvisited track is one of the two neighbours
    of that run.  Two cursors walk outwards from the head's rank, so the
    whole schedule costs one sort.  When both neighbours are equally
    far away the lower track is visited first.
    """

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return the visit order, nearest-first from the current head."""
        _check_tracks(requests, head)
        locations = sorted([head, *requests])
        current = starting_rank(locations, head)
        low = current - 1
        high = current + 1
        order = [head]
        while low >= 0 or high < len(locations):
            position = locations[current]
            low_distance = position - locations[low] if low >= 0 else None
            high_distance = locations[high] - position if high < len(locations) else None
            if high_distance is None or (
                low_distance is not None and low_distance <= high_distance
            ):
                current = low
                low -= 1
            else:
                current = high
                high += 1
            order.append(locations[current])
        return order


class _SweepPolicy:
    """Shared state for the policies that sweep across the whole disk.

    A sweep needs the number of tracks, both to know where the last
    track is and to reject requests that fall off the disk.

    Args:
        number_of_tracks: Total number of tracks on the disk.

    """

    name = "sweep"

    def __init__(self, *, number_of_tracks: int | None) -> None:
        """Create a sweeping policy for a disk with ``number_of_tracks`` tracks."""
        if number_of_tracks is None:
            msg = f"{self.name} requires the number of tracks"
            raise SchedulingError(msg)
        if number_of_tracks <= 0:
            msg = f"Number of tracks must be positive, got {number_of_tracks}"
            raise SchedulingError(msg)
        self._number_of_tracks = number_of_tracks

    @property
    def number_of_tracks(self) -> int:
        """Return the number of tracks on the disk."""
        return self._number_of_tracks

    @property
    def last_track(self) -> int:
        """Return the highest track number on the disk."""
        return self._number_of_tracks - 1

    def _split(self, requests: list[int], head: int) -> tuple[list[int], list[int]]:
        """Split the sorted requests around the head.

        Returns the requests above the head (ascending) and below it
        (ascending).  Requests for the head's own track are serviced
        without moving, so they are absorbed into the starting visit.
        """
        _check_tracks(requests, head)
        highest = max([head, *requests])
        if highest > self.last_track:
            msg = f"Track {highest} is outside a disk of {self._number_of_tracks} tracks"
            raise SchedulingError(msg)
        locations = sorted([head, *requests])
        rank = starting_rank(locations, head)
        lower = locations[:rank]
        upper = [track for track in locations[rank:] if track != head]
        return upper, lower


def _extend_to(order: list[int], track: int) -> None:
    """Move the arm to ``track`` unless it is already there."""
    if order[-1] != track:
        order.append(track)


class SCANPolicy(_SweepPolicy):
    """SCAN (elevator algorithm) — sweep up to the end, then reverse.

    The arm moves up servicing every request on the way and carries on
    to the last track even when nothing is requested there.  It then
    reverses, services the remaining requests and travels all the way
    down to track 0.  No request waits more than two sweeps.
    """

    name = "SCAN"

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return the visit order in SCAN (elevator) order."""
        upper, lower = self._split(requests, head)
        order = [head, *upper]
        _extend_to(order, self.last_track)
        order.extend(reversed(lower))
        _extend_to(order, 0)
        return order


class LOOKPolicy(_SweepPolicy):
    """LOOK — SCAN that turns around at the last request.

    The arm sweeps up only as far as the highest pending request, then
    reverses and sweeps down only as far as the lowest one.  The ends of
    the disk are visited only when a request asks for them.
    """

    name = "LOOK"

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return the visit order in LOOK order."""
        upper, lower = self._split(requests, head)
        return [head, *upper, *reversed(lower)]


class CSCANPolicy(_SweepPolicy):
    """Circular SCAN — sweep up, jump back to track 0, sweep up again.

    Unlike SCAN, C-SCAN only services requests in one direction.  After
    reaching the last track the arm jumps straight back to track 0 and
    sweeps upward again.  The jump is real arm movement and counts
    towards the seek distance.

    With regular SCAN the middle of the disk is favoured, since the arm
    passes it twice per cycle.  C-SCAN treats every track alike.
    """

    name = "C-SCAN"

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return the visit order in C-SCAN order."""
        upper, lower = self._split(requests, head)
        order = [head, *upper]
        _extend_to(order, self.last_track)
        if not lower or lower[0] != 0:
            _extend_to(order, 0)
        order.extend(lower)
        return order


class CLOOKPolicy(_SweepPolicy):
    """Circular LOOK — C-SCAN that jumps from the last request to the first.

    The arm sweeps up to the highest pending request, then jumps to the
    lowest pending request (not to track 0) and sweeps up again.
    """

    name = "C-LOOK"

    def schedule(self, requests: list[int], *, head: int) -> list[int]:
        """Return the visit order in C-LOOK order."""
        upper, lower = self._split(requests, head)
        return [head, *upper, *lower]


def policy_for(policy: Policy, *, number_of_tracks: int | None = None) -> DiskPolicy:
    """Return the strategy implementing ``policy``.

    Args:
        policy: The policy selector.
        number_of_tracks: Total number of tracks, required by the
            sweeping policies (SCAN, C-SCAN, LOOK and C-LOOK).

    Returns:
        A ``DiskPolicy`` ready to schedule requests.

    Raises:
        SchedulingError: If a sweeping policy is selected without a
            valid number of tracks.

    """
    match policy:
        case Policy.FIFO:
            return FIFOPolicy()
        case Policy.SSTF:
            return SSTFPolicy()
        case Policy.SCAN:
            return SCANPolicy(number_of_tracks=number_of_tracks)
        case Policy.C_SCAN:
            return CSCANPolicy(number_of_tracks=number_of_tracks)
        case Policy.LOOK:
            return LOOKPolicy(number_of_tracks=number_of_tracks)
        case Policy.C_LOOK:
            return CLOOKPolicy(number_of_tracks=number_of_tracks)


def parse_policy(name: str) -> Policy:
    """Return the policy selector for a display name such as ``"C-SCAN"``.

    Matching ignores case and accepts ``_`` in place of ``-``.

    Raises:
        SchedulingError: If no policy has that name.

    """
    normalised = name.strip().upper().replace("_", "-")
    try:
        return Policy(normalised)
    except ValueError:
        msg = f"Unknown policy '{name}'"
        raise SchedulingError(msg) from None
