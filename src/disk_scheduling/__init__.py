"""Disk scheduling policies — the order in which a disk arm visits tracks.

Re-exports public symbols so callers can write::

    from disk_scheduling import Policy, schedule
"""

from disk_scheduling.policies import (
    CLOOKPolicy,
    CSCANPolicy,
    DiskPolicy,
    FIFOPolicy,
    LOOKPolicy,
    Policy,
    SCANPolicy,
    SchedulingError,
    SSTFPolicy,
    parse_policy,
    policy_for,
)
from disk_scheduling.scheduler import (
    DiskScheduler,
    ScheduleResult,
    average_distance,
    parse_requests,
    schedule,
    schedule_all,
    total_distance,
)

__all__ = [
    "CLOOKPolicy",
    "CSCANPolicy",
    "DiskPolicy",
    "DiskScheduler",
    "FIFOPolicy",
    "LOOKPolicy",
    "Policy",
    "SCANPolicy",
    "SSTFPolicy",
    "ScheduleResult",
    "SchedulingError",
    "average_distance",
    "parse_policy",
    "parse_requests",
    "policy_for",
    "schedule",
    "schedule_all",
    "total_distance",
]
