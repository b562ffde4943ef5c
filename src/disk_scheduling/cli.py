"""Command-line front end — compare every policy on one set of requests.

Usage::

    disk-scheduling-policies
    disk-scheduling-policies "55 58 39 18 90 160 150 38 184" 100 200

With no arguments the textbook example is used.  With three arguments
they are the requested tracks, the arm's starting track and the number
of tracks on the disk.

This module keeps the I/O separate from the scheduling logic: ``run``
is pure and returns the report text, ``main`` does the printing and
turns errors into exit statuses.
"""

import os
import sys

from disk_scheduling.config import RunConfig, UsageError
from disk_scheduling.logging import Logger, LogLevel
from disk_scheduling.policies import SchedulingError
from disk_scheduling.report import format_report, use_color
from disk_scheduling.scheduler import schedule_all

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2

_SOURCE = "cli"


def run(config: RunConfig, *, logger: Logger | None = None, color: bool = False) -> str:
    """Schedule the configured requests under every policy and format the report.

    Raises:
        SchedulingError: If the inputs are invalid for any policy.

    """
    results = schedule_all(
        config.requests,
        start=config.start,
        number_of_tracks=config.number_of_tracks,
        policies=config.policies,
    )
    if logger is not None:
        for result in results:
            logger.log(
                LogLevel.INFO,
                f"{result.policy}: total {result.total_distance}",
                source=_SOURCE,
            )
    return format_report(config, results, color=color)


def main(argv: list[str] | None = None) -> int:
    """Run the command-line interface and return the exit status.

    This is the ``disk-scheduling-policies`` console entry point.
    """
    args = sys.argv[1:] if argv is None else argv
    logger = Logger()
    try:
        config = RunConfig.from_args(args)
        if config.defaults:
            print("No arguments passed, using default values.")  # noqa: T201
        report = run(config, color=use_color(sys.stdout, os.environ))
    except UsageError as e:
        print(logger.log(LogLevel.ERROR, str(e), source=_SOURCE), file=sys.stderr)  # noqa: T201
        return EXIT_USAGE
    except SchedulingError as e:
        print(logger.log(LogLevel.ERROR, str(e), source=_SOURCE), file=sys.stderr)  # noqa: T201
        return EXIT_ERROR
    print(report, end="")  # noqa: T201
    return EXIT_OK
