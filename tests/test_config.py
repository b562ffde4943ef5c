"""Tests for the run configuration built from command-line arguments."""

import pytest

from disk_scheduling.config import (
    DEFAULT_NUMBER_OF_TRACKS,
    DEFAULT_START,
    RunConfig,
    UsageError,
)
from disk_scheduling.policies import Policy, SchedulingError


class TestDefaults:
    """No arguments means the built-in course example."""

    def test_no_args_uses_defaults(self) -> None:
        """The default run is the course example."""
        config = RunConfig.from_args([])
        assert config.requests == (55, 58, 39, 18, 90, 160, 150, 38, 184)
        assert config.start == DEFAULT_START == 100
        assert config.number_of_tracks == DEFAULT_NUMBER_OF_TRACKS == 200
        assert config.defaults is True

    def test_all_policies_by_default(self) -> None:
        """Every policy is compared."""
        assert RunConfig.default().policies == tuple(Policy)


class TestFromArgs:
    """Three positional arguments describe a custom run."""

    def test_three_args(self) -> None:
        """Requests, start and tracks are parsed."""
        config = RunConfig.from_args(["10 20 30", "15", "50"])
        assert config.requests == (10, 20, 30)
        assert config.start == 15
        assert config.number_of_tracks == 50
        assert config.defaults is False

    def test_empty_request_string(self) -> None:
        """A blank request list is allowed."""
        assert RunConfig.from_args(["", "15", "50"]).requests == ()

    @pytest.mark.parametrize("args", [["1"], ["1 2", "3"], ["1", "2", "3", "4"]])
    def test_wrong_count(self, args: list[str]) -> None:
        """Anything other than zero or three arguments is a usage error."""
        with pytest.raises(UsageError, match="Usage"):
            RunConfig.from_args(args)

    def test_bad_start(self) -> None:
        """A non-integer start is an invalid argument."""
        with pytest.raises(SchedulingError, match="starting location"):
            RunConfig.from_args(["10 20", "x", "50"])

    def test_bad_tracks(self) -> None:
        """A non-integer track count is an invalid argument."""
        with pytest.raises(SchedulingError, match="number of tracks"):
            RunConfig.from_args(["10 20", "5", "many"])

    def test_bad_request(self) -> None:
        """A non-integer request is an invalid argument."""
        with pytest.raises(SchedulingError):
            RunConfig.from_args(["10 2x", "5", "50"])

    def test_requests_text(self) -> None:
        """Requests render back as a space-separated list."""
        assert RunConfig.from_args(["  3   1 2", "0", "5"]).requests_text == "3 1 2"
