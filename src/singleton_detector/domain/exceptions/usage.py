"""Command-line usage exceptions and signals."""

from singleton_detector.domain.exceptions.base import (
    SingletonDetectorError,
    SingletonDetectorSignal,
)


class UsageError(SingletonDetectorError):
    """Malformed or incomplete command line.

    Raised for a missing -t value, an unrecognized flag, a non-integer
    threshold or a wrong positional count. Nothing has been done yet
    when this is raised.

    Attributes:
        reason: Why the arguments were rejected (must not be empty)
    """

    def __init__(self, reason: str) -> None:
        # FAIL-FIRST validation
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(reason)


class VersionRequested(SingletonDetectorSignal):  # noqa: N818
    """Signal: -V was given, print version and stop.

    Attributes:
        version: Version string to print
    """

    def __init__(self, version: str) -> None:
        if not version:
            raise ValueError("version must not be empty")

        self.version = version
        super().__init__(f"version {version}")
