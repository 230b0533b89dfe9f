"""Base exceptions for singleton_detector domain."""


class SingletonDetectorError(Exception):
    """Root exception for all singleton_detector errors.

    All domain exceptions inherit from this.
    Allows catching all detector-specific errors.
    """


# N818: Signals are NOT errors, no "Error" suffix per PEP 8.
class SingletonDetectorSignal(Exception):  # noqa: N818
    """Base for flow-control signals (not errors).

    Like StopIteration: raised to unwind to the caller that decides
    what to do, typically the CLI entry point.
    """
