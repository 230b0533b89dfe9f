"""Domain exceptions."""

from singleton_detector.domain.exceptions.base import (
    SingletonDetectorError,
    SingletonDetectorSignal,
)
from singleton_detector.domain.exceptions.output import OutputWriteError
from singleton_detector.domain.exceptions.resource import ClassFileError, ResourceAccessError
from singleton_detector.domain.exceptions.usage import UsageError, VersionRequested

__all__ = [
    "SingletonDetectorError",
    "SingletonDetectorSignal",
    "UsageError",
    "VersionRequested",
    "ResourceAccessError",
    "ClassFileError",
    "OutputWriteError",
]
