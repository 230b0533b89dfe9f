"""Classpath resource access exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from singleton_detector.domain.exceptions.base import SingletonDetectorError

if TYPE_CHECKING:
    from pathlib import Path


class ResourceAccessError(SingletonDetectorError):
    """Error reading a classpath root or one of its resources.

    Attributes:
        location: Directory, archive or resource that failed
        reason: Why access failed
    """

    def __init__(self, location: Path | str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if location is None:
            raise TypeError("location must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.location = location
        self.reason = reason
        super().__init__(f"Cannot read {location}: {reason}")


class ClassFileError(ResourceAccessError):
    """Class resource is not a well-formed class file.

    Attributes:
        location: Resource name of the class file
        reason: What is malformed
    """
