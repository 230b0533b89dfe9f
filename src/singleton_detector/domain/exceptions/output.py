"""Output sink exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from singleton_detector.domain.exceptions.base import SingletonDetectorError

if TYPE_CHECKING:
    from pathlib import Path


class OutputWriteError(SingletonDetectorError):
    """Graph output could not be written.

    The target is left untouched: either fully written or not at all.

    Attributes:
        path: Output file path
        reason: Why the write failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")
