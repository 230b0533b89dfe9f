"""Parsed command line: flags plus normalized positional values."""

from __future__ import annotations

from dataclasses import dataclass

from singleton_detector.domain.model.flags import Flags


@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """Result of a successful argument parse.

    Attributes:
        flags: Recognized toggles and threshold
        input_path: Classes directory or archive
        output_path: Graph output file
        prefix: Slash-terminated package path, or "" for the root package
    """

    flags: Flags
    input_path: str
    output_path: str
    prefix: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.input_path:
            raise ValueError("input_path must not be empty")
        if not self.output_path:
            raise ValueError("output_path must not be empty")
        if self.prefix and not self.prefix.endswith("/"):
            raise ValueError(f"prefix must end with '/', got {self.prefix!r}")
