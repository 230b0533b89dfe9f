"""Detector protocol for detection engines.

Users plug in their own engine by implementing this Protocol.
The driver never inspects class contents itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Collection

    from singleton_detector.domain.model.flags import Flags
    from singleton_detector.domain.ports.classpath_root import ClasspathRootPort


class AnalysisReport(Protocol):
    """What a detection run hands back to the driver."""

    @property
    def graph_output(self) -> str:
        """Graph document to be written to the output file."""
        ...

    def stats_report(self, verbose: bool) -> str:
        """Human-readable statistics.

        Args:
            verbose: Include per-class detail
        """
        ...


class DetectorProtocol(Protocol):
    """Contract for detection engines.

    Example:
        class CountingDetector:
            def analyze(self, root, prefix, flags, class_names):
                return MyReport(graph_output="<graphml/>", count=len(class_names))
    """

    def analyze(
        self,
        root: ClasspathRootPort,
        prefix: str,
        flags: Flags,
        class_names: Collection[str],
    ) -> AnalysisReport:
        """Analyze discovered classes.

        Args:
            root: Classpath root the classes were found in (engine may read bytecode)
            prefix: Normalized package prefix the classes were found under
            flags: Parsed command-line flags
            class_names: Unique fully qualified class names

        Returns:
            Report with graph output and statistics
        """
        ...
