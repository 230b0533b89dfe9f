"""Driver service: discovery → detection → output → statistics."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

from singleton_detector.application.discovery.classes import enumerate_classes
from singleton_detector.application.discovery.classpath import open_classpath
from singleton_detector.infrastructure.output import write_output

if TYPE_CHECKING:
    from singleton_detector.domain.model.arguments import ParsedArguments
    from singleton_detector.domain.ports.detector import AnalysisReport, DetectorProtocol

logger = logging.getLogger(__name__)


class Driver:
    """Runs one analysis, each step depending on the previous one.

    Contracts:
        - Nothing is written unless discovery and detection succeed
        - Output file written in one all-or-nothing step
        - Verbose messages go to the console as they happen

    Methods:
        run(): Full pipeline for parsed arguments
    """

    def __init__(self, detector: DetectorProtocol, console: Console | None = None) -> None:
        """Initialize driver.

        Args:
            detector: Detection engine to hand discovered classes to
            console: Observation channel. Default: stdout console.

        Raises:
            TypeError: If detector is None
        """
        if detector is None:
            raise TypeError("detector must not be None")

        self._detector = detector
        self._console = console or Console(highlight=False, emoji=False, soft_wrap=True)

    def run(self, arguments: ParsedArguments) -> AnalysisReport:
        """Analyze the classes named by arguments and write the graph.

        Args:
            arguments: Parsed command line

        Returns:
            Report produced by the detector

        Raises:
            ResourceAccessError: Input missing, unreadable or malformed
            OutputWriteError: Output file could not be written
        """
        flags = arguments.flags

        root = open_classpath(arguments.input_path)
        logger.debug("Using %r with prefix %r", root, arguments.prefix)

        on_found = self._echo_found if flags.verbose else None
        classes = enumerate_classes(root, arguments.prefix, on_found)

        self._progress(flags.verbose, "Processing... ")
        report = self._detector.analyze(root, arguments.prefix, flags, classes)
        self._progress(flags.verbose, "done.\nGenerating output graph... ")

        write_output(Path(arguments.output_path), report.graph_output)
        self._progress(flags.verbose, "done.\n")

        if flags.show_stats:
            self._console.print()
            self._console.print(report.stats_report(True), markup=False, end="")

        return report

    def _echo_found(self, class_name: str) -> None:
        self._console.print(f"Found: {class_name}", markup=False)

    def _progress(self, verbose: bool, message: str) -> None:
        if verbose:
            self._console.print(message, markup=False, end="")
