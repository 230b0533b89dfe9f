"""Command-line entry point.

Maps parse results, signals and errors to console output and exit codes.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from rich.console import Console

from singleton_detector.application.detection.reference_graph import ReferenceGraphDetector
from singleton_detector.application.services.driver import Driver
from singleton_detector.domain.exceptions import (
    SingletonDetectorError,
    UsageError,
    VersionRequested,
)
from singleton_detector.presentation.cli.logging_config import configure_logging
from singleton_detector.presentation.cli.parser import PROG, USAGE, parse_arguments

if TYPE_CHECKING:
    from collections.abc import Sequence

    from singleton_detector.domain.ports.detector import DetectorProtocol

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def main(
    argv: Sequence[str] | None = None,
    *,
    console: Console | None = None,
    error_console: Console | None = None,
    detector: DetectorProtocol | None = None,
) -> int:
    """Run the detector from the command line.

    Args:
        argv: Arguments without program name. Default: sys.argv[1:]
        console: Observation channel (stdout)
        error_console: Error channel (stderr)
        detector: Detection engine. Default: ReferenceGraphDetector()

    Returns:
        Process exit code
    """
    console = console or Console(highlight=False, emoji=False, soft_wrap=True)
    error_console = error_console or Console(
        stderr=True,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )
    args = sys.argv[1:] if argv is None else argv

    try:
        configure_logging()
        arguments = parse_arguments(args)
    except VersionRequested as signal:
        console.print(f"{PROG} version {signal.version}", markup=False)
        return EXIT_OK
    except UsageError as e:
        console.print(f"{PROG}: {e.reason}\n", markup=False)
        console.print(USAGE, markup=False)
        return EXIT_USAGE

    driver = Driver(detector or ReferenceGraphDetector(), console)
    try:
        driver.run(arguments)
    except SingletonDetectorError as e:
        logger.debug("Run failed", exc_info=True)
        error_console.print(f"{PROG}: {e}", markup=False)
        return EXIT_ERROR

    return EXIT_OK
