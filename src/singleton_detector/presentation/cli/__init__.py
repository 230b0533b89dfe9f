"""Command-line interface."""

from singleton_detector.presentation.cli.main import main
from singleton_detector.presentation.cli.parser import USAGE, parse_arguments

__all__ = [
    "USAGE",
    "main",
    "parse_arguments",
]
