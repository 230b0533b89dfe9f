"""Reporters for detection output."""

from singleton_detector.application.reporters.statistics import StatisticsReporter, summary_line

__all__ = [
    "StatisticsReporter",
    "summary_line",
]
