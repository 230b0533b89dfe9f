"""Domain model."""

from singleton_detector.domain.model.arguments import ParsedArguments
from singleton_detector.domain.model.category import Category
from singleton_detector.domain.model.flags import Flags
from singleton_detector.domain.model.statistics import DetectionStatistics

__all__ = [
    "Category",
    "DetectionStatistics",
    "Flags",
    "ParsedArguments",
]
