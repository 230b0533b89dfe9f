"""Bundled detection engine."""

from singleton_detector.application.detection.reference_graph import (
    BANNER_NODE,
    ReferenceGraphDetector,
    classify_as_other,
    outer_class,
)
from singleton_detector.application.detection.result import AnalysisResult

__all__ = [
    "BANNER_NODE",
    "AnalysisResult",
    "ReferenceGraphDetector",
    "classify_as_other",
    "outer_class",
]
