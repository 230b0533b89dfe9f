"""Domain ports (interfaces/protocols)."""

from singleton_detector.domain.ports.classpath_root import ClasspathRootPort
from singleton_detector.domain.ports.detector import AnalysisReport, DetectorProtocol

__all__ = [
    "AnalysisReport",
    "ClasspathRootPort",
    "DetectorProtocol",
]
