"""Discovery layer.

Functions to discover what to analyze:
- Classpath root from the input path
- Class names under a package prefix
"""

from singleton_detector.application.discovery.classes import (
    CLASS_SUFFIX,
    EXCLUDED_CLASSES,
    NESTED_CLASS_MARKER,
    class_name_for,
    enumerate_classes,
    is_class_path,
    is_reportable,
    resource_for,
)
from singleton_detector.application.discovery.classpath import (
    ARCHIVE_SUFFIXES,
    is_archive,
    open_classpath,
)

__all__ = [
    "ARCHIVE_SUFFIXES",
    "CLASS_SUFFIX",
    "EXCLUDED_CLASSES",
    "NESTED_CLASS_MARKER",
    "class_name_for",
    "enumerate_classes",
    "is_archive",
    "is_class_path",
    "is_reportable",
    "open_classpath",
    "resource_for",
]
