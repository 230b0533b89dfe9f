"""Classpath root adapters."""

from singleton_detector.infrastructure.classpath.archive import ArchiveClasspathRoot
from singleton_detector.infrastructure.classpath.directory import DirectoryClasspathRoot

__all__ = [
    "ArchiveClasspathRoot",
    "DirectoryClasspathRoot",
]
