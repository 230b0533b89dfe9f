"""Classpath root selection by input path."""

from __future__ import annotations

from pathlib import Path

from singleton_detector.domain.ports.classpath_root import ClasspathRootPort
from singleton_detector.infrastructure.classpath.archive import ArchiveClasspathRoot
from singleton_detector.infrastructure.classpath.directory import DirectoryClasspathRoot

ARCHIVE_SUFFIXES = frozenset({".jar", ".zip"})


def is_archive(path: Path | str) -> bool:
    """Check if path names an archive by its suffix (case-insensitive)."""
    return Path(path).suffix.lower() in ARCHIVE_SUFFIXES


def open_classpath(path: Path | str) -> ClasspathRootPort:
    """Build the classpath root for a directory or archive path.

    Args:
        path: Classes directory, or .jar/.zip archive

    Returns:
        ArchiveClasspathRoot for archive suffixes, DirectoryClasspathRoot otherwise

    Raises:
        ResourceAccessError: If an archive cannot be opened
    """
    if is_archive(path):
        return ArchiveClasspathRoot(Path(path))
    return DirectoryClasspathRoot(Path(path))
