"""Classpath root port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ClasspathRootPort(ABC):
    """Port for listing and reading class resources under one origin.

    Infrastructure layer provides a directory and an archive
    implementation. Callers cannot tell them apart after construction.
    """

    @property
    @abstractmethod
    def origin(self) -> Path:
        """Directory or archive this root was built from."""
        ...

    @abstractmethod
    def list_resources(self, prefix: str) -> tuple[str, ...]:
        """List immediate children under prefix.

        Args:
            prefix: Slash-terminated relative path, or "" for the root

        Returns:
            Bare child names (class files and sub-packages), sorted,
            without trailing separators. Empty if prefix names a leaf.

        Raises:
            ResourceAccessError: If prefix names nothing or cannot be read
        """
        ...

    @abstractmethod
    def read_resource(self, name: str) -> bytes:
        """Read a resource.

        Args:
            name: Slash-separated resource path, e.g. "com/example/Foo.class"

        Returns:
            Raw resource bytes

        Raises:
            ResourceAccessError: If resource is missing or unreadable
        """
        ...
