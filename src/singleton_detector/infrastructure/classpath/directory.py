"""Filesystem directory classpath root.

Implements ClasspathRootPort over a directory of compiled classes.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from singleton_detector.domain.exceptions.resource import ResourceAccessError
from singleton_detector.domain.ports.classpath_root import ClasspathRootPort

logger = logging.getLogger(__name__)


class DirectoryClasspathRoot(ClasspathRootPort):
    """Classpath root backed by a directory tree.

    Stateless apart from the origin. Directory handles are opened and
    closed within each call.

    Symbolic links to a directory that is already on the current
    traversal path are not listed, so recursive walks terminate even
    when the tree contains link cycles.
    """

    def __init__(self, origin: Path) -> None:
        """Initialize root.

        Args:
            origin: Directory holding the class tree

        Raises:
            TypeError: If origin is None
        """
        if origin is None:
            raise TypeError("origin must not be None")

        self._origin = Path(origin)

    def __repr__(self) -> str:
        return f"DirectoryClasspathRoot({str(self._origin)!r})"

    @property
    def origin(self) -> Path:
        return self._origin

    def list_resources(self, prefix: str) -> tuple[str, ...]:
        """List entries of origin/prefix.

        Args:
            prefix: Slash-terminated relative path, or "" for the origin

        Returns:
            Sorted bare entry names. Empty if prefix names a regular file
            below origin.

        Raises:
            ResourceAccessError: If prefix does not exist or is unreadable,
                or if origin itself is not a directory
        """
        target = self._origin / prefix if prefix else self._origin

        # origin must be a directory; only leaves below it list as empty
        if prefix and target.is_file():
            return ()

        on_path = self._resolved_ancestors(prefix)
        names: list[str] = []
        try:
            with os.scandir(target) as entries:
                for entry in entries:
                    if entry.is_symlink() and entry.is_dir():
                        resolved = Path(entry.path).resolve()
                        if resolved in on_path:
                            logger.debug("Skipping link cycle %s -> %s", entry.path, resolved)
                            continue
                    names.append(entry.name)
        except FileNotFoundError as e:
            raise ResourceAccessError(target, "no such directory") from e
        except NotADirectoryError as e:
            raise ResourceAccessError(target, "not a directory") from e
        except PermissionError as e:
            raise ResourceAccessError(target, "permission denied") from e
        except OSError as e:
            raise ResourceAccessError(target, e.strerror or str(e)) from e

        logger.debug("Listed %d entries under %s", len(names), target)
        return tuple(sorted(names))

    def read_resource(self, name: str) -> bytes:
        path = self._origin / name
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise ResourceAccessError(path, "file not found") from e
        except PermissionError as e:
            raise ResourceAccessError(path, "permission denied") from e
        except OSError as e:
            raise ResourceAccessError(path, e.strerror or str(e)) from e

    def _resolved_ancestors(self, prefix: str) -> frozenset[Path]:
        """Resolved paths of origin and of every directory along prefix."""
        current = self._origin
        resolved = {current.resolve()}
        for part in prefix.split("/"):
            if part:
                current = current / part
                resolved.add(current.resolve())
        return frozenset(resolved)
