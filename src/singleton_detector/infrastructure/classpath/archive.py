"""Archive (jar/zip) classpath root.

Implements ClasspathRootPort over the entries of a zip-format archive.
Entry table is read once at construction; the archive handle is
released immediately and re-opened only to read single resources.
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from singleton_detector.domain.exceptions.resource import ResourceAccessError
from singleton_detector.domain.ports.classpath_root import ClasspathRootPort

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)


def normalize_entry_name(raw: str) -> str:
    """Normalize an archive entry name to 'a/b/C.class' form.

    Backslashes become slashes, leading and trailing slashes are dropped.
    """
    return raw.replace("\\", "/").strip("/")


class ArchiveClasspathRoot(ClasspathRootPort):
    """Classpath root backed by a jar or zip archive.

    Directory entries that the archive does not store explicitly are
    synthesized from file entry paths, so listing behaves exactly like
    the equivalent directory tree.
    """

    def __init__(self, origin: Path) -> None:
        """Initialize root and read the archive's entry table.

        Args:
            origin: Archive file

        Raises:
            TypeError: If origin is None
            ResourceAccessError: If archive cannot be opened or is malformed
        """
        if origin is None:
            raise TypeError("origin must not be None")

        self._origin = Path(origin)
        raw_names = self._read_entry_names()
        self._files, self._children = self._index(raw_names)
        logger.debug(
            "Indexed %s: %d files, %d packages",
            self._origin,
            len(self._files),
            len(self._children),
        )

    def __repr__(self) -> str:
        return f"ArchiveClasspathRoot({str(self._origin)!r})"

    @property
    def origin(self) -> Path:
        return self._origin

    def list_resources(self, prefix: str) -> tuple[str, ...]:
        """List entries one level below prefix.

        Args:
            prefix: Slash-terminated in-archive path, or "" for the top level

        Returns:
            Sorted bare entry names. Empty if prefix names a file entry.

        Raises:
            ResourceAccessError: If no entry matches prefix
        """
        key = normalize_entry_name(prefix)
        if key in self._files:
            return ()
        children = self._children.get(key)
        if children is None:
            raise ResourceAccessError(f"{self._origin}!/{prefix}", "no such entry in archive")
        return children

    def read_resource(self, name: str) -> bytes:
        key = normalize_entry_name(name)
        raw = self._files.get(key)
        if raw is None:
            raise ResourceAccessError(f"{self._origin}!/{name}", "no such entry in archive")
        try:
            with zipfile.ZipFile(self._origin) as archive:
                return archive.read(raw)
        except zipfile.BadZipFile as e:
            raise ResourceAccessError(self._origin, f"malformed archive: {e}") from e
        except OSError as e:
            raise ResourceAccessError(self._origin, e.strerror or str(e)) from e

    def _read_entry_names(self) -> list[str]:
        """Read raw entry names. FAIL-FIRST on any archive error."""
        try:
            with zipfile.ZipFile(self._origin) as archive:
                return archive.namelist()
        except FileNotFoundError as e:
            raise ResourceAccessError(self._origin, "archive not found") from e
        except IsADirectoryError as e:
            raise ResourceAccessError(self._origin, "is a directory, not an archive") from e
        except PermissionError as e:
            raise ResourceAccessError(self._origin, "permission denied") from e
        except zipfile.BadZipFile as e:
            raise ResourceAccessError(self._origin, f"malformed archive: {e}") from e
        except OSError as e:
            raise ResourceAccessError(self._origin, e.strerror or str(e)) from e

    @staticmethod
    def _index(
        raw_names: Iterable[str],
    ) -> tuple[Mapping[str, str], Mapping[str, tuple[str, ...]]]:
        """Build file table and package → children table.

        Returns:
            (normalized file name → raw entry name,
             normalized package path → sorted child names).
            The top level is keyed by "".
        """
        files: dict[str, str] = {}
        # top level always exists, even for an empty archive
        children: dict[str, set[str]] = {"": set()}

        for raw in raw_names:
            name = normalize_entry_name(raw)
            if not name:
                continue
            if raw.replace("\\", "/").endswith("/"):
                children.setdefault(name, set())
            else:
                files[name] = raw
            # register name and every implied parent directory
            path = name
            while path:
                parent, _, base = path.rpartition("/")
                children.setdefault(parent, set()).add(base)
                path = parent

        # a file entry has no children of its own
        for name in files:
            children.pop(name, None)

        frozen = {key: tuple(sorted(names)) for key, names in children.items()}
        return MappingProxyType(files), MappingProxyType(frozen)
