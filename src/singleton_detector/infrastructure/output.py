"""Output sink: all-or-nothing file write."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from singleton_detector.domain.exceptions.output import OutputWriteError

logger = logging.getLogger(__name__)


def write_output(path: Path, text: str) -> None:
    """Overwrite path with text.

    Writes a temporary file next to the target and renames it over the
    target, so the target is either fully replaced or left untouched.

    Args:
        path: Output file
        text: Full file contents

    Raises:
        OutputWriteError: If the file cannot be written
    """
    path = Path(path)
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except FileNotFoundError as e:
        raise OutputWriteError(path, "directory does not exist") from e
    except PermissionError as e:
        raise OutputWriteError(path, "permission denied") from e
    except OSError as e:
        raise OutputWriteError(path, e.strerror or str(e)) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as out:
            out.write(text)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except OSError as e:
        Path(tmp_name).unlink(missing_ok=True)
        raise OutputWriteError(path, e.strerror or str(e)) from e

    logger.debug("Wrote %d characters to %s", len(text), path)


def _target_mode(path: Path) -> int:
    """Permission bits for the replacement file.

    An existing target keeps its mode. A new one gets what open() would
    give it: 0o666 filtered by the process umask.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
