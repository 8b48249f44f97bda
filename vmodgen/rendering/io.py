"""File I/O operations for rendering."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from ..core.errors import FileWriteError

FILE_MODE = 0o644
EXECUTABLE_MODE = 0o755


def ensure_dir(path: Path) -> None:
    """Create a directory and its parents.

    Args:
        path: Directory to create
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileWriteError(path, e) from e


def atomic_write_text(path: Path, text: str, mode: int = FILE_MODE) -> None:
    """Write text to a file atomically using a temporary file.

    Existing files are replaced.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    ensure_dir(path.parent)

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    except OSError as e:
        raise FileWriteError(path, e) from e

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except OSError as e:
        raise FileWriteError(path, e) from e
    finally:
        tmp_path.unlink(missing_ok=True)


def touch(path: Path) -> None:
    """Create an empty file."""
    try:
        path.touch()
    except OSError as e:
        raise FileWriteError(path, e) from e


def make_executable(path: Path) -> None:
    try:
        os.chmod(path, EXECUTABLE_MODE)
    except OSError as e:
        raise FileWriteError(path, e) from e
