"""Presence checks for the external build toolchain."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Mapping

from ..core.errors import MissingPrerequisiteError

logger = logging.getLogger(__name__)

# executable -> package that provides it
PREREQUISITES: dict[str, str] = {
    "autoconf": "autoconf",
    "automake": "automake",
    "libtoolize": "libtool",
    "rst2man": "python3-docutils",
    "make": "make",
}


def is_executable(candidate: Path) -> bool:
    """Return True when candidate resolves to an executable regular file.

    Symbolic links are followed transitively; dangling links are not
    executable.
    """
    try:
        resolved = candidate.resolve()
    except (OSError, RuntimeError):
        # RuntimeError: symlink loop on older interpreters
        return False
    return resolved.is_file() and os.access(resolved, os.X_OK)


def find_executable(name: str, search_dirs: Iterable[Path]) -> Path | None:
    """Locate an executable in the first directory that provides it."""
    for directory in search_dirs:
        candidate = Path(directory) / name
        if is_executable(candidate):
            return candidate
    return None


def ensure(
    search_dirs: Iterable[Path],
    prerequisites: Mapping[str, str] = PREREQUISITES,
) -> None:
    """Fail on the first prerequisite that is not installed.

    Args:
        search_dirs: Directories searched in order for each executable
        prerequisites: Mapping of executable name to package hint
    """
    dirs = list(search_dirs)
    for name, hint in prerequisites.items():
        found = find_executable(name, dirs)
        if found is None:
            raise MissingPrerequisiteError(name, hint)
        logger.debug(f"Found {name}: {found}")
