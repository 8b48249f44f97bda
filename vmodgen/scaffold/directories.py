"""Guarded creation of the m4/ and src/ directories.

Both directories hold files users edit or regenerate with other tools, so an
existing directory is never modified.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.models import RenderTask, TemplateVariables
from ..rendering import engine
from ..rendering.io import ensure_dir, touch
from ..rendering.store import SEED_FILES, SEED_TOKEN, TemplateStore

logger = logging.getLogger(__name__)

M4_DIR = "m4"
SRC_DIR = "src"
PLACEHOLDER = "PLACEHOLDER"


def _skip_existing(path: Path) -> bool:
    if path.exists():
        logger.warning(f"{path} already exists, not touching it")
        return True
    return False


def seed_output_name(template_name: str, module_name: str) -> str:
    """Map a seed template name to the file it produces for a module."""
    return template_name.replace(SEED_TOKEN, module_name)


def inflate_m4(root: Path) -> bool:
    """Create ``m4/`` with an empty placeholder.

    Returns:
        True when the directory was created, False when it already existed
    """
    target = root / M4_DIR
    if _skip_existing(target):
        return False

    ensure_dir(target)
    touch(target / PLACEHOLDER)
    logger.info(f"Created {target}")
    return True


def inflate_src(
    root: Path, store: TemplateStore, variables: TemplateVariables
) -> list[Path]:
    """Create ``src/`` and render the starter sources into it.

    Returns:
        Paths of the seed files written, empty when ``src/`` already existed
    """
    target = root / SRC_DIR
    if _skip_existing(target):
        return []

    ensure_dir(target)
    tasks = [
        RenderTask(
            template_name=name,
            output_path=Path(seed_output_name(name, variables.vmod.name)),
        )
        for name in SEED_FILES
    ]
    return engine.render_all(store, tasks, variables, root)
