"""Unconditional emission of the top-level build files."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.models import RenderTask, TemplateVariables
from ..rendering import engine
from ..rendering.io import make_executable
from ..rendering.store import TOP_LEVEL_FILES, TemplateStore

logger = logging.getLogger(__name__)

EXECUTABLE_FILES: tuple[str, ...] = ("autogen.sh",)


def emit_files(
    root: Path, store: TemplateStore, variables: TemplateVariables
) -> list[Path]:
    """Render every top-level file, overwriting what is on disk.

    Args:
        root: Project root
        store: Template catalog
        variables: Template variables

    Returns:
        Written paths, in emission order
    """
    tasks = [
        RenderTask(template_name=name, output_path=Path(name))
        for name in TOP_LEVEL_FILES
    ]
    outputs = engine.render_all(store, tasks, variables, root)

    for name in EXECUTABLE_FILES:
        make_executable(root / name)
        logger.debug(f"Marked {name} executable")

    return outputs
