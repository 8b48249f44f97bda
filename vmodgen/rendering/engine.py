"""Template rendering engine."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from jinja2 import Environment, StrictUndefined, TemplateError

from ..core.errors import TemplateRenderError
from ..core.models import RenderTask, TemplateVariables
from .io import FILE_MODE, atomic_write_text
from .store import TemplateStore

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def build_environment() -> Environment:
    """Create the Jinja2 environment shared by all renders.

    Undefined variables are errors; ``x or y`` gives the truthy fallback
    and ``|upper`` the case transform used by the templates.
    """
    return Environment(
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_template(
    store: TemplateStore, name: str, variables: TemplateVariables
) -> str:
    """Render a catalog template to text.

    Args:
        store: Template catalog
        name: Logical template name
        variables: Template variables

    Returns:
        Rendered text
    """
    source = store.source(name)
    logger.debug(f"Rendering template: {name}")

    try:
        template = build_environment().from_string(source)
        return template.render(**variables.as_context())
    except TemplateError as e:
        raise TemplateRenderError(name, e) from e


def render_task(
    store: TemplateStore,
    task: RenderTask,
    variables: TemplateVariables,
    dest_root: Path,
    file_mode: int = FILE_MODE,
) -> Path:
    """Render a single template task and write the result.

    Args:
        store: Template catalog
        task: Render task to execute
        variables: Template variables
        dest_root: Base directory for relative paths
        file_mode: File permissions

    Returns:
        Output file path
    """
    rendered_text = render_template(store, task.template_name, variables)

    output_path = task.output_path
    if not output_path.is_absolute():
        output_path = dest_root / output_path

    atomic_write_text(output_path, rendered_text, mode=file_mode)
    logger.info(f"Rendered {task.template_name} → {output_path}")

    return output_path


def render_all(
    store: TemplateStore,
    tasks: Iterable[RenderTask],
    variables: TemplateVariables,
    dest_root: Path,
) -> list[Path]:
    """Render tasks in order, stopping at the first failure."""
    return [render_task(store, task, variables, dest_root) for task in tasks]
