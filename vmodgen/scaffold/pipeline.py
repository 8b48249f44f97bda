"""End-to-end generation run."""

from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path

from ..config.loader import load_config
from ..config.settings import Settings
from ..core.models import TemplateVariables
from ..environment import prerequisites
from ..rendering.store import TemplateStore, default_store
from .directories import M4_DIR, PLACEHOLDER, inflate_m4, inflate_src
from .emitter import emit_files

logger = logging.getLogger(__name__)


def generate(
    root: Path,
    settings: Settings,
    *,
    today: dt.date | None = None,
    store: TemplateStore | None = None,
) -> list[Path]:
    """Scaffold a VMOD build tree under root.

    Loads the configuration, checks prerequisites, inflates ``m4/`` and
    ``src/`` when missing and rewrites the top-level files. Any error aborts
    the run; nothing is written before the configuration and prerequisites
    check out.

    Args:
        root: Project root holding the configuration file
        settings: Run-time settings
        today: Build date, defaults to the current local date
        store: Template catalog, defaults to the embedded one

    Returns:
        Paths of all files written by this run
    """
    config = load_config(root / settings.config_name)

    if settings.skip_prerequisites:
        logger.debug("Prerequisite check disabled")
    else:
        prerequisites.ensure(settings.search_dirs)

    variables = TemplateVariables(
        vmod=config, today=(today or dt.date.today()).isoformat()
    )
    store = store or default_store()

    written: list[Path] = []
    if inflate_m4(root):
        written.append(root / M4_DIR / PLACEHOLDER)
    written.extend(inflate_src(root, store, variables))
    written.extend(emit_files(root, store, variables))

    logger.info(f"Generated libvmod-{config.name}: {len(written)} file(s) written")
    return written
