"""Catalog of the templates shipped inside the package."""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources
from typing import Iterable, Mapping

from ..core.errors import TemplateLookupError

logger = logging.getLogger(__name__)

SEED_TOKEN = "example"

# Starter sources written once into a fresh src/; SEED_TOKEN becomes the module name.
SEED_FILES: tuple[str, ...] = (
    "src/vmod_example.vcc",
    "src/vmod_example.c",
)

# Boilerplate rewritten on every run.
TOP_LEVEL_FILES: tuple[str, ...] = (
    "configure.ac",
    "autogen.sh",
    "Makefile.am",
    "README.rst",
    "LICENSE",
    "COPYING",
    "src/Makefile.am",
)

CATALOG: tuple[str, ...] = SEED_FILES + TOP_LEVEL_FILES


class TemplateStore:
    """Read-only mapping of logical file name to template source."""

    def __init__(self, templates: Mapping[str, str]) -> None:
        self._templates = dict(templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def names(self) -> list[str]:
        return list(self._templates)

    def source(self, name: str) -> str:
        try:
            return self._templates[name]
        except KeyError:
            raise TemplateLookupError(name) from None

    @classmethod
    def from_package(cls, names: Iterable[str] = CATALOG) -> TemplateStore:
        """Load templates bundled under ``vmodgen/templates``."""
        root = resources.files("vmodgen").joinpath("templates")
        templates: dict[str, str] = {}
        for name in names:
            resource = root
            for part in name.split("/"):
                resource = resource.joinpath(part)
            if not resource.is_file():
                raise TemplateLookupError(name)
            templates[name] = resource.read_text(encoding="utf-8")
        logger.debug(f"Loaded {len(templates)} embedded template(s)")
        return cls(templates)


@lru_cache(maxsize=1)
def default_store() -> TemplateStore:
    return TemplateStore.from_package()
