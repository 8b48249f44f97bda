"""Domain models for the VMOD configuration and template context."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

IDENTIFIER_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"


class RequiredLib(BaseModel):
    """An external library the generated module links against."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Library name as passed to -l")
    function: str = Field(
        ..., min_length=1, description="Symbol probed by AC_CHECK_LIB"
    )


class VmodConfig(BaseModel):
    """Contents of ``vmod.conf``."""

    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)

    name: str = Field(
        ..., pattern=IDENTIFIER_PATTERN, description="Module name (C identifier)"
    )
    author: str | None = Field(default=None, description="Module author")
    version: str | None = Field(default=None, description="Release version")
    src: str | None = Field(default=None, description="Upstream source location")
    required_libs: list[RequiredLib] = Field(
        default_factory=list, description="Libraries checked by configure"
    )
    copyright: str | None = Field(default=None, description="Copyright line")


class TemplateVariables(BaseModel):
    """Variables exposed to every template render."""

    model_config = ConfigDict(frozen=True)

    vmod: VmodConfig
    today: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="Build date")

    def as_context(self) -> dict[str, Any]:
        return {"vmod": self.vmod.model_dump(), "today": self.today}


class RenderTask(BaseModel):
    """A single template rendering task."""

    template_name: str = Field(..., description="Logical template name")
    output_path: Path = Field(..., description="Output path relative to the root")
