from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict, SettingsError

from ..core.errors import InvalidSettingsError

DEFAULT_SEARCH_DIRS = [Path("/bin"), Path("/usr/bin"), Path("/usr/local/bin")]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="VMODGEN_", case_sensitive=False)

    root: Path | None = None
    config_name: str = "vmod.conf"
    search_dirs: list[Path] = Field(default_factory=lambda: list(DEFAULT_SEARCH_DIRS))
    skip_prerequisites: bool = False


def load_settings(**overrides: Any) -> Settings:
    """Build settings from ``VMODGEN_*`` variables, then apply overrides."""
    try:
        return Settings(**overrides)
    except (SettingsError, ValidationError) as e:
        raise InvalidSettingsError(str(e)) from e
