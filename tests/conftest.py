from __future__ import annotations

import datetime as dt
import json
from pathlib import Path
from typing import Any, Callable

import pytest

from vmodgen.config.settings import Settings
from vmodgen.core.models import TemplateVariables, VmodConfig
from vmodgen.environment.prerequisites import PREREQUISITES

BUILD_DATE = dt.date(2024, 3, 9)


@pytest.fixture
def build_date() -> dt.date:
    return BUILD_DATE


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a vmod.conf into tmp_path and return its path."""

    def _write(data: dict[str, Any] | None = None, text: str | None = None) -> Path:
        path = tmp_path / "vmod.conf"
        if text is None:
            text = json.dumps(
                data
                if data is not None
                else {
                    "name": "cookie",
                    "author": "Ada Lovelace",
                    "version": "1.2",
                    "required_libs": [{"name": "mhash", "function": "mhash_count"}],
                }
            )
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fake_bin(tmp_path: Path) -> Path:
    """Directory holding an executable stub for every prerequisite."""
    bin_dir = tmp_path / "fake-bin"
    bin_dir.mkdir()
    for name in PREREQUISITES:
        exe = bin_dir / name
        exe.write_text("#!/bin/sh\nexit 0\n")
        exe.chmod(0o755)
    return bin_dir


@pytest.fixture
def settings(fake_bin: Path) -> Settings:
    return Settings(search_dirs=[fake_bin])


@pytest.fixture
def variables() -> TemplateVariables:
    return TemplateVariables(
        vmod=VmodConfig(
            name="cookie",
            author="Ada Lovelace",
            version="1.2",
            required_libs=[{"name": "mhash", "function": "mhash_count"}],
        ),
        today=BUILD_DATE.isoformat(),
    )
