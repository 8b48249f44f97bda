"""Relaxed-JSON loader for ``vmod.conf``."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..core.errors import ConfigParseError, ConfigValidationError, MissingConfigFileError
from ..core.models import VmodConfig

logger = logging.getLogger(__name__)

_STRING = r'"(?:\\.|[^"\\])*"'
_COMMENTS = re.compile(rf"({_STRING})|//[^\n]*|/\*.*?\*/", re.S)
_TRAILING_COMMAS = re.compile(rf"({_STRING})|,(?=\s*[}}\]])")


def _keep_strings(match: re.Match[str]) -> str:
    return match.group(1) or ""


def strip_relaxed_syntax(text: str) -> str:
    """Reduce relaxed JSON to strict JSON.

    Removes ``//`` and ``/* */`` comments and commas directly before a
    closing ``}`` or ``]``. String literals are left untouched, so URLs and
    comment-like text inside values survive.

    Args:
        text: Relaxed JSON source

    Returns:
        Source accepted by :func:`json.loads`
    """
    without_comments = _COMMENTS.sub(_keep_strings, text)
    return _TRAILING_COMMAS.sub(_keep_strings, without_comments)


def read_config(path: Path) -> dict[str, Any]:
    """Read and parse a relaxed-JSON configuration file.

    Args:
        path: Configuration file path

    Returns:
        Parsed top-level mapping, without any defaults applied
    """
    if not path.is_file():
        raise MissingConfigFileError(path)

    logger.debug(f"Reading configuration: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(path, str(e)) from e

    try:
        data = json.loads(strip_relaxed_syntax(text))
    except json.JSONDecodeError as e:
        raise ConfigParseError(path, f"{e.msg} (line {e.lineno}, column {e.colno})") from e

    if not isinstance(data, dict):
        raise ConfigParseError(path, "top-level value must be an object")

    return data


def load_config(path: Path) -> VmodConfig:
    """Read a configuration file and validate it against the schema."""
    data = read_config(path)
    try:
        config = VmodConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigValidationError(path, problems) from e

    logger.debug(
        f"Loaded module '{config.name}' with {len(config.required_libs)} required lib(s)"
    )
    return config
