"""Fatal error kinds raised while generating a VMOD tree."""

from __future__ import annotations

from pathlib import Path


class VmodgenError(Exception):
    """Base class for errors that abort a generation run."""


class MissingConfigFileError(VmodgenError):
    """Raised when the configuration file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Configuration file not found: {path}")


class ConfigParseError(VmodgenError):
    """Raised when the configuration file is not valid relaxed JSON."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Cannot parse {path}: {detail}")


class ConfigValidationError(ConfigParseError):
    """Raised when the parsed configuration does not match the schema."""


class MissingPrerequisiteError(VmodgenError):
    def __init__(self, name: str, hint: str) -> None:
        self.name = name
        self.hint = hint
        super().__init__(f"Missing prerequisite '{name}', please install {hint}")


class TemplateLookupError(VmodgenError, LookupError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found in catalog: {name}")


class TemplateRenderError(VmodgenError):
    def __init__(self, name: str, cause: Exception) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"Failed to render template {name}: {cause}")


class FileWriteError(VmodgenError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")


class InvalidSettingsError(VmodgenError):
    """Raised when ``VMODGEN_*`` environment variables cannot be parsed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid VMODGEN_* settings: {detail}")
