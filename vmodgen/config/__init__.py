"""Configuration loading and run-time settings."""

from .loader import load_config, read_config
from .settings import Settings, load_settings

__all__ = ["Settings", "load_config", "load_settings", "read_config"]
