"""Vmodgen - Varnish VMOD project scaffolder.

Renders a fixed set of embedded Jinja2 templates from a relaxed-JSON
``vmod.conf`` into an autotools build tree.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
