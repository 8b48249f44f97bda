"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from ..config.settings import load_settings
from ..core.errors import VmodgenError
from ..rendering.store import default_store
from ..scaffold import pipeline

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="vmodgen",
    help="Scaffold a Varnish VMOD autotools tree from vmod.conf.",
)


@app.command()
def generate(
    root: Annotated[
        str,
        typer.Option(
            "--root",
            help="Project root holding vmod.conf (default: $VMODGEN_ROOT or cwd).",
            metavar="DIR",
        ),
    ] = "",
    config_name: Annotated[
        str,
        typer.Option(
            "--config",
            help="Configuration file name inside the root (default: vmod.conf).",
            metavar="NAME",
        ),
    ] = "",
    skip_prerequisites: Annotated[
        bool,
        typer.Option(
            "--skip-prerequisites",
            help="Do not check for autoconf, automake, libtool, rst2man and make.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Generate build files, m4/ and src/ for the configured VMOD."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    overrides: dict[str, object] = {}
    if root:
        overrides["root"] = Path(root)
    if config_name:
        overrides["config_name"] = config_name
    if skip_prerequisites:
        overrides["skip_prerequisites"] = True

    try:
        settings = load_settings(**overrides)
        root_path = settings.root or Path.cwd()
        logger.debug(f"Project root: {root_path}")
        outputs = pipeline.generate(root_path, settings)
    except VmodgenError as e:
        typer.echo(f"[FATAL] {e}", err=True)
        raise typer.Exit(code=1) from e

    logger.debug(f"Completed: {len(outputs)} file(s) written")


@app.command("templates")
def list_templates() -> None:
    """List the embedded templates in catalog order."""
    for name in default_store().names():
        typer.echo(name)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
