"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.errors import DebmakeError
from ..core.settings import load_settings
from ..environment import context as context_builder
from ..manifest import cargo
from ..rendering import engine
from .parsers import parse_dest_root, parse_log_level

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="debmake",
    help="Generate Debian packaging boilerplate for a Cargo package.",
)


def generate(manifest_path: Path | None, dest_root: str) -> list[Path]:
    """Load the manifest, build the context and render every template.

    Args:
        manifest_path: Explicit Cargo.toml, or None to search from the cwd
        dest_root: Output root, or empty for the manifest's directory

    Returns:
        Written file paths
    """
    settings = load_settings()
    path = manifest_path or cargo.find_manifest(Path.cwd())
    manifest = cargo.load_manifest(path)

    context = context_builder.build_context(manifest, settings.timestamp(), settings)
    config = engine.default_config(parse_dest_root(dest_root, path))
    return engine.render_all(config, context)


@app.command()
def debmake(
    manifest_path: Annotated[
        Optional[Path],
        typer.Option(
            "--manifest-path",
            help="Path to Cargo.toml (default: search upwards from cwd).",
            metavar="PATH",
        ),
    ] = None,
    dest_root: Annotated[
        str,
        typer.Option(
            "--dest-root",
            help="Directory to write debian/ into (default: the manifest's directory).",
            metavar="DIR",
        ),
    ] = "",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Use verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="No output printed to stdout.",
        ),
    ] = False,
) -> None:
    """Generate Debian packaging boilerplate for a Cargo package."""
    logging.basicConfig(
        level=parse_log_level(verbose, quiet),
        format="[%(levelname)s] %(message)s",
    )

    logger.debug("Starting debmake")

    try:
        outputs = generate(manifest_path, dest_root)
    except DebmakeError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=1) from exc

    logger.debug(f"Completed: {len(outputs)} file(s) generated")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
