"""CLI argument parsers and validators."""

from __future__ import annotations

import logging
from pathlib import Path

import typer


def parse_log_level(verbose: bool, quiet: bool) -> int:
    """Map the verbosity flags onto a logging level."""
    if verbose and quiet:
        raise typer.BadParameter("--verbose and --quiet are mutually exclusive")
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def parse_dest_root(value: str, manifest_path: Path) -> Path:
    """Resolve the output root, defaulting to the manifest's directory."""
    if value:
        return Path(value)
    return manifest_path.parent
