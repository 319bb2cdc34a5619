"""Cargo.toml discovery and parsing."""

from __future__ import annotations

import logging
import re
import tomllib
from pathlib import Path
from typing import Any, Iterator

from pydantic import ValidationError

from ..core.errors import ManifestError
from ..core.models import Dependency, DependencyKind, Manifest

logger = logging.getLogger(__name__)

MANIFEST_NAME = "Cargo.toml"

_DEPENDENCY_TABLES: dict[str, DependencyKind] = {
    "dependencies": "normal",
    "build-dependencies": "build",
    "build_dependencies": "build",
    "dev-dependencies": "dev",
    "dev_dependencies": "dev",
}

_OPTIONAL_STRING_FIELDS = {
    "license": "license",
    "description": "description",
    "homepage": "homepage",
    "repository": "repository",
    "documentation": "documentation",
    "license-file": "license_file",
}

_READ_KEYS = ("name", "version", "authors", "readme", *_OPTIONAL_STRING_FIELDS)

_WILDCARD = re.compile(r"(?:^|\.)[*xX](?:\.|$)")


def find_manifest(start: Path) -> Path:
    """Locate the nearest Cargo.toml at or above ``start``.

    Args:
        start: Directory to begin searching from

    Returns:
        Path to the manifest file
    """
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / MANIFEST_NAME
        if candidate.is_file():
            logger.debug(f"Found manifest: {candidate}")
            return candidate
    raise ManifestError(f"Could not find {MANIFEST_NAME} in {start} or any parent directory")


def normalize_version_req(req: str) -> str:
    """Spell out cargo's implicit caret on bare version requirements."""
    comparators = [part.strip() for part in req.split(",") if part.strip()]
    if not comparators:
        return "*"
    return ", ".join(
        f"^{part}" if part[0].isdigit() and not _WILDCARD.search(part) else part
        for part in comparators
    )


def _reject_workspace(key: str, value: Any) -> None:
    if isinstance(value, dict) and value.get("workspace") is True:
        raise ManifestError(f"Workspace-inherited value for {key!r} is not supported")


def _parse_dependency(
    key: str, spec: Any, kind: DependencyKind, platform: str
) -> Dependency:
    _reject_workspace(f"dependency {key}", spec)
    if isinstance(spec, str):
        return Dependency(
            name=key,
            version_req=normalize_version_req(spec),
            kind=kind,
            only_for_platform=platform,
        )
    if not isinstance(spec, dict):
        raise ManifestError(f"Dependency {key!r} must be a string or a table")

    version = spec.get("version", "*")
    if not isinstance(version, str):
        raise ManifestError(f"Dependency {key!r} has a non-string version")
    return Dependency(
        name=str(spec.get("package", key)),
        version_req=normalize_version_req(version),
        kind=kind,
        optional=bool(spec.get("optional", False)),
        only_for_platform=platform,
    )


def _iter_dependency_tables(
    table: dict[str, Any], platform: str = ""
) -> Iterator[tuple[dict[str, Any], DependencyKind, str]]:
    for key, value in table.items():
        if key in _DEPENDENCY_TABLES and isinstance(value, dict):
            yield value, _DEPENDENCY_TABLES[key], platform
        elif key == "target" and not platform and isinstance(value, dict):
            for target, target_table in value.items():
                if isinstance(target_table, dict):
                    yield from _iter_dependency_tables(target_table, target)


def parse_dependencies(data: dict[str, Any]) -> list[Dependency]:
    """Collect dependency declarations in document order.

    Args:
        data: Parsed Cargo.toml document

    Returns:
        Dependencies from every dependency table, including target-specific ones
    """
    return [
        _parse_dependency(name, spec, kind, platform)
        for table, kind, platform in _iter_dependency_tables(data)
        for name, spec in table.items()
    ]


def _parse_readme(value: Any) -> str | None:
    if value is True:
        return "README.md"
    if value is False or value is None:
        return None
    return str(value)


def parse_manifest(data: dict[str, Any], root: Path) -> Manifest:
    """Build a :class:`Manifest` from a parsed Cargo.toml document.

    Args:
        data: Parsed TOML document
        root: Directory containing the manifest

    Returns:
        Manifest model
    """
    package = data.get("package")
    if not isinstance(package, dict):
        raise ManifestError("Manifest has no [package] table")

    for key in _READ_KEYS:
        if key in package:
            _reject_workspace(key, package[key])

    if "name" not in package:
        raise ManifestError("Manifest [package] table has no name")

    fields: dict[str, Any] = {
        "name": package["name"],
        "version": package.get("version", "0.0.0"),
        "authors": package.get("authors", []),
        "readme": _parse_readme(package.get("readme")),
        "dependencies": parse_dependencies(data),
        "root": root,
    }
    for toml_key, field_name in _OPTIONAL_STRING_FIELDS.items():
        if toml_key in package:
            fields[field_name] = package[toml_key]

    try:
        return Manifest(**fields)
    except ValidationError as exc:
        raise ManifestError(f"Invalid [package] metadata: {exc}") from exc


def load_manifest(path: Path) -> Manifest:
    """Read and parse a Cargo.toml file.

    Args:
        path: Path to the manifest

    Returns:
        Manifest model rooted at the manifest's directory
    """
    logger.debug(f"Loading manifest: {path}")
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as exc:
        raise ManifestError(f"Failed to read {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ManifestError(f"Failed to parse {path}: {exc}") from exc

    return parse_manifest(data, path.resolve().parent)
