"""Exception types raised by debmake."""

from __future__ import annotations

from pathlib import Path


class DebmakeError(Exception):
    """Base class for all fatal debmake errors."""


class ManifestError(DebmakeError):
    """Raised when the package manifest cannot be located or read."""


class UserLookupError(DebmakeError):
    """Raised when the maintainer identity cannot be determined."""


class ConfigurationError(DebmakeError):
    """Raised when environment settings fail validation."""


class TemplateRenderError(DebmakeError):
    """Wraps a Jinja2 failure raised while rendering a bundled template."""

    def __init__(self, template: str, message: str) -> None:
        super().__init__(f"Failed rendering template {template!r}: {message}")
        self.template = template


class FilesystemError(DebmakeError):
    """Wraps an OS error raised while writing generated output."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
