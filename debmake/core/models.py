"""Domain models for manifests, template context and render configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

DependencyKind = Literal["normal", "build", "dev"]


class Dependency(BaseModel):
    """A dependency declaration read from the manifest."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Crate name (after any rename)")
    version_req: str = Field(default="*", description="Version requirement")
    kind: DependencyKind = Field(default="normal", description="Dependency kind")
    optional: bool = Field(default=False, description="Feature-gated dependency")
    only_for_platform: str = Field(
        default="", description="Target platform constraint, empty for all"
    )


class Manifest(BaseModel):
    """Package metadata consumed by the context builder."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    authors: list[str] = Field(default_factory=list)
    license: str | None = None
    description: str | None = None
    homepage: str | None = None
    repository: str | None = None
    documentation: str | None = None
    license_file: str | None = None
    readme: str | None = None
    dependencies: list[Dependency] = Field(default_factory=list)
    root: Path = Field(
        default_factory=Path.cwd, description="Directory holding the manifest"
    )


class DependencyRecord(BaseModel):
    """Per-dependency values exposed to templates."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    version_req: str
    kind: DependencyKind
    optional: bool
    only_for_platform: str = ""
    binary_package_name: str


class TemplateContext(BaseModel):
    """Closed set of values every bundled template may reference.

    Optional fields left as ``None`` are dropped by :meth:`as_mapping`, so a
    template touching them without an ``is defined`` guard fails under
    ``StrictUndefined`` instead of rendering empty text.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    version: str
    authors: list[str]
    license: str | None = None
    description: str | None = None
    homepage: str | None = None
    repository: str | None = None
    documentation: str | None = None
    license_file: str | None = None
    readme: str | None = None
    depends: list[DependencyRecord]
    license_contents: str | None = None
    formatted_date: str
    source_package_name: str
    binary_package_name: str
    computed_version: str
    maintainer_name: str
    maintainer_email: str

    def as_mapping(self) -> dict[str, Any]:
        """Return the context as an ordered mapping with absent fields omitted."""
        return self.model_dump(exclude_none=True)


class RenderTask(BaseModel):
    """A single bundled template and where its output goes."""

    model_config = ConfigDict(frozen=True)

    template_name: str = Field(..., description="Bundled template name")
    output_path: Path = Field(..., description="Output path relative to dest_root")
    file_mode: int = Field(default=0o666, description="File permissions (octal)")


class RenderConfig(BaseModel):
    """Configuration for the rendering process."""

    tasks: list[RenderTask] = Field(..., min_length=1, description="Render tasks")
    dest_root: Path = Field(
        default_factory=Path.cwd, description="Base output directory"
    )
