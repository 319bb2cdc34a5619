"""Template context construction."""

from __future__ import annotations

import datetime as dt
import logging
from email.utils import format_datetime
from typing import Callable

from ..core.models import Dependency, DependencyRecord, Manifest, TemplateContext
from ..core.naming import deb_binary_name, deb_pkgname
from ..core.settings import Settings
from . import identity

logger = logging.getLogger(__name__)

DEBIAN_REVISION = "1"


def dependency_record(dependency: Dependency) -> DependencyRecord:
    """Project a manifest dependency onto the record templates iterate over."""
    return DependencyRecord(
        name=dependency.name,
        version_req=dependency.version_req,
        kind=dependency.kind,
        optional=dependency.optional,
        only_for_platform=dependency.only_for_platform,
        binary_package_name=deb_binary_name(dependency.name),
    )


def read_license(manifest: Manifest) -> str | None:
    """Return the contents of the manifest's license file, if readable.

    A missing or unreadable file is not fatal; the field is simply omitted.

    Args:
        manifest: Manifest declaring ``license_file``

    Returns:
        File text, or None
    """
    if manifest.license_file is None:
        return None

    path = manifest.root / manifest.license_file
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug(f"Skipping license contents from {path}: {exc}")
        return None


def format_date(timestamp: dt.datetime) -> str:
    """Format ``timestamp`` as an RFC 2822 date (``Mon, 02 Jan 2006 15:04:05 -0700``)."""
    return format_datetime(timestamp)


def build_context(
    manifest: Manifest,
    timestamp: dt.datetime,
    settings: Settings,
    user_lookup: Callable[[], str] | None = None,
) -> TemplateContext:
    """Build the rendering context for the bundled templates.

    Args:
        manifest: Package metadata
        timestamp: Timezone-aware generation time
        settings: Environment snapshot supplying the maintainer email
        user_lookup: Returns the maintainer display name; defaults to the
            system user database

    Returns:
        Populated template context
    """
    logger.debug(f"Building template context for {manifest.name} {manifest.version}")

    lookup = user_lookup or identity.lookup_display_name
    maintainer_name = lookup()

    description = manifest.description.strip() if manifest.description is not None else None

    return TemplateContext(
        name=manifest.name,
        version=manifest.version,
        authors=list(manifest.authors),
        license=manifest.license,
        description=description,
        homepage=manifest.homepage,
        repository=manifest.repository,
        documentation=manifest.documentation,
        license_file=manifest.license_file,
        readme=manifest.readme,
        depends=[dependency_record(dep) for dep in manifest.dependencies],
        license_contents=read_license(manifest),
        formatted_date=format_date(timestamp),
        source_package_name=deb_pkgname(manifest.name),
        binary_package_name=deb_binary_name(manifest.name),
        computed_version=f"{manifest.version}-{DEBIAN_REVISION}",
        maintainer_name=maintainer_name,
        maintainer_email=identity.resolve_email(settings),
    )
