"""Maintainer identity resolution."""

from __future__ import annotations

import logging
import os

from ..core.errors import UserLookupError
from ..core.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_EMAIL = "<you>@debian.org"


def lookup_display_name() -> str:
    """Return the display name of the invoking user.

    The name is the first comma-separated field of the GECOS entry for the
    current uid in the system user database.

    Returns:
        Display name (may be empty if the GECOS field is empty)
    """
    try:
        import pwd
    except ImportError as exc:
        raise UserLookupError(
            "Cannot determine maintainer name: no user database on this platform"
        ) from exc

    uid = os.getuid()
    try:
        entry = pwd.getpwuid(uid)
    except KeyError as exc:
        raise UserLookupError(
            f"Cannot determine maintainer name: uid {uid} not found in user database"
        ) from exc
    except OSError as exc:
        raise UserLookupError(f"Cannot determine maintainer name: {exc}") from exc

    return entry.pw_gecos.split(",", 1)[0]


def resolve_email(settings: Settings) -> str:
    """Return the maintainer email from DEBEMAIL, then EMAIL, then a placeholder."""
    email = settings.debemail or settings.email
    if email:
        return email
    logger.debug(f"Neither DEBEMAIL nor EMAIL set, using {DEFAULT_EMAIL}")
    return DEFAULT_EMAIL
