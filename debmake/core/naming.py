"""Debian package name normalization."""

from __future__ import annotations

_PASSTHROUGH = frozenset("abcdefghijklmnopqrstuvwxyz0123456789.+-")


def _normalize_char(char: str) -> str:
    if char in _PASSTHROUGH:
        return char
    if "A" <= char <= "Z":
        return char.lower()
    return "-"


def deb_pkgname(name: str) -> str:
    """Map a crate name onto the Debian package name alphabet.

    Valid Debian package names are ``[a-z0-9][a-z0-9.+-]+``. ASCII uppercase
    letters are folded to lowercase and anything else outside that alphabet
    becomes ``-``.

    Args:
        name: Crate name as declared in the manifest

    Returns:
        Normalized source package name
    """
    return "".join(_normalize_char(char) for char in name)


def deb_binary_name(name: str) -> str:
    """Return the library binary package name for a crate."""
    return f"librust-{deb_pkgname(name)}-dev"
