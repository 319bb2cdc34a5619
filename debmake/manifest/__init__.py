"""Package manifest providers."""

from .cargo import find_manifest, load_manifest

__all__ = ["find_manifest", "load_manifest"]
