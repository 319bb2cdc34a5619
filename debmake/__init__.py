"""Debmake - Debian packaging boilerplate for Rust crates.

Renders debian/ scaffolding from a crate's Cargo.toml metadata.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
