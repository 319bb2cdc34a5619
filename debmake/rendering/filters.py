"""String transformations exposed to templates."""

from __future__ import annotations

import re
from typing import Any

from jinja2 import Environment
from jinja2.exceptions import TemplateRuntimeError


def _lines(text: str) -> list[str]:
    """Split on ``\\n`` only, dropping one trailing empty line and any ``\\r``."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def deb_description(text: str) -> str:
    """Reformat text as a Debian extended description.

    Each line is prefixed with a space and blank lines become `` .`` so that
    paragraph breaks survive the control file's continuation-line syntax.
    """
    out = []
    for line in _lines(text):
        stripped = line.rstrip()
        out.append(f" {stripped}\n" if stripped else " .\n")
    return "".join(out).rstrip("\n")


def strip_newlines(text: str) -> str:
    """Collapse text onto a single line."""
    return " ".join(_lines(text))


def matches(value: Any, pattern: str) -> bool:
    """Return True if ``pattern`` is found anywhere in ``value``."""
    try:
        regex = re.compile(pattern)
    except re.error as exc:
        raise TemplateRuntimeError(f"Invalid regex {pattern!r}: {exc}") from exc
    return regex.search(str(value)) is not None


def register(env: Environment) -> Environment:
    """Install the debmake filters and tests on ``env``."""
    env.filters["deb_description"] = lambda value: deb_description(str(value))
    env.filters["strip_newlines"] = lambda value: strip_newlines(str(value))
    env.tests["matches"] = matches
    return env
