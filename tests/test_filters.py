from __future__ import annotations

import pytest
from jinja2.exceptions import TemplateRuntimeError

from debmake.rendering.engine import create_environment
from debmake.rendering.filters import deb_description, matches, strip_newlines


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Hello\n\nWorld", " Hello\n .\n World"),
        ("Hello   \n  \nWorld\n", " Hello\n .\n World"),
        ("\n\n", " .\n ."),
        ("  indented", "   indented"),
        ("", ""),
    ],
)
def test_deb_description(value, expected):
    assert deb_description(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("a\nb\nc", "a b c"),
        ("single line", "single line"),
        ("", ""),
    ],
)
def test_strip_newlines(value, expected):
    assert strip_newlines(value) == expected


def test_matches_searches_string_rendering():
    assert matches("bar", "ba[rR]")
    assert not matches("bar", "^a")
    assert matches(123, r"^\d+$")


def _render(source: str, **context) -> str:
    return create_environment().from_string(source).render(**context)


def test_matches_selects_primary_branch():
    source = "{% if foo is matches('ba[rR]') %}yes{% else %}no{% endif %}"
    assert _render(source, foo="bar") == "yes"


def test_matches_selects_alternate_branch():
    source = "{% if foo is matches('^a') %}yes{% else %}no{% endif %}"
    assert _render(source, foo="bar") == "no"


def test_matches_without_alternate_renders_empty():
    source = "{% if foo is matches('^a') %}yes{% endif %}"
    assert _render(source, foo="bar") == ""


def test_filters_registered_on_environment():
    source = "{{ text | deb_description }}|{{ text | strip_newlines }}"
    assert _render(source, text="one\n\ntwo") == " one\n .\n two|one  two"


def test_matches_invalid_regex_raises_template_error():
    with pytest.raises(TemplateRuntimeError, match="Invalid regex"):
        _render("{% if foo is matches('(') %}yes{% endif %}", foo="bar")


@pytest.mark.parametrize(
    "value, expected",
    [
        ("page one\x0cpage two", " page one\x0cpage two"),
        ("dos\r\nlines\r\n", " dos\n lines"),
        ("a b", " a b"),
    ],
)
def test_deb_description_splits_on_newline_only(value, expected):
    assert deb_description(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("a\x0bb\nc", "a\x0bb c"),
        ("a\r\nb\r\n", "a b"),
    ],
)
def test_strip_newlines_splits_on_newline_only(value, expected):
    assert strip_newlines(value) == expected
