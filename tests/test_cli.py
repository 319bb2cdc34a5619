from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from debmake.cli import app

runner = CliRunner()

MANIFEST = """
[package]
name = "Foo-Bar"
version = "1.2.3"
authors = ["Jane Doe <jane@example.org>"]
license = "MIT"

[dependencies]
baz = "^1"
"""

ENV = {"DEBEMAIL": "jane@example.org", "EMAIL": "", "SOURCE_DATE_EPOCH": "1136239445"}


@pytest.fixture(autouse=True)
def fixed_user(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "debmake.environment.identity.lookup_display_name", lambda: "Jane Doe"
    )


def test_generates_next_to_manifest(write_crate):
    manifest = write_crate(MANIFEST)
    result = runner.invoke(app, ["--manifest-path", str(manifest)], env=ENV)

    assert result.exit_code == 0, result.output
    debian = manifest.parent / "debian"
    assert sorted(p.name for p in debian.iterdir()) == [
        "changelog",
        "compat",
        "control",
        "copyright",
        "rules",
        "watch",
    ]
    changelog = (debian / "changelog").read_text(encoding="utf-8")
    assert changelog.startswith("foo-bar (1.2.3-1) UNRELEASED")
    assert "Mon, 02 Jan 2006 22:04:05 +0000" in changelog


def test_discovers_manifest_from_cwd(write_crate, monkeypatch: pytest.MonkeyPatch):
    manifest = write_crate(MANIFEST)
    nested = manifest.parent / "src"
    nested.mkdir()
    monkeypatch.chdir(nested)

    result = runner.invoke(app, [], env=ENV)

    assert result.exit_code == 0, result.output
    assert (manifest.parent / "debian" / "control").is_file()


def test_dest_root_override(write_crate, tmp_path: Path):
    manifest = write_crate(MANIFEST)
    out = tmp_path / "out"
    result = runner.invoke(
        app, ["--manifest-path", str(manifest), "--dest-root", str(out), "-q"], env=ENV
    )

    assert result.exit_code == 0, result.output
    assert (out / "debian" / "control").is_file()
    assert not (manifest.parent / "debian").exists()


def test_rerun_is_byte_identical(write_crate):
    manifest = write_crate(MANIFEST)
    args = ["--manifest-path", str(manifest)]
    runner.invoke(app, args, env=ENV)
    debian = manifest.parent / "debian"
    first = {p.name: p.read_bytes() for p in debian.iterdir()}
    runner.invoke(app, args, env=ENV)
    assert {p.name: p.read_bytes() for p in debian.iterdir()} == first


def test_missing_manifest_exits_nonzero(tmp_path: Path):
    result = runner.invoke(
        app, ["--manifest-path", str(tmp_path / "Cargo.toml")], env=ENV
    )
    assert result.exit_code == 1
    assert not (tmp_path / "debian").exists()


def test_user_lookup_failure_exits_nonzero(write_crate, monkeypatch: pytest.MonkeyPatch):
    from debmake.core.errors import UserLookupError

    def fail() -> str:
        raise UserLookupError("Cannot determine maintainer name")

    monkeypatch.setattr("debmake.environment.identity.lookup_display_name", fail)
    manifest = write_crate(MANIFEST)
    result = runner.invoke(app, ["--manifest-path", str(manifest)], env=ENV)

    assert result.exit_code == 1
    assert not (manifest.parent / "debian").exists()


def test_verbose_and_quiet_conflict(write_crate):
    manifest = write_crate(MANIFEST)
    result = runner.invoke(app, ["--manifest-path", str(manifest), "-v", "-q"], env=ENV)
    assert result.exit_code == 2
