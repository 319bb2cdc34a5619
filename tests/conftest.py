from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Callable

import pytest

from debmake.core.models import Dependency, Manifest, TemplateContext
from debmake.core.settings import Settings
from debmake.environment import context as context_builder

FIXED_TIMESTAMP = dt.datetime(
    2006, 1, 2, 15, 4, 5, tzinfo=dt.timezone(dt.timedelta(hours=-7))
)


@pytest.fixture()
def timestamp() -> dt.datetime:
    return FIXED_TIMESTAMP


@pytest.fixture()
def settings() -> Settings:
    return Settings(debemail="jane@example.org", email=None, source_date_epoch=None)


@pytest.fixture()
def make_manifest(tmp_path: Path) -> Callable[..., Manifest]:
    def factory(**overrides) -> Manifest:
        fields = {
            "name": "Foo-Bar",
            "version": "1.2.3",
            "authors": ["Jane Doe <jane@example.org>"],
            "dependencies": [Dependency(name="baz", version_req="^1")],
            "root": tmp_path,
        }
        fields.update(overrides)
        return Manifest(**fields)

    return factory


@pytest.fixture()
def make_context(
    make_manifest: Callable[..., Manifest], timestamp: dt.datetime, settings: Settings
) -> Callable[..., TemplateContext]:
    def factory(**overrides) -> TemplateContext:
        return context_builder.build_context(
            make_manifest(**overrides),
            timestamp,
            settings,
            user_lookup=lambda: "Jane Doe",
        )

    return factory


@pytest.fixture()
def write_crate(tmp_path: Path) -> Callable[[str], Path]:
    def factory(body: str) -> Path:
        crate = tmp_path / "crate"
        crate.mkdir(exist_ok=True)
        manifest = crate / "Cargo.toml"
        manifest.write_text(body, encoding="utf-8")
        return manifest

    return factory
