"""Tests for BuildContext construction."""

from pathlib import Path

import pytest

from buildcfg.core.catalog import DEFAULT_CATALOG_TOML
from buildcfg.core.config_store import BuildConfig, FilesystemConfigStore
from buildcfg.core.context import BuildContext, create_context
from buildcfg.core.repositories.fake import FakeRepositorySource
from buildcfg.core.repositories.local import LocalMavenRepository
from buildcfg.core.repositories.remote import HttpMavenRepository
from buildcfg.core.repositories.well_known import RepositorySpec
from tests.fakes.maven_server import FakeMavenServer

GOOGLE = "https://dl.google.com/dl/android/maven2/"
AGP = "com.android.tools.build:gradle:8.7.3"


def _write_project(root: Path, config: BuildConfig | None = None) -> Path:
    config_path = root / "buildcfg.toml"
    FilesystemConfigStore(config_path).save(config or BuildConfig.default())
    catalog = root / "gradle" / "libs.versions.toml"
    catalog.parent.mkdir(parents=True)
    catalog.write_text(DEFAULT_CATALOG_TOML, encoding="utf-8")
    return config_path


def test_create_context_builds_both_scopes(tmp_path: Path) -> None:
    ctx = create_context(_write_project(tmp_path))
    try:
        assert [s.name for s in ctx.buildscript.sources] == ["google", "mavenCentral"]
        assert [s.name for s in ctx.allprojects.sources] == ["google", "mavenCentral", "jitpack"]
        assert all(isinstance(s, HttpMavenRepository) for s in ctx.allprojects.sources)
        assert ctx.buildscript.settings is ctx.allprojects.settings
        assert ctx.buildscript.get("compileSdk") == 36
    finally:
        ctx.close()


def test_create_context_resolves_catalog_alias(tmp_path: Path) -> None:
    server = FakeMavenServer(hosted={GOOGLE: {AGP}})
    ctx = create_context(_write_project(tmp_path), transport=server.transport())
    try:
        location = ctx.buildscript.resolve("libs.agp")
    finally:
        ctx.close()

    assert location.source == "google"
    assert str(location.coordinate) == AGP


def test_create_context_uses_local_repository_override(tmp_path: Path) -> None:
    config = BuildConfig(
        settings=(),
        plugin_repositories=(RepositorySpec.parse("mavenLocal"),),
        classpath=(),
        project_repositories=(),
    )
    local = tmp_path / "m2"
    ctx = create_context(_write_project(tmp_path, config), local_repository=local)
    try:
        source = ctx.buildscript.sources[0]
    finally:
        ctx.close()

    assert isinstance(source, LocalMavenRepository)
    assert source.location == str(local)


def test_create_context_missing_config(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        create_context(tmp_path / "buildcfg.toml")


def test_registry_scope_lookup() -> None:
    ctx = BuildContext.for_test(
        plugin_sources=[FakeRepositorySource("google")],
        project_sources=[FakeRepositorySource("jitpack")],
    )

    assert ctx.registry("buildscript") is ctx.buildscript
    assert ctx.registry("allprojects") is ctx.allprojects
    with pytest.raises(ValueError, match="Unknown scope"):
        ctx.registry("subprojects")


def test_for_test_uses_default_settings() -> None:
    ctx = BuildContext.for_test()

    assert ctx.allprojects.get("versionName") == "3.2.14"
    assert ctx.allprojects.sources == ()
