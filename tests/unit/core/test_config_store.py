"""Tests for build config loading and saving."""

import tomllib
from pathlib import Path

import pytest

from buildcfg.core.config_store import (
    BuildConfig,
    FilesystemConfigStore,
    InMemoryConfigStore,
    parse_config,
    render_config,
)
from buildcfg.core.repositories.well_known import RepositorySpec
from buildcfg.core.settings import JavaVersion

SOURCE = Path("/project/buildcfg.toml")

CONFIG_TOML = """
[settings]
minSdk = 21
compileSdk = 36
versionName = "3.2.14"
languageVersion = "17"
toolchainVersion = "2.0.21"

[buildscript]
repositories = ["google", "mavenCentral"]
classpath = ["libs.agp"]

[allprojects]
repositories = ["google", "mavenCentral", { url = "https://jitpack.io", name = "jitpack" }]
plugins = ["maven-publish"]
"""


def test_parse_config_reads_all_sections() -> None:
    config = parse_config(tomllib.loads(CONFIG_TOML), SOURCE)

    assert config.settings == BuildConfig.default().settings
    assert [r.name for r in config.plugin_repositories] == ["google", "mavenCentral"]
    assert config.classpath == ("libs.agp",)
    assert [r.name for r in config.project_repositories] == ["google", "mavenCentral", "jitpack"]
    assert config.project_repositories[2].url == "https://jitpack.io"
    assert config.plugins == ("maven-publish",)


def test_parse_config_defaults_optional_sections() -> None:
    config = parse_config({}, SOURCE)

    assert config.settings == ()
    assert config.plugin_repositories == ()
    assert config.catalog_path == Path("gradle/libs.versions.toml")
    assert config.timeout == 10.0


def test_parse_config_preserves_repository_order() -> None:
    data = {"allprojects": {"repositories": ["mavenCentral", "google", "mavenLocal"]}}

    config = parse_config(data, SOURCE)

    assert [r.name for r in config.project_repositories] == ["mavenCentral", "google", "mavenLocal"]


def test_parse_config_names_file_on_bad_setting() -> None:
    data = {"settings": {"minSdk": "twenty-one"}}

    with pytest.raises(ValueError, match=r"Invalid \[settings\] in /project/buildcfg.toml"):
        parse_config(data, SOURCE)


def test_parse_config_rejects_unknown_repository() -> None:
    data = {"buildscript": {"repositories": ["jcenter"]}}

    with pytest.raises(ValueError, match="Unknown repository 'jcenter'"):
        parse_config(data, SOURCE)


def test_parse_config_rejects_non_list_classpath() -> None:
    data = {"buildscript": {"classpath": "libs.agp"}}

    with pytest.raises(ValueError, match="'buildscript.classpath' must be a list of strings"):
        parse_config(data, SOURCE)


def test_parse_config_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValueError, match="'resolution.timeout' must be a positive number"):
        parse_config({"resolution": {"timeout": 0}}, SOURCE)


def test_render_then_parse_gives_default_config() -> None:
    default = BuildConfig.default()

    parsed = parse_config(tomllib.loads(render_config(default)), SOURCE)

    assert parsed == default


def test_render_uses_shorthand_for_well_known_repositories() -> None:
    data = tomllib.loads(render_config(BuildConfig.default()))

    assert data["buildscript"]["repositories"] == ["google", "mavenCentral"]
    assert data["allprojects"]["repositories"][2] == {
        "url": "https://jitpack.io",
        "name": "jitpack",
    }
    assert data["settings"]["languageVersion"] == "17"


def test_filesystem_store_load_missing_file(tmp_path: Path) -> None:
    store = FilesystemConfigStore(tmp_path / "buildcfg.toml")

    assert not store.exists()
    with pytest.raises(FileNotFoundError, match="Build config not found"):
        store.load()


def test_filesystem_store_save_and_load(tmp_path: Path) -> None:
    store = FilesystemConfigStore(tmp_path / "nested" / "buildcfg.toml")

    store.save(BuildConfig.default())

    assert store.exists()
    loaded = store.load()
    assert loaded.settings[3].value is JavaVersion.VERSION_17
    assert loaded == BuildConfig.default()


def test_filesystem_store_malformed_toml(tmp_path: Path) -> None:
    path = tmp_path / "buildcfg.toml"
    path.write_text("[settings\nminSdk = 21\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Malformed build config"):
        FilesystemConfigStore(path).load()


def test_in_memory_store() -> None:
    store = InMemoryConfigStore()
    assert not store.exists()
    with pytest.raises(FileNotFoundError):
        store.load()

    config = BuildConfig.default()
    store.save(config)

    assert store.load() is config


def test_default_config_matches_library_build() -> None:
    config = BuildConfig.default()

    assert config.plugin_repositories == (
        RepositorySpec("google", "https://dl.google.com/dl/android/maven2/"),
        RepositorySpec("mavenCentral", "https://repo.maven.apache.org/maven2/"),
    )
    assert config.project_repositories[-1] == RepositorySpec("jitpack", "https://jitpack.io")
