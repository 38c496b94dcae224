"""Build configuration data structures, loading and saving.

Provides immutable BuildConfig data loaded from buildcfg.toml. Loaded once at
the CLI entry point and turned into registries by create_context().
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomlkit

from buildcfg.core.repositories.well_known import GOOGLE, MAVEN_CENTRAL, RepositorySpec
from buildcfg.core.settings import (
    DEFAULT_SETTINGS,
    Setting,
    coerce_setting,
    to_toml_value,
    validate_settings,
)

CONFIG_FILENAME = "buildcfg.toml"
DEFAULT_CATALOG_PATH = Path("gradle") / "libs.versions.toml"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class BuildConfig:
    """Immutable build configuration.

    Attributes:
        settings: Declared settings, in file order
        plugin_repositories: Sources for the buildscript classpath
        classpath: Buildscript classpath dependencies (coordinates or aliases)
        project_repositories: Sources shared by all projects
        plugins: Plugin ids applied to the root project
        catalog_path: Version catalog location, relative to the config file
        timeout: Per-request timeout for remote repositories, in seconds
    """

    settings: tuple[Setting, ...]
    plugin_repositories: tuple[RepositorySpec, ...]
    classpath: tuple[str, ...]
    project_repositories: tuple[RepositorySpec, ...]
    plugins: tuple[str, ...] = ()
    catalog_path: Path = field(default=DEFAULT_CATALOG_PATH)
    timeout: float = DEFAULT_TIMEOUT

    @staticmethod
    def default() -> "BuildConfig":
        """Settings and repositories of the Android library build."""
        google = RepositorySpec.parse(GOOGLE)
        central = RepositorySpec.parse(MAVEN_CENTRAL)
        return BuildConfig(
            settings=DEFAULT_SETTINGS,
            plugin_repositories=(google, central),
            classpath=("libs.agp",),
            project_repositories=(
                google,
                central,
                RepositorySpec.parse({"url": "https://jitpack.io", "name": "jitpack"}),
            ),
            plugins=("maven-publish",),
        )


def _table(data: dict[str, Any], key: str, source: Path) -> dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"'{key}' must be a table in {source}")
    return value


def _string_list(table: dict[str, Any], key: str, section: str, source: Path) -> tuple[str, ...]:
    value = table.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"'{section}.{key}' must be a list of strings in {source}")
    return tuple(value)


def _repositories(table: dict[str, Any], section: str, source: Path) -> tuple[RepositorySpec, ...]:
    value = table.get("repositories", [])
    if not isinstance(value, list):
        raise ValueError(f"'{section}.repositories' must be a list in {source}")
    try:
        return tuple(RepositorySpec.parse(entry) for entry in value)
    except ValueError as e:
        raise ValueError(f"Invalid '{section}.repositories' in {source}: {e}") from None


def parse_config(data: dict[str, Any], source: Path) -> BuildConfig:
    """Build a BuildConfig from parsed TOML data.

    Raises:
        ValueError: If any section is malformed, naming the file and key
    """
    settings_table = _table(data, "settings", source)
    try:
        settings = tuple(coerce_setting(str(k), v) for k, v in settings_table.items())
        validate_settings({s.name: s.value for s in settings})
    except ValueError as e:
        raise ValueError(f"Invalid [settings] in {source}: {e}") from None

    buildscript = _table(data, "buildscript", source)
    allprojects = _table(data, "allprojects", source)
    catalog = _table(data, "catalog", source)
    resolution = _table(data, "resolution", source)

    timeout = resolution.get("timeout", DEFAULT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ValueError(f"'resolution.timeout' must be a positive number in {source}")

    return BuildConfig(
        settings=settings,
        plugin_repositories=_repositories(buildscript, "buildscript", source),
        classpath=_string_list(buildscript, "classpath", "buildscript", source),
        project_repositories=_repositories(allprojects, "allprojects", source),
        plugins=_string_list(allprojects, "plugins", "allprojects", source),
        catalog_path=Path(str(catalog.get("path", DEFAULT_CATALOG_PATH))),
        timeout=float(timeout),
    )


def render_config(config: BuildConfig) -> str:
    """Serialize a BuildConfig to TOML text."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("Build configuration"))

    settings = tomlkit.table()
    for setting in config.settings:
        settings[setting.name] = to_toml_value(setting.value)
    doc["settings"] = settings

    buildscript = tomlkit.table()
    buildscript["repositories"] = [spec.to_toml() for spec in config.plugin_repositories]
    buildscript["classpath"] = list(config.classpath)
    doc["buildscript"] = buildscript

    allprojects = tomlkit.table()
    allprojects["repositories"] = [spec.to_toml() for spec in config.project_repositories]
    if config.plugins:
        allprojects["plugins"] = list(config.plugins)
    doc["allprojects"] = allprojects

    catalog = tomlkit.table()
    catalog["path"] = config.catalog_path.as_posix()
    doc["catalog"] = catalog

    resolution = tomlkit.table()
    resolution["timeout"] = config.timeout
    doc["resolution"] = resolution

    return tomlkit.dumps(doc)


class ConfigStore(ABC):
    """Abstract interface for build config access.

    Enables in-memory implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if the config exists."""
        ...

    @abstractmethod
    def load(self) -> BuildConfig:
        """Load the config.

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: BuildConfig) -> None:
        """Save the config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Path of the config file (for error messages and relative paths)."""
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads/writes a buildcfg.toml file."""

    def __init__(self, config_path: Path) -> None:
        self._path = config_path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> BuildConfig:
        if not self._path.exists():
            raise FileNotFoundError(
                f"Build config not found at {self._path}\nRun 'buildcfg init' to create one."
            )

        try:
            data = tomllib.loads(self._path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed build config {self._path}: {e}") from None
        return parse_config(data, self._path)

    def save(self, config: BuildConfig) -> None:
        """Write config to disk.

        Raises:
            PermissionError: If the directory or file cannot be written
        """
        parent = self._path.parent
        if parent.exists() and not os.access(parent, os.W_OK):
            raise PermissionError(f"Cannot write to directory: {parent}")
        parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(render_config(config), encoding="utf-8")

    def path(self) -> Path:
        return self._path


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory."""

    def __init__(self, config: BuildConfig | None = None) -> None:
        """Initialize in-memory store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> BuildConfig:
        if self._config is None:
            raise FileNotFoundError(f"Build config not found at {self.path()}")
        return self._config

    def save(self, config: BuildConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/project") / CONFIG_FILENAME
