"""Version catalog (libs.versions.toml) loading and alias lookup.

The build script declares its plugin classpath entry as `libs.agp`: an alias
into a version catalog rather than a literal coordinate. This module maps such
aliases to DependencyCoordinate values.
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from buildcfg.core.coordinates import DependencyCoordinate
from buildcfg.core.errors import DependencyNotFoundError

ACCESSOR_PREFIX = "libs."


def normalize_alias(alias: str) -> str:
    """Normalize an alias so that "-", "_" and "." are interchangeable.

    Also strips the "libs." accessor prefix, so "libs.android.gradle",
    "android-gradle" and "android_gradle" all name the same entry.
    """
    text = alias.strip()
    if text.startswith(ACCESSOR_PREFIX):
        text = text.removeprefix(ACCESSOR_PREFIX)
    return text.replace("_", "-").replace(".", "-").lower()


@dataclass(frozen=True)
class VersionCatalog:
    """Immutable alias -> coordinate mapping."""

    libraries: dict[str, DependencyCoordinate] = field(default_factory=dict)
    versions: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        normalized = {normalize_alias(k): v for k, v in self.libraries.items()}
        object.__setattr__(self, "libraries", normalized)

    def has(self, alias: str) -> bool:
        return normalize_alias(alias) in self.libraries

    def lookup(self, alias: str) -> DependencyCoordinate:
        """Return the coordinate for an alias.

        Raises:
            DependencyNotFoundError: If the catalog has no such alias
        """
        key = normalize_alias(alias)
        if key not in self.libraries:
            raise DependencyNotFoundError(alias, searched=("version catalog",))
        return self.libraries[key]

    @staticmethod
    def empty() -> "VersionCatalog":
        return VersionCatalog()


def _library_from_entry(
    alias: str, entry: Any, versions: dict[str, str], source: str
) -> DependencyCoordinate:
    if isinstance(entry, str):
        try:
            return DependencyCoordinate.parse(entry)
        except ValueError as e:
            raise ValueError(f"Invalid library '{alias}' in {source}: {e}") from None

    if not isinstance(entry, dict):
        raise ValueError(f"Invalid library '{alias}' in {source}: expected string or table")

    if "module" in entry:
        module = str(entry["module"])
        if module.count(":") != 1:
            raise ValueError(f"Invalid module '{module}' for library '{alias}' in {source}")
        group, artifact = module.split(":")
    elif "group" in entry and "name" in entry:
        group, artifact = str(entry["group"]), str(entry["name"])
    else:
        raise ValueError(f"Library '{alias}' in {source} needs 'module' or 'group' and 'name'")

    version_spec = entry.get("version")
    if isinstance(version_spec, dict):
        ref = version_spec.get("ref")
        if ref is None:
            raise ValueError(f"Library '{alias}' in {source} has a version table without 'ref'")
        if ref not in versions:
            raise ValueError(f"Library '{alias}' in {source} references unknown version '{ref}'")
        version = versions[ref]
    elif version_spec is not None:
        version = str(version_spec)
    else:
        raise ValueError(f"Library '{alias}' in {source} has no version")

    return DependencyCoordinate(group=group, artifact=artifact, version=version)


def parse_catalog(data: dict[str, Any], source: str = "<catalog>") -> VersionCatalog:
    """Build a VersionCatalog from parsed TOML data.

    Raises:
        ValueError: If an entry is malformed or references an unknown version
    """
    versions: dict[str, str] = {}
    for key, value in data.get("versions", {}).items():
        if isinstance(value, dict):
            # rich versions ({ strictly = "..." } etc.) pin to their preferred value
            value = value.get("strictly") or value.get("require") or value.get("prefer")
            if value is None:
                raise ValueError(f"Version '{key}' in {source} has no usable value")
        versions[str(key)] = str(value)

    libraries = {
        str(alias): _library_from_entry(str(alias), entry, versions, source)
        for alias, entry in data.get("libraries", {}).items()
    }
    return VersionCatalog(libraries=libraries, versions=versions)


def load_catalog(path: Path) -> VersionCatalog:
    """Load a catalog file; a missing file yields an empty catalog."""
    if not path.exists():
        return VersionCatalog.empty()
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Malformed version catalog {path}: {e}") from None
    return parse_catalog(data, source=str(path))


DEFAULT_CATALOG_TOML = """[versions]
agp = "8.7.3"
kotlin = "2.0.21"

[libraries]
agp = { module = "com.android.tools.build:gradle", version.ref = "agp" }
kotlin-gradle-plugin = { module = "org.jetbrains.kotlin:kotlin-gradle-plugin", version.ref = "kotlin" }
"""
