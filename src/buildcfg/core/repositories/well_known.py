"""Declared repository specs and the factory that turns them into sources.

A spec is what the config file says ("google", { url = "..." }); a source is
the live object that can answer lookups.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx

from buildcfg.core.repositories.abc import RepositorySource
from buildcfg.core.repositories.remote import HttpMavenRepository
from buildcfg.core.repositories.local import LocalMavenRepository, default_local_repository

GOOGLE = "google"
MAVEN_CENTRAL = "mavenCentral"
MAVEN_LOCAL = "mavenLocal"

WELL_KNOWN_URLS: dict[str, str] = {
    GOOGLE: "https://dl.google.com/dl/android/maven2/",
    MAVEN_CENTRAL: "https://repo.maven.apache.org/maven2/",
}


@dataclass(frozen=True)
class RepositorySpec:
    """Declared repository entry.

    Attributes:
        name: Display name ("google", "mavenCentral", "mavenLocal" or custom)
        url: Base URL for remote repositories, None for mavenLocal
    """

    name: str
    url: str | None

    @property
    def is_well_known(self) -> bool:
        return self.name in WELL_KNOWN_URLS or self.name == MAVEN_LOCAL

    def to_toml(self) -> str | dict[str, str]:
        """Shorthand string for well-known repositories, a table otherwise."""
        if self.is_well_known and (self.url is None or self.url == WELL_KNOWN_URLS.get(self.name)):
            return self.name
        table = {"url": self.url or ""}
        if self.name != self.url:
            table["name"] = self.name
        return table

    @staticmethod
    def parse(raw: Any) -> "RepositorySpec":
        """Parse a config entry: a well-known name or a { url, name } table.

        Raises:
            ValueError: If the entry is neither a known name nor a table with a url
        """
        if isinstance(raw, str):
            if raw in WELL_KNOWN_URLS:
                return RepositorySpec(name=raw, url=WELL_KNOWN_URLS[raw])
            if raw == MAVEN_LOCAL:
                return RepositorySpec(name=MAVEN_LOCAL, url=None)
            if raw.startswith(("http://", "https://")):
                return RepositorySpec(name=raw, url=raw)
            known = ", ".join([*WELL_KNOWN_URLS, MAVEN_LOCAL])
            raise ValueError(f"Unknown repository '{raw}' (expected a URL or one of: {known})")

        if isinstance(raw, dict):
            url = raw.get("url")
            if not isinstance(url, str) or not url.startswith(("http://", "https://")):
                raise ValueError(f"Repository table needs an http(s) 'url', got {raw!r}")
            return RepositorySpec(name=str(raw.get("name", url)), url=url)

        raise ValueError(f"Invalid repository entry: {raw!r}")


def create_repository_source(
    spec: RepositorySpec,
    client: httpx.Client,
    local_root: Path | None = None,
) -> RepositorySource:
    """Create the live source for a declared spec.

    Args:
        spec: Declared repository
        client: Shared HTTP client for remote repositories
        local_root: Override for the mavenLocal directory (default: ~/.m2/repository)
    """
    if spec.url is None:
        return LocalMavenRepository(local_root or default_local_repository(), name=spec.name)
    return HttpMavenRepository(spec.name, spec.url, client)
