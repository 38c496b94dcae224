"""Application context with dependency injection."""

import logging
from dataclasses import dataclass
from pathlib import Path

import httpx

from buildcfg.core.catalog import VersionCatalog, load_catalog
from buildcfg.core.config_store import BuildConfig, ConfigStore, FilesystemConfigStore
from buildcfg.core.registry import ConfigRegistry
from buildcfg.core.repositories.abc import RepositorySource
from buildcfg.core.repositories.well_known import create_repository_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildContext:
    """Immutable context holding everything a build consumer needs.

    Created once at the CLI entry point and passed to every command. Both
    registries share one settings mapping, so every sub-build sees the same
    values.

    Attributes:
        config: Loaded build configuration
        buildscript: Registry resolving against plugin repositories
        allprojects: Registry resolving against project repositories
        config_store: Where the configuration came from
        http_client: Shared client for remote repositories (None in tests)
    """

    config: BuildConfig
    buildscript: ConfigRegistry
    allprojects: ConfigRegistry
    config_store: ConfigStore
    http_client: httpx.Client | None = None

    def registry(self, scope: str) -> ConfigRegistry:
        """Registry for "buildscript" or "allprojects"."""
        if scope == "buildscript":
            return self.buildscript
        if scope == "allprojects":
            return self.allprojects
        raise ValueError(f"Unknown scope '{scope}' (expected 'buildscript' or 'allprojects')")

    def close(self) -> None:
        if self.http_client is not None:
            self.http_client.close()

    @staticmethod
    def for_test(
        config: BuildConfig | None = None,
        plugin_sources: list[RepositorySource] | None = None,
        project_sources: list[RepositorySource] | None = None,
        catalog: VersionCatalog | None = None,
        config_store: ConfigStore | None = None,
    ) -> "BuildContext":
        """Create a context from fakes, without network or filesystem access.

        Args:
            config: Build configuration (default: BuildConfig.default())
            plugin_sources: Buildscript sources (default: none)
            project_sources: Project sources (default: none)
            catalog: Version catalog (default: empty)
            config_store: Store reported by the context (default: in-memory)

        Example:
            >>> ctx = BuildContext.for_test(
            ...     plugin_sources=[FakeRepositorySource("google", artifacts={"g:a:1"})],
            ... )
            >>> ctx.buildscript.resolve("g:a:1").source
            'google'
        """
        from buildcfg.core.config_store import InMemoryConfigStore

        if config is None:
            config = BuildConfig.default()
        if config_store is None:
            config_store = InMemoryConfigStore(config=config)

        buildscript = ConfigRegistry.build(config.settings, plugin_sources or [], catalog)
        return BuildContext(
            config=config,
            buildscript=buildscript,
            allprojects=buildscript.with_sources(project_sources or []),
            config_store=config_store,
        )


def create_context(
    config_path: Path,
    *,
    local_repository: Path | None = None,
    transport: httpx.BaseTransport | None = None,
) -> BuildContext:
    """Load configuration and build the production context.

    Args:
        config_path: Path to buildcfg.toml
        local_repository: Override for the mavenLocal directory
        transport: Optional httpx transport (used by tests to mock the network)

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the config or catalog is malformed
    """
    store = FilesystemConfigStore(config_path)
    config = store.load()
    catalog_path = config_path.parent / config.catalog_path
    catalog = load_catalog(catalog_path)
    logger.debug(
        "Loaded %s (%d settings, %d catalog entries)",
        config_path,
        len(config.settings),
        len(catalog.libraries),
    )

    client = httpx.Client(timeout=config.timeout, transport=transport)
    plugin_sources = [
        create_repository_source(spec, client, local_repository)
        for spec in config.plugin_repositories
    ]
    project_sources = [
        create_repository_source(spec, client, local_repository)
        for spec in config.project_repositories
    ]

    buildscript = ConfigRegistry.build(config.settings, plugin_sources, catalog)
    return BuildContext(
        config=config,
        buildscript=buildscript,
        allprojects=buildscript.with_sources(project_sources),
        config_store=store,
        http_client=client,
    )
