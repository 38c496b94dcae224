"""Configuration registry: declared settings plus ordered repository sources.

The registry is built once when configuration loads and never mutated. Sub-builds
receive the same instance by reference instead of looking settings up in a
shared global extension.

Resolution protocol:
    1. Expand catalog aliases to coordinates
    2. Query sources in declared order
    3. A source returning None means "not here"; try the next
    4. A source raising RepositoryUnreachableError is logged and skipped
    5. First source that returns a location wins
    6. Exhaustion raises DependencyNotFoundError, or re-raises the last
       source's RepositoryUnreachableError if the last source was unreachable
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from buildcfg.core.catalog import VersionCatalog
from buildcfg.core.coordinates import DependencyCoordinate, is_coordinate_notation
from buildcfg.core.errors import (
    DependencyNotFoundError,
    RepositoryUnreachableError,
    UnknownSettingError,
)
from buildcfg.core.repositories.abc import ArtifactLocation, RepositorySource
from buildcfg.core.settings import Setting, SettingValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfigRegistry:
    """Immutable settings mapping and ordered source list.

    Use ConfigRegistry.build() to construct from Setting entries; it applies
    last-write-wins for duplicate names and freezes the mapping.
    """

    settings: Mapping[str, SettingValue]
    sources: tuple[RepositorySource, ...]
    catalog: VersionCatalog = field(default_factory=VersionCatalog.empty)

    @staticmethod
    def build(
        settings: Iterable[Setting],
        sources: Sequence[RepositorySource],
        catalog: VersionCatalog | None = None,
    ) -> "ConfigRegistry":
        values: dict[str, SettingValue] = {}
        for setting in settings:
            if setting.name in values:
                logger.debug("Setting %s redefined, last value wins", setting.name)
            values[setting.name] = setting.value

        _warn_duplicate_sources(sources)

        return ConfigRegistry(
            settings=MappingProxyType(values),
            sources=tuple(sources),
            catalog=catalog if catalog is not None else VersionCatalog.empty(),
        )

    def has(self, name: str) -> bool:
        return name in self.settings

    def get(self, name: str) -> SettingValue:
        """Return the value of a declared setting.

        Raises:
            UnknownSettingError: If the setting was never declared
        """
        if name not in self.settings:
            raise UnknownSettingError(name)
        return self.settings[name]

    def with_sources(self, sources: Sequence[RepositorySource]) -> "ConfigRegistry":
        """New registry sharing this registry's settings and catalog."""
        _warn_duplicate_sources(sources)
        return replace(self, sources=tuple(sources))

    def to_coordinate(self, dependency_id: str) -> DependencyCoordinate:
        """Turn a dependency reference into a coordinate.

        Raises:
            DependencyNotFoundError: If an alias is not in the version catalog
            ValueError: If a coordinate notation is malformed
        """
        if is_coordinate_notation(dependency_id):
            return DependencyCoordinate.parse(dependency_id)
        return self.catalog.lookup(dependency_id)

    def resolve(self, dependency_id: str) -> ArtifactLocation:
        """Find the first source, in declared order, that serves a dependency.

        Args:
            dependency_id: Coordinate notation or version catalog alias

        Returns:
            Location reported by the winning source

        Raises:
            DependencyNotFoundError: If no source serves the dependency
            RepositoryUnreachableError: If nothing was found and the last
                source could not be contacted
        """
        coordinate = self.to_coordinate(dependency_id)
        logger.debug("Resolving %s as %s", dependency_id, coordinate)

        unreachable: list[RepositoryUnreachableError] = []
        last_index = len(self.sources) - 1
        last_failed = False
        for index, source in enumerate(self.sources):
            logger.debug("Querying %s for %s", source.name, coordinate)
            try:
                location = source.find(coordinate)
            except RepositoryUnreachableError as e:
                logger.warning("%s", e)
                unreachable.append(e)
                last_failed = index == last_index
                continue

            if location is not None:
                logger.debug("Found %s in %s", coordinate, source.name)
                return location
            logger.debug("%s not found in %s", coordinate, source.name)

        raise self._exhausted(dependency_id, unreachable, last_failed)

    def resolve_concurrently(self, dependency_id: str, max_workers: int = 4) -> ArtifactLocation:
        """Like resolve(), but queries all sources in parallel.

        The winner is still the first-declared source that has the artifact,
        not the first one to respond. Sources still running when a winner is
        known are not waited for.
        """
        coordinate = self.to_coordinate(dependency_id)
        if not self.sources:
            raise self._exhausted(dependency_id, [], last_failed=False)

        logger.debug("Resolving %s concurrently across %d sources", coordinate, len(self.sources))
        executor = ThreadPoolExecutor(max_workers=max(1, max_workers))
        try:
            futures: list[Future[ArtifactLocation | None]] = [
                executor.submit(source.find, coordinate) for source in self.sources
            ]

            unreachable: list[RepositoryUnreachableError] = []
            last_index = len(self.sources) - 1
            last_failed = False
            for index, (source, future) in enumerate(zip(self.sources, futures, strict=True)):
                try:
                    location = future.result()
                except RepositoryUnreachableError as e:
                    logger.warning("%s", e)
                    unreachable.append(e)
                    last_failed = index == last_index
                    continue

                if location is not None:
                    logger.debug("Found %s in %s", coordinate, source.name)
                    return location
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        raise self._exhausted(dependency_id, unreachable, last_failed)

    def _exhausted(
        self,
        dependency_id: str,
        unreachable: list[RepositoryUnreachableError],
        last_failed: bool,
    ) -> Exception:
        if last_failed:
            return unreachable[-1]
        return DependencyNotFoundError(
            dependency_id,
            searched=tuple(source.name for source in self.sources),
            unreachable=tuple(e.source for e in unreachable),
        )


def _warn_duplicate_sources(sources: Sequence[RepositorySource]) -> None:
    seen: set[str] = set()
    for source in sources:
        if source.location in seen:
            logger.warning("Repository %s is declared more than once", source.location)
        seen.add(source.location)
