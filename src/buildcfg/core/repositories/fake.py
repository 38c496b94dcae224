"""In-memory repository source for tests.

FakeRepositorySource holds a fixed set of artifacts and records every lookup.
No network or filesystem access.
"""

from buildcfg.core.coordinates import DependencyCoordinate
from buildcfg.core.errors import RepositoryUnreachableError
from buildcfg.core.repositories.abc import ArtifactLocation, RepositorySource


class FakeRepositorySource(RepositorySource):
    """Fake source with pre-configured artifacts.

    All state is provided via constructor; lookups are captured in
    `queried` for test assertions.

    Example:
        >>> source = FakeRepositorySource("mavenCentral", artifacts={"g:a:1.0"})
        >>> source.find(DependencyCoordinate.parse("g:a:1.0")) is not None
        True
    """

    def __init__(
        self,
        name: str,
        *,
        artifacts: set[str] | None = None,
        unreachable: bool = False,
        location: str | None = None,
    ) -> None:
        self._name = name
        self._artifacts = {str(DependencyCoordinate.parse(a)) for a in artifacts or set()}
        self._unreachable = unreachable
        self._location = location if location is not None else f"fake://{name}/"
        self._queried: list[DependencyCoordinate] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def location(self) -> str:
        return self._location

    @property
    def queried(self) -> list[DependencyCoordinate]:
        """Coordinates passed to find(), in call order."""
        return self._queried

    def find(self, coordinate: DependencyCoordinate) -> ArtifactLocation | None:
        self._queried.append(coordinate)
        if self._unreachable:
            raise RepositoryUnreachableError(self._name, "connection refused (fake)")
        if str(coordinate) not in self._artifacts:
            return None
        return ArtifactLocation(
            coordinate=coordinate,
            source=self._name,
            url=self._location + coordinate.pom_path(),
        )
