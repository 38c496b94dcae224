"""Local Maven repository (~/.m2/repository)."""

from pathlib import Path

from buildcfg.core.coordinates import DependencyCoordinate
from buildcfg.core.errors import RepositoryUnreachableError
from buildcfg.core.repositories.abc import ArtifactLocation, RepositorySource


def default_local_repository() -> Path:
    return Path.home() / ".m2" / "repository"


class LocalMavenRepository(RepositorySource):
    """Filesystem-backed repository using the Maven directory layout."""

    def __init__(self, root: Path, name: str = "mavenLocal") -> None:
        self._root = root
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def location(self) -> str:
        return str(self._root)

    def find(self, coordinate: DependencyCoordinate) -> ArtifactLocation | None:
        # LBYL: a missing root means the source is unavailable, not that the artifact is absent
        if not self._root.is_dir():
            raise RepositoryUnreachableError(self._name, f"directory not found: {self._root}")

        pom = self._root / coordinate.pom_path()
        if not pom.is_file():
            return None
        return ArtifactLocation(coordinate=coordinate, source=self._name, url=pom.as_uri())
