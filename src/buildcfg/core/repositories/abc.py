"""Repository source interface.

A repository source answers one question: does it serve a given artifact? The
registry queries sources in declared order, so implementations must keep
"not found" (return None) distinct from "could not ask" (raise
RepositoryUnreachableError).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from buildcfg.core.coordinates import DependencyCoordinate


@dataclass(frozen=True)
class ArtifactLocation:
    """Where a dependency was found.

    Attributes:
        coordinate: The resolved coordinate
        source: Name of the repository source that served it
        url: URL (or file URI) of the POM proving the artifact exists
    """

    coordinate: DependencyCoordinate
    source: str
    url: str


class RepositorySource(ABC):
    """Abstract repository queried during dependency resolution."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name used in logs and error messages (e.g. "google")."""
        ...

    @property
    @abstractmethod
    def location(self) -> str:
        """Base URL or directory of the repository."""
        ...

    @abstractmethod
    def find(self, coordinate: DependencyCoordinate) -> ArtifactLocation | None:
        """Look up an artifact.

        Args:
            coordinate: Artifact to look for

        Returns:
            ArtifactLocation if this source serves the artifact, None otherwise

        Raises:
            RepositoryUnreachableError: If the source cannot be contacted
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, location={self.location!r})"
