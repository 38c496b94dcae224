"""Maven coordinates and repository path layout."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DependencyCoordinate:
    """Identifier of an external artifact in Maven layout.

    Attributes:
        group: Group id, e.g. "com.android.tools.build"
        artifact: Artifact id, e.g. "gradle"
        version: Exact version, e.g. "8.7.3"
        classifier: Optional classifier, e.g. "sources"
        extension: Packaging extension (default: "jar")
    """

    group: str
    artifact: str
    version: str
    classifier: str | None = None
    extension: str = "jar"

    @staticmethod
    def parse(notation: str) -> "DependencyCoordinate":
        """Parse "group:artifact:version[:classifier][@extension]".

        Raises:
            ValueError: If the notation is malformed or has no version
        """
        text = notation.strip()
        extension = "jar"
        if "@" in text:
            text, extension = text.rsplit("@", 1)
            if not extension:
                raise ValueError(f"Empty extension in dependency notation: {notation!r}")

        parts = text.split(":")
        if len(parts) not in (3, 4) or not all(parts):
            raise ValueError(
                f"Invalid dependency notation: {notation!r} "
                "(expected group:artifact:version[:classifier][@extension])"
            )

        classifier = parts[3] if len(parts) == 4 else None
        return DependencyCoordinate(
            group=parts[0],
            artifact=parts[1],
            version=parts[2],
            classifier=classifier,
            extension=extension,
        )

    @property
    def module(self) -> str:
        """The "group:artifact" part without version."""
        return f"{self.group}:{self.artifact}"

    def directory(self) -> str:
        """Relative directory of this version in a Maven repository."""
        return "/".join([*self.group.split("."), self.artifact, self.version])

    def pom_path(self) -> str:
        """Relative path of the POM file, the existence marker for an artifact."""
        return f"{self.directory()}/{self.artifact}-{self.version}.pom"

    def artifact_path(self) -> str:
        """Relative path of the artifact file itself."""
        suffix = f"-{self.classifier}" if self.classifier else ""
        return f"{self.directory()}/{self.artifact}-{self.version}{suffix}.{self.extension}"

    def __str__(self) -> str:
        notation = f"{self.group}:{self.artifact}:{self.version}"
        if self.classifier:
            notation += f":{self.classifier}"
        if self.extension != "jar":
            notation += f"@{self.extension}"
        return notation


def is_coordinate_notation(dependency_id: str) -> bool:
    """True if the id is a coordinate rather than a catalog alias."""
    return ":" in dependency_id
