"""Error types raised by the configuration registry.

All errors carry the name of the missing setting, dependency or source so the
CLI error boundary can show them without a stack trace.
"""


class BuildConfigError(Exception):
    """Base class for registry errors."""


class UnknownSettingError(BuildConfigError, KeyError):
    """Requested setting was never declared."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown setting '{self.name}'"


class RepositoryUnreachableError(BuildConfigError):
    """A single repository source could not be contacted.

    Resolution treats this as source-local: the next source is tried.
    """

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(source, reason)
        self.source = source
        self.reason = reason

    def __str__(self) -> str:
        return f"Repository '{self.source}' is unreachable: {self.reason}"


class DependencyNotFoundError(BuildConfigError):
    """No repository source contains the requested artifact."""

    def __init__(
        self,
        dependency: str,
        searched: tuple[str, ...] = (),
        unreachable: tuple[str, ...] = (),
    ) -> None:
        super().__init__(dependency)
        self.dependency = dependency
        self.searched = searched
        self.unreachable = unreachable

    def __str__(self) -> str:
        msg = f"Could not find dependency '{self.dependency}'"
        if self.searched:
            msg += f"\nSearched in: {', '.join(self.searched)}"
        if self.unreachable:
            msg += f"\nUnreachable: {', '.join(self.unreachable)}"
        return msg
