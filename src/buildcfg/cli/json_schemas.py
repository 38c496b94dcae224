"""Pydantic models for JSON output schemas.

These models define the structure of `--json` output and validate it at
runtime before it is written.
"""

from pydantic import BaseModel, ConfigDict, Field


class SettingInfo(BaseModel):
    """One entry of `buildcfg settings --json`."""

    model_config = ConfigDict(strict=True)

    name: str
    value: str | int | bool


class SettingsResponse(BaseModel):
    """JSON response schema for `buildcfg settings`."""

    model_config = ConfigDict(strict=True)

    settings: list[SettingInfo]


class RepositoryInfo(BaseModel):
    """One repository source, in priority order.

    Attributes:
        position: 1-based priority (1 is queried first)
        name: Source name
        location: Base URL or directory
    """

    model_config = ConfigDict(strict=True)

    position: int = Field(..., ge=1)
    name: str
    location: str


class RepositoriesResponse(BaseModel):
    """JSON response schema for `buildcfg repos`."""

    model_config = ConfigDict(strict=True)

    scope: str = Field(..., pattern="^(buildscript|allprojects)$")
    repositories: list[RepositoryInfo]


class ResolvedDependency(BaseModel):
    """JSON response schema for `buildcfg resolve`.

    Attributes:
        dependency: Reference as given on the command line
        coordinate: Coordinate it expanded to
        source: Winning repository source
        url: POM location in that source
    """

    model_config = ConfigDict(strict=True)

    dependency: str
    coordinate: str
    source: str
    url: str


class ClasspathResponse(BaseModel):
    """JSON response schema for `buildcfg classpath`."""

    model_config = ConfigDict(strict=True)

    classpath: list[ResolvedDependency]


class ErrorResponse(BaseModel):
    """JSON error object emitted when a `--json` command fails.

    Attributes:
        error: Error message
        error_type: Error class name (e.g., "DependencyNotFoundError")
        exit_code: Exit code for the process
    """

    model_config = ConfigDict(strict=True)

    error: str
    error_type: str
    exit_code: int = Field(default=1, ge=0, le=255)
