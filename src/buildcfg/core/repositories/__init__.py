from buildcfg.core.repositories.abc import ArtifactLocation, RepositorySource
from buildcfg.core.repositories.fake import FakeRepositorySource
from buildcfg.core.repositories.remote import HttpMavenRepository
from buildcfg.core.repositories.local import LocalMavenRepository
from buildcfg.core.repositories.well_known import RepositorySpec, create_repository_source

__all__ = [
    "ArtifactLocation",
    "FakeRepositorySource",
    "HttpMavenRepository",
    "LocalMavenRepository",
    "RepositorySource",
    "RepositorySpec",
    "create_repository_source",
]
