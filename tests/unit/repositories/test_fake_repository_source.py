"""Tests for FakeRepositorySource test infrastructure."""

import pytest

from buildcfg.core.coordinates import DependencyCoordinate
from buildcfg.core.errors import RepositoryUnreachableError
from buildcfg.core.repositories.fake import FakeRepositorySource

COORDINATE = DependencyCoordinate.parse("org.example:lib:1.0")


def test_fake_source_serves_configured_artifacts() -> None:
    source = FakeRepositorySource("google", artifacts={"org.example:lib:1.0"})

    location = source.find(COORDINATE)

    assert location is not None
    assert location.url == "fake://google/org/example/lib/1.0/lib-1.0.pom"


def test_fake_source_records_queries() -> None:
    source = FakeRepositorySource("google")

    assert source.find(COORDINATE) is None
    assert source.queried == [COORDINATE]


def test_fake_source_unreachable() -> None:
    source = FakeRepositorySource("google", unreachable=True)

    with pytest.raises(RepositoryUnreachableError, match="google"):
        source.find(COORDINATE)
    assert source.queried == [COORDINATE]
