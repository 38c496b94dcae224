"""Tests for Maven coordinate parsing and path layout."""

import pytest

from buildcfg.core.coordinates import DependencyCoordinate, is_coordinate_notation


def test_parse_basic_notation() -> None:
    coordinate = DependencyCoordinate.parse("com.android.tools.build:gradle:8.7.3")

    assert coordinate.group == "com.android.tools.build"
    assert coordinate.artifact == "gradle"
    assert coordinate.version == "8.7.3"
    assert coordinate.classifier is None
    assert coordinate.extension == "jar"
    assert coordinate.module == "com.android.tools.build:gradle"


def test_parse_classifier_and_extension() -> None:
    coordinate = DependencyCoordinate.parse("com.github.barteksc:pdfium-android:1.9.0:sources@aar")

    assert coordinate.classifier == "sources"
    assert coordinate.extension == "aar"
    assert str(coordinate) == "com.github.barteksc:pdfium-android:1.9.0:sources@aar"


@pytest.mark.parametrize(
    "notation",
    ["gradle", "com.android.tools.build:gradle", "a:b:c:d:e", "a::1.0", "a:b:1.0@"],
)
def test_parse_rejects_malformed_notation(notation: str) -> None:
    with pytest.raises(ValueError):
        DependencyCoordinate.parse(notation)


def test_pom_path_uses_maven_layout() -> None:
    coordinate = DependencyCoordinate.parse("com.android.tools.build:gradle:8.7.3")

    assert coordinate.pom_path() == "com/android/tools/build/gradle/8.7.3/gradle-8.7.3.pom"


def test_artifact_path_includes_classifier() -> None:
    coordinate = DependencyCoordinate.parse("org.example:lib:2.0:sources")

    assert coordinate.artifact_path() == "org/example/lib/2.0/lib-2.0-sources.jar"


def test_is_coordinate_notation() -> None:
    assert is_coordinate_notation("g:a:1")
    assert not is_coordinate_notation("libs.agp")
