"""Tests for the repos command."""

import json

from click.testing import CliRunner

from buildcfg.cli.cli import cli
from buildcfg.core.context import BuildContext
from buildcfg.core.repositories.fake import FakeRepositorySource


def _ctx() -> BuildContext:
    return BuildContext.for_test(
        plugin_sources=[FakeRepositorySource("google"), FakeRepositorySource("mavenCentral")],
        project_sources=[
            FakeRepositorySource("google"),
            FakeRepositorySource("mavenCentral"),
            FakeRepositorySource("jitpack"),
        ],
    )


def test_repos_lists_project_sources_in_order() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["repos"], obj=_ctx())

    assert result.exit_code == 0
    output = result.output
    assert output.index("google") < output.index("mavenCentral") < output.index("jitpack")


def test_repos_json_buildscript_scope() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["repos", "--scope", "buildscript", "--json"], obj=_ctx())

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["scope"] == "buildscript"
    assert [(r["position"], r["name"]) for r in data["repositories"]] == [
        (1, "google"),
        (2, "mavenCentral"),
    ]


def test_repos_rejects_unknown_scope() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["repos", "--scope", "subprojects"], obj=_ctx())

    assert result.exit_code == 2
