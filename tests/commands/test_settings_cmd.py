"""Tests for the settings command."""

import json

from click.testing import CliRunner

from buildcfg.cli.cli import cli
from buildcfg.core.context import BuildContext


def test_settings_lists_all_values() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["settings"], obj=BuildContext.for_test())

    assert result.exit_code == 0
    for name in ("minSdk", "compileSdk", "versionName", "languageVersion", "toolchainVersion"):
        assert name in result.output
    assert "3.2.14" in result.output


def test_settings_json() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["settings", "--json"], obj=BuildContext.for_test())

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["settings"][0] == {"name": "minSdk", "value": 21}
    assert {"name": "languageVersion", "value": "17"} in data["settings"]
