"""Settings command - lists every declared setting."""

import click
from rich.table import Table

from buildcfg.cli.json_output import emit_json
from buildcfg.cli.json_schemas import SettingInfo, SettingsResponse
from buildcfg.cli.output import table_console
from buildcfg.core.context import BuildContext
from buildcfg.core.settings import to_toml_value


@click.command("settings")
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
def settings_cmd(ctx: BuildContext, output_json: bool) -> None:
    """List declared settings."""
    settings = ctx.buildscript.settings

    if output_json:
        response = SettingsResponse(
            settings=[
                SettingInfo(name=name, value=to_toml_value(value))
                for name, value in settings.items()
            ]
        )
        emit_json(response.model_dump(mode="json"))
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Setting")
    table.add_column("Value")
    for name, value in settings.items():
        table.add_row(name, str(value))
    table_console().print(table)
