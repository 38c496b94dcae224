"""Repos command - lists repository sources in priority order."""

import click
from rich.table import Table

from buildcfg.cli.json_output import emit_json
from buildcfg.cli.json_schemas import RepositoriesResponse, RepositoryInfo
from buildcfg.cli.output import table_console
from buildcfg.core.context import BuildContext

SCOPE_OPTION = click.option(
    "--scope",
    type=click.Choice(["buildscript", "allprojects"]),
    default="allprojects",
    show_default=True,
    help="Which repository list to use",
)


@click.command("repos")
@SCOPE_OPTION
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
def repos_cmd(ctx: BuildContext, scope: str, output_json: bool) -> None:
    """List repository sources in the order they are queried."""
    sources = ctx.registry(scope).sources

    if output_json:
        response = RepositoriesResponse(
            scope=scope,
            repositories=[
                RepositoryInfo(position=i, name=source.name, location=source.location)
                for i, source in enumerate(sources, start=1)
            ],
        )
        emit_json(response.model_dump(mode="json"))
        return

    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Location")
    for i, source in enumerate(sources, start=1):
        table.add_row(str(i), source.name, source.location)
    table_console().print(table)
