"""Get command - prints the value of one setting."""

import click

from buildcfg.cli.error_boundary import cli_error_boundary
from buildcfg.cli.output import machine_output
from buildcfg.core.context import BuildContext


@click.command("get")
@click.argument("name")
@click.pass_obj
@cli_error_boundary
def get_cmd(ctx: BuildContext, name: str) -> None:
    """Print the value of setting NAME."""
    machine_output(str(ctx.buildscript.get(name)))
