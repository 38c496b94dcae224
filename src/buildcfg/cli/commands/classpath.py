"""Classpath command - resolves every buildscript classpath entry."""

import click

from buildcfg.cli.commands.resolve import to_response
from buildcfg.cli.error_boundary import cli_error_boundary
from buildcfg.cli.json_output import emit_json, json_error_boundary
from buildcfg.cli.json_schemas import ClasspathResponse
from buildcfg.cli.output import user_output
from buildcfg.core.context import BuildContext


@click.command("classpath")
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
@cli_error_boundary
@json_error_boundary
def classpath_cmd(ctx: BuildContext, output_json: bool) -> None:
    """Resolve the buildscript classpath against the plugin repositories.

    Stops at the first entry that cannot be resolved.
    """
    resolved = [
        to_response(dependency, ctx.buildscript.resolve(dependency))
        for dependency in ctx.config.classpath
    ]

    if output_json:
        emit_json(ClasspathResponse(classpath=resolved).model_dump(mode="json"))
        return

    if not resolved:
        user_output("No classpath dependencies declared")
        return
    for entry in resolved:
        user_output(f"{entry.dependency} -> {entry.coordinate} ({entry.source})")
