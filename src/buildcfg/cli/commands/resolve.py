"""Resolve command - finds which repository serves a dependency."""

import click

from buildcfg.cli.commands.repos import SCOPE_OPTION
from buildcfg.cli.error_boundary import cli_error_boundary
from buildcfg.cli.json_output import emit_json, json_error_boundary
from buildcfg.cli.json_schemas import ResolvedDependency
from buildcfg.cli.output import machine_output, user_output
from buildcfg.core.context import BuildContext
from buildcfg.core.repositories.abc import ArtifactLocation


def to_response(dependency: str, location: ArtifactLocation) -> ResolvedDependency:
    return ResolvedDependency(
        dependency=dependency,
        coordinate=str(location.coordinate),
        source=location.source,
        url=location.url,
    )


@click.command("resolve")
@click.argument("dependency")
@SCOPE_OPTION
@click.option(
    "--concurrent",
    is_flag=True,
    help="Query all repositories in parallel (priority order still decides)",
)
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
@cli_error_boundary
@json_error_boundary
def resolve_cmd(
    ctx: BuildContext, dependency: str, scope: str, concurrent: bool, output_json: bool
) -> None:
    """Resolve DEPENDENCY (coordinate or catalog alias) against the repositories."""
    registry = ctx.registry(scope)
    if concurrent:
        location = registry.resolve_concurrently(dependency)
    else:
        location = registry.resolve(dependency)

    if output_json:
        emit_json(to_response(dependency, location).model_dump(mode="json"))
        return

    user_output(f"{location.coordinate} found in {click.style(location.source, bold=True)}")
    machine_output(location.url)
