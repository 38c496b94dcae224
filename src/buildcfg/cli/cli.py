import logging
import os
from pathlib import Path

import click

from buildcfg.cli.commands.classpath import classpath_cmd
from buildcfg.cli.commands.get import get_cmd
from buildcfg.cli.commands.init import CONFIG_PATH_KEY, init_cmd
from buildcfg.cli.commands.repos import repos_cmd
from buildcfg.cli.commands.resolve import resolve_cmd
from buildcfg.cli.commands.settings import settings_cmd
from buildcfg.cli.error_boundary import cli_error_boundary
from buildcfg.core.config_store import CONFIG_FILENAME
from buildcfg.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Commands that run before a configuration exists
_NO_CONTEXT_COMMANDS = frozenset({"init"})


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="buildcfg")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=CONFIG_FILENAME,
    show_default=True,
    help="Path to the build configuration file",
)
@click.option("--debug", is_flag=True, help="Log resolution details to stderr")
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, config_path: Path, debug: bool) -> None:
    """Inspect build settings and resolve dependencies against ordered repositories."""
    if debug or os.getenv("BUILDCFG_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    ctx.meta[CONFIG_PATH_KEY] = config_path

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None and ctx.invoked_subcommand not in _NO_CONTEXT_COMMANDS:
        build_ctx = create_context(config_path)
        ctx.call_on_close(build_ctx.close)
        ctx.obj = build_ctx


cli.add_command(classpath_cmd)
cli.add_command(get_cmd)
cli.add_command(init_cmd)
cli.add_command(repos_cmd)
cli.add_command(resolve_cmd)
cli.add_command(settings_cmd)


def main() -> None:
    """CLI entry point used by the `buildcfg` console script."""
    cli()
