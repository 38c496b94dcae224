"""Init command - writes the default build configuration."""

from pathlib import Path

import click

from buildcfg.cli.error_boundary import cli_error_boundary
from buildcfg.cli.output import user_output
from buildcfg.core.catalog import DEFAULT_CATALOG_TOML
from buildcfg.core.config_store import BuildConfig, FilesystemConfigStore

CONFIG_PATH_KEY = "buildcfg.config_path"


@click.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing configuration")
@click.pass_context
@cli_error_boundary
def init_cmd(click_ctx: click.Context, force: bool) -> None:
    """Create buildcfg.toml and a version catalog with default values."""
    config_path: Path = click_ctx.meta[CONFIG_PATH_KEY]
    store = FilesystemConfigStore(config_path)

    if store.exists() and not force:
        raise FileExistsError(f"{config_path} already exists (use --force to overwrite)")

    config = BuildConfig.default()
    store.save(config)
    user_output(f"Wrote {config_path}")

    catalog_path = config_path.parent / config.catalog_path
    if not catalog_path.exists():
        catalog_path.parent.mkdir(parents=True, exist_ok=True)
        catalog_path.write_text(DEFAULT_CATALOG_TOML, encoding="utf-8")
        user_output(f"Wrote {catalog_path}")
