"""Error boundary handling for CLI commands.

Catches well-known exceptions at CLI entry points and displays clean error
messages without stack traces.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from buildcfg.core.errors import BuildConfigError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def cli_error_boundary(func: F) -> F:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - BuildConfigError: Unknown settings, missing or unreachable dependencies
        - FileExistsError: Config already present
        - FileNotFoundError: Missing config files
        - ValueError: Malformed configuration or dependency notation
        - PermissionError: Config cannot be written

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (
            BuildConfigError,
            FileExistsError,
            FileNotFoundError,
            ValueError,
            PermissionError,
        ) as e:
            logger.debug("Exception details:", exc_info=True)
            click.echo(click.style("Error: ", fg="red") + str(e), err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
