"""Output helpers with clear stream intent.

user_output: human-facing messages, routed to stderr
machine_output: data meant for scripts and pipes, routed to stdout
"""

import click
from rich.console import Console


def user_output(message: str = "", nl: bool = True) -> None:
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", nl: bool = True) -> None:
    click.echo(message, nl=nl)


def table_console() -> Console:
    """Console for rich tables, bound to the current stdout.

    Created per call so it follows stream redirection by test runners.
    """
    return Console(highlight=False, soft_wrap=False)
