"""JSON output utilities for CLI commands with machine-parseable output."""

import json
from collections.abc import Callable
from functools import wraps
from typing import Any

from buildcfg.cli.json_schemas import ErrorResponse
from buildcfg.cli.output import machine_output
from buildcfg.core.errors import BuildConfigError


def emit_json(data: dict[str, Any]) -> None:
    """Write JSON data to stdout.

    For Pydantic models, call model.model_dump(mode="json") first.
    """
    machine_output(json.dumps(data, indent=2))


def emit_json_error(error: str, error_type: str, exit_code: int = 1) -> None:
    """Output error as JSON and exit.

    Raises:
        SystemExit: Always, with the given exit code
    """
    response = ErrorResponse(error=error, error_type=error_type, exit_code=exit_code)
    emit_json(response.model_dump(mode="json"))
    raise SystemExit(exit_code)


def json_error_boundary(func: Callable) -> Callable:
    """Decorator to emit registry errors as JSON when `--json` is set.

    Inspects the `output_json` keyword argument. In text mode, exceptions
    bubble up unchanged to cli_error_boundary.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (BuildConfigError, ValueError) as e:
            if kwargs.get("output_json"):
                emit_json_error(str(e), type(e).__name__)
            raise

    return wrapper
