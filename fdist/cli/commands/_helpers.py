"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from fdist.core.result import Err, Result
from fdist.output.errors import build_error_exit_code, print_build_error
from fdist.services.build_errors import BuildError

if TYPE_CHECKING:
    from fdist.cli.context import CLIContext


T = TypeVar("T")


def unwrap_or_exit(result: Result[T, BuildError], ctx: CLIContext) -> T:
    """Return the Ok value, or print the error and exit with its code.

    Replaces the repeated:
        match result:
            case Err(error):
                print_build_error(error, ctx.console)
                raise typer.Exit(code=build_error_exit_code(error))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_build_error(result.error, ctx.console)
        raise typer.Exit(code=build_error_exit_code(result.error))
    return result.value
