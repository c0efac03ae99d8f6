from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from fdist.core.config import Config, load_config_or_default
from fdist.core.result import Err
from fdist.output.console import ConsoleProtocol, RichConsole
from fdist.output.errors import build_error_exit_code, print_build_error
from fdist.services.build_errors import ConfigInvalid


@dataclass(frozen=True, slots=True)
class CLIContext:
    cwd: Path
    console: ConsoleProtocol


def build_context() -> CLIContext:
    return CLIContext(cwd=Path.cwd(), console=RichConsole())


def load_project_config(ctx: CLIContext, project_root: Path) -> Config:
    """fdist.toml of the project, defaults if absent; exits if it is broken."""
    result = load_config_or_default(project_root)
    if isinstance(result, Err):
        error = ConfigInvalid(path=result.error.path, reason=result.error.message)
        print_build_error(error, ctx.console)
        raise typer.Exit(code=build_error_exit_code(error))
    return result.value
