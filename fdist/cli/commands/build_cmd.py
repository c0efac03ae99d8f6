"""Build command - build and package Flutter release targets."""

from __future__ import annotations

import typer

from fdist import __version__
from fdist.cli.commands._helpers import unwrap_or_exit
from fdist.cli.context import build_context, load_project_config
from fdist.core.target import BuildTarget
from fdist.output.console import Style
from fdist.services.pipeline import BuildService
from fdist.services.request import make_request, resolve_project_root


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def build(
    env: str = typer.Option(..., "--env", help="Environment passed to env2dart (e.g. dev, prod)"),
    project: str | None = typer.Option(
        None, "--project", help="Sibling project directory name", show_default=False
    ),
    path: str | None = typer.Option(
        None, "--path", help="Project directory relative to cwd", show_default=False
    ),
    env_path: str | None = typer.Option(
        None,
        "--env-path",
        help="Generated env file [default: lib/constants/env.dart]",
        show_default=False,
    ),
    release_config_path: str | None = typer.Option(
        None,
        "--release-config-path",
        help="Generated release constants [default: lib/constants/release.dart]",
        show_default=False,
    ),
    sealed: bool = typer.Option(False, "--sealed", help="Mark the build as sealed"),
    dist: list[BuildTarget] | None = typer.Option(
        None, "--dist", help="Target to build (repeatable)", show_default=False
    ),
    out: str | None = typer.Option(
        None, "--out", help="Dist root relative to cwd [default: dist]", show_default=False
    ),
    no_open: bool = typer.Option(False, "--no-open", help="Do not open the output folder"),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Build Flutter release packages into a dated dist folder."""
    ctx = build_context()

    project_root = unwrap_or_exit(
        resolve_project_root(cwd=ctx.cwd, path=path, project=project), ctx
    )
    config = load_project_config(ctx, project_root)
    request = unwrap_or_exit(
        make_request(
            project_root=project_root,
            cwd=ctx.cwd,
            config=config,
            env=env,
            targets=dist,
            sealed=sealed,
            env_path=env_path,
            release_config_path=release_config_path,
            dist_dir=out,
            open_folder=not no_open,
        ),
        ctx,
    )

    ctx.console.print(f"project: {project_root}", Style.DIM)
    report = unwrap_or_exit(BuildService(console=ctx.console).run(request), ctx)

    ctx.console.header("Built locations")
    for folder in report.folders:
        ctx.console.success(str(folder))
