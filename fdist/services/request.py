"""Build request resolution and validation.

Everything here runs before the first subprocess: a request that would fail
halfway through (no targets, a target whose platform folder is missing) is
rejected up front so earlier targets never leave orphaned artifacts.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fdist.core.config import Config
from fdist.core.result import Err, Ok, Result
from fdist.core.target import BuildTarget, dedupe_targets

from .build_errors import BuildError, EnvMissing, NoTargets, PlatformMissing, ProjectNotFound
from .manifest import MANIFEST_FILENAME

__all__ = ["BuildRequest", "make_request", "resolve_project_root"]


@dataclass(frozen=True, slots=True)
class BuildRequest:
    project_root: Path
    env: str
    env_path: Path
    release_config_path: Path
    sealed: bool
    targets: tuple[BuildTarget, ...]
    dist_root: Path
    export_options_plist: Path
    open_folder: bool = True


def resolve_project_root(
    *,
    cwd: Path,
    path: str | None = None,
    project: str | None = None,
) -> Result[Path, BuildError]:
    """Find the Flutter project to build.

    --path is relative to cwd, --project names a sibling of cwd. With
    neither, cwd itself must be a Flutter project.
    """
    if path is not None:
        root = cwd / path
    elif project is not None:
        root = cwd.parent / project
    else:
        root = cwd

    root = root.resolve()
    if not (root / MANIFEST_FILENAME).is_file():
        return Err(ProjectNotFound(path=root))
    return Ok(root)


def make_request(
    *,
    project_root: Path,
    cwd: Path,
    config: Config,
    env: str | None,
    targets: list[BuildTarget] | None,
    sealed: bool = False,
    env_path: str | None = None,
    release_config_path: str | None = None,
    dist_dir: str | None = None,
    open_folder: bool = True,
) -> Result[BuildRequest, BuildError]:
    """Validate inputs and build a BuildRequest.

    Explicit arguments win over config values.
    """
    if env is None or not env.strip():
        return Err(EnvMissing())

    unique = dedupe_targets(targets or [])
    if not unique:
        return Err(NoTargets())

    for target in unique:
        platform_dir = project_root / target.platform_dir
        if not platform_dir.is_dir():
            return Err(PlatformMissing(target=target, platform_dir=platform_dir))

    return Ok(
        BuildRequest(
            project_root=project_root,
            env=env.strip(),
            env_path=project_root / (env_path or config.paths.env),
            release_config_path=project_root / (release_config_path or config.paths.release_config),
            sealed=sealed,
            targets=unique,
            dist_root=cwd / (dist_dir or config.paths.dist),
            export_options_plist=Path(config.ios.export_options_plist),
            open_folder=open_folder,
        )
    )
