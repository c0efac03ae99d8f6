"""Release build pipeline.

Drives one invocation end to end:

1. locate `flutter` and `env2dart` on the (expanded) PATH
2. `flutter pub get`
3. `env2dart -a <env> -o <env file>`
4. read pubspec.yaml, resolve the commit ref (best effort)
5. create `<dist>/<yyyy-MM-dd>/<HHmmss>/`
6. per target: write the release constants, build, package
7. open the output folder

The first failing step ends the run. Targets already packaged stay on disk.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from fdist.core.result import Err, Ok, Result
from fdist.output.console import ConsoleProtocol, Style
from fdist.platform.environment import expand_environment
from fdist.platform.files import atomic_write_text
from fdist.platform.opener import open_folder
from fdist.platform.process import find_tool, run_silent

from .archive import PackagedTarget, artifact_prefix, package_artifact
from .artifact import ArtifactBuilder, TargetStage
from .build_errors import BuildError, CommandFailed, OutputExists, ToolMissing
from .codegen import release_fields, render_release_class
from .commit_ref import resolve_commit_ref
from .manifest import ProjectMetadata, read_manifest
from .request import BuildRequest

__all__ = ["BuildReport", "BuildService", "dated_dist_dir"]

_TOOL_HINTS = {
    "flutter": "Install Flutter and add its bin directory to PATH",
    "env2dart": "Run: dart pub global activate env2dart",
}


@dataclass(frozen=True, slots=True)
class BuildReport:
    dist_dir: Path
    metadata: ProjectMetadata
    commit_ref: str | None
    packaged: tuple[PackagedTarget, ...]

    @property
    def folders(self) -> list[Path]:
        return [p.folder for p in self.packaged]

    @property
    def open_path(self) -> Path:
        """The target folder for a single-target build, else the dated root."""
        if len(self.packaged) == 1:
            return self.packaged[0].folder
        return self.dist_dir


def dated_dist_dir(dist_root: Path, build_time: datetime) -> Path:
    return dist_root / build_time.strftime("%Y-%m-%d") / build_time.strftime("%H%M%S")


class BuildService:
    """Builds and packages every target of a BuildRequest."""

    def __init__(
        self,
        *,
        console: ConsoleProtocol,
        environ: Mapping[str, str] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._console = console
        self._environ = environ if environ is not None else os.environ
        self._clock = clock

    def run(self, request: BuildRequest) -> Result[BuildReport, BuildError]:
        root = request.project_root
        env = expand_environment(self._environ)

        flutter = self._get_tool_path("flutter", env)
        if isinstance(flutter, Err):
            return flutter
        env2dart = self._get_tool_path("env2dart", env)
        if isinstance(env2dart, Err):
            return env2dart

        self._console.header("Preparing")
        deps = self._run_step([str(flutter.value), "pub", "get"], "flutter pub get", root, env)
        if isinstance(deps, Err):
            return deps

        request.env_path.parent.mkdir(parents=True, exist_ok=True)
        request.env_path.touch(exist_ok=True)
        inject = self._run_step(
            [str(env2dart.value), "-a", request.env, "-o", str(request.env_path)],
            "env2dart",
            root,
            env,
        )
        if isinstance(inject, Err):
            return inject

        manifest = read_manifest(root)
        if isinstance(manifest, Err):
            return manifest
        metadata = manifest.value
        if metadata.version_code_defaulted:
            self._console.info("No version code has been set, fallback to 1.")

        commit_ref = resolve_commit_ref(root, env)
        if commit_ref is None:
            self._console.print("no commit ref (not a git checkout?)", Style.DIM)

        build_time = self._clock()
        dist_dir = dated_dist_dir(request.dist_root, build_time)
        try:
            dist_dir.mkdir(parents=True)
        except FileExistsError:
            return Err(OutputExists(path=dist_dir))

        prefix = artifact_prefix(
            sealed=request.sealed,
            env=request.env,
            app_name=metadata.app_name,
            version_name=metadata.version_name,
            version_code=metadata.version_code,
            build_time=build_time,
            commit_ref=commit_ref,
        )
        release_code = render_release_class(
            release_fields(
                app_name=metadata.app_name,
                version_name=metadata.version_name,
                version_code=metadata.version_code,
                env=request.env,
                sealed=request.sealed,
                build_time=build_time,
                commit_ref=commit_ref,
            )
        )

        builder = ArtifactBuilder(
            project_root=root,
            flutter=flutter.value,
            env=env,
            console=self._console,
            export_options_plist=request.export_options_plist,
        )

        packaged: list[PackagedTarget] = []
        for target in request.targets:
            self._console.header(f"Building {target.value}")
            # The constants must be on disk before Flutter compiles the app.
            atomic_write_text(request.release_config_path, release_code)

            built = builder.build(target)
            if isinstance(built, Err):
                return built

            result = package_artifact(
                built=built.value,
                target=target,
                folder=dist_dir / target.value,
                prefix=prefix,
                project_root=root,
                version_name=metadata.version_name,
                version_code=metadata.version_code,
            )
            if isinstance(result, Err):
                return result
            self._console.print(f"{target.value}: {TargetStage.DONE}", Style.DIM)
            packaged.append(result.value)

        report = BuildReport(
            dist_dir=dist_dir,
            metadata=metadata,
            commit_ref=commit_ref,
            packaged=tuple(packaged),
        )
        if request.open_folder:
            self._open(report.open_path)
        return Ok(report)

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    def _get_tool_path(self, tool_id: str, env: Mapping[str, str]) -> Result[Path, BuildError]:
        found = find_tool(tool_id, env)
        if found is None:
            return Err(ToolMissing(tool_id=tool_id, hint=_TOOL_HINTS[tool_id]))
        return Ok(found)

    def _run_step(
        self,
        cmd: list[str],
        label: str,
        cwd: Path,
        env: Mapping[str, str],
    ) -> Result[None, BuildError]:
        self._console.command(cmd)
        result = run_silent(cmd, cwd=cwd, env=env)
        if isinstance(result, Err):
            return Err(CommandFailed(command=label, returncode=result.error.returncode))
        return Ok(None)

    def _open(self, path: Path) -> None:
        result = open_folder(path)
        if isinstance(result, Err):
            self._console.print(f"could not open {path}: {result.error}", Style.DIM)
