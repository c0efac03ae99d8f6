"""Native release builds.

One `flutter build <target> --release` per target, then the produced package
is located at the path Flutter is known to write it to. A target moves
through validated -> built -> located -> done; any failure stops it there.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import StrEnum
from pathlib import Path

from fdist.core.result import Err, Ok, Result
from fdist.core.target import BuildTarget
from fdist.output.console import ConsoleProtocol, Style
from fdist.platform.process import run_silent

from .build_errors import BuildError, BundleNameMissing, CommandFailed, OutputMissing

__all__ = ["ArtifactBuilder", "TargetStage", "artifact_path", "read_bundle_name"]

_BUNDLE_NAME_RE = re.compile(r"<key>CFBundleName</key>\s*<string>(.+?)</string>")


class TargetStage(StrEnum):
    VALIDATED = "validated"
    BUILT = "built"
    LOCATED = "located"
    DONE = "done"


def info_plist_path(project_root: Path) -> Path:
    return project_root / "ios" / "Runner" / "Info.plist"


def read_bundle_name(project_root: Path) -> Result[str, BuildError]:
    """CFBundleName from ios/Runner/Info.plist; it names the exported .ipa."""
    plist = info_plist_path(project_root)
    try:
        content = plist.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return Err(BundleNameMissing(path=plist))
    m = _BUNDLE_NAME_RE.search(content)
    if m is None:
        return Err(BundleNameMissing(path=plist))
    return Ok(m.group(1).strip())


def artifact_path(target: BuildTarget, project_root: Path) -> Result[Path, BuildError]:
    """Where Flutter writes the package for target."""
    out_dir = target.output_dir(project_root)
    match target:
        case BuildTarget.APK | BuildTarget.APPBUNDLE:
            return Ok(out_dir / f"app-release.{target.extension}")
        case BuildTarget.IPA:
            return read_bundle_name(project_root).map(lambda name: out_dir / f"{name}.ipa")


class ArtifactBuilder:
    """Runs the release build for one target and finds its output."""

    def __init__(
        self,
        *,
        project_root: Path,
        flutter: Path,
        env: Mapping[str, str],
        console: ConsoleProtocol,
        export_options_plist: Path | None = None,
    ) -> None:
        self._project_root = project_root
        self._flutter = flutter
        self._env = env
        self._console = console
        self._export_options_plist = export_options_plist

    def build(self, target: BuildTarget) -> Result[Path, BuildError]:
        """Build target and return the path of the produced package."""
        self._stage(target, TargetStage.VALIDATED)

        cmd = [
            str(self._flutter),
            *target.build_args(export_options_plist=self._export_options_plist),
        ]
        self._console.command(cmd)
        result = run_silent(cmd, cwd=self._project_root, env=self._env)
        if isinstance(result, Err):
            return Err(
                CommandFailed(
                    command=f"flutter build {target.value}",
                    returncode=result.error.returncode,
                )
            )
        self._stage(target, TargetStage.BUILT)

        located = artifact_path(target, self._project_root)
        if isinstance(located, Err):
            return located
        if not located.value.is_file():
            return Err(OutputMissing(path=located.value))
        self._stage(target, TargetStage.LOCATED)
        return located

    def _stage(self, target: BuildTarget, stage: TargetStage) -> None:
        self._console.print(f"{target.value}: {stage}", Style.DIM)
