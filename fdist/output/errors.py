"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fdist.core.errors import ErrorCode
from fdist.output.console import Style
from fdist.services.build_errors import (
    BuildError,
    BundleNameMissing,
    CommandFailed,
    ConfigInvalid,
    EnvMissing,
    LockfileMissing,
    ManifestInvalid,
    NoTargets,
    OutputExists,
    OutputMissing,
    PlatformMissing,
    ProjectNotFound,
    ToolMissing,
)

if TYPE_CHECKING:
    from fdist.output.console import ConsoleProtocol

__all__ = ["print_build_error", "build_error_exit_code"]


def print_build_error(error: BuildError, console: ConsoleProtocol) -> None:
    """Print build error to console with appropriate formatting."""
    match error:
        case ProjectNotFound(path=path):
            console.error(f"no pubspec.yaml in {path}")
            console.print("hint: pass --path or --project", Style.DIM)
        case ConfigInvalid(path=path, reason=reason):
            where = f"{path}: " if path is not None else ""
            console.error(f"invalid config: {where}{reason}")
        case EnvMissing():
            console.error("--env must be specified")
        case NoTargets():
            console.error("no dist has been specified")
            console.print("hint: pass --dist apk|appbundle|ipa (repeatable)", Style.DIM)
        case PlatformMissing(target=target, platform_dir=platform_dir):
            console.error(f"dist [{target.extension}] requires [{platform_dir.name}] platform")
            console.print(f"missing: {platform_dir}", Style.DIM)
        case ManifestInvalid(path=path, reason=reason):
            console.error(f"invalid manifest: {path} ({reason})")
        case ToolMissing(tool_id=tool_id, hint=hint):
            console.error(f"{tool_id}: missing")
            console.print(f"hint: {hint}", Style.DIM)
        case CommandFailed(command=command, returncode=rc):
            console.error(f"{command} failed (exit {rc})")
        case BundleNameMissing(path=path):
            console.error(f"CFBundleName not found in {path}")
        case OutputMissing(path=path):
            console.error(f"output not found: {path}")
        case LockfileMissing(path=path):
            console.error(f"lockfile not found: {path}")
            console.print("hint: run `flutter pub get` and commit pubspec.lock", Style.DIM)
        case OutputExists(path=path):
            console.error(f"output folder already exists: {path}")
            console.print("hint: wait a second and run again", Style.DIM)


def build_error_exit_code(error: BuildError) -> int:
    """Get exit code for a build error."""
    match error:
        case (
            ProjectNotFound()
            | ConfigInvalid()
            | EnvMissing()
            | NoTargets()
            | PlatformMissing()
            | ManifestInvalid()
        ):
            return int(ErrorCode.USER_ERROR)
        case ToolMissing():
            return int(ErrorCode.ENV_ERROR)
        case CommandFailed() | BundleNameMissing():
            return int(ErrorCode.BUILD_ERROR)
        case OutputMissing() | LockfileMissing() | OutputExists():
            return int(ErrorCode.IO_ERROR)
