"""Open a folder in the desktop file browser."""

from __future__ import annotations

from pathlib import Path

from fdist.core.result import Err, Ok, Result

from .detection import Platform, detect_platform
from .process import ProcessError, run

__all__ = ["open_folder", "opener_command"]

# The browser normally returns immediately; a process still running after
# this long is killed rather than holding up the build.
_OPEN_TIMEOUT_SECONDS = 15.0


def opener_command(path: Path, platform: Platform | None = None) -> list[str] | None:
    """Command that opens path on the given platform, or None if unsupported."""
    match platform or detect_platform():
        case Platform.MACOS:
            return ["open", str(path)]
        case Platform.WINDOWS:
            return ["explorer", str(path)]
        case Platform.LINUX:
            return ["xdg-open", str(path)]
        case Platform.UNKNOWN:
            return None


def open_folder(path: Path, platform: Platform | None = None) -> Result[None, ProcessError]:
    """Open path in the file browser.

    explorer.exe exits with 1 even when the window opened fine, so that code
    counts as success on Windows.
    """
    platform = platform or detect_platform()
    cmd = opener_command(path, platform)
    if cmd is None:
        return Err(
            ProcessError(command=(), returncode=-1, stdout="", stderr="unsupported platform")
        )

    result = run(cmd, cwd=path, timeout=_OPEN_TIMEOUT_SECONDS)
    if isinstance(result, Err):
        if platform == Platform.WINDOWS and result.error.returncode == 1:
            return Ok(None)
        return result
    return Ok(None)
