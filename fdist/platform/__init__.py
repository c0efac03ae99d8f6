"""Platform abstraction layer."""

from .detection import (
    Platform,
    detect_platform,
    is_linux,
    is_macos,
    is_windows,
)
from .environment import expand_environment
from .files import atomic_write_text, sha256_file
from .opener import open_folder
from .process import (
    ProcessError,
    find_tool,
    run,
    run_silent,
)

__all__ = [
    # detection
    "Platform",
    "detect_platform",
    "is_linux",
    "is_macos",
    "is_windows",
    # environment
    "expand_environment",
    # files
    "atomic_write_text",
    "sha256_file",
    # opener
    "open_folder",
    # process
    "ProcessError",
    "find_tool",
    "run",
    "run_silent",
]
