"""Operating system detection.

Only the host OS matters to fdist: it decides whether `%VAR%` placeholders
are expanded and which command opens a folder in the file browser.
"""

from __future__ import annotations

import sys as _sys
from enum import Enum, auto
from functools import lru_cache

__all__ = [
    "Platform",
    "detect_platform",
    "is_windows",
    "is_linux",
    "is_macos",
]


class Platform(Enum):
    """Operating system platform."""

    LINUX = auto()
    MACOS = auto()
    WINDOWS = auto()
    UNKNOWN = auto()

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def is_unix(self) -> bool:
        """Check if this is a Unix-like platform (Linux or macOS)."""
        return self in (Platform.LINUX, Platform.MACOS)


@lru_cache(maxsize=1)
def detect_platform() -> Platform:
    """Detect the current operating system (cached)."""
    # NOTE: avoid platform.system() on Windows.
    # Python's platform.system() may query WMI (slow/hangs on some machines).
    system = _sys.platform.lower()
    if system.startswith("linux"):
        return Platform.LINUX
    if system.startswith("darwin"):
        return Platform.MACOS
    if system.startswith(("win32", "cygwin", "msys")):
        return Platform.WINDOWS
    return Platform.UNKNOWN


def is_windows() -> bool:
    """Check if running on Windows."""
    return detect_platform() == Platform.WINDOWS


def is_linux() -> bool:
    """Check if running on Linux."""
    return detect_platform() == Platform.LINUX


def is_macos() -> bool:
    """Check if running on macOS."""
    return detect_platform() == Platform.MACOS
