"""Expansion of `%VAR%` references in a Windows environment.

On Windows a variable can hold unexpanded references to other variables,
e.g. `FLUTTER_ROOT=%USERPROFILE%\\flutter` with `PATH=...;%FLUTTER_ROOT%\\bin`.
Child processes started without a shell see the literal text, so `flutter`
would not be found. The expansion below resolves those references before the
environment is handed to subprocesses.

Rules:
- A reference to an unknown variable is left as-is.
- A variable referencing itself (`PATH=%PATH%;X`) keeps that reference.
- A reference to such a self-referencing variable is replaced by its raw
  value, without expanding it further.
- A reference back to a variable that is already being resolved (A -> B -> A)
  is left as-is, so cycles terminate.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from .detection import is_windows

__all__ = ["expand_environment"]

_PLACEHOLDER_RE = re.compile(r"%([^%]+)%")


def expand_environment(
    environ: Mapping[str, str],
    *,
    windows: bool | None = None,
) -> dict[str, str]:
    """Return a copy of environ with `%VAR%` references resolved.

    Args:
        environ: Source environment (not modified).
        windows: Force the platform check; defaults to the host OS.

    Returns:
        A new dict. Outside Windows it is a plain copy.
    """
    if windows is None:
        windows = is_windows()
    if not windows:
        return dict(environ)

    def resolve(name: str, stack: frozenset[str]) -> str:
        value = environ[name]
        stack = stack | {name}
        for ref in dict.fromkeys(_PLACEHOLDER_RE.findall(value)):
            referenced = environ.get(ref)
            if referenced is None or ref in stack:
                continue
            placeholder = f"%{ref}%"
            if placeholder in referenced:
                value = value.replace(placeholder, referenced)
            else:
                value = value.replace(placeholder, resolve(ref, stack))
        return value

    return {name: resolve(name, frozenset()) for name in environ}
