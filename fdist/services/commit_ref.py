"""Short commit reference for artifact names.

Best effort only: outside a git checkout, or without git installed, the
build simply has no commit ref.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path

from fdist.core.result import Err
from fdist.platform.process import find_tool, run

_REF_RE = re.compile(r"[0-9a-zA-Z]{6,8}")
_GIT_TIMEOUT_SECONDS = 30.0


def extract_commit_ref(output: str) -> str | None:
    """First 6-8 character alphanumeric token of `git reflog` output."""
    m = _REF_RE.search(output)
    return m.group(0) if m else None


def resolve_commit_ref(cwd: Path, env: Mapping[str, str] | None = None) -> str | None:
    git = find_tool("git", env)
    if git is None:
        return None
    out = run([str(git), "reflog", "-n1"], cwd=cwd, env=env, timeout=_GIT_TIMEOUT_SECONDS)
    if isinstance(out, Err):
        return None
    return extract_commit_ref(out.value)
