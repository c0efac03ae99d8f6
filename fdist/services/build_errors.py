from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fdist.core.target import BuildTarget


@dataclass(frozen=True, slots=True)
class ProjectNotFound:
    path: Path


@dataclass(frozen=True, slots=True)
class ConfigInvalid:
    path: Path | None
    reason: str


@dataclass(frozen=True, slots=True)
class EnvMissing:
    pass


@dataclass(frozen=True, slots=True)
class NoTargets:
    pass


@dataclass(frozen=True, slots=True)
class PlatformMissing:
    target: BuildTarget
    platform_dir: Path


@dataclass(frozen=True, slots=True)
class ManifestInvalid:
    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class ToolMissing:
    tool_id: str
    hint: str


@dataclass(frozen=True, slots=True)
class CommandFailed:
    command: str
    returncode: int


@dataclass(frozen=True, slots=True)
class BundleNameMissing:
    path: Path


@dataclass(frozen=True, slots=True)
class OutputMissing:
    path: Path


@dataclass(frozen=True, slots=True)
class LockfileMissing:
    path: Path


@dataclass(frozen=True, slots=True)
class OutputExists:
    path: Path


BuildError = (
    ProjectNotFound
    | ConfigInvalid
    | EnvMissing
    | NoTargets
    | PlatformMissing
    | ManifestInvalid
    | ToolMissing
    | CommandFailed
    | BundleNameMissing
    | OutputMissing
    | LockfileMissing
    | OutputExists
)
