"""Packaging of a built artifact into its output folder.

For each target the output folder ends up holding:

- `<prefix>.<ext>`       the package copied from Flutter's build directory
- `<prefix>.json`        versionName, versionCode, filename, fileSize, sha256
- `pubspec.lock`         dependency lock for reproducible rebuilds
- `<prefix>.<ext>.zip`   everything above in one archive

The prefix is a stable, sortable identifier, e.g.
`SEALED_prod_demo_1.0+2_20240101100000_abcd12`.
"""

from __future__ import annotations

import json
import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZipFile

from fdist.core.result import Err, Ok, Result
from fdist.core.target import BuildTarget
from fdist.platform.files import atomic_write_text, sha256_file

from .build_errors import BuildError, LockfileMissing

__all__ = [
    "LOCKFILE_NAME",
    "ArtifactMetadata",
    "PackagedTarget",
    "artifact_prefix",
    "package_artifact",
    "zip_folder",
]

LOCKFILE_NAME = "pubspec.lock"
TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


@dataclass(frozen=True, slots=True)
class ArtifactMetadata:
    version_name: str
    version_code: int
    filename: str
    file_size: int
    sha256: str

    def to_json(self) -> dict[str, object]:
        return {
            "versionName": self.version_name,
            "versionCode": self.version_code,
            "filename": self.filename,
            "fileSize": self.file_size,
            "sha256": self.sha256,
        }


@dataclass(frozen=True, slots=True)
class PackagedTarget:
    target: BuildTarget
    folder: Path
    artifact: Path
    metadata_path: Path
    zip_path: Path
    metadata: ArtifactMetadata


def artifact_prefix(
    *,
    sealed: bool,
    env: str,
    app_name: str,
    version_name: str,
    version_code: str,
    build_time: datetime,
    commit_ref: str | None = None,
) -> str:
    """Shared file name prefix for the package, sidecar and zip."""
    parts: list[str] = []
    if sealed:
        parts.append("SEALED")
    parts += [
        env,
        app_name,
        f"{version_name}+{version_code}",
        build_time.strftime(TIMESTAMP_FORMAT),
    ]
    if commit_ref is not None:
        parts.append(commit_ref)
    return "_".join(parts)


def zip_folder(folder: Path, zip_name: str) -> Path:
    """Zip every file directly inside folder into folder/zip_name.

    The folder is listed after the archive file has been created, so the
    archive itself shows up in the listing and is skipped by name.
    """
    zip_path = folder / zip_name
    # Pre-1980 mtimes are clamped instead of raising.
    with ZipFile(zip_path, "w", compression=ZIP_DEFLATED, strict_timestamps=False) as zf:
        for p in sorted(folder.iterdir()):
            if p.name == zip_name or not p.is_file():
                continue
            zf.write(p, arcname=p.name)
    return zip_path


def package_artifact(
    *,
    built: Path,
    target: BuildTarget,
    folder: Path,
    prefix: str,
    project_root: Path,
    version_name: str,
    version_code: str,
) -> Result[PackagedTarget, BuildError]:
    """Copy the built package into folder, describe it, and zip the folder."""
    lockfile = project_root / LOCKFILE_NAME
    if not lockfile.is_file():
        return Err(LockfileMissing(path=lockfile))

    folder.mkdir(parents=True, exist_ok=True)
    artifact = folder / f"{prefix}.{target.extension}"
    shutil.copyfile(built, artifact)

    metadata = ArtifactMetadata(
        version_name=version_name,
        version_code=int(version_code),
        filename=artifact.name,
        file_size=artifact.stat().st_size,
        sha256=sha256_file(artifact),
    )

    shutil.copyfile(lockfile, folder / LOCKFILE_NAME)
    metadata_path = folder / f"{prefix}.json"
    atomic_write_text(metadata_path, json.dumps(metadata.to_json()))

    zip_path = zip_folder(folder, f"{prefix}.{target.extension}.zip")
    return Ok(
        PackagedTarget(
            target=target,
            folder=folder,
            artifact=artifact,
            metadata_path=metadata_path,
            zip_path=zip_path,
            metadata=metadata,
        )
    )
