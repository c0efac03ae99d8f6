"""pubspec.yaml reading.

Only `name` and `version` are used. Flutter versions look like
`<versionName>+<versionCode>`; the code part is optional and defaults to 1.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

import yaml

from fdist.core.result import Err, Ok, Result
from fdist.core.structured import as_str_dict, get_scalar, get_str

from .build_errors import BuildError, ManifestInvalid

__all__ = ["MANIFEST_FILENAME", "ProjectMetadata", "parse_manifest", "read_manifest"]

MANIFEST_FILENAME = "pubspec.yaml"
DEFAULT_VERSION_CODE = "1"
_VERSION_CODE_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class ProjectMetadata:
    app_name: str
    version_name: str
    version_code: str
    version_code_defaulted: bool = False


def parse_manifest(text: str, path: Path) -> Result[ProjectMetadata, BuildError]:
    """Parse pubspec content; path is only used in error reports."""
    try:
        data = as_str_dict(yaml.safe_load(text))
    except yaml.YAMLError as e:
        return Err(ManifestInvalid(path=path, reason=f"invalid YAML: {e}"))
    if data is None:
        return Err(ManifestInvalid(path=path, reason="root must be a mapping"))

    app_name = get_str(data, "name")
    if app_name is None:
        return Err(ManifestInvalid(path=path, reason="missing 'name'"))
    version = get_scalar(data, "version")
    if version is None:
        return Err(ManifestInvalid(path=path, reason="missing 'version'"))

    version_name, sep, version_code = version.partition("+")
    if not version_name:
        return Err(ManifestInvalid(path=path, reason=f"invalid version: {version}"))
    defaulted = not sep
    if defaulted:
        version_code = DEFAULT_VERSION_CODE
    elif _VERSION_CODE_RE.fullmatch(version_code) is None:
        return Err(ManifestInvalid(path=path, reason=f"version code must be an integer: {version}"))

    return Ok(
        ProjectMetadata(
            app_name=app_name,
            version_name=version_name,
            version_code=version_code,
            version_code_defaulted=defaulted,
        )
    )


def read_manifest(project_root: Path) -> Result[ProjectMetadata, BuildError]:
    """Read pubspec.yaml from the project root."""
    path = project_root / MANIFEST_FILENAME
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return Err(ManifestInvalid(path=path, reason="file not found"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(ManifestInvalid(path=path, reason=str(e)))
    return parse_manifest(text, path)
