"""Typed configuration loading and access.

A Flutter project may carry an `fdist.toml` next to its pubspec.yaml to
change the defaults of the build command. Every value can still be
overridden from the command line.

    [paths]
    env = "lib/constants/env.dart"
    release_config = "lib/constants/release.dart"
    dist = "dist"

    [ios]
    export_options_plist = "../AppStore-ExportOptions.plist"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "IosConfig",
    "PathsConfig",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "fdist.toml"

DEFAULT_ENV_PATH = "lib/constants/env.dart"
DEFAULT_RELEASE_CONFIG_PATH = "lib/constants/release.dart"
DEFAULT_DIST_DIR = "dist"
DEFAULT_EXPORT_OPTIONS_PLIST = "../AppStore-ExportOptions.plist"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class PathsConfig:
    """Paths relative to the project root (dist is relative to cwd)."""

    env: str = DEFAULT_ENV_PATH
    release_config: str = DEFAULT_RELEASE_CONFIG_PATH
    dist: str = DEFAULT_DIST_DIR


@dataclass(frozen=True, slots=True)
class IosConfig:
    """Options for the ipa target."""

    export_options_plist: str = DEFAULT_EXPORT_OPTIONS_PLIST


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    paths: PathsConfig = field(default_factory=PathsConfig)
    ios: IosConfig = field(default_factory=IosConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        paths: StrDict = get_table(data, "paths") or {}
        ios: StrDict = get_table(data, "ios") or {}

        return cls(
            paths=PathsConfig(
                env=get_str(paths, "env") or DEFAULT_ENV_PATH,
                release_config=get_str(paths, "release_config") or DEFAULT_RELEASE_CONFIG_PATH,
                dist=get_str(paths, "dist") or DEFAULT_DIST_DIR,
            ),
            ios=IosConfig(
                export_options_plist=get_str(ios, "export_options_plist")
                or DEFAULT_EXPORT_OPTIONS_PLIST,
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to fdist.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(project_root: Path) -> Result[Config, ConfigError]:
    """Load `fdist.toml` from the project root, or defaults when absent.

    A present but broken file is still an error.
    """
    path = project_root / CONFIG_FILENAME
    if not path.exists():
        return Ok(Config())
    return load_config(path)
