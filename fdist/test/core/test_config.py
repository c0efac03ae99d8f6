"""Tests for fdist.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from fdist.core.config import (
    CONFIG_FILENAME,
    Config,
    IosConfig,
    PathsConfig,
    load_config,
    load_config_or_default,
)
from fdist.core.result import Err, Ok


class TestDefaults:
    def test_paths_defaults(self) -> None:
        config = PathsConfig()
        assert config.env == "lib/constants/env.dart"
        assert config.release_config == "lib/constants/release.dart"
        assert config.dist == "dist"

    def test_ios_defaults(self) -> None:
        assert IosConfig().export_options_plist == "../AppStore-ExportOptions.plist"

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.paths = PathsConfig()  # type: ignore[misc]


class TestFromDict:
    def test_empty_uses_defaults(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_overrides(self) -> None:
        config = Config.from_dict(
            {
                "paths": {"env": "lib/env.g.dart", "dist": "out"},
                "ios": {"export_options_plist": "ios/Export.plist"},
            }
        )
        assert config.paths.env == "lib/env.g.dart"
        assert config.paths.release_config == "lib/constants/release.dart"
        assert config.paths.dist == "out"
        assert config.ios.export_options_plist == "ios/Export.plist"

    def test_blank_and_wrong_types_fall_back(self) -> None:
        config = Config.from_dict({"paths": {"env": "  ", "dist": 3}, "ios": "nope"})
        assert config == Config()


class TestLoadConfig:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text('[paths]\nrelease_config = "lib/release.g.dart"\n', encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Ok)
        assert result.value.paths.release_config == "lib/release.g.dart"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / CONFIG_FILENAME)

        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / CONFIG_FILENAME
        path.write_text("[paths\n", encoding="utf-8")

        result = load_config(path)

        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message
        assert result.error.path == path


class TestLoadConfigOrDefault:
    def test_absent_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path) == Ok(Config())

    def test_broken_file_is_error(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("= nope", encoding="utf-8")

        assert isinstance(load_config_or_default(tmp_path), Err)
