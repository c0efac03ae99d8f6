"""Tests for fdist.output.errors module."""

from __future__ import annotations

from pathlib import Path

import pytest

from fdist.core.errors import ErrorCode
from fdist.core.target import BuildTarget
from fdist.output.console import MockConsole
from fdist.output.errors import build_error_exit_code, print_build_error
from fdist.services.build_errors import (
    BuildError,
    BundleNameMissing,
    CommandFailed,
    ConfigInvalid,
    EnvMissing,
    LockfileMissing,
    ManifestInvalid,
    NoTargets,
    OutputExists,
    OutputMissing,
    PlatformMissing,
    ProjectNotFound,
    ToolMissing,
)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (ProjectNotFound(Path("x")), ErrorCode.USER_ERROR),
        (ConfigInvalid(None, "bad"), ErrorCode.USER_ERROR),
        (EnvMissing(), ErrorCode.USER_ERROR),
        (NoTargets(), ErrorCode.USER_ERROR),
        (PlatformMissing(BuildTarget.IPA, Path("ios")), ErrorCode.USER_ERROR),
        (ManifestInvalid(Path("pubspec.yaml"), "missing 'name'"), ErrorCode.USER_ERROR),
        (ToolMissing("flutter", "install it"), ErrorCode.ENV_ERROR),
        (CommandFailed("flutter pub get", 1), ErrorCode.BUILD_ERROR),
        (BundleNameMissing(Path("Info.plist")), ErrorCode.BUILD_ERROR),
        (OutputMissing(Path("app-release.apk")), ErrorCode.IO_ERROR),
        (LockfileMissing(Path("pubspec.lock")), ErrorCode.IO_ERROR),
        (OutputExists(Path("dist")), ErrorCode.IO_ERROR),
    ],
)
def test_exit_codes(error: BuildError, code: ErrorCode) -> None:
    assert build_error_exit_code(error) == int(code)


@pytest.mark.parametrize(
    "error",
    [
        ProjectNotFound(Path("x")),
        ConfigInvalid(Path("fdist.toml"), "bad"),
        EnvMissing(),
        NoTargets(),
        PlatformMissing(BuildTarget.IPA, Path("ios")),
        ManifestInvalid(Path("pubspec.yaml"), "missing 'name'"),
        ToolMissing("flutter", "install it"),
        CommandFailed("flutter pub get", 1),
        BundleNameMissing(Path("Info.plist")),
        OutputMissing(Path("app-release.apk")),
        LockfileMissing(Path("pubspec.lock")),
        OutputExists(Path("dist")),
    ],
)
def test_every_error_prints_an_error_line(error: BuildError) -> None:
    console = MockConsole()
    print_build_error(error, console)
    assert console.has_error()


def test_platform_missing_message() -> None:
    console = MockConsole()
    print_build_error(PlatformMissing(BuildTarget.IPA, Path("/p/ios")), console)
    assert console.messages[0] == "error: dist [ipa] requires [ios] platform"


def test_output_missing_mentions_path() -> None:
    console = MockConsole()
    path = Path("build") / "app-release.apk"
    print_build_error(OutputMissing(path), console)
    assert str(path) in console.text
