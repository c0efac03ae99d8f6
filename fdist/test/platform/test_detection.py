from __future__ import annotations

import sys

import pytest

from fdist.platform import detection
from fdist.platform.detection import Platform, detect_platform, is_linux, is_macos, is_windows


@pytest.fixture(autouse=True)
def _clear_cache():
    detect_platform.cache_clear()
    yield
    detect_platform.cache_clear()


@pytest.mark.parametrize(
    ("sys_platform", "expected"),
    [
        ("linux", Platform.LINUX),
        ("darwin", Platform.MACOS),
        ("win32", Platform.WINDOWS),
        ("cygwin", Platform.WINDOWS),
        ("sunos5", Platform.UNKNOWN),
    ],
)
def test_detect_platform(
    monkeypatch: pytest.MonkeyPatch, sys_platform: str, expected: Platform
) -> None:
    monkeypatch.setattr(detection._sys, "platform", sys_platform)
    assert detect_platform() == expected


def test_exactly_one_helper_matches_host() -> None:
    if detect_platform() == Platform.UNKNOWN:
        pytest.skip(f"unknown host platform: {sys.platform}")
    assert [is_windows(), is_linux(), is_macos()].count(True) == 1


def test_is_unix() -> None:
    assert Platform.LINUX.is_unix
    assert Platform.MACOS.is_unix
    assert not Platform.WINDOWS.is_unix
