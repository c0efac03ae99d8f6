from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from fdist.services.codegen import (
    FieldType,
    ReleaseField,
    dart_literal,
    format_build_time,
    release_fields,
    render_release_class,
)

BUILD_TIME = datetime(2024, 1, 1, 10, 0, 0, 123456, tzinfo=UTC)

EXPECTED = """\
// ======================================
// GENERATED CODE - DO NOT MODIFY BY HAND
// ======================================

final class Release {
  const Release._();

  static const String appName = 'demo';
  static const String versionName = '1.0';
  static const int versionCode = 2;
  static const String env = 'prod';
  static const bool sealed = true;
  static const String commitRef = 'abcd12';
  static const String buildTime = '2024-01-01T10:00:00.123Z';
}
"""


def _fields(commit_ref: str | None = "abcd12") -> list[ReleaseField]:
    return release_fields(
        app_name="demo",
        version_name="1.0",
        version_code="2",
        env="prod",
        sealed=True,
        build_time=BUILD_TIME,
        commit_ref=commit_ref,
    )


def test_render_snapshot() -> None:
    assert render_release_class(_fields()) == EXPECTED


def test_render_is_deterministic() -> None:
    assert render_release_class(_fields()) == render_release_class(_fields())


def test_commit_ref_only_when_resolved() -> None:
    names = [f.name for f in _fields(commit_ref=None)]
    assert names == ["appName", "versionName", "versionCode", "env", "sealed", "buildTime"]


def test_custom_class_name() -> None:
    code = render_release_class([], class_name="BuildInfo")
    assert "final class BuildInfo {\n  const BuildInfo._();\n}\n" in code


def test_invalid_identifiers_are_rejected() -> None:
    with pytest.raises(ValueError):
        render_release_class([], class_name="Build Info")
    with pytest.raises(ValueError):
        render_release_class([ReleaseField("app-name", "x")])


class TestDartLiteral:
    def test_string_escaping(self) -> None:
        field = ReleaseField("s", "it's $HOME\\n\nx")
        assert dart_literal(field) == "'it\\'s \\$HOME\\\\n\\nx'"

    def test_control_characters(self) -> None:
        assert dart_literal(ReleaseField("s", "a\x01b")) == "'a\\u{1}b'"

    def test_int(self) -> None:
        assert dart_literal(ReleaseField("n", "042", FieldType.INT)) == "42"
        assert dart_literal(ReleaseField("n", 7, FieldType.INT)) == "7"

    def test_int_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            dart_literal(ReleaseField("n", "1.5", FieldType.INT))
        with pytest.raises(ValueError):
            dart_literal(ReleaseField("n", True, FieldType.INT))

    def test_bool(self) -> None:
        assert dart_literal(ReleaseField("b", False, FieldType.BOOL)) == "false"
        assert dart_literal(ReleaseField("b", "true", FieldType.BOOL)) == "true"

    def test_bool_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            dart_literal(ReleaseField("b", "yes", FieldType.BOOL))


def test_format_build_time_converts_to_utc() -> None:
    local = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert format_build_time(local) == "2024-01-01T10:00:00.000Z"
