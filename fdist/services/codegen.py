"""Generation of the Dart release constants file.

The app reads its build metadata (version, env, sealed flag, commit) from a
generated class such as:

    // ======================================
    // GENERATED CODE - DO NOT MODIFY BY HAND
    // ======================================

    final class Release {
      const Release._();

      static const String appName = 'demo';
      static const int versionCode = 2;
      static const bool sealed = false;
    }

The output only depends on the fields passed in, so regenerating with the
same metadata produces a byte-identical file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum

__all__ = [
    "FieldType",
    "ReleaseField",
    "dart_literal",
    "format_build_time",
    "release_fields",
    "render_release_class",
]

BANNER = (
    "// ======================================",
    "// GENERATED CODE - DO NOT MODIFY BY HAND",
    "// ======================================",
)

_IDENT_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_INT_RE = re.compile(r"^-?[0-9]+$")
_DART_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "$": "\\$",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class FieldType(StrEnum):
    STRING = "String"
    INT = "int"
    BOOL = "bool"


@dataclass(frozen=True, slots=True)
class ReleaseField:
    name: str
    value: str | int | bool
    type: FieldType = FieldType.STRING


def _escape_dart_string(value: str) -> str:
    out: list[str] = []
    for ch in value:
        if ch in _DART_ESCAPES:
            out.append(_DART_ESCAPES[ch])
        elif ord(ch) < 0x20:
            out.append(f"\\u{{{ord(ch):x}}}")
        else:
            out.append(ch)
    return "".join(out)


def dart_literal(field: ReleaseField) -> str:
    """Render a field value as a Dart literal of its declared type.

    Raises:
        ValueError: If the value cannot be represented as that type.
    """
    value = field.value
    match field.type:
        case FieldType.STRING:
            return f"'{_escape_dart_string(str(value))}'"
        case FieldType.INT:
            text = str(value).strip()
            if isinstance(value, bool) or not _INT_RE.match(text):
                raise ValueError(f"{field.name}: not an int: {value!r}")
            return str(int(text))
        case FieldType.BOOL:
            if isinstance(value, bool):
                return "true" if value else "false"
            if value in ("true", "false"):
                return str(value)
            raise ValueError(f"{field.name}: not a bool: {value!r}")


def _check_identifier(name: str) -> None:
    if not _IDENT_RE.match(name):
        raise ValueError(f"not a valid Dart identifier: {name!r}")


def render_release_class(fields: list[ReleaseField], class_name: str = "Release") -> str:
    """Render the generated Dart source for the given fields."""
    _check_identifier(class_name)
    lines = [*BANNER, "", f"final class {class_name} {{", f"  const {class_name}._();"]
    if fields:
        lines.append("")
    for field in fields:
        _check_identifier(field.name)
        lines.append(f"  static const {field.type} {field.name} = {dart_literal(field)};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def format_build_time(build_time: datetime) -> str:
    """UTC ISO-8601 with milliseconds, e.g. 2024-01-01T10:00:00.000Z."""
    utc = build_time.astimezone(UTC)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def release_fields(
    *,
    app_name: str,
    version_name: str,
    version_code: str,
    env: str,
    sealed: bool,
    build_time: datetime,
    commit_ref: str | None = None,
) -> list[ReleaseField]:
    """Fields of the Release class, in the order they are written."""
    fields = [
        ReleaseField("appName", app_name),
        ReleaseField("versionName", version_name),
        ReleaseField("versionCode", version_code, FieldType.INT),
        ReleaseField("env", env),
        ReleaseField("sealed", sealed, FieldType.BOOL),
    ]
    if commit_ref is not None:
        fields.append(ReleaseField("commitRef", commit_ref))
    fields.append(ReleaseField("buildTime", format_build_time(build_time)))
    return fields
