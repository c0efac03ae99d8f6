"""Build targets.

Each target knows the file extension of its package, the platform folder it
needs in the Flutter project, the `flutter build` subcommand that produces it
and where Flutter leaves the result. Dispatch is an exhaustive `match`, so
adding a member without wiring it up fails type checking.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

__all__ = ["BuildTarget", "dedupe_targets"]


class BuildTarget(StrEnum):
    """Package type produced by one `flutter build` invocation."""

    APK = "apk"
    APPBUNDLE = "appbundle"
    IPA = "ipa"

    @property
    def extension(self) -> str:
        match self:
            case BuildTarget.APK:
                return "apk"
            case BuildTarget.APPBUNDLE:
                return "aab"
            case BuildTarget.IPA:
                return "ipa"

    @property
    def platform_dir(self) -> str:
        """Project subdirectory that must exist to build this target."""
        match self:
            case BuildTarget.APK | BuildTarget.APPBUNDLE:
                return "android"
            case BuildTarget.IPA:
                return "ios"

    def build_args(self, *, export_options_plist: Path | None = None) -> list[str]:
        """Arguments for `flutter` that build this target in release mode."""
        args = ["build", self.value, "--release"]
        match self:
            case BuildTarget.APK | BuildTarget.APPBUNDLE:
                pass
            case BuildTarget.IPA:
                if export_options_plist is not None:
                    args.append(f"--export-options-plist={export_options_plist}")
        return args

    def output_dir(self, project_root: Path) -> Path:
        """Directory where Flutter writes this target's package."""
        build_dir = project_root / "build"
        match self:
            case BuildTarget.APK:
                return build_dir / "app" / "outputs" / "flutter-apk"
            case BuildTarget.APPBUNDLE:
                return build_dir / "app" / "outputs" / "bundle" / "release"
            case BuildTarget.IPA:
                return build_dir / "ios" / "ipa"


def dedupe_targets(targets: list[BuildTarget] | tuple[BuildTarget, ...]) -> tuple[BuildTarget, ...]:
    """Collapse duplicates, keeping first-occurrence order."""
    return tuple(dict.fromkeys(targets))
