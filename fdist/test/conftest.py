from __future__ import annotations

from pathlib import Path

import pytest

INFO_PLIST = """\
<?xml version="1.0" encoding="UTF-8"?>
<plist version="1.0">
<dict>
	<key>CFBundleDisplayName</key>
	<string>Demo App</string>
	<key>CFBundleName</key>
	<string>demo</string>
</dict>
</plist>
"""


@pytest.fixture
def flutter_project(tmp_path: Path) -> Path:
    """A minimal Flutter project with both platforms and a lockfile."""
    root = tmp_path / "demo"
    root.mkdir()
    (root / "pubspec.yaml").write_text("name: demo\nversion: 1.0+2\n", encoding="utf-8")
    (root / "pubspec.lock").write_text("packages: {}\n", encoding="utf-8")
    (root / "android").mkdir()
    (root / "ios" / "Runner").mkdir(parents=True)
    (root / "ios" / "Runner" / "Info.plist").write_text(INFO_PLIST, encoding="utf-8")
    return root
