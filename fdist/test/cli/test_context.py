from __future__ import annotations

from pathlib import Path

import pytest
import typer

from fdist.cli.context import CLIContext, load_project_config
from fdist.core.config import Config
from fdist.core.errors import ErrorCode
from fdist.output.console import MockConsole


def _ctx(cwd: Path) -> CLIContext:
    return CLIContext(cwd=cwd, console=MockConsole())


def test_missing_config_gives_defaults(tmp_path: Path) -> None:
    assert load_project_config(_ctx(tmp_path), tmp_path) == Config()


def test_config_values_are_loaded(tmp_path: Path) -> None:
    (tmp_path / "fdist.toml").write_text('[paths]\ndist = "out"\n', encoding="utf-8")

    config = load_project_config(_ctx(tmp_path), tmp_path)

    assert config.paths.dist == "out"


def test_broken_config_is_reported_as_config_invalid(tmp_path: Path) -> None:
    (tmp_path / "fdist.toml").write_text("paths = [\n", encoding="utf-8")
    ctx = _ctx(tmp_path)

    with pytest.raises(typer.Exit) as exc:
        load_project_config(ctx, tmp_path)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert isinstance(ctx.console, MockConsole)
    assert ctx.console.has_error()
    assert ctx.console.find(f"invalid config: {tmp_path / 'fdist.toml'}: Invalid TOML syntax")
