"""Tests for fdist.output.console module."""

from __future__ import annotations

import io

from rich.console import Console

from fdist.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestStyle:
    def test_str_conversion(self) -> None:
        assert str(Style.SUCCESS) == "success"
        assert str(Style.DIM) == "dim"


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("hello", Style.DIM)
        assert console.outputs[0].message == "hello"
        assert console.outputs[0].style == Style.DIM

    def test_shorthands_prefix_messages(self) -> None:
        console = MockConsole()
        console.success("done")
        console.error("boom")
        console.warning("careful")
        console.info("fyi")
        assert console.messages == ["OK done", "error: boom", "warning: careful", "info: fyi"]
        assert console.has_error()

    def test_command_echo(self) -> None:
        console = MockConsole()
        console.command(["flutter", "pub", "get"])
        assert console.commands == ["flutter pub get"]
        assert console.outputs[0].style == Style.DIM

    def test_find(self) -> None:
        console = MockConsole()
        console.print("apk: built")
        console.print("ipa: built")
        assert len(console.find("apk")) == 1

    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = MockConsole()
        console.header("Building apk")


class TestRichConsole:
    def _console(self) -> tuple[RichConsole, io.StringIO]:
        buf = io.StringIO()
        return RichConsole(Console(file=buf, force_terminal=False, width=200)), buf

    def test_error_prefix(self) -> None:
        console, buf = self._console()
        console.error("flutter build apk failed (exit 1)")
        assert "error: flutter build apk failed (exit 1)" in buf.getvalue()

    def test_markup_in_messages_is_not_interpreted(self) -> None:
        console, buf = self._console()
        console.success("dist/[apk]/x")
        console.print("[bold]raw[/bold]")
        out = buf.getvalue()
        assert "dist/[apk]/x" in out
        assert "[bold]raw[/bold]" in out

    def test_command_echo(self) -> None:
        console, buf = self._console()
        console.command(["flutter", "pub", "get"])
        assert "$ flutter pub get" in buf.getvalue()
