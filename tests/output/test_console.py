"""Tests for Rich Console factory and theme."""

from io import StringIO

from adrctl.output.console import ADR_THEME, create_console, get_output, style_for_status


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_plain_by_default(self) -> None:
        console = create_console()
        console.print("[adr.ok]OK[/adr.ok] value=42")
        output = get_output(console)
        assert "\x1b" not in output
        assert "OK value=42" in output

    def test_color_forces_ansi(self) -> None:
        console = create_console(color=True)
        console.print("[adr.ok]OK[/adr.ok]")
        assert "\x1b[" in get_output(console)

    def test_no_color_wins(self) -> None:
        console = create_console(color=True, no_color=True)
        console.print("[bold red]hello[/bold red]")
        assert "\x1b[1;31m" not in get_output(console)

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestTheme:
    def test_status_styles_present(self) -> None:
        for name in ("adr.status.pending", "adr.status.active", "adr.status.inactive"):
            assert name in ADR_THEME.styles


class TestStyleForStatus:
    def test_categories(self) -> None:
        assert style_for_status("Proposed") == "adr.status.pending"
        assert style_for_status("accepted") == "adr.status.active"
        assert style_for_status("Rejected") == "adr.status.inactive"
        assert style_for_status("Deprecated") == "adr.status.inactive"

    def test_superseded_line(self) -> None:
        line = "Superseded by [ADR-0002](0002-x.md)"
        assert style_for_status(line) == "adr.status.inactive"

    def test_unknown(self) -> None:
        assert style_for_status("Supersedes [ADR-0001](0001-x.md)") == ""
