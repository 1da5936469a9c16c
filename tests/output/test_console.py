"""Tests for the StringIO-backed Rich console factory."""

from io import StringIO

from formfield.output.console import FF_THEME, create_console, get_output


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert isinstance(console.file, StringIO)
        assert get_output(console) == "hello\n"

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_width_override(self) -> None:
        assert create_console(width=40).width == 40

    def test_theme_styles(self) -> None:
        for name in ("ff.ok", "ff.error", "ff.valid", "ff.invalid", "ff.disabled"):
            assert name in FF_THEME.styles

    def test_no_ansi_in_buffer(self) -> None:
        console = create_console()
        console.print("[ff.ok]OK[/ff.ok]")
        assert "\x1b[" not in get_output(console)
