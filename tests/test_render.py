"""Tests for half-block rendering."""

import pytest

from climg.config import RenderOptions
from climg.core.errors import InvalidSize
from climg.core.pixel import Pixel, PixelGrid
from climg.render.terminal import TerminalRenderer, render_image
from climg.terminal import TerminalBounds

from conftest import BLACK, BLUE, CLEAR, GREEN, RED, WHITE

BOUNDS = TerminalBounds(width=80, height=23)
ONE_CELL = RenderOptions(width=1, height=1)


class TestCompositing:
    """Glyph and escape selection for each opacity combination."""

    def test_both_opaque(self) -> None:
        output = render_image([[BLACK], [WHITE]], ONE_CELL, bounds=BOUNDS)
        assert output == "\x1b[38;2;0;0;0m\x1b[48;2;255;255;255m▀\x1b[0m"

    def test_top_opaque_only(self) -> None:
        output = render_image([[RED], [CLEAR]], ONE_CELL, bounds=BOUNDS)
        assert output == "\x1b[38;2;255;0;0m\x1b[49m▀\x1b[0m"
        assert "48;2" not in output

    def test_bottom_opaque_only(self) -> None:
        output = render_image([[CLEAR], [BLUE]], ONE_CELL, bounds=BOUNDS)
        assert output == "\x1b[38;2;0;0;255m\x1b[49m▄\x1b[0m"

    def test_neither_opaque(self) -> None:
        output = render_image([[CLEAR], [CLEAR]], ONE_CELL, bounds=BOUNDS)
        assert output == "\x1b[39m\x1b[49m \x1b[0m"

    def test_alpha_threshold(self) -> None:
        faint = Pixel(255, 0, 0, 128)
        solid = Pixel(255, 0, 0, 129)
        assert "▄" in render_image([[faint], [solid]], ONE_CELL, bounds=BOUNDS)
        assert render_image([[faint], [faint]], ONE_CELL, bounds=BOUNDS).endswith(" \x1b[0m")

    def test_out_of_range_channels_are_clamped(self) -> None:
        output = render_image([[Pixel(300, -1, 0)], [CLEAR]], ONE_CELL, bounds=BOUNDS)
        assert "\x1b[38;2;255;0;0m" in output

    def test_checkerboard(self, checkerboard: PixelGrid) -> None:
        output = render_image(checkerboard, RenderOptions(width=2, height=1), bounds=BOUNDS)
        assert "\n" not in output
        assert output.count("▀") == 2
        assert output == (
            "\x1b[38;2;0;0;0m\x1b[48;2;255;255;255m▀"
            "\x1b[38;2;255;255;255m\x1b[48;2;0;0;0m▀"
            "\x1b[0m"
        )


class TestRows:
    """Row pairing and line layout."""

    def test_odd_final_row_is_transparent(self) -> None:
        grid = [[RED], [GREEN], [BLUE]]
        output = render_image(grid, RenderOptions(width=1, height=2), bounds=BOUNDS)
        lines = output.split("\n")
        assert lines == [
            "\x1b[38;2;255;0;0m\x1b[48;2;0;255;0m▀\x1b[0m",
            "\x1b[38;2;0;0;255m\x1b[49m▀\x1b[0m",
        ]
        assert "48;2;0;0;0" not in output

    def test_no_trailing_newline(self, opaque_grid) -> None:
        output = render_image(opaque_grid(4, 4), RenderOptions(width=4, height=2), bounds=BOUNDS)
        assert not output.endswith("\n")
        lines = output.split("\n")
        assert len(lines) == 2
        assert all(line.endswith("\x1b[0m") for line in lines)

    def test_clamped_to_terminal(self, opaque_grid) -> None:
        options = RenderOptions(width=200, height=200)
        output = render_image(opaque_grid(10, 10), options, bounds=TerminalBounds(20, 10))
        lines = output.split("\n")
        assert len(lines) == 10
        assert all(line.count("▀") == 20 for line in lines)

    def test_percentage_width(self, opaque_grid) -> None:
        options = RenderOptions(width="50%")
        output = render_image(opaque_grid(10, 10), options, bounds=TerminalBounds(20, 10))
        lines = output.split("\n")
        assert len(lines) == 5
        assert all(line.count("▀") == 10 for line in lines)

    def test_fits_terminal_by_default(self, opaque_grid) -> None:
        output = render_image(opaque_grid(100, 20), bounds=TerminalBounds(50, 20))
        lines = output.split("\n")
        assert len(lines) == 5
        assert all(line.count("▀") == 50 for line in lines)

    def test_invalid_size(self, opaque_grid) -> None:
        with pytest.raises(InvalidSize):
            render_image(opaque_grid(2, 2), RenderOptions(width="wide"), bounds=BOUNDS)

    def test_empty_grid(self) -> None:
        with pytest.raises(ValueError):
            render_image([], bounds=BOUNDS)


class TestColorModes:
    """True color versus 256-color output."""

    def test_256_color(self) -> None:
        options = RenderOptions(width=1, height=1, true_color=False)
        output = render_image([[RED], [WHITE]], options, bounds=BOUNDS)
        assert output == "\x1b[38;5;196m\x1b[48;5;231m▀\x1b[0m"

    def test_256_color_deterministic(self, gradient: PixelGrid) -> None:
        options = RenderOptions(true_color=False)
        first = render_image(gradient, options, bounds=BOUNDS)
        second = render_image(gradient, options, bounds=BOUNDS)
        assert first == second
        assert "38;2;" not in first

    def test_renderer_color_mode(self) -> None:
        from climg.core.color import ColorMode
        assert TerminalRenderer().color_mode == ColorMode.TRUE_COLOR
        assert TerminalRenderer(RenderOptions(true_color=False)).color_mode == ColorMode.EXTENDED_256


class TestTerminalQuery:
    """Terminal bounds come from the size provider on every render."""

    def test_uses_provider(self, opaque_grid) -> None:
        calls = []

        def provider() -> TerminalBounds:
            calls.append(1)
            return TerminalBounds(4, 2)

        renderer = TerminalRenderer(size_provider=provider)
        output = renderer.render(opaque_grid(4, 4))
        renderer.render(opaque_grid(4, 4))
        assert len(output.split("\n")) == 2
        assert len(calls) == 2

    def test_explicit_bounds_skip_provider(self, opaque_grid) -> None:
        def provider() -> TerminalBounds:
            raise AssertionError("terminal should not be queried")

        renderer = TerminalRenderer(size_provider=provider)
        assert renderer.render(opaque_grid(2, 2), TerminalBounds(2, 1))

    def test_default_provider(self, opaque_grid, fixed_terminal: TerminalBounds) -> None:
        output = render_image(opaque_grid(40, 40))
        lines = output.split("\n")
        assert len(lines) == fixed_terminal.height
        assert lines[0].count("▀") == 20


class TestInfoHeader:
    """Diagnostic header output."""

    def test_header(self, opaque_grid) -> None:
        options = RenderOptions(show_info=True)
        output = render_image(opaque_grid(4, 4), options, bounds=TerminalBounds(4, 2))
        lines = output.split("\n")
        assert len(lines) == 7
        assert "Terminal:" in lines[0] and "4x2 characters" in lines[0]
        assert "Render size:" in lines[1] and "4x2 characters" in lines[1]
        assert "4x4 pixels" in lines[2]
        assert "Original size:" in lines[3] and "4x4 pixels" in lines[3]
        assert lines[4] == ""
        assert lines[5].count("▀") == 4

    def test_no_header_by_default(self, opaque_grid) -> None:
        output = render_image(opaque_grid(4, 4), bounds=TerminalBounds(4, 2))
        assert "Terminal:" not in output


class TestGetTerminalSize:
    """The terminal-size collaborator."""

    def test_reserves_prompt_line(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import os
        from climg.terminal import get_terminal_size
        monkeypatch.setattr("climg.terminal.os.get_terminal_size", lambda: os.terminal_size((120, 40)))
        assert get_terminal_size() == TerminalBounds(120, 39)

    def test_fallback_when_not_a_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from climg.terminal import get_terminal_size

        def no_terminal():
            raise OSError("not a terminal")

        monkeypatch.setattr("climg.terminal.os.get_terminal_size", no_terminal)
        assert get_terminal_size() == TerminalBounds(80, 23)


class TestRenderOptions:
    """Option defaults and copies."""

    def test_defaults(self) -> None:
        options = RenderOptions()
        assert options.width is None and options.height is None
        assert options.true_color is True
        assert options.show_info is False

    def test_replace(self) -> None:
        options = RenderOptions(width=10)
        changed = options.replace(true_color=False)
        assert changed == RenderOptions(width=10, true_color=False)
        assert options.true_color is True
