"""Tests for terminal, SVG and image rendering."""

from pathlib import Path

import pytest
from PIL import Image

from mu_logo.core.color import PALETTE
from mu_logo.core.grid import Grid
from mu_logo.edit.session import EditorSession
from mu_logo.edit.surface import RenderSurface
from mu_logo.render.image import save_png, to_image
from mu_logo.render.svg import SvgSurface, palette_svg
from mu_logo.render.terminal import TerminalRenderer


class TestTerminalRenderer:
    """Tests for TerminalRenderer."""

    def test_blank_grid(self, blank_grid: Grid) -> None:
        lines = TerminalRenderer().render(blank_grid).split("\n")
        assert len(lines) == 8
        assert lines[0] == "\x1b[49m" + " " * 16 + "\x1b[0m"

    def test_colored_cells(self, blank_grid: Grid, red) -> None:
        blank_grid.set(0, 0, red)
        blank_grid.set(1, 0, red)
        first = TerminalRenderer().render(blank_grid).split("\n")[0]
        assert first.startswith("\x1b[48;2;255;0;0m    \x1b[49m")
        # one SGR per color change
        assert first.count("\x1b[48;2;255;0;0m") == 1

    def test_cell_width(self, blank_grid: Grid) -> None:
        lines = TerminalRenderer(cell_width=1).render(blank_grid).split("\n")
        assert lines[0].count(" ") == 8


class TestSvgSurface:
    """Tests for SvgSurface."""

    def test_is_render_surface(self) -> None:
        assert isinstance(SvgSurface(), RenderSurface)

    def test_blank_markup(self) -> None:
        svg = SvgSurface().to_svg()
        assert svg.count("<rect") == 64
        assert 'id="p0-0"' in svg
        assert 'id="p7-7"' in svg
        assert 'fill-opacity="0"' in svg
        assert 'fill-opacity="1"' not in svg
        assert 'class="black"' in svg  # hover class on root

    def test_follows_session(self) -> None:
        surface = SvgSurface()
        session = EditorSession(surface=surface)
        session.select_pen(PALETTE.by_name("fuchsia"))
        session.paint(3, 2)
        assert surface.cell(3, 2).name == "fuchsia"
        assert surface.hover.name == "fuchsia"
        svg = surface.to_svg()
        assert '<rect x="3" y="2" width="1" height="1" id="p3-2" class="fuchsia" fill="#f0f" fill-opacity="1"/>' in svg

    def test_palette_strip(self) -> None:
        svg = palette_svg()
        assert svg.count("<rect") == 16
        assert 'viewBox="0 0 8 2"' in svg
        assert 'data-color="dark-pink"' in svg
        assert '<rect x="7" y="1"' in svg


class TestImage:
    """Tests for PNG rasterization."""

    def test_size_and_transparency(self, blank_grid: Grid, red) -> None:
        blank_grid.set(1, 0, red)
        img = to_image(blank_grid, scale=4)
        assert img.size == (32, 32)
        assert img.mode == "RGBA"
        assert img.getpixel((0, 0))[3] == 0
        assert img.getpixel((4, 0)) == (255, 0, 0, 255)
        assert img.getpixel((7, 3)) == (255, 0, 0, 255)
        assert img.getpixel((8, 0))[3] == 0

    def test_save_png(self, tmp_path: Path, half_black_half_white: Grid) -> None:
        path = save_png(half_black_half_white, tmp_path / "logo.png", scale=2)
        with Image.open(path) as img:
            assert img.size == (16, 16)
            assert img.convert("RGBA").getpixel((0, 15)) == (255, 255, 255, 255)

    def test_bad_scale(self, blank_grid: Grid) -> None:
        with pytest.raises(ValueError):
            to_image(blank_grid, scale=0)
