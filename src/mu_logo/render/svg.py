"""SVG surface: one rect per cell, sized in grid units.

Markup mirrors the web editor: cells are ``<rect>`` elements with id
``p{x}-{y}``, the color name as class, and ``fill-opacity="0"`` for
``none`` so the page background shows through. The pen color is a class
on the root ``<svg>`` so stylesheets can highlight hover.
"""

from __future__ import annotations

from xml.sax.saxutils import quoteattr

from mu_logo.core.color import PALETTE, Color, Palette
from mu_logo.core.constants import GRID_SIZE, PALETTE_STRIP_WIDTH


def _rect(x: int, y: int, attrs: dict[str, str]) -> str:
    extra = "".join(f" {key}={quoteattr(value)}" for key, value in attrs.items())
    return f'<rect x="{x}" y="{y}" width="1" height="1"{extra}/>'


class SvgSurface:
    """RenderSurface that keeps SVG rect state for a logo grid."""

    def __init__(self, palette: Palette = PALETTE, element_id: str = "logo-canvas"):
        self.element_id = element_id
        self._cells: dict[tuple[int, int], Color] = {
            (x, y): palette.none for y in range(GRID_SIZE) for x in range(GRID_SIZE)
        }
        self._hover: Color = palette.black

    @property
    def hover(self) -> Color:
        return self._hover

    def draw_cell(self, x: int, y: int, color: Color) -> None:
        self._cells[(x, y)] = color

    def set_hover(self, color: Color) -> None:
        self._hover = color

    def cell(self, x: int, y: int) -> Color:
        return self._cells[(x, y)]

    def to_svg(self) -> str:
        """Render current state to a standalone SVG document."""
        rects = []
        for y in range(GRID_SIZE):
            for x in range(GRID_SIZE):
                color = self._cells[(x, y)]
                rects.append(_rect(x, y, {
                    "id": f"p{x}-{y}",
                    "class": color.name,
                    "fill": color.hex,
                    "fill-opacity": "0" if color.is_none() else "1",
                }))
        body = "\n  ".join(rects)
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" id={quoteattr(self.element_id)} '
            f'class={quoteattr(self._hover.name)} viewBox="0 0 {GRID_SIZE} {GRID_SIZE}">\n'
            f"  {body}\n"
            f"</svg>"
        )


def palette_svg(palette: Palette = PALETTE, element_id: str = "logo-canvas-palette") -> str:
    """Render the palette strip; each rect carries its color in ``data-color``."""
    rects = [
        _rect(x, y, {"class": color.name, "data-color": color.name, "fill": color.hex})
        for x, y, color in palette.layout()
    ]
    rows = -(-len(palette) // PALETTE_STRIP_WIDTH)
    body = "\n  ".join(rects)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" id={quoteattr(element_id)} '
        f'viewBox="0 0 {PALETTE_STRIP_WIDTH} {rows}">\n'
        f"  {body}\n"
        f"</svg>"
    )
