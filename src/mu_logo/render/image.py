"""Rasterize a logo grid with Pillow."""

from pathlib import Path
from typing import Union

from PIL import Image, ImageDraw

from mu_logo.core.grid import Grid


def to_image(grid: Grid, scale: int = 32) -> Image.Image:
    """
    Draw the grid as an RGBA image, ``scale`` pixels per cell.

    ``none`` cells are fully transparent.
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")

    size = grid.size * scale
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    for x, y, color in grid.cells():
        if color.is_none():
            continue
        left, top = x * scale, y * scale
        draw.rectangle(
            [left, top, left + scale - 1, top + scale - 1],
            fill=(*color.rgb, 255),
        )
    return img


def save_png(grid: Grid, path: Union[str, Path], scale: int = 32) -> Path:
    """Write the grid to a PNG file and return its path."""
    path = Path(path)
    to_image(grid, scale).save(path, format="PNG")
    return path
