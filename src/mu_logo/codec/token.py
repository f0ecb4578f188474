"""Grid <-> token: one hex digit per cell in row-major order."""

from __future__ import annotations

from typing import Sequence

from mu_logo.core.color import PALETTE, Palette
from mu_logo.core.constants import CELL_COUNT, GRID_SIZE
from mu_logo.core.grid import Grid


def token_of(grid: Grid) -> str:
    """Serialize a grid to its 64-character lowercase hex token."""
    return "".join(color.digit for color in grid.colors())


def grid_of(token: str | Sequence[str | int], palette: Palette = PALETTE) -> Grid:
    """
    Build a grid from a token.

    Accepts a string or a sequence of single hex digits (strings or
    ints). Short tokens fill only the leading cells and leave the rest
    ``none``; characters past the last cell are ignored. Digits that do
    not name a palette entry resolve to ``none``.
    """
    grid = Grid(palette)
    for i, digit in enumerate(token[:CELL_COUNT]):
        grid.set(i % GRID_SIZE, i // GRID_SIZE, palette.by_code(digit))
    return grid
