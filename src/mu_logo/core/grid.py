"""Grid - the 8x8 logo, one Color per cell."""

from __future__ import annotations

from collections import Counter
from typing import Iterator

from loguru import logger

from mu_logo.core.color import PALETTE, Color, Palette
from mu_logo.core.constants import CELL_COUNT, GRID_SIZE, MAJORITY_COUNT
from mu_logo.core.errors import IndexOutOfRange


class Grid:
    """
    A fixed-size 8x8 grid of Colors.

    Every cell holds a Color at all times; a fresh grid is all ``none``.
    Cells are stored flat in row-major scan order (``y`` outer, ``x``
    inner), which is also the token order and the tie-break order for
    :meth:`most_frequent_color`.
    """

    size = GRID_SIZE

    def __init__(self, palette: Palette = PALETTE) -> None:
        self.palette = palette
        self._cells: list[Color] = [palette.none] * CELL_COUNT

    @staticmethod
    def _index(x: int, y: int) -> int:
        if not (0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE):
            raise IndexOutOfRange(
                f"({x}, {y}) out of bounds (grid is {GRID_SIZE}x{GRID_SIZE})"
            )
        return y * GRID_SIZE + x

    def _check_color(self, color: Color) -> None:
        if color not in self.palette:
            raise ValueError(f"{color!r} is not in the grid palette")

    def get(self, x: int, y: int) -> Color:
        """Get the color at position (x, y)."""
        return self._cells[self._index(x, y)]

    def set(self, x: int, y: int, color: Color) -> None:
        """Set the color at position (x, y)."""
        index = self._index(x, y)
        self._check_color(color)
        self._cells[index] = color

    def __getitem__(self, pos: tuple[int, int]) -> Color:
        """Get color using indexing: grid[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], color: Color) -> None:
        """Set color using indexing: grid[x, y] = color."""
        x, y = pos
        self.set(x, y, color)

    def cells(self) -> Iterator[tuple[int, int, Color]]:
        """Iterate over all cells as (x, y, color) in scan order."""
        for i, color in enumerate(self._cells):
            yield i % GRID_SIZE, i // GRID_SIZE, color

    def rows(self) -> Iterator[list[Color]]:
        """Iterate over rows, top to bottom."""
        for y in range(GRID_SIZE):
            yield self._cells[y * GRID_SIZE:(y + 1) * GRID_SIZE]

    def colors(self) -> list[Color]:
        """Flat copy of all cells in scan order."""
        return list(self._cells)

    def counts(self) -> Counter[str]:
        """Occurrences of each color name, in order of first appearance."""
        return Counter(color.name for color in self._cells)

    def most_frequent_color(self) -> Color:
        """
        Return the color covering the most cells.

        Ties go to the color that appears first in scan order. Stops as
        soon as a color reaches half the grid, since nothing can then
        beat it.
        """
        best_name = self.palette.none.name
        best_count = 0
        for name, count in self.counts().items():
            if count > best_count:
                best_name = name
                best_count = count
                if best_count >= MAJORITY_COUNT:
                    break
        return self.palette.by_name(best_name)

    def recolor(self, from_color: Color, to_color: Color) -> list[tuple[int, int]]:
        """
        Replace every ``from_color`` cell with ``to_color``.

        This is a global replace, not a connected flood fill.

        Returns:
            Coordinates of the cells that were changed, in scan order.

        Raises:
            ValueError: If ``to_color`` is not in the grid palette
        """
        self._check_color(to_color)
        changed: list[tuple[int, int]] = []
        if from_color == to_color:
            return changed
        for i, color in enumerate(self._cells):
            if color == from_color:
                self._cells[i] = to_color
                changed.append((i % GRID_SIZE, i // GRID_SIZE))
        logger.debug(
            "recolor {} -> {}: {} cells", from_color.name, to_color.name, len(changed)
        )
        return changed

    def clear(self) -> None:
        """Reset every cell to ``none``."""
        self._cells = [self.palette.none] * CELL_COUNT

    def copy(self) -> Grid:
        """Create a copy of this grid sharing the same palette."""
        new_grid = Grid(self.palette)
        new_grid._cells = list(self._cells)
        return new_grid

    def is_blank(self) -> bool:
        return all(color.is_none() for color in self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        digits = "".join(color.digit for color in self._cells)
        return f"Grid({digits})"
