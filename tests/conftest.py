"""Shared fixtures for mu-logo tests."""

import pytest

from mu_logo.core.color import PALETTE, Color, Palette
from mu_logo.core.grid import Grid


@pytest.fixture
def palette() -> Palette:
    return PALETTE


@pytest.fixture
def blank_grid() -> Grid:
    return Grid()


@pytest.fixture
def red(palette: Palette) -> Color:
    return palette.by_name("red")


@pytest.fixture
def half_black_half_white(palette: Palette) -> Grid:
    """Top four rows black, bottom four white."""
    grid = Grid()
    for x, y, _ in grid.cells():
        grid.set(x, y, palette.black if y < 4 else palette.by_name("white"))
    return grid
