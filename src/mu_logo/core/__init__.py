"""Core data structures: palette, grid and errors."""

from mu_logo.core.color import PALETTE, Color, Palette
from mu_logo.core.errors import (
    IndexOutOfRange,
    MalformedFragmentError,
    MalformedTokenError,
    MuLogoError,
)
from mu_logo.core.grid import Grid

__all__ = [
    "Color",
    "Palette",
    "PALETTE",
    "Grid",
    "MuLogoError",
    "MalformedTokenError",
    "MalformedFragmentError",
    "IndexOutOfRange",
]
