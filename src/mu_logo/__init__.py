"""
mu-logo: 8x8 sixteen-color logos that fit in a URL fragment

Quick Start:
    >>> import mu_logo
    >>> session = mu_logo.EditorSession()
    >>> session.select_pen(mu_logo.PALETTE.by_name("red"))
    >>> session.paint(0, 0)
    >>> session.token()[:4]
    '4000'
    >>> fragment = session.current_fragment()
    >>> mu_logo.load(fragment) == session.grid
    True

Features:
    - Fixed 16-color palette with lookup by nibble code or name
    - Lossless hex token and compact base64 fragment encodings
    - Pixel painting and palette-wide bucket fill
    - Terminal, SVG and PNG rendering
"""

from loguru import logger

__version__ = "0.1.0"

# Core types
from mu_logo.core.color import PALETTE, Color, Palette
from mu_logo.core.grid import Grid
from mu_logo.core.errors import (
    IndexOutOfRange,
    MalformedFragmentError,
    MalformedTokenError,
    MuLogoError,
)

# Codec
from mu_logo.codec import decode, encode, grid_of, token_of
from mu_logo.codec.fragment import grid_from_fragment, grid_to_fragment

# Editing
from mu_logo.edit.session import EditorSession

logger.disable("mu_logo")


def load(fragment: str) -> Grid:
    """Hydrate a grid from a fragment (empty means blank)."""
    return grid_from_fragment(fragment)


def dump(grid: Grid) -> str:
    """Encode a grid to its fragment."""
    return grid_to_fragment(grid)


__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "Palette",
    "PALETTE",
    "Grid",
    # Errors
    "MuLogoError",
    "MalformedTokenError",
    "MalformedFragmentError",
    "IndexOutOfRange",
    # Codec
    "token_of",
    "grid_of",
    "encode",
    "decode",
    "load",
    "dump",
    # Editing
    "EditorSession",
]
