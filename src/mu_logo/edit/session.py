"""EditorSession - current grid, pen color and fragment publishing.

The session is the only part of the editor that talks to the outside
world. The host reads its ambient state once (for example the URL
fragment) and passes it to the constructor, then listens for new
fragments through ``on_change``. The session never reads ambient state
itself.

Example:
    published = []
    session = EditorSession(fragment_from_url(url), on_change=published.append)
    session.select_pen(PALETTE.by_name("red"))
    session.paint(3, 4)
    session.bucket_fill(PALETTE.by_name("aqua"))
    location_hash = session.current_fragment()
"""

from __future__ import annotations

from typing import Callable

from loguru import logger

from mu_logo.codec.fragment import encode, grid_from_fragment
from mu_logo.codec.token import token_of
from mu_logo.core.color import PALETTE, Color, Palette
from mu_logo.core.grid import Grid
from mu_logo.edit.surface import NullSurface, RenderSurface


class EditorSession:
    """Editing session over a single logo grid.

    Attributes:
        palette: Palette registry shared with the grid
        surface: Visual surface receiving cell and hover updates
        on_change: Called with the new fragment after every operation. The
            edit is applied before it runs; if it raises, the exception
            reaches the caller and the grid keeps the change.
    """

    def __init__(
        self,
        fragment: str | None = None,
        *,
        palette: Palette = PALETTE,
        surface: RenderSurface | None = None,
        on_change: Callable[[str], None] | None = None,
    ) -> None:
        """Start a session, hydrating the grid from ``fragment`` if given.

        Args:
            fragment: Encoded fragment to load; None or "" starts blank
            palette: Palette registry
            surface: Rendering surface (headless if not provided)
            on_change: Receiver for the fragment after each operation

        Raises:
            MalformedFragmentError: If ``fragment`` is not valid base64
        """
        self.palette = palette
        self.surface: RenderSurface = surface or NullSurface()
        self.on_change = on_change

        if fragment:
            self._grid = grid_from_fragment(fragment, palette)
            logger.debug("session hydrated from fragment {!r}", fragment)
        else:
            self._grid = Grid(palette)
            logger.debug("session started blank")

        self._pen_color = palette.black
        self._hover_color = palette.black

        for x, y, color in self._grid.cells():
            self.surface.draw_cell(x, y, color)
        self.surface.set_hover(self._hover_color)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def pen_color(self) -> Color:
        """Color applied by :meth:`paint`."""
        return self._pen_color

    @property
    def hover_color(self) -> Color:
        """Advisory highlight color; not part of the fragment."""
        return self._hover_color

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def paint(self, x: int, y: int) -> None:
        """Set cell (x, y) to the pen color.

        Raises:
            IndexOutOfRange: If (x, y) is outside the grid
        """
        self._grid.set(x, y, self._pen_color)
        self.surface.draw_cell(x, y, self._pen_color)
        self._publish()

    def select_pen(self, color: Color) -> None:
        """Make ``color`` the pen and hover color.

        Raises:
            ValueError: If ``color`` is not in the session palette
        """
        if color not in self.palette:
            raise ValueError(f"{color!r} is not in the session palette")
        self._pen_color = color
        self._hover_color = color
        self.surface.set_hover(color)
        self._publish()

    def bucket_fill(self, to_color: Color) -> None:
        """Recolor every cell of the grid's most frequent color."""
        from_color = self._grid.most_frequent_color()
        for x, y in self._grid.recolor(from_color, to_color):
            self.surface.draw_cell(x, y, to_color)
        self._publish()

    def palette_action(self, name: str, alternate: bool = False) -> None:
        """Handle a palette affordance being activated.

        Primary action selects the pen, alternate action fills.
        Unknown names resolve to ``none``.
        """
        color = self.palette.by_name(name)
        if alternate:
            self.bucket_fill(color)
        else:
            self.select_pen(color)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def token(self) -> str:
        return token_of(self._grid)

    def current_fragment(self) -> str:
        """Encoded fragment for the current grid."""
        return encode(self.token())

    def _publish(self) -> None:
        # The edit is already applied; a raising receiver propagates to the
        # caller but leaves the grid changed. current_fragment() stays valid.
        fragment = self.current_fragment()
        logger.debug("publish fragment {}", fragment)
        if self.on_change is not None:
            self.on_change(fragment)

    def __repr__(self) -> str:
        return (
            f"EditorSession("
            f"pen={self._pen_color.name}, "
            f"grid={self._grid!r})"
        )
