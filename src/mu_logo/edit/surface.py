"""RenderSurface - what the editor session expects from a visual surface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mu_logo.core.color import Color


@runtime_checkable
class RenderSurface(Protocol):
    """A surface that can show logo cells.

    The session calls :meth:`draw_cell` for every cell it changes and
    :meth:`set_hover` when the pen color changes. How the color becomes
    visible is up to the surface.
    """

    def draw_cell(self, x: int, y: int, color: Color) -> None:
        """Make ``color`` visible at (x, y)."""
        ...

    def set_hover(self, color: Color) -> None:
        """Show ``color`` as the current pen/hover indicator."""
        ...


class NullSurface:
    """Surface for headless sessions; draws nothing."""

    def draw_cell(self, x: int, y: int, color: Color) -> None:
        pass

    def set_hover(self, color: Color) -> None:
        pass
