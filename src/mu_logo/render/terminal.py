"""Render a logo grid to terminal escape sequences."""

from mu_logo.core.grid import Grid

RESET = "\x1b[0m"


class TerminalRenderer:
    """
    Render a Grid as true-color ANSI text.

    Each cell is ``cell_width`` spaces on a colored background; ``none``
    cells keep the terminal's own background. SGR codes are only emitted
    when the color changes along a row.
    """

    def __init__(self, cell_width: int = 2):
        self.cell_width = cell_width

    def render(self, grid: Grid) -> str:
        """Render grid to an ANSI string, one line per row."""
        blank = " " * self.cell_width
        lines: list[str] = []

        for row in grid.rows():
            parts: list[str] = []
            last = None
            for color in row:
                if color != last:
                    if color.is_none():
                        parts.append("\x1b[49m")
                    else:
                        r, g, b = color.rgb
                        parts.append(f"\x1b[48;2;{r};{g};{b}m")
                    last = color
                parts.append(blank)
            parts.append(RESET)
            lines.append("".join(parts))

        return "\n".join(lines)
