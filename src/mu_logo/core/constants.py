"""Shared constants for the logo grid and its palette."""

# Grid geometry (square, row-major scan: index = y * GRID_SIZE + x)
GRID_SIZE = 8
CELL_COUNT = GRID_SIZE * GRID_SIZE

# A color seen this many times cannot be tied or beaten by any other
MAJORITY_COUNT = CELL_COUNT // 2

# Palette rows: (nibble code, display value, name)
# Order is canonical: it is the token alphabet and the palette strip order.
PALETTE_TABLE: tuple[tuple[int, str, str], ...] = (
    (0x0, "#fff", "none"),
    (0x1, "#000", "black"),
    (0x2, "#808080", "grey"),
    (0x3, "#fff", "white"),
    (0x4, "#f00", "red"),
    (0x5, "#ff8000", "orange"),
    (0x6, "#ff0", "yellow"),
    (0x7, "#80ff00", "chartreuse"),
    (0x8, "#0f0", "green"),
    (0x9, "#00ff80", "spring-green"),
    (0xA, "#00ffff", "aqua"),
    (0xB, "#0080ff", "dodger-blue"),
    (0xC, "#00f", "blue"),
    (0xD, "#8000ff", "indigo"),
    (0xE, "#f0f", "fuchsia"),
    (0xF, "#ff0080", "dark-pink"),
)

# Palette strip is laid out on rows of this width
PALETTE_STRIP_WIDTH = GRID_SIZE
