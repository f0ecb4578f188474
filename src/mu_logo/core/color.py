"""Color values and the fixed 16-entry palette registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from mu_logo.core.constants import PALETTE_STRIP_WIDTH, PALETTE_TABLE


@dataclass(frozen=True)
class Color:
    """
    One palette entry.

    Equality and hashing use ``code`` only; ``hex`` and ``name`` are
    carried for display and lookup.
    """
    code: int
    hex: str = field(compare=False)
    name: str = field(compare=False)

    def __post_init__(self) -> None:
        valid = isinstance(self.code, int) and not isinstance(self.code, bool)
        if not valid or not 0 <= self.code <= 0xF:
            raise ValueError(f"color code must be a nibble (0-15), got {self.code!r}")

    def is_none(self) -> bool:
        """Check if this is the transparent/unset sentinel."""
        return self.code == 0

    @property
    def digit(self) -> str:
        """Single lowercase hex digit used in tokens."""
        return format(self.code, "x")

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Display value as an (r, g, b) tuple."""
        value = self.hex.lstrip("#")
        if len(value) == 3:
            # Short form: f80 -> ff8800
            value = value[0] * 2 + value[1] * 2 + value[2] * 2
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


class Palette:
    """
    Immutable, ordered registry of the 16 logo colors.

    Lookups never fail: anything that does not match an entry resolves
    to the ``none`` sentinel (code 0).
    """

    def __init__(self, table: tuple[tuple[int, str, str], ...] = PALETTE_TABLE):
        self._colors: tuple[Color, ...] = tuple(
            Color(code, hex_value, name) for code, hex_value, name in table
        )
        self._by_code: dict[int, Color] = {c.code: c for c in self._colors}
        self._by_name: dict[str, Color] = {c.name: c for c in self._colors}
        self._none = self._by_code[0]

    @property
    def none(self) -> Color:
        return self._none

    @property
    def black(self) -> Color:
        return self._by_name["black"]

    def by_code(self, code: int | str) -> Color:
        """Look up a color by nibble code.

        Accepts an integer or a single hex digit (as found in tokens).
        Out-of-range and unparseable input resolves to ``none``.
        """
        if isinstance(code, bool):
            return self._none
        if isinstance(code, str):
            if len(code) != 1:
                return self._none
            try:
                code = int(code, 16)
            except ValueError:
                return self._none
        if not isinstance(code, int):
            return self._none
        return self._by_code.get(code, self._none)

    def by_name(self, name: str) -> Color:
        """Look up a color by symbolic name, defaulting to ``none``."""
        return self._by_name.get(name, self._none)

    def all(self) -> tuple[Color, ...]:
        """All 16 colors in canonical order."""
        return self._colors

    def names(self) -> list[str]:
        return [c.name for c in self._colors]

    def layout(self) -> Iterator[tuple[int, int, Color]]:
        """Yield (x, y, color) for each entry on the palette strip."""
        for i, color in enumerate(self._colors):
            yield i % PALETTE_STRIP_WIDTH, i // PALETTE_STRIP_WIDTH, color

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, item: object) -> bool:
        return item in self._colors

    def __repr__(self) -> str:
        return f"Palette({', '.join(self.names())})"


# Process-wide registry, built once at import
PALETTE = Palette()
