"""Token <-> fragment: pack hex digit pairs into bytes, then base64.

The fragment is the shareable form of a logo, small enough for a URL
fragment. A full 64-digit token packs to 32 bytes, i.e. a 44-character
fragment. The blank grid encodes to 43 ``A`` characters plus ``=``.
"""

from __future__ import annotations

import base64
import re

from mu_logo.core.color import PALETTE, Palette
from mu_logo.core.errors import MalformedFragmentError, MalformedTokenError
from mu_logo.core.grid import Grid
from mu_logo.codec.token import grid_of, token_of

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def encode(token: str) -> str:
    """Pack a hex token into standard, padded base64 text."""
    if len(token) % 2:
        raise MalformedTokenError(f"token length must be even, got {len(token)}")
    if not _HEX_RE.fullmatch(token):
        raise MalformedTokenError(f"token contains non-hex characters: {token!r}")
    return base64.b64encode(bytes.fromhex(token)).decode("ascii")


def decode(fragment: str) -> str:
    """Unpack base64 text into a lowercase hex token (two digits per byte)."""
    try:
        data = base64.b64decode(fragment, validate=True)
    except ValueError as e:  # binascii.Error is a ValueError
        raise MalformedFragmentError(f"invalid base64 fragment {fragment!r}: {e}") from e
    return data.hex()


def grid_to_fragment(grid: Grid) -> str:
    """Serialize a grid straight to its fragment."""
    return encode(token_of(grid))


def grid_from_fragment(fragment: str, palette: Palette = PALETTE) -> Grid:
    """Hydrate a grid from a fragment; an empty fragment gives a blank grid."""
    return grid_of(decode(fragment), palette)
