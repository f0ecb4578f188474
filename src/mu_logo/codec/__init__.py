"""Encoding/decoding between grids, tokens and fragments."""

from mu_logo.codec.token import grid_of, token_of
from mu_logo.codec.fragment import decode, encode, grid_from_fragment, grid_to_fragment

__all__ = [
    "token_of",
    "grid_of",
    "encode",
    "decode",
    "grid_to_fragment",
    "grid_from_fragment",
]
