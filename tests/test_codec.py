"""Tests for the token and fragment codecs."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mu_logo.codec import decode, encode, grid_of, token_of
from mu_logo.codec.fragment import grid_from_fragment, grid_to_fragment
from mu_logo.core.color import PALETTE
from mu_logo.core.errors import MalformedFragmentError, MalformedTokenError, MuLogoError
from mu_logo.core.grid import Grid

BLANK_FRAGMENT = "A" * 43 + "="
RAINBOW_TOKEN = "0123456789abcdef" * 4
RAINBOW_FRAGMENT = "ASNFZ4mrze8BI0VniavN7wEjRWeJq83vASNFZ4mrze8="

grids = st.lists(st.integers(min_value=0, max_value=15), min_size=64, max_size=64).map(
    lambda codes: grid_of(codes)
)


class TestToken:
    """Tests for Grid <-> token."""

    def test_blank_token(self, blank_grid: Grid) -> None:
        assert token_of(blank_grid) == "0" * 64

    def test_single_red_cell(self, blank_grid: Grid, red) -> None:
        blank_grid.set(0, 0, red)
        assert token_of(blank_grid) == "4" + "0" * 63

    def test_row_major_order(self, blank_grid: Grid, red) -> None:
        blank_grid.set(1, 0, red)
        blank_grid.set(0, 1, PALETTE.by_name("dark-pink"))
        token = token_of(blank_grid)
        assert token[1] == "4"
        assert token[8] == "f"

    def test_lowercase_digits(self) -> None:
        assert token_of(grid_of(RAINBOW_TOKEN.upper())) == RAINBOW_TOKEN

    def test_grid_of_full_token(self) -> None:
        grid = grid_of(RAINBOW_TOKEN)
        assert grid.get(0, 0).is_none()
        assert grid.get(4, 0).name == "red"
        assert grid.get(7, 1).name == "dark-pink"
        assert token_of(grid) == RAINBOW_TOKEN

    def test_short_token(self) -> None:
        grid = grid_of("4a0")
        assert grid.get(0, 0).name == "red"
        assert grid.get(1, 0).name == "aqua"
        assert all(color.is_none() for color in grid.colors()[2:])

    def test_empty_token_is_blank(self) -> None:
        assert grid_of("") == Grid()

    def test_long_token_excess_ignored(self) -> None:
        grid = grid_of("1" * 64 + "4" * 10)
        assert token_of(grid) == "1" * 64

    def test_sequence_of_digits(self) -> None:
        assert grid_of(["4", "a"]) == grid_of("4a")
        assert grid_of([4, 10]) == grid_of("4a")

    def test_unknown_digit_is_none(self) -> None:
        grid = grid_of("4z4")
        assert grid.get(1, 0).is_none()
        assert grid.get(2, 0).name == "red"


class TestFragment:
    """Tests for token <-> fragment."""

    def test_blank(self) -> None:
        assert encode("0" * 64) == BLANK_FRAGMENT
        assert decode(BLANK_FRAGMENT) == "0" * 64

    def test_known_fragment(self) -> None:
        assert encode(RAINBOW_TOKEN) == RAINBOW_FRAGMENT
        assert decode(RAINBOW_FRAGMENT) == RAINBOW_TOKEN

    def test_short_token(self) -> None:
        assert encode("1234") == "EjQ="
        assert decode("EjQ=") == "1234"

    def test_uppercase_token(self) -> None:
        assert encode(RAINBOW_TOKEN.upper()) == RAINBOW_FRAGMENT

    def test_empty(self) -> None:
        assert encode("") == ""
        assert decode("") == ""

    def test_decode_zero_pads_bytes(self) -> None:
        assert decode("AQ==") == "01"

    @pytest.mark.parametrize("token", ["4a0", "0", "0" * 63])
    def test_odd_length(self, token: str) -> None:
        with pytest.raises(MalformedTokenError):
            encode(token)

    @pytest.mark.parametrize("token", ["zz", "4g", "12 4", "0x12"])
    def test_non_hex(self, token: str) -> None:
        with pytest.raises(MalformedTokenError):
            encode(token)

    @pytest.mark.parametrize("fragment", ["A", "AAA", "!!!!", "EjQ", "Ej-_", "EjQ=\n", "ÉjQ="])
    def test_malformed_fragment(self, fragment: str) -> None:
        with pytest.raises(MalformedFragmentError):
            decode(fragment)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            encode("1")
        with pytest.raises(MuLogoError):
            decode("A")


class TestRoundTrip:
    """Round-trip laws across both layers."""

    @given(grids)
    def test_grid_round_trip(self, grid: Grid) -> None:
        assert grid_of(decode(encode(token_of(grid)))) == grid

    @given(grids)
    def test_token_length(self, grid: Grid) -> None:
        assert len(token_of(grid)) == 64

    @given(grids)
    def test_fragment_helpers(self, grid: Grid) -> None:
        fragment = grid_to_fragment(grid)
        assert len(fragment) == 44
        assert grid_from_fragment(fragment) == grid

    def test_empty_fragment_is_blank_grid(self) -> None:
        assert grid_from_fragment("") == Grid()
