"""Error types raised by the grid and codec."""


class MuLogoError(Exception):
    """Base class for all mu-logo errors."""


class MalformedTokenError(MuLogoError, ValueError):
    """Token cannot be packed into bytes (odd length or non-hex digit)."""


class MalformedFragmentError(MuLogoError, ValueError):
    """Fragment is not valid standard base64 text."""


class IndexOutOfRange(MuLogoError, IndexError):
    """Grid coordinate outside [0, GRID_SIZE) on either axis."""
