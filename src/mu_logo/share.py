"""Share links: moving fragments in and out of URLs."""

from urllib.parse import unquote, urlsplit, urlunsplit


def fragment_from_url(source: str) -> str:
    """
    Extract the fragment text from a URL, ``#fragment`` or bare fragment.

    Percent-escapes are decoded, so ``%3D`` padding comes back as ``=``.
    """
    source = source.strip()
    if "://" in source:
        source = urlsplit(source).fragment
    elif source.startswith("#"):
        source = source[1:]
    return unquote(source)


def share_url(base_url: str, fragment: str) -> str:
    """Return ``base_url`` with its fragment replaced by ``fragment``."""
    parts = urlsplit(base_url)
    return urlunsplit(parts._replace(fragment=fragment))
