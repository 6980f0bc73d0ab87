"""URL validation and resolution helpers."""

from urllib.parse import urljoin, urlparse

MAGNET_PREFIX = 'magnet:'


def is_valid_url(url: str | None) -> bool:
    """Check that a string is an absolute URL with both scheme and host.

    Args:
        url: Candidate URL

    Returns:
        True if the URL has a non-empty scheme and network location

    """
    if not url or not isinstance(url, str):
        return False
    try:
        result = urlparse(url)
    except ValueError:
        return False
    return all([result.scheme, result.netloc])


def is_magnet_uri(uri: str | None) -> bool:
    """Check if a string is a magnet URI."""
    return bool(uri) and isinstance(uri, str) and uri.lower().startswith(MAGNET_PREFIX + '?')


def is_valid_item_link(link: str | None) -> bool:
    """Check that a string can be emitted as an item id or link.

    Magnet URIs carry no host but are accepted as item references.

    Args:
        link: Candidate link

    Returns:
        True if the link is an absolute URL or a magnet URI

    """
    return is_valid_url(link) or is_magnet_uri(link)


def resolve_url(base: str, maybe_relative: str) -> str:
    """Resolve a link found on a page against the page URL.

    Relative and protocol-relative links are joined against ``base``.
    Absolute links, including non-hierarchical schemes like ``magnet:``,
    are returned unchanged. An href urllib cannot split (such as a broken
    IPv6 host) is returned as-is so link validation rejects it.

    Args:
        base: The page URL
        maybe_relative: The raw href value

    Returns:
        Absolute URL or URI string

    """
    href = maybe_relative.strip()
    if is_magnet_uri(href):
        return href
    try:
        return urljoin(base, href)
    except ValueError:
        return href


def hostname(url: str) -> str:
    """Return the host part of a URL, without a leading ``www.``."""
    return urlparse(url).netloc.removeprefix('www.')
