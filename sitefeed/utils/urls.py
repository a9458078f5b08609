"""
URL resolution helpers.

Resolves site-relative paths against the configured site URL and applies
the trailing slash convention used for route URLs.

Responsibility: Turn relative references into absolute site URLs
"""

import re
from urllib.parse import urljoin, urlsplit, urlunsplit

from ..errors import InvalidUrlError

# A path ending in a short alphabetic extension addresses a file, not a route
_FILE_EXTENSION = re.compile(r"\.[a-z]{1,4}$", re.IGNORECASE)


def is_file_path(path: str) -> bool:
    """Return True if the URL path ends in a file extension like .html or .xml"""
    return bool(_FILE_EXTENSION.search(path))


def url_with_base(path: str, base: str, enforce_trailing_slash: bool = False) -> str:
    """
    Resolve a path or relative URL against an absolute base URL.

    Args:
        path: Path or relative URL (e.g., '/posts/hello', '../about')
        base: Absolute base URL (e.g., 'https://example.com/blog/')
        enforce_trailing_slash: Append '/' to route paths without an extension

    Returns:
        Absolute URL string

    Raises:
        InvalidUrlError: If base is not an absolute URL

    Example:
        >>> url_with_base('/about', 'https://example.com', True)
        'https://example.com/about/'
        >>> url_with_base('/feed.xml', 'https://example.com', True)
        'https://example.com/feed.xml'
    """
    try:
        base_parts = urlsplit(base)
    except (TypeError, ValueError) as exc:
        raise InvalidUrlError(f"Invalid base URL: {base!r}", url=base) from exc

    if not base_parts.scheme or not base_parts.netloc:
        raise InvalidUrlError(f"Base URL is not absolute: {base!r}", url=base)

    try:
        resolved = urlsplit(urljoin(base, path or ""))
    except ValueError as exc:
        raise InvalidUrlError(f"Cannot resolve {path!r} against {base!r}", url=path) from exc

    url_path = resolved.path or "/"
    if enforce_trailing_slash and not url_path.endswith("/") and not is_file_path(url_path):
        url_path = f"{url_path}/"

    return urlunsplit(resolved._replace(path=url_path))
