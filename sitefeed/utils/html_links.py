"""
HTML link rewriting.

Rewrites relative href/src attribute values in an HTML fragment to absolute
URLs. Only values that are unambiguously relative ('/', './', '../') are
touched; absolute URLs, mailto:, fragments and protocol-relative '//' links
are left alone. This is a single regex pass, not an HTML parser.
"""

import re

from .urls import url_with_base

RELATIVE_REFS = re.compile(
    r"""(?<![\w-])(href|src)=(["'])((?=\.{1,2}/|/(?!/)).+?)\2""",
    re.IGNORECASE,
)


def convert_to_site_urls(html: str, base_url: str, enforce_trailing_slash: bool = False) -> str:
    """
    Rewrite relative href/src values in html against base_url.

    Attribute name casing and the original quote character are kept.
    """

    def _replace(match: re.Match) -> str:
        attribute, quote, relative_url = match.groups()
        absolute_url = url_with_base(relative_url, base_url, enforce_trailing_slash)
        return f"{attribute}={quote}{absolute_url}{quote}"

    return RELATIVE_REFS.sub(_replace, html)
