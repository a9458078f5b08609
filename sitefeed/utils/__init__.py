"""
Utilities package for sitefeed.

This package contains small pure helpers for:
- URL resolution
- HTML link rewriting
- Output path normalization
- Nested mapping merges
"""

from .urls import url_with_base, is_file_path
from .html_links import convert_to_site_urls
from .paths import ensure_extension
from .merge import deep_merge, get_dotted

__all__ = [
    "url_with_base",
    "is_file_path",
    "convert_to_site_urls",
    "ensure_extension",
    "deep_merge",
    "get_dotted",
]
