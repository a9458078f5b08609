"""
Domain models for sitefeed.

Exports:
    - ContentRecord: Record handed over by a content store
    - FeedItem: Normalized feed entry
    - FeedFormat: RSS/Atom/JSON format enum
    - to_utc_datetime: Date normalization helper
"""

from .record import ContentRecord
from .feed_item import FeedItem, author_list, to_utc_datetime
from .feed_format import FeedFormat

__all__ = [
    "ContentRecord",
    "FeedItem",
    "FeedFormat",
    "to_utc_datetime",
    "author_list",
]
