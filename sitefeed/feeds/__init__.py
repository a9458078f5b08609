"""
Feeds Module
============
RSS/Atom/JSON feed generation from site content.

Exports:
    - FeedBuilder: Document serializer
    - FeedFormat: RSS/Atom/JSON format enum
    - FeedPipeline: Feed item pipeline
    - generate_feeds: Build hook entry point
"""

from .feed_builder import (
    FeedBuilder,
    FeedFormat,
)

from .pipeline import (
    FeedPipeline,
    generate_feeds,
    sort_by_date,
    limit_items,
)

__all__ = [
    'FeedBuilder',
    'FeedFormat',
    'FeedPipeline',
    'generate_feeds',
    'sort_by_date',
    'limit_items',
]
