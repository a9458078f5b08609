"""
sitefeed: RSS, Atom and JSON feeds for statically built sites.

Reads content collections at build time and writes feed documents with
every relative link rewritten to an absolute site URL.
"""

from .config import BuildConfig, FeedConfiguration, FeedOptions, resolve_config
from .errors import ConfigError, FeedError, FeedItemError, InvalidUrlError
from .feeds import FeedBuilder, FeedPipeline, generate_feeds
from .models import ContentRecord, FeedFormat, FeedItem
from .stores import ContentStore, JsonDirectoryContentStore, MemoryContentStore

__version__ = "1.0.0"

__all__ = [
    "BuildConfig",
    "FeedConfiguration",
    "FeedOptions",
    "resolve_config",
    "ConfigError",
    "FeedError",
    "FeedItemError",
    "InvalidUrlError",
    "FeedBuilder",
    "FeedPipeline",
    "generate_feeds",
    "ContentRecord",
    "FeedFormat",
    "FeedItem",
    "ContentStore",
    "JsonDirectoryContentStore",
    "MemoryContentStore",
]
