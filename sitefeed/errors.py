"""
Feed generation errors.

Configuration problems are raised before any work starts; item and URL
problems are raised while assembling the feed.

Responsibility: Exception taxonomy for the feed pipeline
"""

from typing import Optional


class FeedError(Exception):
    """Base class for all feed generation errors"""


class ConfigError(FeedError):
    """Raised when required build or feed configuration is missing"""


class InvalidUrlError(FeedError, ValueError):
    """Raised when a base URL is not an absolute URL"""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class FeedItemError(FeedError):
    """Raised when a content record cannot be turned into a feed item"""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.path = path
        self.cause = cause
