"""Supported feed document formats."""

from enum import Enum


class FeedFormat(str, Enum):
    """Supported feed formats"""
    RSS = "rss"
    ATOM = "atom"
    JSON = "json"

    @property
    def extension(self) -> str:
        """Canonical output file extension"""
        return _EXTENSIONS[self]

    @property
    def label(self) -> str:
        """Human-readable name used in log lines"""
        return _LABELS[self]


_EXTENSIONS = {
    FeedFormat.RSS: ".xml",
    FeedFormat.ATOM: ".atom",
    FeedFormat.JSON: ".json",
}

_LABELS = {
    FeedFormat.RSS: "RSS",
    FeedFormat.ATOM: "Atom",
    FeedFormat.JSON: "JSON",
}