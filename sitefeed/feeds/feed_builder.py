"""
Feed Builder Infrastructure
===========================
Serializers for RSS 2.0, Atom 1.0 and JSON Feed 1.1 documents.

Responsibility: Turn feed metadata and an ordered item list into documents
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from feedgen.entry import FeedEntry
from feedgen.feed import FeedGenerator

from ..models import FeedFormat, FeedItem, author_list, to_utc_datetime

JSON_FEED_VERSION = "https://jsonfeed.org/version/1.1"

# Used as the update time of a feed with no dated items so output stays stable
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class FeedBuilder:
    """
    Builds one feed document from metadata and items.

    Entries are appended in the order they are added, so the item list
    order is the document order.

    Example:
        builder = FeedBuilder(
            title="Example Blog",
            feed_id="https://example.com/",
            link="https://example.com/",
            self_link="https://example.com/feed.xml",
        )
        builder.add_item(FeedItem(id=..., link=..., title="Hello", date="2023-01-01"))
        xml = builder.generate(FeedFormat.RSS)
    """

    def __init__(
        self,
        title: str,
        feed_id: str,
        link: str,
        description: Optional[str] = None,
        self_link: Optional[str] = None,
        language: Optional[str] = None,
        copyright: Optional[str] = None,
        author: Optional[Any] = None,
        image: Optional[str] = None,
        favicon: Optional[str] = None,
        generator: Optional[str] = None,
        updated: Optional[datetime] = None
    ):
        """
        Initialize feed builder.

        Args:
            title: Feed title
            feed_id: Stable feed identifier (the site URL)
            link: URL of the website
            description: Feed description (defaults to title)
            self_link: URL of the feed document itself
            language: Feed language code
            copyright: Rights statement
            author: Author name or {'name', 'email', 'uri'} dict
            image: Feed logo URL
            favicon: Feed icon URL
            generator: Generator name
            updated: Last update time (defaults to the Unix epoch)
        """
        self.title = title
        self.feed_id = feed_id
        self.link = link
        self.description = description or title
        self.self_link = self_link
        self.language = language
        self.image = image
        self.favicon = favicon
        self.authors = author_list(author)
        self.updated = updated or EPOCH

        self.fg = FeedGenerator()

        # Required metadata
        self.fg.id(feed_id)
        self.fg.title(title)
        self.fg.description(self.description)
        self.fg.link(href=link, rel='alternate')
        if self_link:
            self.fg.link(href=self_link, rel='self')

        if language:
            self.fg.language(language)
        if copyright:
            self.fg.rights(copyright)
        for entry in self.authors:
            self.fg.author(entry)
        if image:
            self.fg.logo(image)
        if favicon:
            self.fg.icon(favicon)
        if generator:
            self.fg.generator(generator)

        # Fixed update time keeps output byte-stable between builds
        self.fg.updated(self.updated)
        self.fg.lastBuildDate(self.updated)

        self._items: List[FeedItem] = []

    @classmethod
    def from_feed_options(
        cls,
        feed_options: Mapping[str, Any],
        self_link: Optional[str] = None,
        updated: Optional[datetime] = None
    ) -> "FeedBuilder":
        """
        Create a builder from resolved feed metadata.

        An 'updated' key in feed_options wins over the updated argument.
        """
        link = feed_options.get("link") or feed_options.get("id")
        override = to_utc_datetime(feed_options.get("updated"))
        return cls(
            title=feed_options.get("title") or link,
            feed_id=feed_options.get("id") or link,
            link=link,
            description=feed_options.get("description"),
            self_link=self_link,
            language=feed_options.get("language"),
            copyright=feed_options.get("copyright"),
            author=feed_options.get("author"),
            image=feed_options.get("image"),
            favicon=feed_options.get("favicon"),
            generator=feed_options.get("generator"),
            updated=override or updated,
        )

    def add_item(self, item: FeedItem) -> FeedEntry:
        """
        Add an item to the feed.

        Args:
            item: Feed item with id and link already assigned

        Returns:
            The created FeedEntry
        """
        entry = self.fg.add_entry(order='append')

        # Required fields
        entry.id(item.id)
        entry.guid(item.id, permalink=True)
        entry.title(item.title or item.link)
        entry.link(href=item.link)

        # Optional fields
        if item.description:
            entry.description(item.description)
        if item.content:
            entry.content(item.content, type='html')

        published = item.date or self.updated
        entry.published(published)
        entry.updated(published)

        for author in item.authors:
            entry.author(author)

        for category in item.categories:
            entry.category(term=category)

        self._items.append(item)
        return entry

    def generate(self, format: FeedFormat = FeedFormat.RSS) -> str:
        """
        Generate the feed in the specified format.

        Args:
            format: Output format (RSS, Atom or JSON)

        Returns:
            Feed document string
        """
        if format == FeedFormat.RSS:
            return self.fg.rss_str(pretty=True).decode('utf-8')
        elif format == FeedFormat.ATOM:
            return self.fg.atom_str(pretty=True).decode('utf-8')
        elif format == FeedFormat.JSON:
            return json.dumps(self._json_feed(), indent=2, ensure_ascii=False)
        else:
            raise ValueError(f"Unsupported format: {format}")

    def get_entry_count(self) -> int:
        """Get the number of entries in the feed"""
        return len(self._items)

    def _json_feed(self) -> Dict[str, Any]:
        feed = {
            "version": JSON_FEED_VERSION,
            "title": self.title,
            "home_page_url": self.link,
            "feed_url": self.self_link,
            "description": self.description,
            "icon": self.image,
            "favicon": self.favicon,
            "language": self.language,
            "authors": self.authors or None,
            "items": [self._json_item(item) for item in self._items],
        }
        return {k: v for k, v in feed.items() if v is not None}

    def _json_item(self, item: FeedItem) -> Dict[str, Any]:
        # JSON Feed requires content_html or content_text on every item
        content_html = item.content or item.description
        entry = {
            "id": item.id,
            "url": item.link,
            "title": item.title,
            "content_html": content_html,
            "content_text": None if content_html else "",
            "summary": item.description if item.content else None,
            "date_published": item.date.isoformat() if item.date else None,
            "authors": item.authors or None,
            "tags": item.categories or None,
        }
        return {k: v for k, v in entry.items() if v is not None}

