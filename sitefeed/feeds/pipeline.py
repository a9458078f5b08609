"""
Feed item pipeline.

Coordinates turning content collections into feed documents.
Handles the full flow: collect → filter → map → sort → cap → rewrite links
→ serialize → write.

Responsibility: Orchestrate one feed generation run per build
"""

import asyncio
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from ..config import BuildConfig, FeedConfiguration, FeedOptions, resolve_config
from ..errors import FeedError, FeedItemError
from ..models import ContentRecord, FeedFormat, FeedItem
from ..stores import ContentStore
from ..utils import convert_to_site_urls
from .feed_builder import FeedBuilder

logger = logging.getLogger(__name__)

# Sort key for items without a date; they end up after every dated item
_NO_DATE = datetime.min.replace(tzinfo=timezone.utc)


def sort_by_date(items: Sequence[FeedItem]) -> List[FeedItem]:
    """
    Sort items by date, most recent first.

    The sort is stable: items with the same instant keep their input order.
    Items without a date go last.
    """
    return sorted(
        items,
        key=lambda item: (item.date is not None, item.date or _NO_DATE),
        reverse=True,
    )


def limit_items(items: List[FeedItem], max_items: Optional[int]) -> List[FeedItem]:
    """Keep the first max_items items (all of them when max_items is unset)"""
    if max_items and len(items) > max_items:
        return items[:max_items]
    return items


def _write_document(path: Path, document: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document, encoding="utf-8")


class FeedPipeline:
    """
    Orchestrates the complete feed generation run.

    Pipeline stages:
    1. Fetch each configured content type's collection from the store
    2. Filter records and map them to feed items with absolute id/link
    3. Sort all items by date (newest first) and cap to max_items
    4. Rewrite relative links in HTML fields against each item's link
    5. Serialize every enabled format, then write all documents

    Example:
        config = resolve_config({"content_types": ["posts"]}, {"site_url": "https://example.com"})
        documents = FeedPipeline(config).run(store)
        rss_xml = documents[FeedFormat.RSS]
    """

    def __init__(self, config: FeedConfiguration):
        """
        Initialize feed pipeline.

        Args:
            config: Resolved feed configuration
        """
        self.config = config

    def build_item(self, record: Any) -> FeedItem:
        """
        Map one record to a feed item and assign its canonical id/link.

        Raises:
            InvalidUrlError: If the item URL cannot be built
            pydantic.ValidationError: If the mapped item is malformed
        """
        mapped = self.config.node_to_feed_item(record)
        item = mapped if isinstance(mapped, FeedItem) else FeedItem.model_validate(mapped)
        item.id = self.config.item_url(record.path)
        item.link = item.id
        return item

    def collect_items(self, store: ContentStore) -> List[FeedItem]:
        """
        Gather, filter and map records of every configured content type.

        Items are returned in content type order, then source order.
        """
        items: List[FeedItem] = []

        for content_type in self.config.content_types:
            collection = store.get_collection(content_type)
            if not collection:
                logger.debug(f"Skipping empty content type '{content_type}'")
                continue

            kept = 0
            for raw in collection:
                item = self._process_record(content_type, raw)
                if item is not None:
                    items.append(item)
                    kept += 1

            logger.info(f"Collected {kept} of {len(collection)} '{content_type}' records")

        return items

    def _process_record(self, content_type: str, raw: Any) -> Optional[FeedItem]:
        path = raw.get("path") if isinstance(raw, Mapping) else getattr(raw, "path", None)
        try:
            record = ContentRecord.coerce(raw)
            if not self.config.filter_nodes(record):
                return None
            return self.build_item(record)
        except Exception as exc:
            if self.config.skip_invalid_items:
                logger.warning(f"Skipping invalid '{content_type}' record {path!r}: {exc}")
                return None
            if isinstance(exc, FeedError):
                raise
            raise FeedItemError(
                f"Cannot build feed item for '{content_type}' record {path!r}: {exc}",
                path=path,
                cause=exc
            ) from exc

    def rewrite_html_fields(self, items: List[FeedItem]) -> None:
        """Make relative links in each item's HTML fields absolute"""
        for item in items:
            for field in self.config.html_fields:
                value = getattr(item, field, None)
                if not value or not isinstance(value, str):
                    continue
                setattr(
                    item,
                    field,
                    convert_to_site_urls(value, item.link, self.config.enforce_trailing_slashes)
                )

    def assemble(self, store: ContentStore) -> List[FeedItem]:
        """Return the final ordered, capped and link-rewritten item list"""
        items = self.collect_items(store)
        items = sort_by_date(items)
        items = limit_items(items, self.config.max_items)
        self.rewrite_html_fields(items)
        return items

    def render(self, items: List[FeedItem]) -> Dict[FeedFormat, str]:
        """
        Serialize the items in every enabled format.

        All documents are built in memory first, so a failing format
        prevents every file from being written.
        """
        updated = next((item.date for item in items if item.date), None)
        documents: Dict[FeedFormat, str] = {}

        for fmt in self.config.outputs:
            builder = FeedBuilder.from_feed_options(
                self.config.feed_options,
                self_link=self.config.self_link(fmt),
                updated=updated
            )
            for item in items:
                builder.add_item(item)
            documents[fmt] = builder.generate(fmt)
            logger.debug(f"Rendered {fmt.label} feed with {builder.get_entry_count()} entries")

        return documents

    async def write(self, documents: Dict[FeedFormat, str]) -> None:
        """Write all documents to their output paths concurrently"""
        tasks = []
        for fmt, document in documents.items():
            output_path = self.config.outputs[fmt]
            logger.info(f"Generate {fmt.label} feed at {output_path}")
            target = Path(self.config.out_dir) / output_path.lstrip("/")
            tasks.append(asyncio.to_thread(_write_document, target, document))

        await asyncio.gather(*tasks)

    async def run_async(self, store: ContentStore) -> Dict[FeedFormat, str]:
        """
        Run the whole pipeline and write every enabled feed.

        Args:
            store: Content store to read collections from

        Returns:
            Generated documents keyed by format
        """
        logger.info(
            f"Starting feed pipeline: content_types={self.config.content_types}, "
            f"formats={[fmt.value for fmt in self.config.outputs]}, "
            f"max_items={self.config.max_items}"
        )

        items = self.assemble(store)
        documents = self.render(items)
        await self.write(documents)

        logger.info(f"Feed pipeline complete: {len(items)} items, {len(documents)} documents")
        return documents

    def run(self, store: ContentStore) -> Dict[FeedFormat, str]:
        """Synchronous wrapper around run_async() for hosts without an event loop"""
        return asyncio.run(self.run_async(store))


def generate_feeds(
    options: Union[FeedOptions, Mapping[str, Any], None],
    build_config: Union[BuildConfig, Mapping[str, Any]],
    store: ContentStore
) -> Dict[FeedFormat, str]:
    """
    Build hook entry point: resolve configuration and generate all feeds.

    Configuration errors are raised before anything is read or written.
    """
    config = resolve_config(options, build_config)
    return FeedPipeline(config).run(store)
