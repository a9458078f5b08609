"""In-memory content store, mainly for hosts that already hold their records."""

from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..models import ContentRecord


class MemoryContentStore:
    """
    Content store backed by a dict of content type name to records.

    Example:
        store = MemoryContentStore({
            "posts": [{"path": "/posts/a/", "title": "A", "date": "2023-01-01"}],
        })
        store.get_collection("posts")
    """

    def __init__(self, collections: Optional[Dict[str, Iterable[Any]]] = None):
        self._collections: Dict[str, List[Any]] = {}
        for name, records in (collections or {}).items():
            self.add_collection(name, records)

    def add_collection(self, content_type: str, records: Iterable[Any]) -> None:
        """Register (or replace) the records of a content type"""
        self._collections[content_type] = [ContentRecord.coerce(r) for r in records]

    def get_collection(self, content_type: str) -> Optional[Sequence[Any]]:
        return self._collections.get(content_type)

    def content_types(self) -> List[str]:
        """Names of all registered content types"""
        return list(self._collections)
