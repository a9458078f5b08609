"""
Content store interface.

The pipeline only needs to look up a collection of records by content type
name. Anything that implements ``get_collection`` can back a feed.

Responsibility: Contract between the feed pipeline and the storage layer
"""

from typing import Any, Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ContentStore(Protocol):
    """Read-only lookup of record collections by content type name"""

    def get_collection(self, content_type: str) -> Optional[Sequence[Any]]:
        """
        Return the ordered records of a content type.

        Returns None (or an empty sequence) when the type has no records.
        """
        ...
