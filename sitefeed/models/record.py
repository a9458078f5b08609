"""
Content record model.

A unit of site content (blog post, page) as handed over by the content store.
The pipeline only relies on the site-relative path; every other field is
opaque and reaches the feed through the mapping function.

Responsibility: Read-only view of a content record
"""

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class ContentRecord(BaseModel):
    """
    Single content record from a collection.

    Arbitrary extra fields are kept and readable as attributes.

    Example:
        record = ContentRecord(path="/posts/hello/", title="Hello", date="2023-01-01")
        record.title  # "Hello"
    """

    path: str = Field(description="Site-relative path (e.g., '/posts/hello/')")

    model_config = ConfigDict(extra="allow", frozen=True)

    def __getitem__(self, key: str) -> Any:
        try:
            return getattr(self, key)
        except AttributeError:
            raise KeyError(key) from None

    def get(self, key: str, default: Any = None) -> Any:
        """Mapping-style access to record fields"""
        return getattr(self, key, default)

    @classmethod
    def coerce(cls, record: Any) -> Any:
        """
        Validate mappings into ContentRecord; pass other objects through.

        Stores may hand back plain dicts, ContentRecord instances, or any
        object with a ``path`` attribute.
        """
        if isinstance(record, Mapping):
            return cls.model_validate(record)
        return record
