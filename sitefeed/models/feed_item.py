"""
Feed item model.

One entry of an RSS/Atom/JSON feed, produced from a content record by the
configured mapping function. Dates are normalized to timezone-aware UTC so
that the pipeline can compare records whose dates arrive as different
representations.

Responsibility: Normalized feed entry shared by all serializers
"""

from datetime import date, datetime, timezone
from typing import Any, List, Optional, Union

from dateutil import parser as date_parser
from pydantic import BaseModel, ConfigDict, Field, field_validator


# Fills the parts a partial date string leaves out ("2023-02" is Feb 1st, midnight)
_PARSE_DEFAULT = datetime(1970, 1, 1)


def to_utc_datetime(value: Any) -> Optional[datetime]:
    """
    Convert a date-like value into a timezone-aware UTC datetime.

    Accepts datetime, date, ISO 8601 / RFC 2822 strings and epoch seconds.
    Naive datetimes are taken to be UTC.

    Raises:
        ValueError: If the value cannot be interpreted as a date
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        parsed = datetime.fromtimestamp(value, tz=timezone.utc)
    elif isinstance(value, str):
        try:
            parsed = date_parser.parse(value.strip(), default=_PARSE_DEFAULT)
        except (ValueError, OverflowError) as exc:
            raise ValueError(f"Unrecognized date: {value!r}") from exc
    else:
        raise ValueError(f"Unsupported date type: {type(value).__name__}")

    # Ensure timezone-aware
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def author_list(author: Any) -> List[dict]:
    """Normalize an author name, dict, or list of either into a list of dicts"""
    if not author:
        return []
    entries = author if isinstance(author, list) else [author]
    return [{"name": a} if isinstance(a, str) else dict(a) for a in entries]


class FeedItem(BaseModel):
    """
    Feed entry assembled from a content record.

    ``id`` and ``link`` are assigned by the pipeline from the record path.
    Extra fields returned by the mapping function are kept so they can be
    listed in ``html_fields``.
    """

    id: Optional[str] = Field(default=None, description="Absolute URL, stable across builds")
    link: Optional[str] = Field(default=None, description="Absolute URL (same as id)")
    title: Optional[str] = Field(default=None, description="Entry title")
    date: Optional[datetime] = Field(default=None, description="Publication date (UTC)")
    description: Optional[str] = Field(default=None, description="Short summary (HTML)")
    content: Optional[str] = Field(default=None, description="Full body (HTML)")
    author: Optional[Union[str, dict, List[Union[str, dict]]]] = Field(
        default=None,
        description="Author name, {'name', 'email', 'uri'} dict, or a list of either"
    )
    categories: List[str] = Field(default_factory=list, description="Category terms")

    model_config = ConfigDict(extra="allow")

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        """Accept any supported date representation"""
        return to_utc_datetime(v)

    @field_validator("categories", mode="before")
    @classmethod
    def parse_categories(cls, v):
        """Allow a single category string or None"""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @property
    def authors(self) -> List[dict]:
        """Author information as a list of dicts with at least a name"""
        return author_list(self.author)
