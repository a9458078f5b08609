"""
JSON directory content store.

Reads one ``<content_type>.json`` file per content type from a directory.
Each file holds a JSON array of record objects, each with a ``path``.

Responsibility: File-backed content store for static site builds
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from ..models import ContentRecord

logger = logging.getLogger(__name__)


class JsonDirectoryContentStore:
    """
    Content store reading JSON arrays from a directory.

    A missing file is treated as an empty collection. Files are read once
    and cached for the lifetime of the store.
    """

    def __init__(self, directory: Union[str, Path], encoding: str = "utf-8"):
        self.directory = Path(directory)
        self.encoding = encoding
        self._cache: Dict[str, List[ContentRecord]] = {}

    def get_collection(self, content_type: str) -> Optional[Sequence[Any]]:
        if content_type in self._cache:
            return self._cache[content_type]

        path = self.directory / f"{content_type}.json"
        if not path.exists():
            logger.debug(f"No collection file for content type '{content_type}' at {path}")
            return None

        try:
            data = json.loads(path.read_text(encoding=self.encoding))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON payload in {path}: {exc}") from exc

        if not isinstance(data, list):
            raise ValueError(f"Expected an array in {path}, got {type(data).__name__}")

        records = [ContentRecord.model_validate(entry) for entry in data]
        self._cache[content_type] = records
        logger.debug(f"Loaded {len(records)} '{content_type}' records from {path}")
        return records
