"""
Content stores for sitefeed.

Exports:
    - ContentStore: Protocol implemented by all stores
    - MemoryContentStore: Dict-backed store
    - JsonDirectoryContentStore: Directory of <type>.json arrays
"""

from .base import ContentStore
from .memory import MemoryContentStore
from .json_directory import JsonDirectoryContentStore

__all__ = [
    "ContentStore",
    "MemoryContentStore",
    "JsonDirectoryContentStore",
]
