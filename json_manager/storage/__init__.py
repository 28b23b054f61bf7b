"""Storage layer: collection files and per-collection write locks."""

from .locks import CollectionLocks, FifoLock
from .repository import JSON_SUFFIX, CollectionRepository, Record, normalize_filename

__all__ = [
    "CollectionLocks",
    "CollectionRepository",
    "FifoLock",
    "JSON_SUFFIX",
    "Record",
    "normalize_filename",
]
