"""
json-manager - named JSON collections persisted as flat files.

Collections are exposed as MCP tools: add, get, query, update, delete
and list.
"""

from .config import Configuration
from .errors import ErrorKind, StoreError
from .service import JsonDataService
from .storage import CollectionRepository

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("json-manager")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "CollectionRepository",
    "Configuration",
    "ErrorKind",
    "JsonDataService",
    "StoreError",
]
