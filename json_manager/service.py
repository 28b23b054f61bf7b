"""Business operations over record collections.

``JsonDataService`` validates inputs, stamps ids and timestamps, and runs
every mutating read-modify-write cycle under the collection's lock so
concurrent writers to one collection cannot lose each other's changes.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from json_manager.errors import StoreError
from json_manager.logging_config import log_operation
from json_manager.storage import CollectionLocks, CollectionRepository, Record, normalize_filename
from json_manager.utils import generate_id, json_equal, utc_now

logger = logging.getLogger(__name__)

INVALID_FILENAME_CHARS = re.compile(r'[<>:"|?*]')

_MISSING = object()


@dataclass(frozen=True)
class AddResult:
    message: str
    total_count: int


@dataclass(frozen=True)
class DeleteResult:
    message: str
    remaining_count: int


class JsonDataService:
    def __init__(self, repository: CollectionRepository, locks: Optional[CollectionLocks] = None):
        self.repository = repository
        self.locks = locks if locks is not None else CollectionLocks()

    def add_object(self, filename: str, obj: Mapping[str, Any]) -> AddResult:
        """Append a record stamped with a fresh ``id`` and ``createdAt``."""
        self._validate_filename(filename)
        record: Record = {**obj, "id": generate_id(), "createdAt": utc_now()}

        with self.locks.hold(normalize_filename(filename)):
            data = self.repository.read(filename)
            data.append(record)
            self.repository.write(filename, data)
            total = len(data)

        log_operation("add", filename, id=record["id"], total=total)
        return AddResult(message=f"Successfully added object to {filename}", total_count=total)

    def get_objects(self, filename: str) -> List[Record]:
        self._validate_filename(filename)
        return self.repository.read(filename)

    def query_objects(self, filename: str, property: str, value: Any) -> List[Record]:
        """Return records whose ``property`` structurally equals ``value``.

        ``property`` names a top-level key; a dotted name such as
        ``"address.city"`` reaches into nested objects when no top-level key
        of that exact name exists. A record without the property never
        matches, not even a ``None`` query value.
        """
        self._validate_filename(filename)
        if not isinstance(property, str) or not property:
            raise StoreError.validation("Property name is required for querying")

        matches = []
        for record in self.repository.read(filename):
            found = _field(record, property)
            if found is not _MISSING and json_equal(found, value):
                matches.append(record)
        logger.debug("Query %s on %s matched %d records", property, filename, len(matches))
        return matches

    def update_object(self, filename: str, index: int, updates: Mapping[str, Any]) -> str:
        """Shallow-merge ``updates`` into the record at ``index`` and stamp ``updatedAt``."""
        self._validate_filename(filename)
        self._validate_index(index)

        with self.locks.hold(normalize_filename(filename)):
            data = self.repository.read(filename)
            if index >= len(data):
                raise StoreError.index_out_of_bounds(index, len(data))
            data[index] = {**data[index], **updates, "updatedAt": utc_now()}
            self.repository.write(filename, data)

        log_operation("update", filename, index=index, keys=",".join(sorted(updates)))
        return f"Successfully updated object at index {index} in {filename}"

    def delete_object(self, filename: str, index: int) -> DeleteResult:
        """Remove the record at ``index``; later records shift down by one."""
        self._validate_filename(filename)
        self._validate_index(index)

        with self.locks.hold(normalize_filename(filename)):
            data = self.repository.read(filename)
            if index >= len(data):
                raise StoreError.index_out_of_bounds(index, len(data))
            del data[index]
            self.repository.write(filename, data)
            remaining = len(data)

        log_operation("delete", filename, index=index, remaining=remaining)
        return DeleteResult(
            message=f"Successfully deleted object at index {index} from {filename}",
            remaining_count=remaining,
        )

    def list_available_files(self) -> List[str]:
        return self.repository.list_files()

    @staticmethod
    def _validate_filename(filename: Any) -> None:
        if not isinstance(filename, str) or not filename.strip():
            raise StoreError.validation("Filename is required")
        if INVALID_FILENAME_CHARS.search(filename):
            raise StoreError.validation("Filename contains invalid characters")

    @staticmethod
    def _validate_index(index: Any) -> None:
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            raise StoreError.validation("Index must be a non-negative integer")


def _field(record: Any, property: str) -> Any:
    """Look up ``property`` on a record, falling back to a dotted nested path."""
    if not isinstance(record, dict):
        return _MISSING
    if property in record:
        return record[property]
    if "." not in property:
        return _MISSING

    current: Any = record
    for part in property.split("."):
        if not isinstance(current, dict) or part not in current:
            return _MISSING
        current = current[part]
    return current
