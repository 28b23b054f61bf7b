"""File-backed persistence for named record collections.

Each collection is one ``<name>.json`` file in the storage root holding a
JSON array. Writes replace the whole file atomically; the repository
never looks inside the records.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Union

from json_manager.errors import StoreError

logger = logging.getLogger(__name__)

JSON_SUFFIX = ".json"
FILE_MODE = 0o600

Record = Dict[str, Any]


def normalize_filename(filename: str) -> str:
    """Append the canonical ``.json`` suffix when it is missing."""
    if not filename.endswith(JSON_SUFFIX):
        return f"{filename}{JSON_SUFFIX}"
    return filename


class CollectionRepository:
    """Read, write and enumerate collection files under one directory."""

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)

    def read(self, filename: str) -> List[Record]:
        path = self._file_path(filename)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            raise StoreError.file_operation(f"Failed to read file {filename}", e) from e

        if not isinstance(data, list):
            raise StoreError.file_operation(
                f"Failed to read file {filename}",
                ValueError(f"expected a JSON array, got {type(data).__name__}"),
            )
        return data

    def write(self, filename: str, records: List[Record]) -> None:
        self.ensure_directory_exists()
        path = self._file_path(filename)
        try:
            content = json.dumps(records, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StoreError.file_operation(f"Failed to write file {filename}", e) from e

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=".tmp-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.chmod(tmp_name, FILE_MODE)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreError.file_operation(f"Failed to write file {filename}", e) from e
        logger.debug("Wrote %d records to %s", len(records), path)

    def exists(self, filename: str) -> bool:
        return self._file_path(filename).is_file()

    def list_files(self) -> List[str]:
        self.ensure_directory_exists()
        try:
            names = [
                entry.name
                for entry in self.data_dir.iterdir()
                if entry.name.endswith(JSON_SUFFIX) and entry.is_file()
            ]
        except OSError as e:
            raise StoreError.file_operation("Failed to list files", e) from e
        return sorted(names)

    def ensure_directory_exists(self) -> None:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError.file_operation(
                f"Failed to create directory {self.data_dir}", e
            ) from e

    def _file_path(self, filename: str) -> Path:
        """Resolve a collection name to a file directly inside the storage root."""
        if any(sep in filename for sep in ("/", "\\", "\x00")):
            raise StoreError.validation("Filename must not contain path separators")

        name = normalize_filename(filename)
        path = self.data_dir / name
        root = self.data_dir.resolve()
        if path.resolve().parent != root:
            raise StoreError.validation("Filename resolves outside the data directory")
        return path
