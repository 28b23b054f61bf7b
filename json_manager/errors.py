"""Error taxonomy for json-manager.

Every business failure is a :class:`StoreError` tagged with an
:class:`ErrorKind`. Callers match on ``error.kind`` rather than on
subclass identity; anything that is not a ``StoreError`` is an
unexpected failure.
"""

from enum import Enum
from typing import Iterable, Optional


class ErrorKind(str, Enum):
    """Kinds of recoverable failures surfaced to callers."""

    VALIDATION = "validation"
    INDEX_OUT_OF_BOUNDS = "index_out_of_bounds"
    FILE_OPERATION = "file_operation"
    TOOL_NOT_FOUND = "tool_not_found"
    MISSING_ARGUMENTS = "missing_arguments"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.INDEX_OUT_OF_BOUNDS: 400,
    ErrorKind.FILE_OPERATION: 500,
    ErrorKind.TOOL_NOT_FOUND: 404,
    ErrorKind.MISSING_ARGUMENTS: 400,
}


class StoreError(Exception):
    """A recoverable failure with a kind, a message and an optional cause."""

    def __init__(self, kind: ErrorKind, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.cause = cause

    def __repr__(self) -> str:
        return f"StoreError(kind={self.kind.value!r}, message={self.message!r})"

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @classmethod
    def validation(cls, message: str) -> "StoreError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def index_out_of_bounds(cls, index: int, length: int) -> "StoreError":
        return cls(
            ErrorKind.INDEX_OUT_OF_BOUNDS,
            f"Index {index} is out of bounds. Array has {length} elements.",
        )

    @classmethod
    def file_operation(cls, message: str, cause: Optional[BaseException] = None) -> "StoreError":
        text = f"File operation failed: {message}"
        if cause is not None:
            text = f"{text} - {cause}"
        return cls(ErrorKind.FILE_OPERATION, text, cause)

    @classmethod
    def tool_not_found(cls, name: str) -> "StoreError":
        return cls(ErrorKind.TOOL_NOT_FOUND, f"Unknown tool: {name}")

    @classmethod
    def missing_arguments(cls, names: Iterable[str]) -> "StoreError":
        return cls(
            ErrorKind.MISSING_ARGUMENTS,
            f"Missing required arguments: {', '.join(names)}",
        )
