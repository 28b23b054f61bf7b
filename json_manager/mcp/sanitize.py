"""Shared sanitization utilities for the MCP layer.

These functions check the shape of tool arguments before a handler
runs. Every failure is raised as a ``validation`` :class:`StoreError`.
"""

import math
import re
from typing import Any, Dict

from json_manager.errors import StoreError

# Leaves room for the ".json" suffix within a 255-byte file name.
MAX_FILENAME_LENGTH = 250
MAX_PROPERTY_LENGTH = 500

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def sanitize_string(
    value: Any, field_name: str, max_length: int = 1000, required: bool = True
) -> str:
    """Sanitize and validate string inputs.

    Args:
        value: The value to sanitize.
        field_name: Name of the field for error messages.
        max_length: Maximum allowed string length.
        required: If True, empty strings are rejected.

    Returns:
        The string with control characters removed.

    Raises:
        StoreError: If validation fails.
    """
    if value is None and not required:
        return ""

    if not isinstance(value, str):
        raise StoreError.validation(f"{field_name} must be a string, got {type(value).__name__}")

    if required and not value.strip():
        raise StoreError.validation(f"{field_name} cannot be empty")

    if len(value) > max_length:
        raise StoreError.validation(
            f"{field_name} too long (max {max_length} characters, got {len(value)})"
        )

    return _CONTROL_CHARS.sub("", value)


def sanitize_filename(value: Any) -> str:
    """Validate a collection name; control characters are rejected, not stripped."""
    if isinstance(value, str) and _CONTROL_CHARS.search(value):
        raise StoreError.validation("filename must not contain control characters")
    return sanitize_string(value, "filename", MAX_FILENAME_LENGTH, required=True)


def validate_object(value: Any, field_name: str) -> Dict[str, Any]:
    """Require a JSON object (mapping with string keys)."""
    if not isinstance(value, dict):
        raise StoreError.validation(f"{field_name} must be an object, got {_json_type(value)}")
    non_string = [key for key in value if not isinstance(key, str)]
    if non_string:
        raise StoreError.validation(f"{field_name} keys must be strings")
    return dict(value)


def validate_index(value: Any, field_name: str = "index") -> int:
    """Require a non-negative integer; integral floats such as ``2.0`` are accepted."""
    if isinstance(value, bool):
        raise StoreError.validation(f"{field_name} must be a non-negative integer, got boolean")

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value) or not value.is_integer():
            raise StoreError.validation(f"{field_name} must be a non-negative integer, got {value}")
        value = int(value)

    if not isinstance(value, int):
        raise StoreError.validation(
            f"{field_name} must be a non-negative integer, got {_json_type(value)}"
        )

    if value < 0:
        raise StoreError.validation(f"{field_name} must be a non-negative integer, got {value}")

    return value


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return type(value).__name__
