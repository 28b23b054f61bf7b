"""Shared helpers: timestamps, record ids and JSON structural equality."""

import random
import time
from datetime import datetime, timezone
from typing import Any


def utc_now() -> str:
    """Get current timestamp as ISO string in UTC."""
    return datetime.now(timezone.utc).isoformat()


def generate_id() -> int:
    """Millisecond timestamp plus a random offset below 1000.

    Not guaranteed unique under rapid creation; nothing relies on it being so.
    """
    return int(time.time() * 1000) + random.randint(0, 999)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def json_equal(a: Any, b: Any) -> bool:
    """Structural equality over JSON values.

    Mappings compare by key set and per-key value, ignoring key order.
    Sequences compare by length and position. Booleans never equal
    numbers, and ``None`` only equals ``None``.
    """
    if a is None or b is None:
        return a is None and b is None
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if _is_number(a) and _is_number(b):
        return a == b
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if isinstance(a, dict) and isinstance(b, dict):
        if a.keys() != b.keys():
            return False
        return all(json_equal(a[key], b[key]) for key in a)
    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(json_equal(x, y) for x, y in zip(a, b))
    return False
