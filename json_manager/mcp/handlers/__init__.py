"""Handler registry for MCP tools.

Exposes the HANDLERS and VALIDATORS dicts keyed by tool name.
"""

from typing import Callable, Dict

from json_manager.mcp.handlers.collections import HANDLERS as _COLLECTION_H
from json_manager.mcp.handlers.collections import VALIDATORS as _COLLECTION_V

HANDLERS: Dict[str, Callable] = {
    **_COLLECTION_H,
}

VALIDATORS: Dict[str, Callable] = {
    **_COLLECTION_V,
}
