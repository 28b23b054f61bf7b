"""MCP tool schema definitions for json-manager collection operations.

Each Tool() defines the name, description, and JSON Schema for one MCP tool.
Validators and handlers live in json_manager.mcp.handlers.
"""

from mcp.types import Tool

_FILENAME = {
    "type": "string",
    "description": "Name of the JSON file (the .json extension is added when missing)",
}

TOOLS = [
    Tool(
        name="add_json_object",
        description="Add a JSON object to a specified file. The object is stamped with an id and createdAt timestamp.",
        inputSchema={
            "type": "object",
            "properties": {
                "filename": _FILENAME,
                "object": {
                    "type": "object",
                    "description": "JSON object to add",
                },
            },
            "required": ["filename", "object"],
        },
    ),
    Tool(
        name="get_json_objects",
        description="Retrieve all objects from a JSON file, in stored order.",
        inputSchema={
            "type": "object",
            "properties": {
                "filename": _FILENAME,
            },
            "required": ["filename"],
        },
    ),
    Tool(
        name="query_json_objects",
        description="Query JSON objects whose property equals a value. Objects and arrays are compared structurally; dotted property names reach nested fields.",
        inputSchema={
            "type": "object",
            "properties": {
                "filename": _FILENAME,
                "property": {
                    "type": "string",
                    "description": "Property name to search by (e.g. 'status' or 'address.city')",
                },
                "value": {
                    "description": "Value to search for (string, number, boolean, null, object or array)",
                },
            },
            "required": ["filename", "property", "value"],
        },
    ),
    Tool(
        name="update_json_object",
        description="Update a JSON object by index. Given properties overwrite existing ones; others are kept. Sets updatedAt.",
        inputSchema={
            "type": "object",
            "properties": {
                "filename": _FILENAME,
                "index": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Zero-based index of the object to update",
                },
                "updates": {
                    "type": "object",
                    "description": "Properties to update",
                },
            },
            "required": ["filename", "index", "updates"],
        },
    ),
    Tool(
        name="delete_json_object",
        description="Delete a JSON object by index. Objects after it shift down by one.",
        inputSchema={
            "type": "object",
            "properties": {
                "filename": _FILENAME,
                "index": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Zero-based index of the object to delete",
                },
            },
            "required": ["filename", "index"],
        },
    ),
    Tool(
        name="list_json_files",
        description="List all available JSON files.",
        inputSchema={
            "type": "object",
            "properties": {},
        },
    ),
]
