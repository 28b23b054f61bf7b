"""Handlers for collection tools: add, get, query, update, delete, list."""

import json
from typing import Any, Dict

from json_manager.mcp.sanitize import (
    MAX_PROPERTY_LENGTH,
    sanitize_filename,
    sanitize_string,
    validate_index,
    validate_object,
)
from json_manager.service import JsonDataService

# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def validate_add_json_object(arguments: Dict[str, Any]) -> Dict[str, Any]:
    sanitized: Dict[str, Any] = {}
    sanitized["filename"] = sanitize_filename(arguments.get("filename"))
    sanitized["object"] = validate_object(arguments.get("object"), "object")
    return sanitized


def validate_get_json_objects(arguments: Dict[str, Any]) -> Dict[str, Any]:
    return {"filename": sanitize_filename(arguments.get("filename"))}


def validate_query_json_objects(arguments: Dict[str, Any]) -> Dict[str, Any]:
    sanitized: Dict[str, Any] = {}
    sanitized["filename"] = sanitize_filename(arguments.get("filename"))
    sanitized["property"] = sanitize_string(
        arguments.get("property"), "property", MAX_PROPERTY_LENGTH, required=True
    )
    sanitized["value"] = arguments.get("value")
    return sanitized


def validate_update_json_object(arguments: Dict[str, Any]) -> Dict[str, Any]:
    sanitized: Dict[str, Any] = {}
    sanitized["filename"] = sanitize_filename(arguments.get("filename"))
    sanitized["index"] = validate_index(arguments.get("index"))
    sanitized["updates"] = validate_object(arguments.get("updates"), "updates")
    return sanitized


def validate_delete_json_object(arguments: Dict[str, Any]) -> Dict[str, Any]:
    sanitized: Dict[str, Any] = {}
    sanitized["filename"] = sanitize_filename(arguments.get("filename"))
    sanitized["index"] = validate_index(arguments.get("index"))
    return sanitized


def validate_list_json_files(arguments: Dict[str, Any]) -> Dict[str, Any]:
    return {}


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def handle_add_json_object(args: Dict[str, Any], service: JsonDataService) -> str:
    result = service.add_object(args["filename"], args["object"])
    return f"{result.message}. Total objects: {result.total_count}"


def handle_get_json_objects(args: Dict[str, Any], service: JsonDataService) -> str:
    records = service.get_objects(args["filename"])
    return f"Found {len(records)} objects in {args['filename']}:\n{_dump(records)}"


def handle_query_json_objects(args: Dict[str, Any], service: JsonDataService) -> str:
    results = service.query_objects(args["filename"], args["property"], args["value"])
    return (
        f"Found {len(results)} objects where {args['property']} = "
        f"{json.dumps(args['value'], ensure_ascii=False)}:\n{_dump(results)}"
    )


def handle_update_json_object(args: Dict[str, Any], service: JsonDataService) -> str:
    return service.update_object(args["filename"], args["index"], args["updates"])


def handle_delete_json_object(args: Dict[str, Any], service: JsonDataService) -> str:
    result = service.delete_object(args["filename"], args["index"])
    return f"{result.message}. Remaining objects: {result.remaining_count}"


def handle_list_json_files(args: Dict[str, Any], service: JsonDataService) -> str:
    files = service.list_available_files()
    if not files:
        return "No JSON files found"
    return "Available JSON files:\n" + "\n".join(files)


# ---------------------------------------------------------------------------
# Registry dicts
# ---------------------------------------------------------------------------

HANDLERS = {
    "add_json_object": handle_add_json_object,
    "get_json_objects": handle_get_json_objects,
    "query_json_objects": handle_query_json_objects,
    "update_json_object": handle_update_json_object,
    "delete_json_object": handle_delete_json_object,
    "list_json_files": handle_list_json_files,
}

VALIDATORS = {
    "add_json_object": validate_add_json_object,
    "get_json_objects": validate_get_json_objects,
    "query_json_objects": validate_query_json_objects,
    "update_json_object": validate_update_json_object,
    "delete_json_object": validate_delete_json_object,
    "list_json_files": validate_list_json_files,
}
