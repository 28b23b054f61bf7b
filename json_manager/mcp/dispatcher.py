"""Tool registry and dispatcher.

The dispatcher is the single boundary that turns ``(name, arguments)``
into a ``CallToolResult``. No exception raised while handling a call
escapes it: business failures and unexpected errors alike come back as
error envelopes.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from mcp.types import CallToolResult, TextContent, Tool

from json_manager.errors import StoreError
from json_manager.mcp.handlers import HANDLERS, VALIDATORS
from json_manager.mcp.tool_definitions import TOOLS
from json_manager.service import JsonDataService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    required_args: Tuple[str, ...]
    schema: Dict[str, Any]
    validator: Callable[[Dict[str, Any]], Dict[str, Any]]
    handler: Callable[[Dict[str, Any], JsonDataService], str]

    def descriptor(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.schema)


def build_registry(
    tools: Sequence[Tool] = TOOLS,
    handlers: Mapping[str, Callable] = HANDLERS,
    validators: Mapping[str, Callable] = VALIDATORS,
) -> Dict[str, ToolSpec]:
    """Join tool descriptors with their validator and handler."""
    registry: Dict[str, ToolSpec] = {}
    for tool in tools:
        if tool.name in registry:
            raise ValueError(f"Duplicate tool name: {tool.name}")
        if tool.name not in handlers or tool.name not in validators:
            raise ValueError(f"Tool '{tool.name}' has no handler or validator")
        registry[tool.name] = ToolSpec(
            name=tool.name,
            description=tool.description or "",
            required_args=tuple(tool.inputSchema.get("required", [])),
            schema=tool.inputSchema,
            validator=validators[tool.name],
            handler=handlers[tool.name],
        )
    return registry


def success_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)])


def error_result(message: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=f"Error: {message}")], isError=True)


class Dispatcher:
    def __init__(self, service: JsonDataService, registry: Optional[Dict[str, ToolSpec]] = None):
        self.service = service
        self.registry = registry if registry is not None else build_registry()

    def list_operations(self) -> List[Tool]:
        return [spec.descriptor() for spec in self.registry.values()]

    def resolve(self, name: str) -> ToolSpec:
        spec = self.registry.get(name) if isinstance(name, str) else None
        if spec is None:
            raise StoreError.tool_not_found(name)
        return spec

    def dispatch(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> CallToolResult:
        """Run one tool call and return its envelope; never raises."""
        try:
            spec = self.resolve(name)
            args = self._check_arguments(spec, arguments)
            sanitized = spec.validator(args)
            text = spec.handler(sanitized, self.service)
            return success_result(text)
        except Exception as e:
            return self._handle_error(e, name, arguments)

    @staticmethod
    def _check_arguments(spec: ToolSpec, arguments: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            raise StoreError.validation(
                f"arguments must be an object, got {type(arguments).__name__}"
            )
        missing = [key for key in spec.required_args if key not in arguments]
        if missing:
            raise StoreError.missing_arguments(missing)
        return dict(arguments)

    @staticmethod
    def _handle_error(e: Exception, tool_name: Any, arguments: Any) -> CallToolResult:
        if isinstance(e, StoreError):
            logger.warning(f"{e.kind.value} error in tool {tool_name}: {e.message}")
            return error_result(e.message)

        argument_keys = list(arguments.keys()) if isinstance(arguments, Mapping) else []
        logger.error(
            f"Internal error in tool {tool_name}",
            extra={
                "tool_name": tool_name,
                "arguments_keys": argument_keys,
                "error_type": type(e).__name__,
            },
            exc_info=True,
        )
        return error_result(f"Internal error ({type(e).__name__}): {e}")
