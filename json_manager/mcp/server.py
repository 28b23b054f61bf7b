"""
json-manager MCP Server - named JSON collections as MCP tools.

Components are built explicitly in dependency order:
Configuration -> CollectionRepository -> JsonDataService -> Dispatcher
-> MCP Server. Each tool call runs in a worker thread so concurrent
calls proceed concurrently; writes to one collection are serialized by
the service's per-collection locks.

Usage:
    json-manager serve  # Start MCP server (stdio transport)
"""

import asyncio
import logging
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from json_manager.config import Configuration
from json_manager.mcp.dispatcher import Dispatcher
from json_manager.service import JsonDataService
from json_manager.storage import CollectionRepository

logger = logging.getLogger(__name__)


def build_dispatcher(config: Configuration) -> Dispatcher:
    repository = CollectionRepository(config.data_dir)
    service = JsonDataService(repository)
    return Dispatcher(service)


def create_server(config: Configuration, dispatcher: Optional[Dispatcher] = None) -> Server:
    """Build an MCP server whose tools are served by ``dispatcher``."""
    if dispatcher is None:
        dispatcher = build_dispatcher(config)

    server = Server(config.server_name, version=config.server_version)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return dispatcher.list_operations()

    # Required-argument checks happen in the dispatcher.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        return await asyncio.to_thread(dispatcher.dispatch, name, arguments)

    logger.info("MCP JSON server initialized")
    logger.info(f"Data directory: {config.data_dir}")
    logger.info(f"Server: {config.server_name} v{config.server_version}")
    logger.info(
        "Available tools: %s", ", ".join(tool.name for tool in dispatcher.list_operations())
    )
    return server


async def run_server(server: Server) -> None:
    """Serve ``server`` over stdio until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("MCP JSON server running on stdio")
        try:
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
        finally:
            logger.info("Shutting down MCP JSON server")


def main(config: Optional[Configuration] = None) -> None:
    """Entry point for the MCP server."""
    if config is None:
        config = Configuration.from_env()
    server = create_server(config)
    asyncio.run(run_server(server))
