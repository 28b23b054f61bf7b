"""
json-manager CLI - serve or exercise the JSON collection tools.

Usage:
    json-manager [--data-dir DIR] [--log-level LEVEL] serve
    json-manager tools [--json]
    json-manager call NAME [--args JSON]
"""

import argparse
import json
import logging
import sys

from json_manager.config import Configuration
from json_manager.errors import StoreError
from json_manager.logging_config import setup_logging

logger = logging.getLogger(__name__)


def cmd_serve(args, config: Configuration):
    """Run the MCP server over stdio."""
    from json_manager.mcp.server import main as mcp_main

    mcp_main(config)


def cmd_tools(args, config: Configuration):
    """Print the registered tool descriptors."""
    from json_manager.mcp.server import build_dispatcher

    tools = build_dispatcher(config).list_operations()
    if args.json:
        print(json.dumps([tool.model_dump(exclude_none=True) for tool in tools], indent=2))
        return
    for tool in tools:
        print(f"{tool.name}: {tool.description}")


def cmd_call(args, config: Configuration):
    """Dispatch one tool call locally and print the envelope text."""
    from json_manager.mcp.server import build_dispatcher

    try:
        arguments = json.loads(args.args) if args.args else {}
    except json.JSONDecodeError as e:
        logger.error(f"--args is not valid JSON: {e}")
        sys.exit(1)

    result = build_dispatcher(config).dispatch(args.name, arguments)
    for block in result.content:
        print(block.text)
    if result.isError:
        sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="json-manager",
        description="Named JSON collections exposed as MCP tools",
    )
    parser.add_argument("--data-dir", help="Storage root (overrides MCP_JSON_DATA_DIR)")
    parser.add_argument("--log-level", help="Log level (overrides MCP_JSON_LOG_LEVEL)")

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("serve", help="Start the MCP server (stdio transport)")

    p_tools = subparsers.add_parser("tools", help="List available tools")
    p_tools.add_argument("--json", "-j", action="store_true")

    p_call = subparsers.add_parser("call", help="Call one tool and print its result")
    p_call.add_argument("name", help="Tool name, e.g. add_json_object")
    p_call.add_argument("--args", "-a", help="Tool arguments as a JSON object")

    args = parser.parse_args(argv)

    try:
        config = Configuration.from_env(data_dir=args.data_dir, log_level=args.log_level)
        setup_logging(config.log_level, config.log_dir)
    except (OSError, ValueError, StoreError) as e:
        logger.error(f"Failed to initialize json-manager: {e}")
        sys.exit(1)

    commands = {
        "serve": cmd_serve,
        "tools": cmd_tools,
        "call": cmd_call,
    }
    commands[args.command or "serve"](args, config)


if __name__ == "__main__":
    main()
