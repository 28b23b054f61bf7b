"""MCP surface for json-manager: tool definitions, handlers and dispatch."""
