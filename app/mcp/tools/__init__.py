"""Todo tools registered with the MCP server."""
