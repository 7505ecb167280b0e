"""MCP server for podcheck."""
