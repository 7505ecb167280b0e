"""Service layer reusable by the CLI, REST API and MCP server."""

from podcheck.service.checker import ManifestChecker

__all__ = ["ManifestChecker"]
