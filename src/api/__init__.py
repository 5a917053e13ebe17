"""API layer - MCP endpoints."""

from src.api.mcp import create_mcp_server, run_mcp_server

__all__ = [
    "create_mcp_server",
    "run_mcp_server",
]
