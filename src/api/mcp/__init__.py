"""MCP server implementation."""

from src.api.mcp.dispatcher import ToolDispatcher, error_result, success_result
from src.api.mcp.registry import TOOL_DESCRIPTORS, list_tool_descriptors, tool_names
from src.api.mcp.server import create_mcp_server, run_mcp_server
from src.api.mcp.tools import (
    TOOL_BINDINGS,
    ToolBinding,
    ToolServices,
    create_tool_services,
)

__all__ = [
    "create_mcp_server",
    "run_mcp_server",
    "ToolDispatcher",
    "error_result",
    "success_result",
    "TOOL_DESCRIPTORS",
    "list_tool_descriptors",
    "tool_names",
    "TOOL_BINDINGS",
    "ToolBinding",
    "ToolServices",
    "create_tool_services",
]
