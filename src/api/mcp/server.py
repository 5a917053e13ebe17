"""MCP Server implementation for the TwelveLabs video tools."""

from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from src.api.mcp.dispatcher import ToolDispatcher
from src.api.mcp.registry import list_tool_descriptors
from src.api.mcp.tools import create_tool_services
from src.commons.settings.models import Settings
from src.commons.telemetry.logger import get_logger
from src.infrastructure.factory import InfrastructureFactory

logger = get_logger(__name__)


def create_mcp_server(
    settings: Settings,
    factory: InfrastructureFactory | None = None,
) -> Server:
    """Create and configure the MCP server.

    Args:
        settings: Application settings, carrying the upstream credential.
        factory: Optional infrastructure factory. Built from settings if omitted.

    Returns:
        Configured MCP server instance.
    """
    factory = factory or InfrastructureFactory(settings)
    dispatcher = ToolDispatcher(create_tool_services(factory))
    server = Server(settings.app.name, version=settings.app.version)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List all available tools."""
        return list_tool_descriptors()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        """Handle tool calls."""
        return await dispatcher.dispatch(name, arguments)

    return server


async def run_mcp_server(settings: Settings) -> None:
    """Run the MCP server using stdio transport."""
    factory = InfrastructureFactory(settings)
    server = create_mcp_server(settings, factory)
    logger.info(
        "TwelveLabs video MCP server running on stdio",
        extra={"base_url": settings.twelvelabs.base_url},
    )

    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await factory.close_all()
