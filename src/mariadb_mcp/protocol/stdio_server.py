"""STDIO transport MCP server."""

import logging
from typing import Optional

from mcp.server.stdio import stdio_server

from mariadb_mcp.core import messages
from mariadb_mcp.core.config import AppConfig
from mariadb_mcp.core.dependencies import get_tool_registry
from mariadb_mcp.protocol.base_server import BaseMCPServer
from mariadb_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


class StdioMCPServer(BaseMCPServer):
    """MCP server using STDIO transport."""

    def __init__(self, registry: ToolRegistry):
        """Initialize STDIO MCP server.

        Args:
            registry: ToolRegistry instance
        """
        super().__init__(registry)

    async def run(self):
        """Run the STDIO MCP server until the client disconnects."""
        async with stdio_server() as (read_stream, write_stream):
            logger.info(messages.SERVER_RUNNING)
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options()
            )


async def run_stdio_server(app_config: Optional[AppConfig] = None):
    """Run STDIO MCP server with given configuration.

    Args:
        app_config: App configuration (optional, defaults to env)
    """
    registry = get_tool_registry(app_config)
    server = StdioMCPServer(registry)
    try:
        await server.run()
    finally:
        await registry.pool.close()
