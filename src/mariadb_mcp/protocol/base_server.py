"""Base MCP server - Transport-agnostic MCP protocol binding.

Wires the tool registry into the MCP low-level Server; transports
subclass it and only deal with streams.
"""

import logging
from typing import Optional

from mcp.server import Server
from mcp.types import CallToolResult

from mariadb_mcp import __version__
from mariadb_mcp.core.error_handling import ToolResult
from mariadb_mcp.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def to_call_tool_result(result: ToolResult) -> CallToolResult:
    """Convert a ToolResult into the MCP wire type."""
    return CallToolResult.model_validate(result.to_dict())


class BaseMCPServer:
    """Base MCP server providing core protocol functionality.

    This class encapsulates the MCP protocol logic independent of
    the transport mechanism.
    """

    def __init__(self, registry: ToolRegistry, server_name: Optional[str] = None):
        """Initialize base MCP server.

        Args:
            registry: ToolRegistry that executes tool calls
            server_name: Name of the MCP server (defaults to configuration)
        """
        self.registry = registry
        if server_name is None:
            server_name = registry.app_config.server_name
        self.server = Server(server_name, version=__version__)
        self._setup_handlers()
        logger.info(f"Initialized {server_name} MCP server v{__version__}")

    def _setup_handlers(self):
        """Setup MCP protocol handlers."""

        @self.server.list_tools()
        async def list_tools():
            """List all available tools."""
            return self.registry.list_tools()

        # Arguments are checked by the registry so that missing ones come
        # back in the usual "Error: ..." shape.
        @self.server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: dict):
            """Handle tool execution."""
            result = await self.registry.dispatch(name, arguments or {})
            return to_call_tool_result(result)
