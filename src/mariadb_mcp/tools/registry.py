"""Tool registry for routing MCP tool calls to handlers."""

import logging
from typing import Any, Dict, List, Mapping, Optional

from mcp.types import Tool

from mariadb_mcp.core.config import AppConfig
from mariadb_mcp.core.error_handling import ToolResult, format_error_response, format_success_response
from mariadb_mcp.core.exceptions import UnknownToolError
from mariadb_mcp.database.pool import ConnectionPoolManager
from mariadb_mcp.tools.base import ToolContext, ToolHandler, ToolInvocation
from mariadb_mcp.tools.definitions import MARIADB_TOOLS
from mariadb_mcp.tools.handlers import DatabaseHandler, QueryHandler, SchemaHandler
from mariadb_mcp.tools.session import SessionState

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Central registry for MCP tool handlers.

    Routes tool calls to handlers by name and owns the selected-database
    session state shared by every call that does not bring its own.
    ``dispatch`` never raises: every failure becomes an error ToolResult.
    """

    def __init__(
        self,
        pool: ConnectionPoolManager,
        app_config: Optional[AppConfig] = None,
        session: Optional[SessionState] = None
    ):
        self.pool = pool
        self.app_config = app_config or AppConfig()
        self.session = session or SessionState(self.app_config.database.database)
        self.handlers: Dict[str, ToolHandler] = {}
        self._register_handlers()

    def _register_handlers(self):
        """Register all tool handlers."""
        handler_classes = [
            QueryHandler,
            SchemaHandler,
            DatabaseHandler,
        ]

        for handler_class in handler_classes:
            handler = handler_class()
            for tool_name in handler.tool_names:
                self.handlers[tool_name] = handler
                logger.debug(f"Registered {tool_name} -> {handler_class.__name__}")

        logger.info(f"✅ Registered {len(self.handlers)} MCP tools across {len(handler_classes)} handlers")

    def list_tools(self) -> List[Tool]:
        """Descriptors of every registered tool."""
        return [tool for tool in MARIADB_TOOLS if tool.name in self.handlers]

    def is_tool_registered(self, tool_name: str) -> bool:
        """Check if a tool has a registered handler."""
        return tool_name in self.handlers

    async def dispatch(
        self,
        name: str,
        arguments: Optional[Mapping[str, Any]] = None,
        session: Optional[SessionState] = None
    ) -> ToolResult:
        """
        Route a tool call to its handler.

        Args:
            name: Tool name
            arguments: Tool arguments
            session: Per-caller session state; defaults to the process-wide one

        Returns:
            Success or error ToolResult
        """
        invocation = ToolInvocation(name=name, arguments=dict(arguments or {}))
        context = ToolContext(pool=self.pool, session=session or self.session, config=self.app_config)

        try:
            handler = self.handlers.get(name)
            if handler is None:
                raise UnknownToolError(name)

            logger.debug(f"Routing {name} to {handler.__class__.__name__}")
            payload = await handler.handle(invocation, context)
            return format_success_response(payload, self.app_config.json_indent)
        except Exception as e:
            return format_error_response(e)
