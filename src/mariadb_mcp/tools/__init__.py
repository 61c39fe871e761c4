"""MCP tools package for MariaDB MCP Server."""

from mariadb_mcp.tools.base import ToolContext, ToolHandler, ToolInvocation
from mariadb_mcp.tools.registry import ToolRegistry
from mariadb_mcp.tools.session import SessionState
from mariadb_mcp.tools.definitions import MARIADB_TOOLS, get_all_tools
from mariadb_mcp.tools.validators import InputValidator

__all__ = [
    'ToolContext',
    'ToolHandler',
    'ToolInvocation',
    'ToolRegistry',
    'SessionState',
    'MARIADB_TOOLS',
    'get_all_tools',
    'InputValidator',
]
