"""Base classes for MCP tool handlers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List

from mariadb_mcp.core.config import AppConfig
from mariadb_mcp.database.pool import ConnectionPoolManager
from mariadb_mcp.tools.session import SessionState
from mariadb_mcp.tools.validators import InputValidator


@dataclass
class ToolInvocation:
    """A single tool call: tool name plus its arguments."""

    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolContext:
    """Collaborators a handler needs to run one invocation."""

    pool: ConnectionPoolManager
    session: SessionState
    config: AppConfig


class ToolHandler(ABC):
    """Abstract base class for MCP tool handlers."""

    @property
    @abstractmethod
    def tool_names(self) -> List[str]:
        """Return list of tool names this handler supports."""
        pass

    @abstractmethod
    async def handle(self, invocation: ToolInvocation, context: ToolContext) -> Any:
        """
        Handle tool invocation.

        Args:
            invocation: Tool name and arguments
            context: Pool, session state and configuration

        Returns:
            Payload for the response: a message string or JSON-serializable data

        Raises:
            MCPDBError: Any domain failure; the registry turns it into an
                error response
        """
        pass

    def _identifier_argument(self, invocation: ToolInvocation, name: str, context: ToolContext) -> str:
        """Fetch a table/database name argument.

        The value is used verbatim in SQL unless strict identifiers are on.
        """
        value = InputValidator.require_argument(invocation.arguments, name)
        if context.config.strict_identifiers:
            InputValidator.check_identifier(value)
        return value
