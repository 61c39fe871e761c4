"""Custom exceptions for MariaDB MCP Server."""

from mariadb_mcp.core import messages


class MCPDBError(Exception):
    """Base exception for all MariaDB MCP server errors."""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging and diagnostics."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class NoDatabaseSelectedError(MCPDBError):
    """Raised when a data tool runs before any database was selected."""

    def __init__(self, message: str = messages.NO_DATABASE_SELECTED, details: dict = None):
        super().__init__(message, details)


class ValidationError(MCPDBError):
    """Raised when tool arguments are missing or malformed."""
    pass


class DatabaseConnectionError(MCPDBError):
    """Exception raised when the pool cannot produce a usable connection."""
    pass


class PoolExhaustedError(DatabaseConnectionError):
    """Raised when the pool is saturated and the caller may not wait."""
    pass


class QueryExecutionError(MCPDBError):
    """Exception raised when the database engine rejects a statement."""
    pass


class UnknownToolError(MCPDBError):
    """Raised when a tool name is not registered."""

    def __init__(self, tool_name: str):
        super().__init__(messages.UNKNOWN_TOOL.format(name=tool_name), {"tool": tool_name})
        self.tool_name = tool_name
