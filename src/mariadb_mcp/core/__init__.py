"""Core modules for MariaDB MCP Server."""

from .exceptions import (
    MCPDBError,
    NoDatabaseSelectedError,
    ValidationError,
    DatabaseConnectionError,
    PoolExhaustedError,
    QueryExecutionError,
    UnknownToolError
)

__all__ = [
    "MCPDBError",
    "NoDatabaseSelectedError",
    "ValidationError",
    "DatabaseConnectionError",
    "PoolExhaustedError",
    "QueryExecutionError",
    "UnknownToolError"
]
