"""Database access modules for MariaDB MCP Server."""

from .pool import ConnectionPoolManager
from .queries import execute, pin_database

__all__ = [
    "ConnectionPoolManager",
    "execute",
    "pin_database"
]
