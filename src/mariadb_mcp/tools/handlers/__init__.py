"""Tool handlers package."""

from mariadb_mcp.tools.handlers.query_handler import QueryHandler
from mariadb_mcp.tools.handlers.schema_handler import SchemaHandler
from mariadb_mcp.tools.handlers.database_handler import DatabaseHandler

__all__ = [
    'QueryHandler',
    'SchemaHandler',
    'DatabaseHandler',
]
