"""MCP tool definitions for MariaDB MCP Server."""

from typing import List
from mcp.types import Tool


# Tool name constants (used for matching in handlers)
TOOL_EXECUTE_SQL = "execute_sql"
TOOL_LIST_TABLES = "list_tables"
TOOL_DESCRIBE_TABLE = "describe_table"
TOOL_LIST_DATABASES = "list_databases"
TOOL_SWITCH_DATABASE = "switch_database"
TOOL_GET_CURRENT_DATABASE = "get_current_database"


def get_all_tools() -> List[Tool]:
    """Generate all MCP tool definitions.

    Returns:
        List of Tool objects, in the order they are advertised
    """
    return [
        Tool(
            name=TOOL_EXECUTE_SQL,
            description="Execute a SQL query on the MariaDB database",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "SQL query to execute (SELECT, INSERT, UPDATE, DELETE, etc.)"
                    }
                },
                "required": ["query"]
            }
        ),
        Tool(
            name=TOOL_LIST_TABLES,
            description="List all tables in the current database",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
        Tool(
            name=TOOL_DESCRIBE_TABLE,
            description="Show the structure of a table",
            inputSchema={
                "type": "object",
                "properties": {
                    "table": {
                        "type": "string",
                        "description": "Name of the table to describe"
                    }
                },
                "required": ["table"]
            }
        ),
        Tool(
            name=TOOL_LIST_DATABASES,
            description="List all available databases",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
        Tool(
            name=TOOL_SWITCH_DATABASE,
            description="Switch to a different database. Must be called before executing queries.",
            inputSchema={
                "type": "object",
                "properties": {
                    "database": {
                        "type": "string",
                        "description": "Name of the database to switch to"
                    }
                },
                "required": ["database"]
            }
        ),
        Tool(
            name=TOOL_GET_CURRENT_DATABASE,
            description="Get the name of the currently selected database",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
    ]


MARIADB_TOOLS = get_all_tools()
