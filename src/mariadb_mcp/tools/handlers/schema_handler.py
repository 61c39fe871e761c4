"""Schema introspection handler: list and describe tables."""

from typing import Any, List

from mariadb_mcp.database.queries import execute, pin_database
from mariadb_mcp.tools.base import ToolContext, ToolHandler, ToolInvocation
from mariadb_mcp.tools.definitions import TOOL_DESCRIBE_TABLE, TOOL_LIST_TABLES


class SchemaHandler(ToolHandler):
    """Handler for table listing and table structure."""

    @property
    def tool_names(self) -> List[str]:
        return [TOOL_LIST_TABLES, TOOL_DESCRIBE_TABLE]

    async def handle(self, invocation: ToolInvocation, context: ToolContext) -> Any:
        database = context.session.require_database()

        if invocation.name == TOOL_DESCRIBE_TABLE:
            table = self._identifier_argument(invocation, "table", context)
            statement = f"DESCRIBE {table}"
        else:
            statement = "SHOW TABLES"

        async with context.pool.acquire() as connection:
            await pin_database(connection, database)
            return await execute(connection, statement)
