"""SQL execution handler."""

import logging
from typing import Any, List

from mariadb_mcp.database.queries import execute, pin_database
from mariadb_mcp.tools.base import ToolContext, ToolHandler, ToolInvocation
from mariadb_mcp.tools.definitions import TOOL_EXECUTE_SQL
from mariadb_mcp.tools.validators import InputValidator

logger = logging.getLogger(__name__)


class QueryHandler(ToolHandler):
    """Handler for arbitrary SQL against the selected database."""

    @property
    def tool_names(self) -> List[str]:
        return [TOOL_EXECUTE_SQL]

    async def handle(self, invocation: ToolInvocation, context: ToolContext) -> Any:
        """
        Run the query verbatim on a connection pinned to the selected database.

        Returns:
            Result rows, or an affected-rows summary for statements without
            a result set
        """
        database = context.session.require_database()
        query = InputValidator.require_argument(invocation.arguments, "query")

        async with context.pool.acquire() as connection:
            await pin_database(connection, database)
            result = await execute(connection, query)

        if isinstance(result, list):
            logger.debug(f"Query on {database} returned {len(result)} rows")
        return result
