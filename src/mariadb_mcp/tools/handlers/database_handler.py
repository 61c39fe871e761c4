"""Database listing and selection handler."""

import logging
from typing import Any, List

from mariadb_mcp.core import messages
from mariadb_mcp.database.queries import execute, pin_database
from mariadb_mcp.tools.base import ToolContext, ToolHandler, ToolInvocation
from mariadb_mcp.tools.definitions import (
    TOOL_GET_CURRENT_DATABASE,
    TOOL_LIST_DATABASES,
    TOOL_SWITCH_DATABASE,
)

logger = logging.getLogger(__name__)


class DatabaseHandler(ToolHandler):
    """Handler for the tools that read or change the selected database."""

    @property
    def tool_names(self) -> List[str]:
        return [TOOL_LIST_DATABASES, TOOL_SWITCH_DATABASE, TOOL_GET_CURRENT_DATABASE]

    async def handle(self, invocation: ToolInvocation, context: ToolContext) -> Any:
        if invocation.name == TOOL_SWITCH_DATABASE:
            return await self._switch_database(invocation, context)
        if invocation.name == TOOL_GET_CURRENT_DATABASE:
            return self._current_database(context)
        return await self._list_databases(context)

    async def _list_databases(self, context: ToolContext) -> Any:
        # No pinning: SHOW DATABASES does not depend on the selection
        async with context.pool.acquire() as connection:
            return await execute(connection, "SHOW DATABASES")

    async def _switch_database(self, invocation: ToolInvocation, context: ToolContext) -> str:
        """
        Probe the target database on a pooled connection, then commit it.

        A failed probe (unknown database, no privilege) leaves the current
        selection unchanged and surfaces the engine error.
        """
        database = self._identifier_argument(invocation, "database", context)

        async def probe(name: str):
            async with context.pool.acquire() as connection:
                await pin_database(connection, name)

        await context.session.switch(database, probe)
        return messages.DATABASE_SWITCHED.format(database=database)

    def _current_database(self, context: ToolContext) -> str:
        database = context.session.database
        if database:
            return messages.CURRENT_DATABASE.format(database=database)
        return messages.NO_DATABASE_SELECTED
