"""Statement helpers that run on a borrowed pool connection."""

import logging
from typing import Any, Dict, List, Union

import aiomysql
from pymysql.err import MySQLError

from mariadb_mcp.core.exceptions import QueryExecutionError

logger = logging.getLogger(__name__)

QueryPayload = Union[List[Dict[str, Any]], Dict[str, Any]]


def engine_message(error: BaseException) -> str:
    """Extract the server's own message from a driver error.

    PyMySQL errors carry ``(errno, message)`` in ``args``.
    """
    if isinstance(error, MySQLError) and len(error.args) == 2 and isinstance(error.args[1], str):
        return error.args[1]
    return str(error) or type(error).__name__


async def execute(connection: Any, sql: str) -> QueryPayload:
    """Run ``sql`` verbatim and return what the engine produced.

    Returns:
        A list of row dicts when the statement yields a result set,
        otherwise a summary of the affected rows.

    Raises:
        QueryExecutionError: The engine rejected the statement
    """
    try:
        async with connection.cursor(aiomysql.DictCursor) as cursor:
            await cursor.execute(sql)
            if cursor.description is None:
                return {
                    "affectedRows": cursor.rowcount,
                    "insertId": cursor.lastrowid,
                }
            rows = await cursor.fetchall()
            return list(rows)
    except MySQLError as e:
        logger.warning(f"Statement failed: {e} | {sql[:200]}")
        raise QueryExecutionError(engine_message(e), {"query": sql[:200]}) from e


async def pin_database(connection: Any, database: str):
    """Select ``database`` on the connection.

    The name is interpolated as given; callers validate it when strict
    identifier checking is enabled.
    """
    await execute(connection, f"USE {database}")
