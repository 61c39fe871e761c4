"""Selected-database session state."""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from mariadb_mcp.core.exceptions import NoDatabaseSelectedError

logger = logging.getLogger(__name__)


class SessionState:
    """
    Holds the database that data tools run against.

    Readers take one snapshot per tool call and pin against it, so a
    concurrent switch never changes the database halfway through a call.
    Switches are serialised: the probe and the commit happen under one
    lock, and the last committed switch wins.
    """

    def __init__(self, database: Optional[str] = None):
        self._database = database
        self._switch_lock = asyncio.Lock()

    @property
    def database(self) -> Optional[str]:
        return self._database

    def require_database(self) -> str:
        """Snapshot the selected database or raise NoDatabaseSelectedError."""
        database = self._database
        if not database:
            raise NoDatabaseSelectedError()
        return database

    async def switch(self, database: str, probe: Callable[[str], Awaitable[None]]) -> str:
        """Commit ``database`` once ``probe`` accepts it.

        If the probe raises, the current selection is left untouched and
        the error propagates.
        """
        async with self._switch_lock:
            await probe(database)
            previous, self._database = self._database, database
        logger.info(f"Selected database changed: {previous} -> {database}")
        return database
