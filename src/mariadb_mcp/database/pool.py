"""Async MariaDB connection pool manager."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import aiomysql
from pymysql.err import MySQLError

from mariadb_mcp.core.config import DatabaseConfig, PoolConfig
from mariadb_mcp.core.exceptions import DatabaseConnectionError, PoolExhaustedError
from mariadb_mcp.database.queries import engine_message

logger = logging.getLogger(__name__)


class ConnectionPoolManager:
    """
    Bounded pool of MariaDB connections backed by aiomysql.

    Connections are opened lazily up to ``connection_limit``. When every
    connection is busy, callers queue in FIFO order, unless waiting is
    disabled or the wait queue already holds ``queue_limit`` callers, in
    which case acquisition fails with PoolExhaustedError.

    Note: connections are not bound to any database; callers pin one with
    ``USE`` before running statements.
    """

    def __init__(self, config: DatabaseConfig, pool_config: Optional[PoolConfig] = None):
        self.config = config
        self.pool_config = pool_config or PoolConfig()
        self._pool: Optional[aiomysql.Pool] = None
        self._init_lock = asyncio.Lock()
        self._waiting = 0

    async def initialize(self):
        """Create the underlying pool. Safe to call more than once."""
        async with self._init_lock:
            if self._pool is not None:
                return
            self._pool = await aiomysql.create_pool(
                host=self.config.host,
                port=self.config.port,
                user=self.config.user,
                password=self.config.password,
                connect_timeout=self.config.connect_timeout,
                minsize=0,
                maxsize=self.pool_config.connection_limit,
                autocommit=True,
            )
            logger.info(
                f"✅ MariaDB connection pool initialized "
                f"({self.config.host}:{self.config.port}, limit={self.pool_config.connection_limit})"
            )

    def _is_saturated(self) -> bool:
        return self._pool.freesize == 0 and self._pool.size >= self._pool.maxsize

    async def _checkout(self) -> Any:
        """Take a connection out of the pool, honouring the wait policy."""
        if self._pool is None:
            await self.initialize()

        queued = self._is_saturated()
        if queued:
            if not self.pool_config.wait_for_connections:
                raise PoolExhaustedError("No connections available.")
            if self.pool_config.queue_limit and self._waiting >= self.pool_config.queue_limit:
                raise PoolExhaustedError("Queue limit reached.")
            self._waiting += 1
            logger.debug(f"Pool saturated, queued caller (waiting={self._waiting})")

        timeout = self.pool_config.acquire_timeout or None
        pending = asyncio.ensure_future(self._pool.acquire())
        try:
            done, _ = await asyncio.wait({pending}, timeout=timeout)
            if pending not in done:
                raise PoolExhaustedError(
                    f"Timed out after {self.pool_config.acquire_timeout}s waiting for a connection."
                )
            return pending.result()
        except (MySQLError, OSError) as e:
            logger.error(f"Failed to open database connection: {e}")
            raise DatabaseConnectionError(engine_message(e)) from e
        except BaseException:
            # Timeout or caller cancellation. A checkout that completes
            # afterwards still goes back to the pool.
            pending.cancel()
            pending.add_done_callback(self._return_abandoned)
            raise
        finally:
            if queued:
                self._waiting -= 1

    def _return_abandoned(self, pending: "asyncio.Future"):
        if pending.cancelled() or pending.exception() is not None or self._pool is None:
            return
        logger.debug("Returning connection acquired after its caller gave up")
        self.release(pending.result())

    def release(self, connection: Any):
        """Return a connection to the free set."""
        self._pool.release(connection)

    @asynccontextmanager
    async def acquire(self):
        """Borrow a connection for the duration of the block.

        The connection goes back to the pool on every exit path.
        """
        connection = await self._checkout()
        try:
            yield connection
        finally:
            self.release(connection)

    def stats(self) -> Dict[str, int]:
        """Current pool occupancy."""
        if self._pool is None:
            return {"size": 0, "free": 0, "in_use": 0, "waiting": 0,
                    "limit": self.pool_config.connection_limit}
        return {
            "size": self._pool.size,
            "free": self._pool.freesize,
            "in_use": self._pool.size - self._pool.freesize,
            "waiting": self._waiting,
            "limit": self._pool.maxsize,
        }

    async def close(self):
        """Close connection pool and clean up resources."""
        if self._pool is not None:
            self._pool.close()
            await self._pool.wait_closed()
            self._pool = None
            logger.info("MariaDB connection pool closed")
