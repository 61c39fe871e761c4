"""
pytest configuration

Provides an in-memory stand-in for the MariaDB server, a fake aiomysql
pool and shared fixtures.
"""

import asyncio
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import pytest
from pymysql.err import OperationalError, ProgrammingError

# Add src directory to the Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from mariadb_mcp.core.config import AppConfig, DatabaseConfig, PoolConfig  # noqa: E402
from mariadb_mcp.tools.registry import ToolRegistry  # noqa: E402


class FakeEngine:
    """Tiny MariaDB lookalike: databases, tables and a handful of statements."""

    def __init__(self):
        self.databases = {
            "information_schema": [],
            "shop": ["customers", "orders"],
            "analytics": ["events"],
        }
        self.statements = []
        self.yield_on_use = False

    async def run(self, connection, sql):
        self.statements.append((id(connection), sql))
        upper = sql.strip().upper()

        if upper.startswith("USE "):
            name = sql.strip()[4:].strip()
            if self.yield_on_use:
                await asyncio.sleep(0)
            if name not in self.databases:
                raise OperationalError(1049, f"Unknown database '{name}'")
            connection.db = name
            return None, 0, None
        if upper == "SHOW DATABASES":
            return [{"Database": name} for name in self.databases], None, None
        if upper == "SHOW TABLES":
            return [{f"Tables_in_{connection.db}": t} for t in self.databases[connection.db]], None, None
        if upper.startswith("DESCRIBE "):
            table = sql.strip()[9:].strip()
            if table not in self.databases[connection.db]:
                raise ProgrammingError(1146, f"Table '{connection.db}.{table}' doesn't exist")
            return [
                {"Field": "id", "Type": "int(11)", "Null": "NO", "Key": "PRI", "Default": None, "Extra": "auto_increment"},
                {"Field": "name", "Type": "varchar(255)", "Null": "YES", "Key": "", "Default": None, "Extra": ""},
            ], None, None
        if upper == "SELECT 1 AS X":
            return [{"x": 1}], None, None
        if upper == "SELECT DATABASE() AS DB":
            return [{"db": connection.db}], None, None
        if upper.startswith("INSERT"):
            return None, 1, 42
        raise ProgrammingError(1064, "You have an error in your SQL syntax")


class FakeCursor:
    def __init__(self, connection):
        self.connection = connection
        self.description = None
        self.rowcount = -1
        self.lastrowid = None
        self._rows = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def execute(self, sql):
        rows, rowcount, lastrowid = await self.connection.engine.run(self.connection, sql)
        if rows is None:
            self.description = None
            self.rowcount = rowcount
            self.lastrowid = lastrowid
            self._rows = []
        else:
            self.description = [(key,) for key in (rows[0] if rows else {})] or [("",)]
            self.rowcount = len(rows)
            self._rows = rows

    async def fetchall(self):
        return tuple(self._rows)


class FakeConnection:
    def __init__(self, engine):
        self.engine = engine
        self.db = None

    def cursor(self, cursor_class=None):
        return FakeCursor(self)


class FakeAiomysqlPool:
    """Mimics the parts of aiomysql.Pool the pool manager relies on."""

    def __init__(self, engine, maxsize):
        self.engine = engine
        self.maxsize = maxsize
        self._free = []
        self._used = []
        self._waiters = []
        self.closed = False

    @property
    def size(self):
        return len(self._free) + len(self._used)

    @property
    def freesize(self):
        return len(self._free)

    async def acquire(self):
        while True:
            if self._free:
                conn = self._free.pop(0)
                break
            if self.size < self.maxsize:
                conn = FakeConnection(self.engine)
                break
            waiter = asyncio.get_running_loop().create_future()
            self._waiters.append(waiter)
            await waiter
        self._used.append(conn)
        return conn

    def release(self, conn):
        self._used.remove(conn)
        self._free.append(conn)
        while self._waiters:
            waiter = self._waiters.pop(0)
            if not waiter.done():
                waiter.set_result(None)
                break

    def close(self):
        self.closed = True

    async def wait_closed(self):
        pass


class FakePoolManager:
    """Pool manager double that counts checkouts and returns."""

    def __init__(self, engine):
        self.engine = engine
        self.acquired = 0
        self.released = 0

    @asynccontextmanager
    async def acquire(self):
        self.acquired += 1
        try:
            yield FakeConnection(self.engine)
        finally:
            self.released += 1

    async def close(self):
        pass


@pytest.fixture
def engine():
    """In-memory database server"""
    return FakeEngine()


@pytest.fixture
def fake_pool(engine):
    """Pool manager double backed by the in-memory server"""
    return FakePoolManager(engine)


@pytest.fixture
def app_config():
    """Default application config with no database preselected"""
    return AppConfig(database=DatabaseConfig(), pool=PoolConfig())


@pytest.fixture
def registry(fake_pool, app_config):
    """Tool registry wired to the pool double"""
    return ToolRegistry(fake_pool, app_config)


@pytest.fixture
def aiomysql_pool_factory(engine):
    """Build FakeAiomysqlPool objects with a chosen size"""
    def factory(maxsize):
        return FakeAiomysqlPool(engine, maxsize)
    return factory
