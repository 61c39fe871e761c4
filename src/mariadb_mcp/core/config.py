"""Configuration management for MariaDB MCP Server."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


def load_environment(env_file: Optional[str] = None) -> bool:
    """Load a .env file into the process environment.

    Existing environment variables always win over values from the file.

    Args:
        env_file: Explicit path to a .env file. Falls back to ENV_FILE_PATH,
            then to the current directory and the project root.

    Returns:
        True if a file was found and loaded
    """
    env_file = env_file or os.getenv("ENV_FILE_PATH")
    if env_file and Path(env_file).exists():
        return load_dotenv(env_file, override=False)

    possible_paths = [
        Path.cwd() / ".env",
        Path(__file__).parent.parent.parent.parent / ".env",
    ]
    for env_path in possible_paths:
        if env_path.exists():
            return load_dotenv(str(env_path), override=False)
    return False


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class DatabaseConfig(BaseModel):
    """Database server connection settings."""

    host: str = Field(default="127.0.0.1", description="Database server hostname or IP")
    port: int = Field(default=3306, description="Database server port")
    user: str = Field(default="claude_mcp", description="Database username")
    password: str = Field(default="", description="Database password")
    database: Optional[str] = Field(
        default=None,
        description="Database selected at startup (None = nothing selected)"
    )
    connect_timeout: int = Field(default=10, description="Connection handshake timeout in seconds")

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Create configuration from environment variables."""
        return cls(
            host=os.getenv("DB_HOST", "127.0.0.1"),
            port=int(os.getenv("DB_PORT", "3306")),
            user=os.getenv("DB_USER", "claude_mcp"),
            password=os.getenv("DB_PASS", ""),
            database=os.getenv("DB_NAME") or None,
            connect_timeout=int(os.getenv("DB_CONNECT_TIMEOUT", "10")),
        )


class PoolConfig(BaseModel):
    """Connection pool sizing and wait policy."""

    connection_limit: int = Field(default=10, ge=1, description="Max simultaneous live connections")
    queue_limit: int = Field(
        default=0,
        ge=0,
        description="Max callers waiting while the pool is saturated (0 = unbounded)"
    )
    wait_for_connections: bool = Field(
        default=True,
        description="Wait for a free connection instead of failing when saturated"
    )
    acquire_timeout: float = Field(
        default=0,
        ge=0,
        description="Seconds to wait for a free connection (0 = wait forever)"
    )

    @classmethod
    def from_env(cls) -> "PoolConfig":
        """Create pool configuration from environment variables."""
        return cls(
            connection_limit=int(os.getenv("POOL_CONNECTION_LIMIT", "10")),
            queue_limit=int(os.getenv("POOL_QUEUE_LIMIT", "0")),
            # Only the literal "false" disables waiting
            wait_for_connections=os.getenv("POOL_WAIT_FOR_CONNECTIONS") != "false",
            acquire_timeout=float(os.getenv("POOL_ACQUIRE_TIMEOUT", "0")),
        )


class AppConfig(BaseModel):
    """Application configuration combining all configs."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    pool: PoolConfig = Field(default_factory=PoolConfig)
    server_name: str = Field(default="mariadb-mcp-server", description="MCP server name identifier")
    json_indent: int = Field(default=2, description="Indentation of JSON tool payloads")
    strict_identifiers: bool = Field(
        default=False,
        description="Validate table/database names before interpolating them into SQL"
    )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create full application configuration from environment variables."""
        return cls(
            database=DatabaseConfig.from_env(),
            pool=PoolConfig.from_env(),
            server_name=os.getenv("MCP_SERVER_NAME", "mariadb-mcp-server"),
            strict_identifiers=_env_bool("STRICT_IDENTIFIERS", "false"),
        )
