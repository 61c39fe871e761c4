"""Singleton management for MariaDB MCP Server."""

from functools import lru_cache
from typing import Optional
import logging

logger = logging.getLogger(__name__)

# Global singletons
_pool_manager: Optional["ConnectionPoolManager"] = None
_tool_registry: Optional["ToolRegistry"] = None


@lru_cache()
def get_app_config() -> "AppConfig":
    """Get singleton AppConfig instance.

    This function is cached to ensure only one AppConfig instance exists.
    """
    from mariadb_mcp.core.config import AppConfig
    config = AppConfig.from_env()
    logger.info(f"Loaded AppConfig: {config.database.user}@{config.database.host}:{config.database.port}")
    return config


def get_pool_manager(app_config: Optional["AppConfig"] = None) -> "ConnectionPoolManager":
    """Get singleton ConnectionPoolManager instance."""
    global _pool_manager

    if _pool_manager is None:
        from mariadb_mcp.database.pool import ConnectionPoolManager

        app_cfg = app_config if app_config is not None else get_app_config()
        _pool_manager = ConnectionPoolManager(app_cfg.database, app_cfg.pool)
        logger.info("Initialized ConnectionPoolManager singleton")

    return _pool_manager


def get_tool_registry(app_config: Optional["AppConfig"] = None) -> "ToolRegistry":
    """Get singleton ToolRegistry bound to the pool manager singleton.

    The registry owns the process-wide session state, so there must be
    exactly one per process.
    """
    global _tool_registry

    if _tool_registry is None:
        from mariadb_mcp.tools.registry import ToolRegistry

        app_cfg = app_config if app_config is not None else get_app_config()
        _tool_registry = ToolRegistry(get_pool_manager(app_cfg), app_cfg)
        logger.info("Initialized ToolRegistry singleton")

    return _tool_registry


def reset_singletons():
    """Reset all singletons (useful for testing)."""
    global _pool_manager, _tool_registry
    _pool_manager = None
    _tool_registry = None
    get_app_config.cache_clear()
    logger.info("Reset all singletons")
