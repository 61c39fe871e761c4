"""Entry point for MariaDB MCP Server.

Runs the server over the stdio transport, for MCP clients that spawn it
as a subprocess. Logs go to stderr; stdout carries the protocol.

Usage:
    mariadb-mcp-server
    mariadb-mcp-server --env-file /path/to/.env --log-level DEBUG
    python -m mariadb_mcp
"""

import argparse
import asyncio
import logging
import os
import sys

from mariadb_mcp.core import messages
from mariadb_mcp.core.config import AppConfig, load_environment

logger = logging.getLogger("mariadb_mcp")


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


async def run_stdio_mode(app_config: AppConfig):
    """Run MCP server in STDIO mode."""
    from mariadb_mcp.protocol.stdio_server import run_stdio_server

    logger.info(
        f"Starting MariaDB MCP Server ({app_config.database.user}@"
        f"{app_config.database.host}:{app_config.database.port}, "
        f"database={app_config.database.database or '-'})"
    )
    await run_stdio_server(app_config)


def main(argv=None):
    """Main entry point with argument parsing."""
    parser = argparse.ArgumentParser(
        description="MariaDB MCP Server - expose a MariaDB database to MCP clients over stdio"
    )
    parser.add_argument(
        "--env-file",
        type=str,
        default=None,
        help="Path to a .env file (default: ENV_FILE_PATH env, then ./.env)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: from LOG_LEVEL env or INFO)"
    )
    args = parser.parse_args(argv)

    load_environment(args.env_file)
    configure_logging(args.log_level or os.getenv("LOG_LEVEL", "INFO"))

    try:
        app_config = AppConfig.from_env()
        asyncio.run(run_stdio_mode(app_config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.error(f"{messages.FATAL_ERROR} {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
