"""MariaDB MCP Server - expose a MariaDB/MySQL server to MCP clients."""

__version__ = "1.0.0"
