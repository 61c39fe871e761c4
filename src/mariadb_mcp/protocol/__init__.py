"""MCP protocol bindings for MariaDB MCP Server."""
