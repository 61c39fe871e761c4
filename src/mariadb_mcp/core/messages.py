"""User-visible message templates.

Clients match on these strings, so the wording is fixed.
"""

ERROR_PREFIX = "Error: "

NO_DATABASE_SELECTED = "No database selected. Use switch_database tool first."
DATABASE_SWITCHED = "Successfully switched to database: {database}"
CURRENT_DATABASE = "Current database: {database}"
UNKNOWN_TOOL = "Unknown tool: {name}"
MISSING_ARGUMENT = "Missing required argument: {field}"

SERVER_RUNNING = "MariaDB MCP server running on stdio"
FATAL_ERROR = "Fatal error:"
