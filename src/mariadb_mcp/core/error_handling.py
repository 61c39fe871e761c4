"""Unified result formatting for MCP tool calls.

Every tool call ends in a ToolResult, built either from a success payload
or from the exception that stopped it.
"""

import datetime
import decimal
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from mariadb_mcp.core import messages
from mariadb_mcp.core.exceptions import MCPDBError

logger = logging.getLogger(__name__)

JSON_INDENT = 2


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one tool call: a single text block, flagged on error."""

    text: str
    is_error: bool = False

    @property
    def content(self) -> List[Dict[str, str]]:
        return [{"type": "text", "text": self.text}]

    def to_dict(self) -> Dict[str, Any]:
        """Render in MCP tool format: {"content": [...], "isError": true}."""
        response: Dict[str, Any] = {"content": self.content}
        if self.is_error:
            response["isError"] = True
        return response


def _json_default(value: Any) -> Any:
    """Convert driver values that json cannot encode natively."""
    if isinstance(value, decimal.Decimal):
        return str(value)
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, datetime.timedelta):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def format_json(data: Any, indent: int = JSON_INDENT) -> str:
    """Pretty-print a payload as JSON."""
    return json.dumps(data, indent=indent, default=_json_default, ensure_ascii=False)


def format_success_response(data: Any, indent: int = JSON_INDENT) -> ToolResult:
    """Format success response.

    Args:
        data: Tool payload. Strings are passed through, anything else is
            rendered as JSON.
        indent: JSON indentation

    Returns:
        Success ToolResult
    """
    if isinstance(data, str):
        return ToolResult(text=data)
    return ToolResult(text=format_json(data, indent))


def format_error_response(error: BaseException) -> ToolResult:
    """Format error response as "Error: <message>".

    Domain errors are logged without a stack trace; anything else is
    unexpected and logged with one.
    """
    if isinstance(error, MCPDBError):
        error_message = error.message
        logger.error(f"Tool call failed: {error.to_dict()}")
    else:
        error_message = str(error) or type(error).__name__
        logger.error(f"Unexpected {type(error).__name__}: {error_message}", exc_info=error)

    return ToolResult(text=f"{messages.ERROR_PREFIX}{error_message}", is_error=True)
