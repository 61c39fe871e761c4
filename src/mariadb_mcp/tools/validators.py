"""Input validators for tool arguments."""

import re
from typing import Any, Mapping, Tuple

from mariadb_mcp.core import messages
from mariadb_mcp.core.exceptions import ValidationError

# Plain or backtick-quoted identifier, optionally schema-qualified (db.table)
_IDENTIFIER_PART = r"(?:[A-Za-z0-9_$]+|`[^`]+`)"
IDENTIFIER_PATTERN = re.compile(rf"^{_IDENTIFIER_PART}(?:\.{_IDENTIFIER_PART})?$")

MAX_IDENTIFIER_LENGTH = 129  # 64-char db + "." + 64-char table


class InputValidator:
    """General input validation utilities."""

    @staticmethod
    def require_argument(arguments: Mapping[str, Any], field: str) -> str:
        """
        Fetch a required string argument.

        Raises:
            ValidationError: If the argument is missing, empty or not a string
        """
        value = arguments.get(field)
        if value is None or value == "":
            raise ValidationError(messages.MISSING_ARGUMENT.format(field=field), {"field": field})
        if not isinstance(value, str):
            raise ValidationError(
                f"Argument '{field}' must be a string, got {type(value).__name__}",
                {"field": field}
            )
        return value

    @staticmethod
    def validate_identifier(name: str) -> Tuple[bool, str]:
        """
        Validate a table or database name before it is interpolated into SQL.

        Args:
            name: Identifier to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not name:
            return False, "Identifier cannot be empty"

        if len(name) > MAX_IDENTIFIER_LENGTH:
            return False, f"Identifier too long (max {MAX_IDENTIFIER_LENGTH} characters)"

        if not IDENTIFIER_PATTERN.match(name):
            return False, f"Invalid identifier '{name}' (only letters, digits, _, $, backtick quoting and one '.' allowed)"

        return True, ""

    @classmethod
    def check_identifier(cls, name: str):
        """Raise ValidationError if ``name`` is not a safe identifier."""
        is_valid, error_msg = cls.validate_identifier(name)
        if not is_valid:
            raise ValidationError(error_msg, {"identifier": name})
