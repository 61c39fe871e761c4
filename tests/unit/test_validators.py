"""
Input validator unit tests
"""

import pytest

from mariadb_mcp.core.exceptions import ValidationError
from mariadb_mcp.tools.validators import InputValidator


class TestRequireArgument:
    """Required argument lookup"""

    def test_present(self):
        """✅ Returns the value"""
        assert InputValidator.require_argument({"query": "SELECT 1"}, "query") == "SELECT 1"

    @pytest.mark.parametrize("arguments", [{}, {"query": None}, {"query": ""}])
    def test_missing(self, arguments):
        """❌ Missing, None or empty"""
        with pytest.raises(ValidationError) as exc_info:
            InputValidator.require_argument(arguments, "query")

        assert exc_info.value.message == "Missing required argument: query"
        assert exc_info.value.details == {"field": "query"}

    def test_wrong_type(self):
        """❌ Non-string value"""
        with pytest.raises(ValidationError, match="must be a string"):
            InputValidator.require_argument({"table": 5}, "table")


class TestValidateIdentifier:
    """Identifier checks used in strict mode"""

    @pytest.mark.parametrize("name", [
        "customers",
        "order_items",
        "shop.customers",
        "`weird name`",
        "`shop`.`order-items`",
        "t$1",
    ])
    def test_valid(self, name):
        """✅ Plain, qualified and quoted identifiers"""
        is_valid, error = InputValidator.validate_identifier(name)
        assert is_valid is True
        assert error == ""

    @pytest.mark.parametrize("name", [
        "customers; DROP TABLE orders",
        "customers --",
        "a.b.c",
        "`unterminated",
        "name with space",
        "x/*",
    ])
    def test_invalid(self, name):
        """❌ Injection attempts and malformed names"""
        is_valid, error = InputValidator.validate_identifier(name)
        assert is_valid is False
        assert "Invalid identifier" in error

    def test_empty(self):
        """❌ Empty identifier"""
        assert InputValidator.validate_identifier("") == (False, "Identifier cannot be empty")

    def test_too_long(self):
        """❌ Overlong identifier"""
        is_valid, error = InputValidator.validate_identifier("a" * 200)
        assert is_valid is False
        assert "too long" in error

    def test_check_identifier_raises(self):
        """❌ check_identifier raises ValidationError"""
        with pytest.raises(ValidationError):
            InputValidator.check_identifier("bad name")
