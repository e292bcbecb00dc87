# tests/parser_tests/test_parse_errors.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Test suite for formula parser syntax validation and error handling

"""Test suite for formula parser error handling.

Every malformed input must raise ParseError; nothing else may escape.
"""

import pytest
from parser import parse, ParseError
from utils.logger import get_logger


class TestFormulaParserErrors:
    """Test cases for parser syntax validation and error handling."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    INVALID_FORMULAS = [
        # Empty input
        "",
        "   ",
        # Lowercase atoms and illegal characters
        "a",
        "(A & b)",
        "A1",
        "(A % B)",
        "!A",
        # Unparenthesized or chained binary connectives
        "A & B",
        "(A & B & C)",
        "A => B",
        # Unbalanced parentheses
        "(A & B",
        "A & B)",
        "((A)",
        "()",
        # Missing operands
        "(& B)",
        "(A &)",
        "~",
        "(~)",
        # Trailing garbage
        "A B",
        "(A & B) C",
        # Partial operators
        "(A = B)",
        "(A <= B)",
    ]

    @pytest.mark.parametrize("formula", INVALID_FORMULAS)
    def test_invalid_formula_raises_parse_error(self, formula):
        """Malformed formulas raise ParseError."""
        self.logger.debug(f"Expecting rejection of: {formula!r}")
        with pytest.raises(ParseError):
            parse(formula)

    def test_empty_input_message(self):
        """Empty input is reported as such."""
        with pytest.raises(ParseError, match="empty"):
            parse("")

    def test_illegal_character_message(self):
        """Illegal characters are reported with their position."""
        with pytest.raises(ParseError, match="Illegal character 'b'"):
            parse("(A & b)")

    def test_parse_error_is_runtime_error(self):
        """ParseError keeps the RuntimeError base class."""
        assert issubclass(ParseError, RuntimeError)
