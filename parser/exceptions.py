# parser/exceptions.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula processing."""


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the input text does not conform to the formula grammar:
    empty input, illegal characters, unbalanced parentheses, unparenthesized
    binary connectives or trailing tokens.
    """

    pass
