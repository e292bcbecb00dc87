# parser/__init__.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Formula parsing components for propositional logic expressions

"""Propositional formula parsing for the natural deduction engine.

The proof engine only ever consumes already-built formula values; this package
is the collaborator that turns user text such as ``((A & B) => ~C)`` into
those values.

Core Functions:
    parse: Converts formula strings into formula trees, raising on failure
    try_parse: Same, but returns None instead of raising

Example:
    >>> from parser import parse
    >>> parse("(A & (~B))")
    And(left=Atom(name='A'), right=Not(operand=Atom(name='B')))
"""

from typing import Optional

from .exceptions import ParseError
from .grammar import _FormulaParser
from .ast_nodes import Formula, Atom, Absurd, Not, And, Or, Implies, Iff
from utils.logger import get_logger


def parse(source: str) -> Formula:
    """Parse a formula string into its tree representation.

    Uses a fresh parser instance for each invocation so that no parser state
    leaks between calls.

    Args:
        source: Formula text, e.g. ``"((A | B) => C)"``

    Returns:
        Root node of the parsed formula

    Raises:
        ParseError: Formula syntax is malformed
    """
    logger = get_logger()
    parser = _FormulaParser()

    try:
        return parser.parse(source)

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def try_parse(source: str) -> Optional[Formula]:
    """Parse a formula string, returning None when it is not well formed."""
    try:
        return parse(source)
    except ParseError as exc:
        get_logger().debug(f"Rejected formula {source!r}: {exc}")
        return None


__all__ = [
    "parse",
    "try_parse",
    "ParseError",
    "Formula",
    "Atom",
    "Absurd",
    "Not",
    "And",
    "Or",
    "Implies",
    "Iff",
]
