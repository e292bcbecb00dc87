# parser/grammar.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implemented with the SLY parser generator.

The grammar is deliberately strict: every binary connective must be wrapped in
its own pair of parentheses, so formulas never depend on operator precedence
and the canonical rendering of a formula is always re-parsable.

Grammar:
    formula := ATOM | ABSURD | NOT formula
             | ( formula )
             | ( formula AND formula )
             | ( formula OR formula )
             | ( formula IMPLIES formula )
             | ( formula IFF formula )
"""

from sly import Parser
from .lexer import FormulaLexer
from .ast_nodes import Formula, Atom, Absurd, Not, And, Or, Implies, Iff
from .exceptions import ParseError
from utils.logger import get_logger


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Attributes:
        tokens: Token types from FormulaLexer
    """

    tokens = FormulaLexer.tokens

    @_("formula")
    def start(self, p) -> Formula:
        """Start rule: complete input is a single formula."""
        return p.formula

    @_("ATOM")
    def formula(self, p) -> Formula:
        """Propositional variable."""
        return Atom(p.ATOM)

    @_("ABSURD")
    def formula(self, p) -> Formula:
        """Falsehood constant."""
        return Absurd()

    @_("NOT formula")
    def formula(self, p) -> Formula:
        """Negation, written either bare (~A) or grouped ((~A))."""
        return Not(p.formula)

    @_("LPAREN formula RPAREN")
    def formula(self, p) -> Formula:
        """Redundant grouping."""
        return p.formula

    @_("LPAREN formula AND formula RPAREN")
    def formula(self, p) -> Formula:
        """Conjunction."""
        return And(p.formula0, p.formula1)

    @_("LPAREN formula OR formula RPAREN")
    def formula(self, p) -> Formula:
        """Disjunction."""
        return Or(p.formula0, p.formula1)

    @_("LPAREN formula IMPLIES formula RPAREN")
    def formula(self, p) -> Formula:
        """Implication."""
        return Implies(p.formula0, p.formula1)

    @_("LPAREN formula IFF formula RPAREN")
    def formula(self, p) -> Formula:
        """Biconditional."""
        return Iff(p.formula0, p.formula1)

    def parse(self, text: str) -> Formula:
        """Parse formula text into an AST.

        Args:
            text: Formula string to parse

        Returns:
            Root AST node representing the parsed formula

        Raises:
            ParseError: If the formula is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        if text.strip() == "":
            raise ParseError("Input formula is empty.")

        try:
            ast_result = super().parse(FormulaLexer().tokenize(text))

            if ast_result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(
                f"Successfully parsed formula into {type(ast_result).__name__}"
            )
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise ParseError(error_msg)
