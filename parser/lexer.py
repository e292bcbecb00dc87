# parser/lexer.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module implements tokenization of the formula language accepted by the
proof assistant, breaking input strings into tokens for parser consumption.

Supported Tokens:
- Atoms: one or more uppercase ASCII letters
- Absurdity: # or ⊥
- Operators: ~ ¬ (not), & ^ ∧ (and), | ∨ (or), => → (implies), <=> ↔ (iff)
- Grouping: ( )
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "ATOM",
        "ABSURD",
        "NOT",
        "AND",
        "OR",
        "IFF",
        "IMPLIES",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    # IFF is listed before IMPLIES so that "<=>" is never split
    IFF = r"<=>|↔"
    IMPLIES = r"=>|→"
    ABSURD = r"\#|⊥"
    NOT = r"~|¬"
    AND = r"&|\^|∧"
    OR = r"\||∨"
    LPAREN = r"\("
    RPAREN = r"\)"

    ATOM = r"[A-Z]+"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
