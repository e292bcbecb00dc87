# core/scope.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Subproof boundaries and line availability over a sequence of proof lines

"""Scope analysis for Fitch-style proofs.

A proof is stored as a flat sequence of lines, each tagged with its nesting
depth. Subproof structure is implicit in that sequence: an assumption at depth
d > 0 opens a subproof which runs until the next line shallower than d or the
next assumption at depth d (a sibling subproof).

These helpers are pure functions of the line sequence (and, for availability,
of the depth at which the next line will be placed). They never mutate.
"""

from typing import Optional, Sequence, Tuple

from parser.ast_nodes import Formula
from .line import ProofLine


def _closes(line: ProofLine, depth: int) -> bool:
    """True when ``line`` ends a scope opened at ``depth``."""
    return line.depth < depth or (line.is_assumption and line.depth <= depth)


def subproof_span(lines: Sequence[ProofLine], opener: int) -> Optional[Tuple[int, int]]:
    """Return the first and last index of the subproof opened at ``opener``.

    The last index is the final line before a later assumption at the same or
    a shallower depth, a line at a shallower depth, or the end of the proof.
    A subproof consisting of nothing but its assumption spans ``(opener, opener)``.

    Args:
        lines: Proof lines in order
        opener: Index of the assumption that opens the subproof

    Returns:
        ``(opener, last)`` or None if ``opener`` is not an assumption line
    """
    if not 0 <= opener < len(lines) or not lines[opener].is_assumption:
        return None

    depth = lines[opener].depth
    last = opener
    for index in range(opener + 1, len(lines)):
        if _closes(lines[index], depth):
            break
        last = index
    return opener, last


def result_of(lines: Sequence[ProofLine], opener: int) -> Optional[Formula]:
    """Return the conclusion of the subproof opened at ``opener``.

    The conclusion is the formula on the last line of the subproof (see
    ``subproof_span``); None if ``opener`` is not an assumption line.
    """
    span = subproof_span(lines, opener)
    if span is None:
        return None
    return lines[span[1]].formula


def scope_is_open(
    lines: Sequence[ProofLine], current_depth: int, position: int, depth: int
) -> bool:
    """Check whether the scope containing ``position`` at ``depth`` is still open.

    Depth 0 is the main proof and never closes. A nested scope is open when the
    cursor is at least that deep and no later line has closed it.
    """
    if depth == 0:
        return True
    if depth > current_depth:
        return False
    return not any(_closes(line, depth) for line in lines[position + 1:])


def is_available(lines: Sequence[ProofLine], current_depth: int, index: int) -> bool:
    """True when the line at ``index`` may be cited at the current position.

    Lines of the main proof (depth 0) are always available. A nested line is
    available only while its innermost enclosing subproof is still open.
    """
    if not 0 <= index < len(lines):
        return False
    return scope_is_open(lines, current_depth, index, lines[index].depth)


def is_citable_subproof(
    lines: Sequence[ProofLine], current_depth: int, opener: int
) -> bool:
    """True when the subproof opened at ``opener`` may be cited as a whole.

    The subproof must be nested (depth > 0), already closed, and its parent
    scope must still be open at the current position.
    """
    if not 0 <= opener < len(lines):
        return False
    line = lines[opener]
    if not line.is_assumption or line.depth == 0:
        return False
    if scope_is_open(lines, current_depth, opener, line.depth):
        return False
    return scope_is_open(lines, current_depth, opener, line.depth - 1)
