# core/document.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# The proof document: an append-mostly store of proof lines with rule checking

"""Fitch-style proof document and inference rule checker.

A ``ProofDocument`` owns the ordered list of proof lines together with two
pieces of bookkeeping:

- ``boundary``: index one past the last top-level assumption. Top-level
  assumptions sit contiguously at the front of the proof.
- ``current_depth``: the nesting level at which the next line is placed.
  Opening a subproof increases it, closing one decreases it.

Every rule operation validates its preconditions first and only then appends a
single derivation line. A failed operation returns False and leaves the
document untouched; callers decide how to report the failure to the user.

With ``strict_scope`` enabled the document additionally refuses to cite lines
buried in subproofs that have already closed, and only accepts closed
subproofs whose parent scope is still open where a whole subproof is cited.
"""

from __future__ import annotations
from typing import List, Optional, Tuple

from parser.ast_nodes import Formula, Absurd, Not, And, Or, Implies, Iff
from utils.logger import get_logger
from .line import Justification, LineRole, ProofLine, Rule
from .scope import is_available, is_citable_subproof, result_of
from .snapshot import ProofSnapshot


class ProofDocument:
    """Mutable proof under construction.

    Attributes:
        strict_scope: Whether cited lines and subproofs must be in scope
    """

    def __init__(self, strict_scope: bool = False):
        self._lines: List[ProofLine] = []
        self._boundary = 0
        self._current_depth = 0
        self.strict_scope = strict_scope
        self._logger = get_logger()

    # ------------------------------------------------------------------
    # Read-only access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> ProofLine:
        return self._lines[index]

    @property
    def lines(self) -> Tuple[ProofLine, ...]:
        return tuple(self._lines)

    @property
    def boundary(self) -> int:
        return self._boundary

    @property
    def current_depth(self) -> int:
        return self._current_depth

    def snapshot(self) -> ProofSnapshot:
        """Capture the current state for rendering."""
        return ProofSnapshot(tuple(self._lines), self._boundary, self._current_depth)

    def result_of(self, opener: int) -> Optional[Formula]:
        """Conclusion of the subproof opened at ``opener`` (None if not an assumption)."""
        return result_of(self._lines, opener)

    def __str__(self) -> str:
        rows = []
        for index, line in enumerate(self._lines):
            if index == self._boundary:
                rows.append("-" * 18)
            rows.append(str(line))
        return "\n".join(rows)

    # ------------------------------------------------------------------
    # Structural operations
    # ------------------------------------------------------------------

    def add_assumption(self, formula: Formula) -> bool:
        """Add a standing top-level assumption.

        Only possible while the proof consists of top-level assumptions alone,
        i.e. before any subproof or derivation has been started.

        Args:
            formula: The assumed formula

        Returns:
            True if the assumption was added
        """
        if len(self._lines) > self._boundary:
            self._logger.rule_rejected(
                Rule.PREMISE.label, (), "deduction area already started"
            )
            return False

        line = ProofLine(0, LineRole.ASSUMPTION, formula, Justification(Rule.PREMISE))
        self._lines.insert(self._boundary, line)
        self._boundary += 1
        self._logger.line_added(
            self._boundary - 1, 0, str(formula), str(line.justification)
        )
        return True

    def add_subproof(self, formula: Formula) -> bool:
        """Open a nested subproof whose hypothesis is ``formula``.

        Always succeeds.
        """
        old_depth = self._current_depth
        self._current_depth += 1
        self._logger.depth_changed(old_depth, self._current_depth)
        self._append(formula, Rule.HYPOTHESIS, (), LineRole.ASSUMPTION)
        return True

    def end_subproof(self) -> bool:
        """Close the innermost open subproof.

        Lines are left untouched; only the placement of subsequent lines
        changes. A no-op at depth 0.

        Returns:
            True if a subproof was closed
        """
        if self._current_depth == 0:
            self._logger.debug("end_subproof ignored: already at depth 0")
            return False

        self._current_depth -= 1
        self._logger.depth_changed(self._current_depth + 1, self._current_depth)
        return True

    def delete_last_line(self) -> bool:
        """Remove the most recent line.

        The boundary is clamped to the new length and the depth cursor is
        reset to the depth of the new last line (0 for an empty proof).
        A subproof closed just before the deleted line is therefore reopened.

        Returns:
            True if a line was removed
        """
        if not self._lines:
            self._logger.debug("delete_last_line ignored: proof is empty")
            return False

        self._lines.pop()
        self._boundary = min(self._boundary, len(self._lines))
        self._current_depth = self._lines[-1].depth if self._lines else 0
        self._logger.line_deleted(
            len(self._lines), self._boundary, self._current_depth
        )
        return True

    def reiterate(self, row: int) -> bool:
        """Repeat an earlier line at the current depth.

        The line must not sit deeper than the current position, i.e. its
        subproof must not have been closed.
        """
        rule = Rule.REITERATION
        if not self._in_range(row):
            return self._reject(rule, (row,), "index out of range")
        if self._lines[row].depth > self._current_depth:
            return self._reject(rule, (row,), "line belongs to a closed subproof")
        if not self._lines_in_scope(row):
            return self._reject(rule, (row,), "line is out of scope")

        return self._append(self._lines[row].formula, rule, (row,))

    # ------------------------------------------------------------------
    # Conjunction
    # ------------------------------------------------------------------

    def introduce_and(self, left: int, right: int) -> bool:
        """From ``A`` and ``B`` derive ``(A & B)``."""
        rule = Rule.AND_INTRO
        cited = (left, right)
        if not self._in_range(left, right):
            return self._reject(rule, cited, "index out of range")
        if not self._lines_in_scope(left, right):
            return self._reject(rule, cited, "line is out of scope")

        conjunction = And(self._lines[left].formula, self._lines[right].formula)
        return self._append(conjunction, rule, cited)

    def eliminate_and(self, conjunction: int, target: Formula) -> bool:
        """From ``(A & B)`` derive whichever of ``A`` or ``B`` equals ``target``."""
        rule = Rule.AND_ELIM
        cited = (conjunction,)
        if not self._in_range(conjunction):
            return self._reject(rule, cited, "index out of range")
        if not self._lines_in_scope(conjunction):
            return self._reject(rule, cited, "line is out of scope")

        formula = self._lines[conjunction].formula
        if not isinstance(formula, And):
            return self._reject(rule, cited, f"{formula} is not a conjunction")

        if formula.left == target:
            return self._append(formula.left, rule, cited)
        if formula.right == target:
            return self._append(formula.right, rule, cited)
        return self._reject(rule, cited, f"{target} is not a conjunct of {formula}")

    # ------------------------------------------------------------------
    # Disjunction
    # ------------------------------------------------------------------

    def introduce_or(self, source: int, target: Formula) -> bool:
        """From ``A`` derive ``target`` when it is ``(A | B)`` or ``(B | A)``."""
        rule = Rule.OR_INTRO
        cited = (source,)
        if not self._in_range(source):
            return self._reject(rule, cited, "index out of range")
        if not self._lines_in_scope(source):
            return self._reject(rule, cited, "line is out of scope")
        if not isinstance(target, Or):
            return self._reject(rule, cited, f"{target} is not a disjunction")

        formula = self._lines[source].formula
        if formula != target.left and formula != target.right:
            return self._reject(rule, cited, f"{formula} is not a disjunct of {target}")
        return self._append(target, rule, cited)

    def eliminate_or(self, disjunction: int, left: int, right: int) -> bool:
        """Proof by cases.

        Given ``(A | B)`` and two subproofs, one assuming ``A`` and one
        assuming ``B``, that reach the same conclusion ``C``, derive ``C``.

        Args:
            disjunction: Index of the ``(A | B)`` line
            left: Index of the assumption opening the ``A`` subproof
            right: Index of the assumption opening the ``B`` subproof
        """
        rule = Rule.OR_ELIM
        cited = (disjunction, left, right)
        if not self._in_range(disjunction, left, right):
            return self._reject(rule, cited, "index out of range")
        if disjunction >= left or disjunction >= right:
            return self._reject(rule, cited, "disjunction must precede both subproofs")
        if not self._lines_in_scope(disjunction):
            return self._reject(rule, cited, "line is out of scope")
        if not self._subproofs_in_scope(left, right):
            return self._reject(rule, cited, "subproof is not closed or out of scope")

        formula = self._lines[disjunction].formula
        if not isinstance(formula, Or):
            return self._reject(rule, cited, f"{formula} is not a disjunction")
        if self._lines[left].formula != formula.left:
            return self._reject(rule, cited, f"left subproof does not assume {formula.left}")
        if self._lines[right].formula != formula.right:
            return self._reject(rule, cited, f"right subproof does not assume {formula.right}")

        left_result = result_of(self._lines, left)
        right_result = result_of(self._lines, right)
        if left_result is None or left_result != right_result:
            return self._reject(rule, cited, "subproofs reach different conclusions")
        return self._append(left_result, rule, cited)

    # ------------------------------------------------------------------
    # Negation
    # ------------------------------------------------------------------

    def introduce_not(self, subproof: int) -> bool:
        """From a just-closed subproof ``A ... #`` derive ``(~A)``."""
        rule = Rule.NOT_INTRO
        cited = (subproof,)
        if not self._in_range(subproof):
            return self._reject(rule, cited, "index out of range")
        if self._current_depth != self._lines[subproof].depth - 1:
            return self._reject(rule, cited, "subproof is not the one just closed")
        if not self._subproofs_in_scope(subproof):
            return self._reject(rule, cited, "subproof is not closed or out of scope")

        if result_of(self._lines, subproof) != Absurd():
            return self._reject(rule, cited, "subproof does not end in absurdity")
        return self._append(Not(self._lines[subproof].formula), rule, cited)

    def eliminate_not(self, index: int) -> bool:
        """From ``(~(~A))`` derive ``A``."""
        rule = Rule.NOT_ELIM
        cited = (index,)
        if not self._in_range(index):
            return self._reject(rule, cited, "index out of range")
        if not self._lines_in_scope(index):
            return self._reject(rule, cited, "line is out of scope")

        formula = self._lines[index].formula
        if not (isinstance(formula, Not) and isinstance(formula.operand, Not)):
            return self._reject(rule, cited, f"{formula} is not a double negation")
        return self._append(formula.operand.operand, rule, cited)

    # ------------------------------------------------------------------
    # Implication
    # ------------------------------------------------------------------

    def introduce_implies(self, subproof: int) -> bool:
        """From a just-closed subproof ``A ... B`` derive ``(A => B)``."""
        rule = Rule.IMPLIES_INTRO
        cited = (subproof,)
        if not self._in_range(subproof):
            return self._reject(rule, cited, "index out of range")
        if self._current_depth != self._lines[subproof].depth - 1:
            return self._reject(rule, cited, "subproof is not the one just closed")
        if not self._subproofs_in_scope(subproof):
            return self._reject(rule, cited, "subproof is not closed or out of scope")

        conclusion = result_of(self._lines, subproof)
        if conclusion is None:
            return self._reject(rule, cited, "line does not open a subproof")
        implication = Implies(self._lines[subproof].formula, conclusion)
        return self._append(implication, rule, cited)

    def eliminate_implies(self, implication: int, antecedent: int) -> bool:
        """Modus ponens: from ``(A => B)`` and ``A`` derive ``B``."""
        rule = Rule.IMPLIES_ELIM
        cited = (implication, antecedent)
        if not self._in_range(implication, antecedent):
            return self._reject(rule, cited, "index out of range")
        if not self._lines_in_scope(implication, antecedent):
            return self._reject(rule, cited, "line is out of scope")

        formula = self._lines[implication].formula
        if not isinstance(formula, Implies):
            return self._reject(rule, cited, f"{formula} is not an implication")
        if self._lines[antecedent].formula != formula.left:
            return self._reject(rule, cited, f"antecedent {formula.left} not found")
        return self._append(formula.right, rule, cited)

    # ------------------------------------------------------------------
    # Biconditional
    # ------------------------------------------------------------------

    def introduce_iff(self, left: int, right: int) -> bool:
        """From just-closed subproofs ``A ... B`` and ``B ... A`` derive ``(A <=> B)``."""
        rule = Rule.IFF_INTRO
        cited = (left, right)
        if not self._in_range(left, right):
            return self._reject(rule, cited, "index out of range")
        expected = self._current_depth + 1
        if self._lines[left].depth != expected or self._lines[right].depth != expected:
            return self._reject(rule, cited, "subproofs are not directly below the current depth")
        if not self._subproofs_in_scope(left, right):
            return self._reject(rule, cited, "subproof is not closed or out of scope")

        left_formula = self._lines[left].formula
        right_formula = self._lines[right].formula
        left_result = result_of(self._lines, left)
        right_result = result_of(self._lines, right)
        if left_result is None or right_result is None:
            return self._reject(rule, cited, "line does not open a subproof")
        if left_formula != right_result or left_result != right_formula:
            return self._reject(rule, cited, "subproofs do not derive each other's hypothesis")
        return self._append(Iff(left_formula, right_formula), rule, cited)

    def eliminate_iff(self, biconditional: int, truth: int) -> bool:
        """From ``(A <=> B)`` and either side derive the other side."""
        rule = Rule.IFF_ELIM
        cited = (biconditional, truth)
        if not self._in_range(biconditional, truth):
            return self._reject(rule, cited, "index out of range")
        if not self._lines_in_scope(biconditional, truth):
            return self._reject(rule, cited, "line is out of scope")

        formula = self._lines[biconditional].formula
        if not isinstance(formula, Iff):
            return self._reject(rule, cited, f"{formula} is not a biconditional")

        known = self._lines[truth].formula
        if known == formula.left:
            return self._append(formula.right, rule, cited)
        if known == formula.right:
            return self._append(formula.left, rule, cited)
        return self._reject(rule, cited, f"{known} is neither side of {formula}")

    # ------------------------------------------------------------------
    # Absurdity
    # ------------------------------------------------------------------

    def introduce_absurd(self, first: int, second: int) -> bool:
        """From ``A`` and ``(~A)`` (in either order) derive ``#``."""
        rule = Rule.ABSURD_INTRO
        cited = (first, second)
        if not self._in_range(first, second):
            return self._reject(rule, cited, "index out of range")
        if not self._lines_in_scope(first, second):
            return self._reject(rule, cited, "line is out of scope")

        a = self._lines[first].formula
        b = self._lines[second].formula
        if b != Not(a) and a != Not(b):
            return self._reject(rule, cited, f"{a} and {b} do not contradict each other")
        return self._append(Absurd(), rule, cited)

    def eliminate_absurd(self, absurdity: int, target: Formula) -> bool:
        """Ex falso: from ``#`` derive any ``target``."""
        rule = Rule.ABSURD_ELIM
        cited = (absurdity,)
        if not self._in_range(absurdity):
            return self._reject(rule, cited, "index out of range")
        if not isinstance(self._lines[absurdity].formula, Absurd):
            return self._reject(rule, cited, "line is not an absurdity")
        if self._lines[absurdity].depth > self._current_depth:
            return self._reject(rule, cited, "line belongs to a closed subproof")
        if not self._lines_in_scope(absurdity):
            return self._reject(rule, cited, "line is out of scope")
        return self._append(target, rule, cited)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _in_range(self, *indices: int) -> bool:
        size = len(self._lines)
        return all(type(i) is int and 0 <= i < size for i in indices)

    def _lines_in_scope(self, *indices: int) -> bool:
        if not self.strict_scope:
            return True
        return all(
            is_available(self._lines, self._current_depth, i) for i in indices
        )

    def _subproofs_in_scope(self, *openers: int) -> bool:
        if not self.strict_scope:
            return True
        return all(
            is_citable_subproof(self._lines, self._current_depth, i) for i in openers
        )

    def _append(
        self,
        formula: Formula,
        rule: Rule,
        cited: Tuple[int, ...],
        role: LineRole = LineRole.DERIVATION,
    ) -> bool:
        line = ProofLine(self._current_depth, role, formula, Justification(rule, cited))
        self._lines.append(line)
        self._logger.line_added(
            len(self._lines) - 1, line.depth, str(formula), str(line.justification)
        )
        return True

    def _reject(self, rule: Rule, cited: Tuple[int, ...], reason: str) -> bool:
        self._logger.rule_rejected(rule.label, cited, reason)
        return False
