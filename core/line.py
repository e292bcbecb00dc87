# core/line.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Proof line representation: role, justification and nesting depth

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from parser.ast_nodes import Formula


class LineRole(Enum):
    """Whether a line is a hypothesis or the product of a rule."""

    ASSUMPTION = "assumption"
    DERIVATION = "derivation"

    def __str__(self) -> str:
        return self.value


class Rule(Enum):
    """Inference rules and line sources of Fitch-style natural deduction.

    Each member carries the short label used in the justification column of a
    rendered proof.
    """

    PREMISE = "Premise"
    HYPOTHESIS = "Hyp"
    REITERATION = "R"
    AND_INTRO = "∧I"
    AND_ELIM = "∧E"
    OR_INTRO = "∨I"
    OR_ELIM = "∨E"
    NOT_INTRO = "¬I"
    NOT_ELIM = "¬E"
    IMPLIES_INTRO = "→I"
    IMPLIES_ELIM = "→E"
    IFF_INTRO = "↔I"
    IFF_ELIM = "↔E"
    ABSURD_INTRO = "⊥I"
    ABSURD_ELIM = "⊥E"

    @property
    def label(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Justification:
    """Which rule produced a line and which earlier lines it cites.

    Attributes:
        rule: The rule (or line source) that placed the line
        cited: Indices of the antecedent lines, in the order they were given
    """

    rule: Rule
    cited: Tuple[int, ...] = ()

    def __str__(self) -> str:
        if not self.cited:
            return self.rule.label
        return f"{self.rule.label} {', '.join(str(i) for i in self.cited)}"


@dataclass(frozen=True)
class ProofLine:
    """One row of a proof.

    Attributes:
        depth: Nesting level, 0 being the outermost proof
        role: Assumption or derivation
        formula: The formula stated on this line
        justification: How the line was obtained
    """

    depth: int
    role: LineRole
    formula: Formula
    justification: Justification

    @property
    def is_assumption(self) -> bool:
        return self.role is LineRole.ASSUMPTION

    def __str__(self) -> str:
        return f"{'  ' * self.depth}{self.formula}  [{self.justification}]"
