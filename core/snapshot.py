# core/snapshot.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Read-only view of a proof document for renderers

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple

from .line import ProofLine


@dataclass(frozen=True)
class ProofSnapshot:
    """Immutable picture of a proof at one point in time.

    Carries exactly what a renderer needs: every line (depth, role, formula,
    justification), the boundary between the top-level assumptions and the
    deduction area, and the depth at which the next line will be placed.

    Attributes:
        lines: Proof lines in order
        boundary: Index one past the last top-level assumption
        current_depth: Nesting depth of the next line
    """

    lines: Tuple[ProofLine, ...]
    boundary: int
    current_depth: int

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[ProofLine]:
        return iter(self.lines)

    @property
    def premises(self) -> Tuple[ProofLine, ...]:
        """The standing top-level assumptions."""
        return self.lines[: self.boundary]

    @property
    def deductions(self) -> Tuple[ProofLine, ...]:
        """Every line after the top-level assumptions."""
        return self.lines[self.boundary :]

    @property
    def conclusion(self):
        """Formula of the last depth-0 line after the premises, if any."""
        for line in reversed(self.deductions):
            if line.depth == 0:
                return line.formula
        return None
