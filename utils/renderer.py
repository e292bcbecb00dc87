# utils/renderer.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Text rendering of proof snapshots in Fitch notation

"""Plain-text rendering of proofs.

Proofs are drawn the way they appear in textbooks: one vertical bar per
nesting level, a horizontal rule under the premises and under every subproof
hypothesis, and a justification column on the right. A trailing marker row
shows the depth at which the next line will be placed.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from parser.ast_nodes import Formula, Atom, Absurd, Not, And, Or, Implies, Iff

if TYPE_CHECKING:
    from core.snapshot import ProofSnapshot


class UnicodeSymbols:
    """Formula visitor producing logic-notation text, e.g. ``(A ∧ (¬B))``.

    The output stays fully parenthesized and is accepted by the parser.
    """

    def visit_atom(self, n: Atom) -> str:
        return n.name

    def visit_absurd(self, n: Absurd) -> str:
        return "⊥"

    def visit_not(self, n: Not) -> str:
        return f"(¬{n.operand.accept(self)})"

    def visit_and(self, n: And) -> str:
        return f"({n.left.accept(self)} ∧ {n.right.accept(self)})"

    def visit_or(self, n: Or) -> str:
        return f"({n.left.accept(self)} ∨ {n.right.accept(self)})"

    def visit_implies(self, n: Implies) -> str:
        return f"({n.left.accept(self)} → {n.right.accept(self)})"

    def visit_iff(self, n: Iff) -> str:
        return f"({n.left.accept(self)} ↔ {n.right.accept(self)})"


_ASCII_TRANSLATION = str.maketrans(
    {"∧": "&", "∨": "|", "¬": "~", "→": "=>", "↔": "<=>", "⊥": "#"}
)


@dataclass(frozen=True)
class Glyphs:
    bar: str
    rule: str
    marker: str
    turnstile: str


UNICODE_GLYPHS = Glyphs(bar="│", rule="├", marker="▸", turnstile="⊢")
ASCII_GLYPHS = Glyphs(bar="|", rule="+", marker=">", turnstile="|-")


def format_formula(formula: Formula, unicode: bool = True) -> str:
    """Render a single formula in logic notation or canonical ASCII."""
    if unicode:
        return formula.accept(UnicodeSymbols())
    return str(formula)


def format_label(text: str, unicode: bool = True) -> str:
    """Convert a justification label to ASCII when unicode output is off."""
    return text if unicode else text.translate(_ASCII_TRANSLATION)


def render_proof(snapshot: ProofSnapshot, unicode: bool = True) -> str:
    """Render a proof snapshot as Fitch-style text.

    Args:
        snapshot: The proof to draw
        unicode: Use box-drawing and logic symbols instead of plain ASCII

    Returns:
        Multi-line string, one row per proof line plus separator rows
    """
    glyphs = UNICODE_GLYPHS if unicode else ASCII_GLYPHS
    lines = snapshot.lines
    number_width = len(str(max(len(lines) - 1, 0)))
    gutter = " " * number_width

    bodies = [
        f"{(glyphs.bar + ' ') * line.depth}{glyphs.bar} "
        f"{format_formula(line.formula, unicode)}"
        for line in lines
    ]
    body_width = max((len(body) for body in bodies), default=0)

    rows: List[str] = []
    for index, (line, body) in enumerate(zip(lines, bodies)):
        justification = format_label(str(line.justification), unicode)
        rows.append(f"{index:>{number_width}} {body.ljust(body_width)}   {justification}")

        premises_end = index == snapshot.boundary - 1
        if premises_end or (line.is_assumption and line.depth > 0):
            underline = "─" if unicode else "-"
            rows.append(
                f"{gutter} {(glyphs.bar + ' ') * line.depth}{glyphs.rule}{underline * 4}"
            )

    rows.append(f"{gutter} {(glyphs.bar + ' ') * snapshot.current_depth}{glyphs.marker}")
    return "\n".join(rows)


def render_sequent(snapshot: ProofSnapshot, unicode: bool = True) -> str:
    """Summarize the proof as ``premises ⊢ conclusion``.

    The conclusion is the last line of the main proof after the premises;
    ``?`` when nothing has been derived at depth 0 yet.
    """
    glyphs = UNICODE_GLYPHS if unicode else ASCII_GLYPHS
    premises = ", ".join(format_formula(line.formula, unicode) for line in snapshot.premises)
    conclusion = snapshot.conclusion
    goal = format_formula(conclusion, unicode) if conclusion is not None else "?"
    return f"{premises} {glyphs.turnstile} {goal}".strip()
