# parser/ast_nodes.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional logic formulas. Nodes are built bottom-up and
never mutated afterwards, so a sub-formula may be shared by any number of proof
lines without copying.

Node Types:
    Atom: Uninterpreted propositional variables
    Absurd: The falsehood constant
    Not, And, Or, Implies, Iff: Logical connectives

Equality is structural: two formulas are equal iff they have the same shape
and equal components. All nodes support the visitor design pattern.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    so that every consumer handles every formula shape.
    """

    def visit_atom(self, n: Atom): ...

    def visit_absurd(self, n: Absurd): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...

    def visit_iff(self, n: Iff): ...


@dataclass(frozen=True, slots=True)
class Formula:
    """Base class for all propositional formula nodes.

    Provides the foundation for immutable expression trees with visitor pattern
    support. Concrete node types implement ``accept`` for visitor dispatch and
    ``__str__`` for the canonical, re-parsable text form.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Atom(Formula):
    """Propositional variable identified by its (case-sensitive) name.

    Attributes:
        name: The identifier string for this atom
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_atom(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Absurd(Formula):
    """The falsehood constant (⊥).

    Carries no data; all instances compare equal.
    """

    SYMBOL = "#"

    def accept(self, v: Visitor):
        return v.visit_absurd(self)

    def __str__(self) -> str:
        return self.SYMBOL


@dataclass(frozen=True, slots=True)
class Not(Formula):
    """Logical negation.

    Attributes:
        operand: The formula being negated
    """

    operand: Formula

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"(~{self.operand})"


@dataclass(frozen=True, slots=True)
class And(Formula):
    """Logical conjunction.

    Attributes:
        left: Left conjunct
        right: Right conjunct
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def __str__(self) -> str:
        return f"({self.left} & {self.right})"


@dataclass(frozen=True, slots=True)
class Or(Formula):
    """Logical disjunction.

    Attributes:
        left: Left disjunct
        right: Right disjunct
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def __str__(self) -> str:
        return f"({self.left} | {self.right})"


@dataclass(frozen=True, slots=True)
class Implies(Formula):
    """Material implication.

    Attributes:
        left: Antecedent
        right: Consequent
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor):
        return v.visit_implies(self)

    def __str__(self) -> str:
        return f"({self.left} => {self.right})"


@dataclass(frozen=True, slots=True)
class Iff(Formula):
    """Biconditional.

    Attributes:
        left: Left side
        right: Right side
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor):
        return v.visit_iff(self)

    def __str__(self) -> str:
        return f"({self.left} <=> {self.right})"
