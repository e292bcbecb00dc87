# tests/parser_tests/test_ast_nodes.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Test suite for the formula value type

"""Structural equality, immutability and visitor dispatch of formula nodes."""

import dataclasses

import pytest
from parser.ast_nodes import Atom, Absurd, Not, And, Or, Implies, Iff


class RecordingVisitor:
    """Visitor returning the name of the visit method that was called."""

    def visit_atom(self, n):
        return "atom"

    def visit_absurd(self, n):
        return "absurd"

    def visit_not(self, n):
        return "not"

    def visit_and(self, n):
        return "and"

    def visit_or(self, n):
        return "or"

    def visit_implies(self, n):
        return "implies"

    def visit_iff(self, n):
        return "iff"


class TestFormulaNodes:

    def test_structural_equality(self):
        """Separately built trees with the same shape are equal."""
        left = And(Atom("A"), Not(Atom("B")))
        right = And(Atom("A"), Not(Atom("B")))
        assert left == right
        assert left is not right
        assert hash(left) == hash(right)

    def test_different_connectives_are_not_equal(self):
        a, b = Atom("A"), Atom("B")
        assert And(a, b) != Or(a, b)
        assert Implies(a, b) != Iff(a, b)
        assert Implies(a, b) != Implies(b, a)

    def test_absurd_instances_are_equal(self):
        assert Absurd() == Absurd()
        assert Absurd() != Atom("#")

    def test_nodes_are_immutable(self):
        formula = Not(Atom("A"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            formula.operand = Atom("B")

    def test_shared_subformula(self):
        """One node may be referenced from several parents."""
        shared = Or(Atom("A"), Atom("B"))
        formula = Iff(shared, Not(shared))
        assert formula.left is formula.right.operand

    @pytest.mark.parametrize(
        "formula, expected",
        [
            (Atom("A"), "atom"),
            (Absurd(), "absurd"),
            (Not(Atom("A")), "not"),
            (And(Atom("A"), Atom("B")), "and"),
            (Or(Atom("A"), Atom("B")), "or"),
            (Implies(Atom("A"), Atom("B")), "implies"),
            (Iff(Atom("A"), Atom("B")), "iff"),
        ],
    )
    def test_visitor_dispatch(self, formula, expected):
        assert formula.accept(RecordingVisitor()) == expected
