# tests/core_tests/test_proof_scenarios.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# End-to-end proofs built through the document API

import pytest
from core.document import ProofDocument
from core.line import Rule
from parser import parse
from parser.ast_nodes import Atom, Absurd, Not, Or, Implies, Iff

A, B, C, Z = Atom("A"), Atom("B"), Atom("C"), Atom("Z")


@pytest.fixture(params=[False, True], ids=["reference", "strict"])
def any_document(request):
    """Run the scenario under both scoping modes."""
    return ProofDocument(strict_scope=request.param)


class TestTextbookScenarios:
    """Small proofs every Fitch system must accept."""

    def test_proof_by_cases(self, any_document):
        document = any_document
        document.add_assumption(A)
        document.add_assumption(Or(B, C))
        document.add_subproof(B)
        document.reiterate(0)
        document.end_subproof()
        document.add_subproof(C)
        document.reiterate(0)
        document.end_subproof()

        assert document.eliminate_or(1, 2, 4)
        assert document[6].formula == A
        assert document[6].depth == 0
        assert document[6].justification.cited == (1, 2, 4)

    def test_nested_implication(self, any_document):
        document = any_document
        document.add_subproof(B)
        document.add_subproof(A)
        document.reiterate(0)
        document.end_subproof()
        assert document.current_depth == 1

        assert document.introduce_implies(1)
        assert document[3].formula == Implies(A, B)
        assert document[3].depth == 1

        document.end_subproof()
        assert document.introduce_implies(0)
        assert document[4].formula == Implies(B, Implies(A, B))
        assert document[4].depth == 0

    def test_ex_falso(self, any_document):
        document = any_document
        document.add_assumption(A)
        document.add_assumption(Not(A))

        assert document.introduce_absurd(0, 1)
        assert document[2].formula == Absurd()
        assert document.eliminate_absurd(2, Z)
        assert document[3].formula == Z

    def test_contraposition(self, any_document):
        document = any_document
        document.add_assumption(Implies(A, B))
        document.add_subproof(Not(B))
        document.add_subproof(A)
        assert document.eliminate_implies(0, 2)
        assert document.reiterate(1)
        assert document.introduce_absurd(3, 4)
        document.end_subproof()
        assert document.introduce_not(2)
        document.end_subproof()
        assert document.introduce_implies(1)

        assert document[7].formula == parse("((~B) => (~A))")
        assert document.snapshot().conclusion == Implies(Not(B), Not(A))

    def test_biconditional_from_premises(self, any_document):
        document = any_document
        document.add_assumption(Implies(A, B))
        document.add_assumption(Implies(B, A))
        document.add_subproof(A)
        document.eliminate_implies(0, 2)
        document.end_subproof()
        document.add_subproof(B)
        document.eliminate_implies(1, 4)
        document.end_subproof()
        assert document.introduce_iff(2, 4)

        document.add_subproof(B)
        assert document.eliminate_iff(6, 7)
        assert document[8].formula == A
        assert document[8].depth == 1

    def test_double_negation_round_trip(self, any_document):
        document = any_document
        document.add_assumption(A)
        document.add_subproof(Not(A))
        document.reiterate(0)
        document.introduce_absurd(1, 2)
        document.end_subproof()
        assert document.introduce_not(1)
        assert document[4].formula == Not(Not(A))

        assert document.eliminate_not(4)
        assert document[5].formula == A


class TestEditing:
    """Mistakes can be undone and the proof continued."""

    def test_delete_then_retry(self):
        document = ProofDocument()
        document.add_assumption(Implies(A, B))
        document.add_assumption(A)
        document.reiterate(1)
        document.delete_last_line()

        assert document.eliminate_implies(0, 1)
        assert [line.formula for line in document.lines] == [Implies(A, B), A, B]

    def test_delete_back_into_subproof(self):
        document = ProofDocument()
        document.add_subproof(A)
        document.reiterate(0)
        document.end_subproof()
        document.introduce_implies(0)
        assert document.current_depth == 0

        document.delete_last_line()
        assert document.current_depth == 1
        assert document.add_subproof(B)
        assert document[2].depth == 2

    def test_failed_rule_then_success(self):
        document = ProofDocument()
        document.add_assumption(Iff(A, B))
        document.add_assumption(C)
        assert not document.eliminate_iff(0, 1)

        document.delete_last_line()
        document.add_assumption(B)
        assert document.eliminate_iff(0, 1)
        assert document[2].formula == A
        assert document[2].justification.rule is Rule.IFF_ELIM

    def test_reiterate_after_closing_fails(self):
        document = ProofDocument()
        document.add_subproof(A)
        document.add_subproof(B)
        document.end_subproof()

        assert not document.reiterate(1)
        assert document.reiterate(0)

    def test_assumption_after_first_deduction_fails(self):
        document = ProofDocument()
        document.add_assumption(A)
        document.introduce_or(0, Or(A, B))

        assert not document.add_assumption(B)
        assert document.boundary == 1
