# tests/utils_tests/test_proof_visualizer.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Test suite for the Graphviz justification graph

import os

import pytest
from graphviz import Digraph, ExecutableNotFound

from core.document import ProofDocument
from parser.ast_nodes import Atom, Or
from utils.proof_visualizer import VISUALIZATION_OUTPUT_FOLDER, build_graph, render_graph

A, B, C = Atom("A"), Atom("B"), Atom("C")


@pytest.fixture
def cases_proof():
    document = ProofDocument()
    document.add_assumption(A)
    document.add_assumption(Or(B, C))
    document.add_subproof(B)
    document.reiterate(0)
    document.end_subproof()
    document.add_subproof(C)
    document.reiterate(0)
    document.end_subproof()
    document.eliminate_or(1, 2, 4)
    return document.snapshot()


class TestBuildGraph:

    def test_one_node_per_line(self, cases_proof):
        source = build_graph(cases_proof).source
        for index in range(len(cases_proof)):
            assert f"L{index} [" in source

    def test_citation_edges(self, cases_proof):
        source = build_graph(cases_proof).source
        assert "L0 -> L3" in source
        assert "L0 -> L5" in source
        for cited in (1, 2, 4):
            assert f"L{cited} -> L6" in source

    def test_subproofs_become_clusters(self, cases_proof):
        source = build_graph(cases_proof).source
        assert "subgraph cluster_2" in source
        assert "subgraph cluster_4" in source
        assert "cluster_0" not in source

    def test_labels_follow_notation(self, cases_proof):
        assert "(B ∨ C)" in build_graph(cases_proof).source
        ascii_source = build_graph(cases_proof, unicode=False).source
        assert "(B | C)" in ascii_source
        assert "|E 1, 2, 4" in ascii_source

    def test_format(self, cases_proof):
        assert build_graph(cases_proof, fmt="svg").format == "svg"

    def test_empty_proof(self):
        graph = build_graph(ProofDocument().snapshot())
        assert "->" not in graph.source


class TestRenderGraph:

    def test_default_output_folder(self, cases_proof, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(
            Digraph, "render", lambda self, path, **kwargs: f"{path}.{self.format}"
        )

        written = render_graph(cases_proof, "cases", fmt="svg")
        assert written == os.path.join(VISUALIZATION_OUTPUT_FOLDER, "cases") + ".svg"
        assert (tmp_path / VISUALIZATION_OUTPUT_FOLDER).is_dir()

    def test_missing_graphviz_binary(self, cases_proof, tmp_path, monkeypatch):
        def fail(self, path, **kwargs):
            raise ExecutableNotFound(["dot"])

        monkeypatch.setattr(Digraph, "render", fail)
        assert render_graph(cases_proof, str(tmp_path / "cases")) is None
