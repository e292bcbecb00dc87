# utils/proof_visualizer.py
# This file is part of Fitchpad - A Fitch-style Natural Deduction Assistant
#
# Graphviz export of the justification graph of a proof

import os
from typing import TYPE_CHECKING, Optional, Sequence

from graphviz import Digraph, ExecutableNotFound, CalledProcessError

from core.scope import subproof_span
from utils.logger import get_logger
from utils.renderer import format_formula, format_label

if TYPE_CHECKING:
    from core.line import ProofLine
    from core.snapshot import ProofSnapshot

logger = get_logger(__name__)

VISUALIZATION_OUTPUT_FOLDER = "proof_visualizations"

_FILL_COLORS = {
    "premise": "lightskyblue",
    "hypothesis": "lightgoldenrodyellow",
    "derivation": "white",
}


def _node_id(index: int) -> str:
    return f"L{index}"


def _add_lines(
    graph: Digraph,
    lines: Sequence["ProofLine"],
    start: int,
    stop: int,
    depth: int,
    unicode: bool,
) -> None:
    """Add lines ``start..stop`` to ``graph``, nesting subproofs as clusters."""
    index = start
    while index <= stop:
        line = lines[index]
        if line.is_assumption and line.depth > depth:
            _, last = subproof_span(lines, index)
            with graph.subgraph(name=f"cluster_{index}") as cluster:
                cluster.attr(
                    label=f"subproof {index}", style="rounded", color="grey", fontsize="10"
                )
                _add_lines(cluster, lines, index, last, line.depth, unicode)
            index = last + 1
            continue

        if line.is_assumption:
            kind = "premise" if line.depth == 0 else "hypothesis"
        else:
            kind = "derivation"

        label = (
            f"{index}: {format_formula(line.formula, unicode)}\n"
            f"{format_label(str(line.justification), unicode)}"
        )
        graph.node(
            _node_id(index), label, shape="box", style="filled", fillcolor=_FILL_COLORS[kind]
        )
        index += 1


def build_graph(snapshot: "ProofSnapshot", unicode: bool = True, fmt: str = "png") -> Digraph:
    """Build a Graphviz digraph of a proof.

    One node per line, one cluster per subproof, and an edge from every cited
    line to the line citing it.

    Args:
        snapshot: The proof to draw
        unicode: Label formulas with logic symbols instead of ASCII
        fmt: Output format used when the graph is rendered

    Returns:
        Unrendered Digraph
    """
    dot = Digraph(comment="Fitch proof", format=fmt)
    dot.attr(rankdir="TB", nodesep="0.4", ranksep="0.4")

    lines = snapshot.lines
    if lines:
        _add_lines(dot, lines, 0, len(lines) - 1, 0, unicode)

    for index, line in enumerate(lines):
        for cited in line.justification.cited:
            dot.edge(_node_id(cited), _node_id(index))

    return dot


def render_graph(
    snapshot: "ProofSnapshot", base_filename: str, fmt: str = "png", unicode: bool = True
) -> Optional[str]:
    """Render the justification graph of a proof to an image file.

    The image is written below the ``proof_visualizations`` folder unless
    ``base_filename`` already contains a directory.

    Returns:
        Path of the written file, or None if Graphviz could not render it
    """
    if os.path.dirname(base_filename):
        output_path = base_filename
    else:
        os.makedirs(VISUALIZATION_OUTPUT_FOLDER, exist_ok=True)
        output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)

    dot = build_graph(snapshot, unicode=unicode, fmt=fmt)

    try:
        written = dot.render(output_path, view=False, cleanup=True)
    except (ExecutableNotFound, CalledProcessError) as e:
        logger.warning(
            f"Failed to render proof graph to {output_path}.{fmt}: {e}. "
            "Ensure Graphviz executables (dot) are in your system's PATH."
        )
        return None

    logger.info(f"Proof graph saved to {written}")
    return written
