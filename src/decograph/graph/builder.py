"""Initial program graph construction."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from decograph.core.models import Program
from decograph.graph.model import GraphAttr, ProgramGraph

logger = logging.getLogger(__name__)


def build_graph(programs: Iterable[Program]) -> ProgramGraph:
    """Build the program graph the enrichment phases start from.

    Every definition becomes an initial object (document order, programs in the
    given order). Each named abstract definition gets a graph node holding its
    named children as own attributes at depth 0.

    Args:
        programs: Parsed programs.

    Returns:
        The initial `ProgramGraph`.
    """
    programs = list(programs)
    graph = ProgramGraph(obj for program in programs for obj in program.walk())

    for obj in graph.initial_objects:
        if not obj.is_abstract or obj.name is None:
            continue
        node = graph.add_node(obj)
        for child in obj.children:
            if child.name is not None:
                node.add_attr(GraphAttr(child.name, 0, child))

    logger.debug(
        f"Built graph from {len(programs)} program(s): "
        f"{len(graph.initial_objects)} objects, {len(graph.nodes)} graph nodes"
    )
    return graph
