"""Program graph module."""

from decograph.graph.builder import build_graph
from decograph.graph.model import (
    GraphAttr,
    GraphEdge,
    GraphNode,
    ProgramGraph,
)

__all__ = [
    "GraphAttr",
    "GraphEdge",
    "GraphNode",
    "ProgramGraph",
    "build_graph",
]
