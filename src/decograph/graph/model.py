"""Program graph: definition nodes, their attributes and derivation edges."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from decograph.core.models import ObjectDefinition


@dataclass
class GraphAttr:
    """An attribute held by a graph node.

    `depth` counts the propagation levels between this entry and the definition
    that originally declared it (0 for own attributes).
    """

    name: str | None
    depth: int
    body: ObjectDefinition


@dataclass(eq=False)
class GraphNode:
    """Graph counterpart of one object definition."""

    body: ObjectDefinition
    package: str = ""
    attributes: list[GraphAttr] = field(default_factory=list)

    @property
    def name(self) -> str | None:
        return self.body.name

    def find_attr(self, body: ObjectDefinition) -> GraphAttr | None:
        """Return the attribute originating from `body`, if present."""
        for attr in self.attributes:
            if attr.body is body:
                return attr
        return None

    def add_attr(self, attr: GraphAttr) -> bool:
        """Add `attr` unless one with the same originating node exists.

        Returns:
            True if the attribute was added.
        """
        if self.find_attr(attr.body) is not None:
            return False
        self.attributes.append(attr)
        return True


@dataclass(frozen=True)
class GraphEdge:
    """`source` derives its attributes from `target`."""

    source: GraphNode
    target: GraphNode


class ProgramGraph:
    """Mutable program graph shared by the enrichment phases.

    Holds the initial object set in document order, at most one `GraphNode`
    per definition and the derivation edges between graph nodes.
    """

    def __init__(self, initial_objects: Iterable[ObjectDefinition] = ()) -> None:
        self.initial_objects: list[ObjectDefinition] = list(initial_objects)
        self.edges: list[GraphEdge] = []
        self._nodes: dict[ObjectDefinition, GraphNode] = {}

    @property
    def nodes(self) -> list[GraphNode]:
        return list(self._nodes.values())

    def find_node(self, body: ObjectDefinition) -> GraphNode | None:
        return self._nodes.get(body)

    def has_node(self, node: GraphNode) -> bool:
        return self._nodes.get(node.body) is node

    def add_node(self, body: ObjectDefinition) -> GraphNode:
        """Return the graph node of `body`, registering an empty one if absent."""
        node = self._nodes.get(body)
        if node is None:
            node = GraphNode(body, body.package)
            self._nodes[body] = node
        return node

    def connect(self, source: GraphNode, target: GraphNode) -> GraphEdge:
        """Record that `source` derives attributes from `target`.

        An edge already present is returned as is.
        """
        edge = GraphEdge(source, target)
        if edge not in self.edges:
            self.edges.append(edge)
        return edge

    def derived_from(self, node: GraphNode) -> list[GraphNode]:
        """Graph nodes `node` has derived attributes from."""
        return [edge.target for edge in self.edges if edge.source is node]
