"""Copying resolved abstract attributes into enclosing objects."""

from __future__ import annotations

import logging

from decograph.core.models import ObjectDefinition
from decograph.enrichers.inner_index import DecoratorEntry, ResolutionStatus
from decograph.graph.model import GraphAttr, GraphNode, ProgramGraph

logger = logging.getLogger(__name__)


class AttributePropagator:
    """Propagate the attributes of a resolved abstract into the enclosing object.

    For a dot chain (`a.b.c > @`) the abstract `a` refers to is only the entry
    point: the propagator walks down its nested attributes (`b`, then `c`) in
    lockstep with the chain before copying.
    """

    def __init__(self, graph: ProgramGraph) -> None:
        self._graph = graph

    def propagate(
        self,
        node: ObjectDefinition,
        abstract: ObjectDefinition,
        entry: DecoratorEntry,
    ) -> ResolutionStatus:
        """Copy attributes of `abstract` into the object enclosing `node`.

        Args:
            node: Definition the decorator's chain bottomed out at.
            abstract: Definition the chain's base resolved to.
            entry: The decorator being processed.

        Returns:
            Outcome of the attempt. Failures leave the graph untouched.
        """
        source = self._graph.find_node(abstract)
        if source is None:
            logger.debug(f"Abstract '{abstract.name}' has no graph node yet")
            return ResolutionStatus.DEFERRED

        source = self._descend(source, node, entry.node.body.chain_name)
        if source is None:
            return ResolutionStatus.DEFERRED

        parent = node.parent
        if parent is None:
            return ResolutionStatus.UNRESOLVABLE

        target = self._graph.add_node(parent)
        added = 0
        for attr in source.attributes:
            if target.add_attr(GraphAttr(attr.name, attr.depth + 1, attr.body)):
                added += 1
        self._graph.connect(target, source)

        if added:
            logger.debug(
                f"Propagated {added} attribute(s) from '{source.name}' into '{parent.name}'"
            )
        return ResolutionStatus.RESOLVED

    def _descend(
        self,
        source: GraphNode,
        node: ObjectDefinition,
        target_name: str | None,
    ) -> GraphNode | None:
        """Walk nested attributes of `source` until the one named `target_name`."""
        if target_name is None:
            return source

        step = node.next_sibling
        while source.name != target_name:
            if step is None or step.chain_name is None:
                return None
            attr = next(
                (a for a in source.attributes if a.body.name == step.chain_name),
                None,
            )
            nested = self._graph.find_node(attr.body) if attr is not None else None
            if nested is None:
                logger.debug(
                    f"No nested abstract '{step.chain_name}' under '{source.name}'"
                )
                return None
            source = nested
            step = step.next_sibling
        return source
