"""Resolving which abstract definition a decorator applies."""

from __future__ import annotations

import logging

from decograph.core.models import PARENT_MARKER, SELF_MARKER, ObjectDefinition
from decograph.core.references import ReferenceFinder
from decograph.enrichers.attr_propagator import AttributePropagator
from decograph.enrichers.inner_index import DecoratorEntry, ResolutionStatus
from decograph.graph.model import ProgramGraph

logger = logging.getLogger(__name__)


class BaseResolver:
    """Find the abstract a decorator's base ultimately refers to.

    Dot-chain steps are walked back to the head of the chain; the head's base is
    then classified as a parent reference (`^`), a self reference (`$`) or a name
    looked up through the reference finder.
    """

    def __init__(
        self,
        graph: ProgramGraph,
        finder: ReferenceFinder,
        propagator: AttributePropagator | None = None,
    ) -> None:
        self._graph = graph
        self._finder = finder
        self._propagator = propagator or AttributePropagator(graph)

    def resolve(self, entry: DecoratorEntry) -> ResolutionStatus:
        """Resolve one decorator and propagate on success."""
        head = self.chain_head(entry.node.body)
        if head.base == PARENT_MARKER and (head.parent is None or head.parent.parent is None):
            return ResolutionStatus.UNRESOLVABLE

        abstract = self.resolve_abstract(head)
        if abstract is None:
            if head.is_dot_chain:
                # A dot chain without a head object never resolves.
                return ResolutionStatus.UNRESOLVABLE
            logger.debug(f"Base '{head.base}' (line {head.line}) not resolved yet")
            return ResolutionStatus.DEFERRED
        return self._propagator.propagate(head, abstract, entry)

    @staticmethod
    def chain_head(node: ObjectDefinition) -> ObjectDefinition:
        """Walk back over dot-chain steps.

        Stops early at the first definition of its scope, which may then still be
        a dot-chain step.
        """
        current = node
        while current.is_dot_chain:
            previous = current.previous_sibling
            if previous is None:
                break
            current = previous
        return current

    def resolve_abstract(self, node: ObjectDefinition) -> ObjectDefinition | None:
        """Return the definition the base of `node` refers to."""
        if node.base == PARENT_MARKER:
            return node.parent.parent if node.parent is not None else None
        if node.base == SELF_MARKER:
            return node
        if node.is_abstract:
            return node
        if node.base is None:
            return None
        return self._finder.find(node.base, node.package, self._graph.initial_objects)
