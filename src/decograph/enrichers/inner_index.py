"""Decorator and abstract collection for inner propagation.

A decorator is an inner object application: an object bound to the decorator
name (`@` by default) whose attributes come from whatever its base refers to.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from decograph.core.models import ObjectDefinition
from decograph.graph.model import GraphNode, ProgramGraph

Abstracts = dict[str, set[GraphNode]]


class ResolutionStatus(str, Enum):
    """Outcome of one resolution attempt for a decorator.

    Reported only: the driver reprocesses every decorator on every pass
    whatever the outcome.
    """

    RESOLVED = "resolved"
    DEFERRED = "deferred"
    UNRESOLVABLE = "unresolvable"


@dataclass
class DecoratorEntry:
    """Resolution status of one decorator across passes."""

    node: GraphNode
    resolved: bool = False


@dataclass
class InnerIndex:
    """Decorators and abstract definitions collected for one run."""

    decorators: list[DecoratorEntry] = field(default_factory=list)
    abstracts: Abstracts = field(default_factory=dict)

    @property
    def abstracts_count(self) -> int:
        return sum(len(nodes) for nodes in self.abstracts.values())


def collect_decorators(
    graph: ProgramGraph,
    decorator_name: str,
    objects: Iterable[ObjectDefinition] | None = None,
) -> InnerIndex:
    """Classify the initial objects into decorators and abstracts.

    A definition may land in both groups. Same-named abstracts from different
    packages are all kept.

    Args:
        graph: Graph whose registered nodes are reused where present.
        decorator_name: Name marking a decorator.
        objects: Definitions to classify, the graph's initial objects by default.

    Returns:
        The collected `InnerIndex`.
    """
    index = InnerIndex()
    if objects is None:
        objects = graph.initial_objects

    for obj in objects:
        name = obj.name
        if name is None:
            continue
        node = graph.find_node(obj) or GraphNode(obj, obj.package)
        if name == decorator_name:
            index.decorators.append(DecoratorEntry(node))
        if obj.is_abstract:
            index.abstracts.setdefault(name, set()).add(node)

    return index
