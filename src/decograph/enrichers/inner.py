"""Inner attribute propagation.

Top-level objects get their attributes from global propagation. Objects
declared inside other objects through a decorator (`... > @`) are handled here:
the decorator's base is resolved to an abstract definition and that
definition's attributes are copied into the enclosing object.

Decorators can depend on each other in any order, so every decorator is
reprocessed on each of a fixed number of passes. A dependency chain longer than
the pass count may be left partially propagated.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

from decograph.core.config import get_config
from decograph.core.references import PackageReferenceFinder, ReferenceFinder
from decograph.enrichers.base import GraphEnricher
from decograph.enrichers.base_resolver import BaseResolver
from decograph.enrichers.inner_index import (
    InnerIndex,
    ResolutionStatus,
    collect_decorators,
)
from decograph.graph.model import ProgramGraph

logger = logging.getLogger(__name__)


@dataclass
class PassStats:
    """Resolution outcomes of one pass."""

    number: int
    resolved: int = 0
    deferred: int = 0
    unresolvable: int = 0

    @property
    def unresolved(self) -> int:
        return self.deferred + self.unresolvable


@dataclass
class PropagationReport:
    """Observability data of one inner propagation run."""

    decorators: int = 0
    abstracts: int = 0
    passes: list[PassStats] = field(default_factory=list)

    @property
    def unresolved(self) -> int:
        """Decorators not resolved on the final pass."""
        return self.passes[-1].unresolved if self.passes else 0


class InnerPropagator:
    """Propagate attributes of objects defined inside other objects."""

    def __init__(
        self,
        graph: ProgramGraph,
        finder: ReferenceFinder | None = None,
        passes: int | None = None,
        decorator_name: str | None = None,
    ) -> None:
        config = get_config()
        self._graph = graph
        self._passes = passes if passes is not None else config.propagation_passes
        self._decorator_name = decorator_name or config.decorator_name
        self._resolver = BaseResolver(graph, finder or PackageReferenceFinder())
        self.index = InnerIndex()
        self.report = PropagationReport()

    def propagate(self) -> None:
        """Collect decorators and abstracts, then run every pass."""
        self.index = collect_decorators(self._graph, self._decorator_name)
        self.report = PropagationReport(
            decorators=len(self.index.decorators),
            abstracts=self.index.abstracts_count,
        )
        logger.debug(
            f"Collected {self.report.decorators} decorator(s), "
            f"{self.report.abstracts} abstract(s)"
        )
        self._process_decorators()

    def _process_decorators(self) -> None:
        # The resolved flag is never set, so every pass revisits every decorator.
        for number in range(1, self._passes + 1):
            outcomes = Counter(
                self._resolver.resolve(entry)
                for entry in self.index.decorators
                if not entry.resolved
            )
            stats = PassStats(
                number=number,
                resolved=outcomes[ResolutionStatus.RESOLVED],
                deferred=outcomes[ResolutionStatus.DEFERRED],
                unresolvable=outcomes[ResolutionStatus.UNRESOLVABLE],
            )
            self.report.passes.append(stats)
            logger.info(
                f"Inner propagation pass {number}/{self._passes}: "
                f"{stats.resolved} resolved, {stats.unresolved} unresolved"
            )


def propagate_inner_attrs(
    graph: ProgramGraph,
    finder: ReferenceFinder | None = None,
    passes: int | None = None,
) -> None:
    """Propagate attributes of objects that are defined inside other objects.

    Mutates `graph` in place.

    Args:
        graph: Program graph holding every parsed definition.
        finder: Name lookup strategy, `PackageReferenceFinder` by default.
        passes: Number of passes, `propagation_passes` from config by default.
    """
    InnerPropagator(graph, finder=finder, passes=passes).propagate()


class InnerAttributesEnricher(GraphEnricher):
    """Enricher running inner attribute propagation."""

    def __init__(
        self,
        finder: ReferenceFinder | None = None,
        passes: int | None = None,
    ) -> None:
        self._finder = finder
        self._passes = passes
        self.last_report: PropagationReport | None = None

    @property
    def name(self) -> str:
        return "inner-attributes"

    def enrich(self, graph: ProgramGraph) -> None:
        propagator = InnerPropagator(graph, finder=self._finder, passes=self._passes)
        propagator.propagate()
        self.last_report = propagator.report
