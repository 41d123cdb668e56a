"""Base interface for program graph enrichers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from decograph.graph.model import ProgramGraph


class GraphEnricher(ABC):
    """Post-process a program graph to add derived semantics."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique enricher name."""

    @abstractmethod
    def enrich(self, graph: ProgramGraph) -> None:
        """Mutate the graph in-place."""
