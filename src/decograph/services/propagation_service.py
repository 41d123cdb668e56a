"""Propagation service for coordinating graph enrichment.

This module provides the PropagationService for loading program files,
building the initial program graph, running the enrichers and validating the
result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from decograph.core.models import Program
from decograph.core.serializer import SerializationError, load_program
from decograph.core.validator import validate_graph
from decograph.enrichers.inner import InnerAttributesEnricher, PropagationReport
from decograph.enrichers.registry import enrich_graph, get_default_enrichers
from decograph.graph.builder import build_graph
from decograph.graph.model import ProgramGraph

logger = logging.getLogger(__name__)


@dataclass
class PropagationResult:
    """Result of a propagation run."""

    files: list[Path] = field(default_factory=list)
    objects_count: int = 0
    decorators_count: int = 0
    abstracts_count: int = 0
    nodes_count: int = 0
    edges_count: int = 0
    unresolved_count: int = 0
    graph: ProgramGraph | None = None
    report: PropagationReport | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if the run was successful."""
        return len(self.errors) == 0


class PropagationService:
    """Service running the enrichment phases over program files."""

    def __init__(self, passes: int | None = None) -> None:
        """Initialize propagation service.

        Args:
            passes: Inner propagation pass count, config default if None.
        """
        self._passes = passes

    def load_programs(self, paths: Iterable[Path], errors: list[str]) -> list[Program]:
        """Load every readable program, appending a message per failed file."""
        programs: list[Program] = []
        for path in paths:
            try:
                programs.append(load_program(path))
            except SerializationError as e:
                errors.append(f"{path}: {e}")
        return programs

    def run(self, paths: Iterable[Path]) -> PropagationResult:
        """Load programs, enrich their graph and validate it.

        Args:
            paths: Program JSON files.

        Returns:
            PropagationResult with statistics and any errors.
        """
        result = PropagationResult(files=list(paths))
        if not result.files:
            result.errors.append("No program files given")
            return result

        programs = self.load_programs(result.files, result.errors)
        if not programs:
            result.errors.append("No programs loaded")
            return result

        graph = build_graph(programs)
        result.graph = graph
        result.objects_count = len(graph.initial_objects)

        enrichers = get_default_enrichers(passes=self._passes)
        result.errors.extend(enrich_graph(graph, enrichers))

        for enricher in enrichers:
            if isinstance(enricher, InnerAttributesEnricher) and enricher.last_report:
                result.report = enricher.last_report
                result.decorators_count = enricher.last_report.decorators
                result.abstracts_count = enricher.last_report.abstracts
                result.unresolved_count = enricher.last_report.unresolved

        result.nodes_count = len(graph.nodes)
        result.edges_count = len(graph.edges)

        validation = validate_graph(graph)
        for error in validation.errors:
            result.errors.append(f"Invalid graph: {error.message}")

        logger.info(
            f"Propagated {len(programs)} program(s): {result.nodes_count} nodes, "
            f"{result.edges_count} edges, {result.unresolved_count} unresolved decorator(s)"
        )
        return result
