"""Enricher registry and orchestration."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from decograph.enrichers.base import GraphEnricher
from decograph.enrichers.inner import InnerAttributesEnricher
from decograph.graph.model import ProgramGraph

logger = logging.getLogger(__name__)


def get_default_enrichers(passes: int | None = None) -> list[GraphEnricher]:
    """Return built-in enrichers shipped with decograph."""
    return [
        InnerAttributesEnricher(passes=passes),
    ]


def enrich_graph(
    graph: ProgramGraph,
    enrichers: Sequence[GraphEnricher] | None = None,
) -> list[str]:
    """Apply enrichers in order and return any error messages."""
    errors: list[str] = []
    if enrichers is None:
        enrichers = get_default_enrichers()
    for enricher in enrichers:
        try:
            enricher.enrich(graph)
        except Exception as exc:
            logger.warning(f"Enricher {enricher.name} failed: {exc}")
            errors.append(f"{enricher.name}: {exc}")
    return errors
