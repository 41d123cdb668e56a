"""Program graph enrichers.

Enrichers run after parsing has produced the initial program graph, adding
derived attributes and derivation edges in place.
"""

from decograph.enrichers.base import GraphEnricher
from decograph.enrichers.inner import (
    InnerAttributesEnricher,
    InnerPropagator,
    PropagationReport,
    propagate_inner_attrs,
)
from decograph.enrichers.registry import enrich_graph, get_default_enrichers

__all__ = [
    "GraphEnricher",
    "InnerAttributesEnricher",
    "InnerPropagator",
    "PropagationReport",
    "enrich_graph",
    "get_default_enrichers",
    "propagate_inner_attrs",
]
