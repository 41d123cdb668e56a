"""Business services for decograph."""

from decograph.services.propagation_service import PropagationResult, PropagationService

__all__ = [
    "PropagationResult",
    "PropagationService",
]
