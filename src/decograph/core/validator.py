"""Program graph validation module.

This module checks the invariants downstream consumers rely on after the
enrichment phases have mutated a program graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from decograph.graph.model import ProgramGraph


class ValidationErrorType(str, Enum):
    """Types of validation errors."""

    DUPLICATE_ATTRIBUTE = "duplicate_attribute"
    DUPLICATE_EDGE = "duplicate_edge"
    DANGLING_EDGE = "dangling_edge"


@dataclass
class ValidationError:
    """A single validation error."""

    error_type: ValidationErrorType
    entity: str
    message: str


@dataclass
class ValidationResult:
    """Result of graph validation."""

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    def add_error(
        self,
        error_type: ValidationErrorType,
        entity: str,
        message: str,
    ) -> None:
        """Add a validation error."""
        self.errors.append(
            ValidationError(error_type=error_type, entity=entity, message=message)
        )
        self.is_valid = False


def _label(name: str | None, line: int | None) -> str:
    label = name if name is not None else "<anonymous>"
    return f"{label}@{line}" if line is not None else label


def validate_graph(graph: ProgramGraph) -> ValidationResult:
    """Validate a program graph.

    Checks that no graph node holds two attributes with the same originating
    definition, that no edge is recorded twice and that every edge joins nodes
    registered in the graph.

    Args:
        graph: The program graph to validate.

    Returns:
        ValidationResult containing validation status and any errors found.
    """
    result = ValidationResult(is_valid=True)

    for node in graph.nodes:
        label = _label(node.name, node.body.line)
        seen: set[int] = set()
        for attr in node.attributes:
            if id(attr.body) in seen:
                result.add_error(
                    error_type=ValidationErrorType.DUPLICATE_ATTRIBUTE,
                    entity=label,
                    message=f"Node '{label}' holds attribute "
                    f"'{_label(attr.name, attr.body.line)}' more than once",
                )
            seen.add(id(attr.body))

    seen_edges = set()
    for edge in graph.edges:
        label = (
            f"{_label(edge.source.name, edge.source.body.line)} -> "
            f"{_label(edge.target.name, edge.target.body.line)}"
        )
        if edge in seen_edges:
            result.add_error(
                error_type=ValidationErrorType.DUPLICATE_EDGE,
                entity=label,
                message=f"Edge '{label}' is recorded more than once",
            )
        seen_edges.add(edge)

        for end in (edge.source, edge.target):
            if not graph.has_node(end):
                result.add_error(
                    error_type=ValidationErrorType.DANGLING_EDGE,
                    entity=label,
                    message=f"Edge '{label}' references unregistered node "
                    f"'{_label(end.name, end.body.line)}'",
                )

    return result
