"""Core module containing program models, configuration, serializer and validator."""

from decograph.core.models import (
    ObjectDefinition,
    ObjectSpec,
    Program,
    ProgramSpec,
)
from decograph.core.references import PackageReferenceFinder, ReferenceFinder
from decograph.core.serializer import (
    SerializationError,
    deserialize,
    deserialize_from_dict,
    load_program,
    serialize,
)
from decograph.core.validator import (
    ValidationError,
    ValidationErrorType,
    ValidationResult,
    validate_graph,
)

__all__ = [
    "ObjectDefinition",
    "ObjectSpec",
    "PackageReferenceFinder",
    "Program",
    "ProgramSpec",
    "ReferenceFinder",
    "SerializationError",
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
    "deserialize",
    "deserialize_from_dict",
    "load_program",
    "serialize",
    "validate_graph",
]
