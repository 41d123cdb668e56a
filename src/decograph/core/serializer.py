"""Program input serialization and deserialization.

This module reads program descriptions (the parsed object tree of one source
file) from JSON and validates them against the `ProgramSpec` model.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from decograph.core.models import Program, ProgramSpec


class SerializationError(Exception):
    """Error during serialization or deserialization."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


def _format_validation_error(error: ValidationError) -> str:
    error_details = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"])
        error_details.append(f"{loc}: {err['msg']}")
    return "; ".join(error_details)


def serialize(spec: ProgramSpec) -> str:
    """Serialize a program description to JSON string.

    Args:
        spec: The program description to serialize.

    Returns:
        JSON string representation of the program.
    """
    data = spec.model_dump(mode="json", exclude_defaults=True)
    return json.dumps(data, indent=2, ensure_ascii=False)


def deserialize(json_str: str) -> ProgramSpec:
    """Deserialize a JSON string to a program description.

    Args:
        json_str: JSON string representation of a program.

    Returns:
        The validated program description.

    Raises:
        SerializationError: If deserialization fails with detailed error info.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(
            message="Invalid JSON format",
            details=f"Line {e.lineno}, column {e.colno}: {e.msg}",
        ) from e
    return deserialize_from_dict(data)


def deserialize_from_dict(data: dict[str, Any]) -> ProgramSpec:
    """Deserialize a dictionary to a program description.

    Raises:
        SerializationError: If validation fails.
    """
    try:
        return ProgramSpec.model_validate(data)
    except ValidationError as e:
        raise SerializationError(
            message="Program validation failed",
            details=_format_validation_error(e),
        ) from e


def load_program(path: Path) -> Program:
    """Read a program file and build its definition tree.

    Args:
        path: JSON file describing one program.

    Returns:
        The linked `Program`.

    Raises:
        SerializationError: If the file cannot be read or is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SerializationError(
            message=f"Failed to read {path}",
            details=str(e),
        ) from e
    return Program.from_spec(deserialize(text))
