"""Shared pytest fixtures for decograph tests."""

from __future__ import annotations

import pytest
from hypothesis import settings

from decograph.core.config import get_config
from decograph.core.models import ObjectDefinition, Program
from decograph.core.serializer import deserialize_from_dict

# Configure hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("dev", max_examples=20, deadline=None)
settings.load_profile("dev")


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached configuration around each test."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def make_program():
    """Build a linked `Program` from plain object dictionaries."""

    def _make(objects: list[dict], package: str = "test") -> Program:
        spec = deserialize_from_dict({"package": package, "objects": objects})
        return Program.from_spec(spec)

    return _make


@pytest.fixture
def at_line():
    """Find the definition declared on a given line."""

    def _find(program: Program, line: int) -> ObjectDefinition:
        for definition in program.walk():
            if definition.line == line:
                return definition
        raise LookupError(f"No definition on line {line}")

    return _find


@pytest.fixture
def sample_objects() -> list[dict]:
    """Abstract `A` with attribute `x`, applied by a decorator inside `E`."""
    return [
        {"name": "A", "abstract": True, "line": 1, "children": [{"name": "x", "line": 2}]},
        {
            "name": "E",
            "abstract": True,
            "line": 3,
            "children": [{"name": "@", "base": "A", "line": 4}],
        },
    ]
