"""Program tree models for decograph.

This module defines the parsed object tree that the enrichment phases navigate
(`Program`, `ObjectDefinition`) together with the pydantic input models used to
describe a program on disk (`ProgramSpec`, `ObjectSpec`).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from pydantic import BaseModel, Field

PARENT_MARKER = "^"
SELF_MARKER = "$"
DOT_MARKER = "."


class ObjectSpec(BaseModel):
    """Input description of one object literal."""

    name: str | None = Field(None, description="Attribute name the object is bound to")
    base: str | None = Field(None, description="Base reference (^, $, .name or identifier)")
    abstract: bool = Field(False, description="Whether the object is an abstract definition")
    line: int | None = Field(None, description="Source line number")
    children: list[ObjectSpec] = Field(default_factory=list, description="Nested objects")


class ProgramSpec(BaseModel):
    """Input description of one parsed program (one source file)."""

    package: str = Field("", description="Package the program belongs to")
    objects: list[ObjectSpec] = Field(default_factory=list, description="Top-level objects")


ObjectSpec.model_rebuild()


@dataclass(eq=False)
class ObjectDefinition:
    """One parsed object literal.

    Definitions compare and hash by identity: two literals with the same name and
    base are still different objects of the program.
    """

    name: str | None = None
    base: str | None = None
    is_abstract: bool = False
    line: int | None = None
    parent: ObjectDefinition | None = field(default=None, repr=False)
    children: list[ObjectDefinition] = field(default_factory=list, repr=False)
    program: Program | None = field(default=None, repr=False)

    @property
    def package(self) -> str:
        return self.program.package if self.program is not None else ""

    @property
    def depth(self) -> int:
        """Number of enclosing definitions."""
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    @property
    def is_dot_chain(self) -> bool:
        return self.base is not None and self.base.startswith(DOT_MARKER)

    @property
    def chain_name(self) -> str | None:
        """Attribute name of a dot-chain step (`.b` -> `b`), None otherwise."""
        if not self.is_dot_chain:
            return None
        return self.base[len(DOT_MARKER):]

    @property
    def previous_sibling(self) -> ObjectDefinition | None:
        siblings = self._siblings()
        position = siblings.index(self)
        return siblings[position - 1] if position > 0 else None

    @property
    def next_sibling(self) -> ObjectDefinition | None:
        siblings = self._siblings()
        position = siblings.index(self)
        return siblings[position + 1] if position + 1 < len(siblings) else None

    def _siblings(self) -> list[ObjectDefinition]:
        if self.parent is not None:
            return self.parent.children
        if self.program is not None:
            return self.program.objects
        return [self]

    def add_child(self, child: ObjectDefinition) -> ObjectDefinition:
        """Attach `child` as the last nested object and return it."""
        child.parent = self
        for nested in child.walk():
            nested.program = self.program
        self.children.append(child)
        return child

    def walk(self) -> Iterator[ObjectDefinition]:
        """Yield this definition and every nested one in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(eq=False)
class Program:
    """A parsed program: a package and its top-level object definitions."""

    package: str = ""
    objects: list[ObjectDefinition] = field(default_factory=list)

    def add(self, definition: ObjectDefinition) -> ObjectDefinition:
        """Attach a top-level definition and return it."""
        definition.parent = None
        for nested in definition.walk():
            nested.program = self
        self.objects.append(definition)
        return definition

    def walk(self) -> Iterator[ObjectDefinition]:
        """Yield every definition of the program in document order."""
        for definition in self.objects:
            yield from definition.walk()

    @classmethod
    def from_spec(cls, spec: ProgramSpec) -> Program:
        """Build the linked definition tree described by `spec`."""
        program = cls(package=spec.package)
        for object_spec in spec.objects:
            root = program.add(_definition_from_spec(object_spec))
            _attach_children(root, object_spec)
        return program


def _definition_from_spec(spec: ObjectSpec) -> ObjectDefinition:
    return ObjectDefinition(
        name=spec.name,
        base=spec.base,
        is_abstract=spec.abstract,
        line=spec.line,
    )


def _attach_children(definition: ObjectDefinition, spec: ObjectSpec) -> None:
    for child_spec in spec.children:
        child = definition.add_child(_definition_from_spec(child_spec))
        _attach_children(child, child_spec)
