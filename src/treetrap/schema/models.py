"""Typed grammar-to-relation schema.

A schema is an ordered list of entries, one per grammar node type:

- ``TableEntry``: the node kind becomes a relational row with the given fields.
- ``UnionEntry``: the node kind is an alias for "one of these other kinds" and
  never produces rows itself.

Each ``Field`` stores either as a ``ColumnStorage`` (exactly one child, inline
reference argument in the row) or a ``TableStorage`` (zero or more children,
one child-link fact per child).

Entry and Storage are closed unions. Dispatch on them with ``isinstance``
against exactly the listed variants.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, order=True)
class TypeName:
    """A concrete syntax-tree node shape: grammar kind plus named flag."""

    kind: str
    named: bool

    def __str__(self) -> str:
        return self.kind if self.named else f'"{self.kind}"'


@dataclass(frozen=True, slots=True)
class ColumnStorage:
    """Single-valued field stored inline in the parent row."""


@dataclass(frozen=True, slots=True)
class TableStorage:
    """Multi-valued field stored as child-link facts of ``parent`` at ``index``."""

    parent: TypeName
    index: int


Storage = ColumnStorage | TableStorage


@dataclass(frozen=True, slots=True)
class Field:
    name: str | None  # None for the unnamed (positional) children slot
    types: frozenset[TypeName]
    storage: Storage = field(default_factory=ColumnStorage)

    @property
    def display_name(self) -> str:
        return self.name if self.name is not None else "child"


@dataclass(frozen=True, slots=True)
class TableEntry:
    type_name: TypeName
    fields: tuple[Field, ...] = ()


@dataclass(frozen=True, slots=True)
class UnionEntry:
    type_name: TypeName
    members: frozenset[TypeName]


Entry = TableEntry | UnionEntry
