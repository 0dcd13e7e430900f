"""Schema lookup tables and the union-aware type resolver."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from treetrap.schema.models import Entry, TableEntry, TypeName, UnionEntry


def build_table_lookup(schema: Iterable[Entry]) -> dict[TypeName, TableEntry]:
    """Map each table's type name to its entry. Union entries are ignored."""
    tables: dict[TypeName, TableEntry] = {}
    for entry in schema:
        if isinstance(entry, TableEntry):
            tables[entry.type_name] = entry
    return tables


def build_union_lookup(schema: Iterable[Entry]) -> dict[TypeName, frozenset[TypeName]]:
    """Map each union's type name to its direct members."""
    unions: dict[TypeName, frozenset[TypeName]] = {}
    for entry in schema:
        if isinstance(entry, UnionEntry):
            unions[entry.type_name] = entry.members
    return unions


@dataclass(frozen=True)
class SchemaLookup:
    """Read-only view of a schema used during traversal.

    Lookups are exact ``(kind, named)`` matches. Compatibility between a
    concrete kind and a declared type set goes through ``matches`` only.
    """

    tables: Mapping[TypeName, TableEntry]
    unions: Mapping[TypeName, frozenset[TypeName]]

    @classmethod
    def from_entries(cls, schema: Iterable[Entry]) -> SchemaLookup:
        entries = list(schema)
        return cls(
            tables=MappingProxyType(build_table_lookup(entries)),
            unions=MappingProxyType(build_union_lookup(entries)),
        )

    def table(self, type_name: TypeName) -> TableEntry | None:
        return self.tables.get(type_name)

    def matches(self, candidate: TypeName, allowed: Iterable[TypeName]) -> bool:
        """Does ``candidate`` satisfy the declared type set ``allowed``?

        True on direct membership, or when some member of ``allowed`` is a
        union whose members (recursively) accept ``candidate``. The union graph
        must be acyclic; a cyclic schema does not terminate here.
        """
        allowed = allowed if isinstance(allowed, (set, frozenset)) else frozenset(allowed)
        if candidate in allowed:
            return True
        for other in allowed:
            members = self.unions.get(other)
            if members is not None and self.matches(candidate, members):
                return True
        return False
