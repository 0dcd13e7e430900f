"""Grammar schema: tables, unions, fields, and the type resolver."""

from treetrap.schema.lookup import SchemaLookup
from treetrap.schema.models import (
    ColumnStorage,
    Entry,
    Field,
    Storage,
    TableEntry,
    TableStorage,
    TypeName,
    UnionEntry,
)
from treetrap.schema.node_types import load_node_types, parse_node_types

__all__ = [
    "ColumnStorage",
    "Entry",
    "Field",
    "SchemaLookup",
    "Storage",
    "TableEntry",
    "TableStorage",
    "TypeName",
    "UnionEntry",
    "load_node_types",
    "parse_node_types",
]
