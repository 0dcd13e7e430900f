"""treetrap - schema-driven extraction of relational facts from syntax trees.

Given a tree-sitter grammar and a schema describing which node kinds become
database rows, which fields are columns and which are one-to-many child links,
and which kinds are unions of others, treetrap walks a file's syntax tree and
emits a validated TRAP fact stream.

Public API:
- ``Extractor`` / ``create``: parse and extract one file at a time
- ``load_node_types``: build a schema from a grammar's node-types.json
- ``load_language``: resolve an installed ``tree_sitter_<name>`` grammar
"""

__version__ = "0.1.0"

from treetrap.extraction import (
    Diagnostic,
    DiagnosticKind,
    ExtractionResult,
    Extractor,
    create,
    load_language,
)
from treetrap.schema import load_node_types, parse_node_types

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "ExtractionResult",
    "Extractor",
    "create",
    "load_language",
    "load_node_types",
    "parse_node_types",
]
