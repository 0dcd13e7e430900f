"""TRAP fact model, identifier escaping, and file output."""

from treetrap.trap.escape import RESERVED_KEYWORDS, escape_name, node_type_name
from treetrap.trap.facts import (
    Arg,
    ChildLink,
    Comment,
    Fact,
    Label,
    Location,
    NewId,
    Program,
    RowDefinition,
    format_arg,
)
from treetrap.trap.writer import trap_path_for, write_trap

__all__ = [
    "RESERVED_KEYWORDS",
    "Arg",
    "ChildLink",
    "Comment",
    "Fact",
    "Label",
    "Location",
    "NewId",
    "Program",
    "RowDefinition",
    "escape_name",
    "format_arg",
    "node_type_name",
    "trap_path_for",
    "write_trap",
]
