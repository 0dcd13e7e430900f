"""Schema-driven syntax tree visitor that emits TRAP facts.

The visitor is driven by ``traverse`` with paired enter/leave events. It keeps
one accumulator frame per open node: entering a node pushes an empty list,
and every finished child appends ``(field name, label, type)`` to its
parent's frame. Leaving a node pops its frame and checks the collected
children against the node's schema fields. When they fit, the row definition
and child-link facts are added to the program.

A visitor is used for exactly one file. Its label counter, stack, program,
and diagnostics all start empty.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from treetrap.core.errors import ExtractionError
from treetrap.extraction.diagnostics import Diagnostic, DiagnosticKind
from treetrap.schema.lookup import SchemaLookup
from treetrap.schema.models import ColumnStorage, Field, TableStorage, TypeName
from treetrap.trap.escape import node_type_name
from treetrap.trap.facts import (
    Arg,
    ChildLink,
    Comment,
    Label,
    Location,
    NewId,
    Program,
    RowDefinition,
)


class ChildContribution(NamedTuple):
    field_name: str | None
    label: Label
    type_name: TypeName


def _type_name_of(node: Any) -> TypeName:
    return TypeName(kind=node.type, named=node.is_named)


def _format_types(types: frozenset[TypeName]) -> str:
    return "{" + ", ".join(str(t) for t in sorted(types)) + "}"


class Visitor:
    """Turns enter/leave events over one syntax tree into a TRAP program."""

    def __init__(
        self,
        path: str,
        source: bytes,
        schema: SchemaLookup,
        *,
        comment_header: bool = True,
        link_invalid_nodes: bool = True,
    ) -> None:
        self.path = path
        self.source = source
        self.schema = schema
        self.link_invalid_nodes = link_invalid_nodes
        self.program = Program()
        self.diagnostics: list[Diagnostic] = []
        self._counter = -1
        self._stack: list[list[ChildContribution]] = []
        if comment_header:
            self.program.append(Comment(f"Auto-generated TRAP file for {path}"))

    @property
    def depth(self) -> int:
        """Number of open accumulator frames."""
        return len(self._stack)

    def _report(self, kind: DiagnosticKind, node: Any, message: str) -> None:
        self.diagnostics.append(
            Diagnostic(kind=kind, path=self.path, row=node.start_point[0], message=message)
        )

    def _fresh_labels(self) -> tuple[Label, Label]:
        self._counter += 1
        return Label.normal(self._counter), Label.location(self._counter)

    def enter_node(self, node: Any) -> bool:
        """Open a frame for ``node``. Returns whether to descend into it."""
        if node.is_error:
            self._report(DiagnosticKind.PARSE_ERROR, node, "parse error")
            return False
        if node.is_missing:
            self._report(
                DiagnosticKind.MISSING_TOKEN, node, f"parse error: expecting '{node.type}'"
            )
            return False
        if node.is_extra:
            return False

        self._stack.append([])
        return True

    def leave_node(self, field_name: str | None, node: Any) -> None:
        """Close ``node``'s frame and emit its facts."""
        if node.is_extra or node.is_error or node.is_missing:
            return
        children = self._stack.pop()
        type_name = _type_name_of(node)
        table = self.schema.table(type_name)
        if table is None:
            self._report(
                DiagnosticKind.UNKNOWN_TABLE, node, f"unknown table type: '{node.type}'"
            )
            return

        row_id, loc = self._fresh_labels()
        self.program.append(NewId(row_id))
        self.program.append(NewId(loc))
        self.program.append(self._location_for(loc, node))

        args: list[Arg] | None
        if not table.fields:
            args = [self._sliced_source(node)]
        else:
            args = self.complex_node(node, table.fields, children, row_id)
        if args is not None:
            self.program.append(
                RowDefinition(node_type_name(node.type, node.is_named), row_id, tuple(args), loc)
            )
        elif not self.link_invalid_nodes:
            return

        if self._stack:
            self._stack[-1].append(ChildContribution(field_name, row_id, type_name))

    def complex_node(
        self,
        node: Any,
        fields: tuple[Field, ...],
        children: list[ChildContribution],
        parent_id: Label,
    ) -> list[Arg] | None:
        """Validate ``children`` against ``fields``.

        Returns the column arguments in field order, or None when any column
        field did not receive exactly one value. Child links for table-stored
        fields are emitted either way.
        """
        buckets: dict[str | None, tuple[Field, list[Label]]] = {}
        for field in fields:
            buckets[field.name] = (field, [])

        for child_field, child_id, child_type in children:
            bucket = buckets.get(child_field)
            if bucket is not None:
                field, values = bucket
                if self.schema.matches(child_type, field.types):
                    values.append(child_id)
                elif field.name is not None:
                    self._report(
                        DiagnosticKind.TYPE_MISMATCH,
                        node,
                        f"type mismatch for field {node.type}::{field.display_name} "
                        f"with type {child_type} != {_format_types(field.types)}",
                    )
            elif child_field is not None or child_type.named:
                self._report(
                    DiagnosticKind.UNKNOWN_FIELD,
                    node,
                    f"value for unknown field: {node.type}::{child_field or 'child'} "
                    f"and type {child_type}",
                )

        args: list[Arg] = []
        is_valid = True
        for field in fields:
            child_ids = buckets[field.name][1]
            storage = field.storage
            if isinstance(storage, ColumnStorage):
                if len(child_ids) == 1:
                    args.append(child_ids[0])
                    continue
                is_valid = False
                if child_ids:
                    kind, problem = DiagnosticKind.TOO_MANY_VALUES, "too many values"
                else:
                    kind, problem = DiagnosticKind.MISSING_VALUE, "missing value"
                self._report(
                    kind, node, f"{problem} for field: {node.type}::{field.display_name}"
                )
            elif isinstance(storage, TableStorage):
                parent_table = node_type_name(storage.parent.kind, storage.parent.named)
                for child_id in child_ids:
                    self.program.append(
                        ChildLink(
                            parent_table, parent_id, field.display_name, storage.index, child_id
                        )
                    )
            else:
                raise TypeError(f"Unknown field storage: {storage!r}")

        return args if is_valid else None

    def _sliced_source(self, node: Any) -> str:
        try:
            return self.source[node.start_byte : node.end_byte].decode("utf-8")
        except UnicodeDecodeError as e:
            raise ExtractionError.decode_error(self.path, node.start_point[0], str(e)) from e

    def _location_for(self, label: Label, node: Any) -> Location:
        start_line, start_col = node.start_point[0], node.start_point[1]
        end_line, end_col = node.end_point[0], node.end_point[1]
        return Location(label, self.path, start_line, start_col, end_line, end_col)
