"""Build a schema from a tree-sitter ``node-types.json`` document.

Every tree-sitter grammar ships a ``node-types.json`` describing each node
type, its named fields, and its unnamed children. The mapping is:

- a node type with ``subtypes`` becomes a ``UnionEntry`` over those subtypes;
- every other node type becomes a ``TableEntry``. Its fields, sorted by name,
  come first, then its ``children`` as the unnamed field;
- a field that is required and not multiple is a ``ColumnStorage``; anything
  else (optional or repeated) is a ``TableStorage`` keyed by the node type and
  the field's position.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from treetrap.core.errors import SchemaError
from treetrap.schema.models import (
    ColumnStorage,
    Entry,
    TableEntry,
    TableStorage,
    TypeName,
    UnionEntry,
)
from treetrap.schema.models import (
    Field as SchemaField,
)


class _NodeRef(BaseModel):
    type: str
    named: bool

    def type_name(self) -> TypeName:
        return TypeName(kind=self.type, named=self.named)


class _FieldInfo(BaseModel):
    multiple: bool = False
    required: bool = False
    types: list[_NodeRef] = Field(default_factory=list)


class _NodeInfo(BaseModel):
    type: str
    named: bool
    fields: dict[str, _FieldInfo] | None = None
    children: _FieldInfo | None = None
    subtypes: list[_NodeRef] | None = None


_NODE_TYPES = TypeAdapter(list[_NodeInfo])


def _make_field(
    parent: TypeName, name: str | None, info: _FieldInfo, index: int
) -> SchemaField:
    types = frozenset(ref.type_name() for ref in info.types)
    if info.required and not info.multiple:
        return SchemaField(name=name, types=types, storage=ColumnStorage())
    return SchemaField(name=name, types=types, storage=TableStorage(parent=parent, index=index))


def _convert(node: _NodeInfo) -> Entry:
    type_name = TypeName(kind=node.type, named=node.named)
    if node.subtypes is not None:
        if node.fields or node.children:
            raise SchemaError.invalid(node.type, "a union type cannot declare fields")
        return UnionEntry(
            type_name=type_name,
            members=frozenset(ref.type_name() for ref in node.subtypes),
        )

    fields: list[SchemaField] = []
    for field_name in sorted(node.fields or {}):
        info = (node.fields or {})[field_name]
        fields.append(_make_field(type_name, field_name, info, len(fields)))
    if node.children is not None:
        fields.append(_make_field(type_name, None, node.children, len(fields)))
    return TableEntry(type_name=type_name, fields=tuple(fields))


def parse_node_types(text: str | bytes, source: str = "<string>") -> list[Entry]:
    """Convert the JSON text of a ``node-types.json`` document into entries."""
    try:
        nodes = _NODE_TYPES.validate_json(text)
    except ValidationError as e:
        raise SchemaError.parse_error(source, str(e.errors()[0]["msg"])) from e
    return [_convert(node) for node in nodes]


def load_node_types(path: Path) -> list[Entry]:
    """Read and convert a ``node-types.json`` file."""
    try:
        text = path.read_bytes()
    except OSError as e:
        raise SchemaError.parse_error(str(path), str(e)) from e
    return parse_node_types(text, source=str(path))
