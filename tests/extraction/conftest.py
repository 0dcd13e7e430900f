"""Hand-built syntax trees for driving the visitor without a grammar.

``FakeNode`` and ``FakeTree`` expose the same attributes and cursor moves the
traversal uses on tree-sitter objects.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from treetrap.schema import SchemaLookup
from treetrap.schema.models import Entry


@dataclass
class FakeNode:
    type: str
    is_named: bool = True
    is_error: bool = False
    is_missing: bool = False
    is_extra: bool = False
    start_byte: int = 0
    end_byte: int = 0
    start_point: tuple[int, int] = (0, 0)
    end_point: tuple[int, int] = (0, 0)
    field_name: str | None = None
    children: list[FakeNode] = field(default_factory=list)


class FakeCursor:
    def __init__(self, root: FakeNode) -> None:
        # (node, index within parent's children)
        self._path: list[tuple[FakeNode, int]] = [(root, 0)]

    @property
    def node(self) -> FakeNode:
        return self._path[-1][0]

    @property
    def field_name(self) -> str | None:
        if len(self._path) == 1:
            return None
        return self.node.field_name

    def goto_first_child(self) -> bool:
        if not self.node.children:
            return False
        self._path.append((self.node.children[0], 0))
        return True

    def goto_next_sibling(self) -> bool:
        if len(self._path) == 1:
            return False
        parent = self._path[-2][0]
        index = self._path[-1][1] + 1
        if index >= len(parent.children):
            return False
        self._path[-1] = (parent.children[index], index)
        return True

    def goto_parent(self) -> bool:
        if len(self._path) == 1:
            return False
        self._path.pop()
        return True


@dataclass
class FakeTree:
    root_node: FakeNode

    def walk(self) -> FakeCursor:
        return FakeCursor(self.root_node)


def make_node(
    kind: str,
    *children: FakeNode,
    named: bool = True,
    field: str | None = None,
    span: tuple[int, int] | None = None,
    row: int = 0,
    error: bool = False,
    missing: bool = False,
    extra: bool = False,
) -> FakeNode:
    """Build a node on a single source line ``row``.

    Without ``span``, the node covers its children (or is empty).
    """
    if span is None:
        if children:
            span = (children[0].start_byte, children[-1].end_byte)
        else:
            span = (0, 0)
    return FakeNode(
        type=kind,
        is_named=named,
        is_error=error,
        is_missing=missing,
        is_extra=extra,
        start_byte=span[0],
        end_byte=span[1],
        start_point=(row, span[0]),
        end_point=(row, span[1]),
        field_name=field,
        children=list(children),
    )


@pytest.fixture
def node() -> Callable[..., FakeNode]:
    """Factory for fake syntax nodes, see ``make_node``."""
    return make_node


@pytest.fixture
def tree() -> Callable[[FakeNode], FakeTree]:
    return FakeTree


@pytest.fixture
def lookup() -> Callable[[list[Entry]], SchemaLookup]:
    return SchemaLookup.from_entries


def facts_text(program: Any) -> list[str]:
    return program.lines()


@pytest.fixture
def lines() -> Callable[[Any], list[str]]:
    """Rendered lines of a program."""
    return facts_text
