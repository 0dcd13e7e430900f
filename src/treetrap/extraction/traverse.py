"""Iterative pre/post-order walk over a tree-sitter tree.

Uses the tree cursor instead of Python recursion so deeply nested sources
cannot exhaust the call stack.
"""

from __future__ import annotations

from typing import Any

from treetrap.extraction.visitor import Visitor


def traverse(tree: Any, visitor: Visitor) -> None:
    """Drive ``visitor`` over ``tree``.

    Every entered node is left exactly once, after all of its children. When
    ``enter_node`` returns False the node's children are skipped. The root is
    always descended into.
    """
    cursor = tree.walk()
    visitor.enter_node(cursor.node)
    recurse = True
    while True:
        if recurse and cursor.goto_first_child():
            recurse = visitor.enter_node(cursor.node)
        else:
            visitor.leave_node(cursor.field_name, cursor.node)

            if cursor.goto_next_sibling():
                recurse = visitor.enter_node(cursor.node)
            elif cursor.goto_parent():
                recurse = False
            else:
                break
