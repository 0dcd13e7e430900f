"""Tests for schema data types."""

from __future__ import annotations

import dataclasses

import pytest

from treetrap.schema import ColumnStorage, Field, TableEntry, TableStorage, TypeName


class TestTypeName:
    def test_equality_uses_kind_and_named(self) -> None:
        assert TypeName("if", True) == TypeName("if", True)
        assert TypeName("if", True) != TypeName("if", False)

    def test_hashable(self) -> None:
        assert len({TypeName("a", True), TypeName("a", True), TypeName("a", False)}) == 2

    def test_ordering(self) -> None:
        names = [TypeName("b", True), TypeName("a", True), TypeName("a", False)]

        assert sorted(names) == [TypeName("a", False), TypeName("a", True), TypeName("b", True)]

    def test_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            TypeName("a", True).kind = "b"  # type: ignore[misc]

    def test_str_quotes_anonymous(self) -> None:
        assert str(TypeName("if", True)) == "if"
        assert str(TypeName("if", False)) == '"if"'


class TestField:
    def test_defaults_to_column(self) -> None:
        field = Field("name", frozenset({TypeName("identifier", True)}))

        assert field.storage == ColumnStorage()

    def test_display_name(self) -> None:
        parent = TypeName("block", True)

        assert Field("body", frozenset()).display_name == "body"
        assert Field(None, frozenset(), TableStorage(parent, 1)).display_name == "child"


class TestTableEntry:
    def test_token_table_has_no_fields(self) -> None:
        assert TableEntry(TypeName("identifier", True)).fields == ()
