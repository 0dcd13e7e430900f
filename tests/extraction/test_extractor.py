"""Integration tests for Extractor over real tree-sitter-python parses."""

from __future__ import annotations

from pathlib import Path

import pytest

from treetrap.config.models import ExtractorConfig
from treetrap.core.errors import ErrorCode, ExtractionError
from treetrap.extraction import DiagnosticKind, Extractor, create, load_language
from treetrap.schema import (
    ColumnStorage,
    Entry,
    Field,
    TableEntry,
    TableStorage,
    TypeName,
    UnionEntry,
)
from treetrap.trap.facts import ChildLink, RowDefinition

MODULE = TypeName("module", True)
EXPRESSION_STATEMENT = TypeName("expression_statement", True)
ASSIGNMENT = TypeName("assignment", True)
EXPRESSION = TypeName("expression", True)
IDENTIFIER = TypeName("identifier", True)
INTEGER = TypeName("integer", True)
EQUALS = TypeName("=", False)


@pytest.fixture
def schema() -> list[Entry]:
    """Just enough of Python to describe simple assignments."""
    return [
        TableEntry(
            MODULE,
            (Field(None, frozenset({EXPRESSION_STATEMENT}), TableStorage(MODULE, 0)),),
        ),
        TableEntry(
            EXPRESSION_STATEMENT,
            (Field(None, frozenset({ASSIGNMENT}), ColumnStorage()),),
        ),
        TableEntry(
            ASSIGNMENT,
            (
                Field("left", frozenset({IDENTIFIER}), ColumnStorage()),
                Field("right", frozenset({EXPRESSION}), ColumnStorage()),
            ),
        ),
        UnionEntry(EXPRESSION, frozenset({IDENTIFIER, INTEGER})),
        TableEntry(IDENTIFIER),
        TableEntry(INTEGER),
        TableEntry(EQUALS),
    ]


@pytest.fixture
def extractor(schema: list[Entry]) -> Extractor:
    return Extractor(load_language("python"), schema)


class TestExtract:
    def test_simple_assignment(self, extractor: Extractor) -> None:
        result = extractor.extract("a.py", b"x = 1\n")

        lines = result.program.lines()
        assert lines[0] == "// Auto-generated TRAP file for a.py"
        assert lines[1:9] == [
            "#0 = *",
            "#0_loc = *",
            'location(#0_loc, "a.py", 0, 0, 0, 1)',
            'identifier_def(#0, "x", #0_loc)',
            "#1 = *",
            "#1_loc = *",
            'location(#1_loc, "a.py", 0, 2, 0, 3)',
            'equal_unnamed_def(#1, "=", #1_loc)',
        ]
        assert 'integer_def(#2, "1", #2_loc)' in lines
        assert "assignment_def(#3, #0, #2, #3_loc)" in lines
        assert "expression_statement_def(#4, #3, #4_loc)" in lines
        assert lines[-2:] == ["module_child(#5, 0, #4)", "module_def(#5, #5_loc)"]
        assert result.diagnostics == []
        assert result.path == "a.py"

    def test_unknown_kind_and_missing_value(self, extractor: Extractor) -> None:
        """A float is unknown, so the second assignment loses its row."""
        result = extractor.extract("b.py", b"x = 1\ny = 2.5\n")

        assert [(d.kind, d.row) for d in result.diagnostics] == [
            (DiagnosticKind.UNKNOWN_TABLE, 1),
            (DiagnosticKind.MISSING_VALUE, 1),
        ]
        assert [str(d) for d in result.diagnostics] == [
            "error: b.py:1: unknown table type: 'float'",
            "error: b.py:1: missing value for field: assignment::right",
        ]
        tables = [d.table for d in result.program.of_type(RowDefinition)]
        assert tables.count("assignment") == 1
        assert tables.count("expression_statement") == 2
        links = result.program.of_type(ChildLink)
        assert [str(link) for link in links] == [
            "module_child(#9, 0, #4)",
            "module_child(#9, 0, #8)",
        ]

    def test_syntax_error_is_local(self, extractor: Extractor) -> None:
        """Broken code is diagnosed and the rest of the file still extracts."""
        result = extractor.extract("c.py", b"x = 1\ny = (\n")

        kinds = {d.kind for d in result.diagnostics}
        assert kinds & {DiagnosticKind.PARSE_ERROR, DiagnosticKind.MISSING_TOKEN}
        assert 'identifier_def(#0, "x", #0_loc)' in result.program.lines()

    def test_repeat_extraction_is_deterministic(self, extractor: Extractor) -> None:
        first = extractor.extract("d.py", b"a = b\n").render()
        second = extractor.extract("d.py", b"a = b\n").render()

        assert first == second

    def test_reads_file_when_source_omitted(self, extractor: Extractor, tmp_path: Path) -> None:
        path = tmp_path / "e.py"
        path.write_bytes(b"z = 3\n")

        result = extractor.extract(path)

        assert result.path == str(path)
        assert 'identifier_def(#0, "z", #0_loc)' in result.program.lines()

    def test_missing_file(self, extractor: Extractor, tmp_path: Path) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            extractor.extract(tmp_path / "nope.py")

        assert exc_info.value.code == ErrorCode.EXTRACT_READ_ERROR

    def test_file_too_large(self, schema: list[Entry], tmp_path: Path) -> None:
        path = tmp_path / "big.py"
        path.write_bytes(b"x = 1\n" * 200_000)
        extractor = Extractor(
            load_language("python"), schema, ExtractorConfig(max_file_size_mb=1)
        )

        with pytest.raises(ExtractionError) as exc_info:
            extractor.extract(path)

        assert exc_info.value.code == ErrorCode.EXTRACT_READ_ERROR

    def test_config_disables_header(self, schema: list[Entry]) -> None:
        extractor = create(
            load_language("python"), schema, ExtractorConfig(comment_header=False)
        )

        result = extractor.extract("f.py", b"x = 1\n")

        assert result.program.lines()[0] == "#0 = *"

    def test_lookup_built_from_schema(self, extractor: Extractor) -> None:
        assert extractor.lookup.table(MODULE) is not None
        assert extractor.lookup.table(EXPRESSION) is None
        assert extractor.lookup.matches(INTEGER, {EXPRESSION})


class TestLoadLanguage:
    def test_unknown_language(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            load_language("no_such_grammar_xyz")

        assert exc_info.value.code == ErrorCode.EXTRACT_LANGUAGE_UNAVAILABLE
