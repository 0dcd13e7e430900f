"""Extractor: parse a file and turn its syntax tree into TRAP facts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import tree_sitter

from treetrap.config.constants import BYTES_PER_MB
from treetrap.config.models import ExtractorConfig
from treetrap.core.errors import ExtractionError
from treetrap.core.logging import get_logger
from treetrap.extraction.diagnostics import Diagnostic
from treetrap.extraction.traverse import traverse
from treetrap.extraction.visitor import Visitor
from treetrap.schema.lookup import SchemaLookup
from treetrap.schema.models import Entry
from treetrap.trap.facts import Program

log = get_logger("extractor")


@dataclass
class ExtractionResult:
    """Facts and diagnostics for one source file."""

    path: str
    program: Program
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_diagnostics(self) -> bool:
        return bool(self.diagnostics)

    def render(self) -> str:
        return self.program.render()


class Extractor:
    """Owns a parser and a schema; extracts one file per ``extract`` call.

    Usage::

        extractor = Extractor(load_language("ruby"), load_node_types(path))
        result = extractor.extract(Path("app.rb"))
        print(result.render())
        for diagnostic in result.diagnostics:
            print(diagnostic)

    Not thread-safe: give each worker its own instance.
    """

    def __init__(
        self,
        language: tree_sitter.Language,
        schema: Iterable[Entry],
        config: ExtractorConfig | None = None,
    ) -> None:
        self.config = config or ExtractorConfig()
        self.schema: list[Entry] = list(schema)
        self._lookup = SchemaLookup.from_entries(self.schema)
        self._parser = tree_sitter.Parser()
        self._parser.language = language

    @property
    def lookup(self) -> SchemaLookup:
        return self._lookup

    def _read_source(self, path: Path) -> bytes:
        limit = self.config.max_file_size_mb * BYTES_PER_MB
        try:
            size = path.stat().st_size
            if size > limit:
                raise ExtractionError.read_error(
                    str(path), f"file is {size} bytes, limit is {limit}"
                )
            return path.read_bytes()
        except OSError as e:
            raise ExtractionError.read_error(str(path), str(e)) from e

    def extract(self, path: Path | str, source: bytes | None = None) -> ExtractionResult:
        """Extract facts from ``source``, or from the file at ``path`` when None.

        ``path`` is used verbatim in locations and diagnostics.

        Raises:
            ExtractionError: When the file cannot be read or a token's text is
                not valid UTF-8. Structural problems are diagnostics instead.
        """
        path_str = str(path)
        if source is None:
            source = self._read_source(Path(path))

        log.debug("extract_start", path=path_str, size=len(source))
        try:
            tree = self._parser.parse(source)
            if tree is None:
                raise ExtractionError.parse_failed(path_str)
            visitor = Visitor(
                path_str,
                source,
                self._lookup,
                comment_header=self.config.comment_header,
                link_invalid_nodes=self.config.link_invalid_nodes,
            )
            traverse(tree, visitor)
        finally:
            self._parser.reset()

        log.debug(
            "extract_done",
            path=path_str,
            facts=len(visitor.program),
            diagnostics=len(visitor.diagnostics),
        )
        return ExtractionResult(
            path=path_str, program=visitor.program, diagnostics=visitor.diagnostics
        )


def create(
    language: tree_sitter.Language,
    schema: Iterable[Entry],
    config: ExtractorConfig | None = None,
) -> Extractor:
    """Build an Extractor for ``language`` and ``schema``."""
    return Extractor(language, schema, config)
