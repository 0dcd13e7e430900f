"""Syntax tree traversal and TRAP fact extraction."""

from treetrap.extraction.diagnostics import Diagnostic, DiagnosticKind
from treetrap.extraction.extractor import ExtractionResult, Extractor, create
from treetrap.extraction.languages import load_language
from treetrap.extraction.traverse import traverse
from treetrap.extraction.visitor import ChildContribution, Visitor

__all__ = [
    "ChildContribution",
    "Diagnostic",
    "DiagnosticKind",
    "ExtractionResult",
    "Extractor",
    "Visitor",
    "create",
    "load_language",
    "traverse",
]
