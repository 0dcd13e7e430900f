"""Structural diagnostics reported while extracting a file.

These never abort extraction. They are collected in order and returned with
the facts so the caller decides how to present them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    PARSE_ERROR = "parse_error"
    MISSING_TOKEN = "missing_token"
    UNKNOWN_TABLE = "unknown_table"
    TYPE_MISMATCH = "type_mismatch"
    UNKNOWN_FIELD = "unknown_field"
    MISSING_VALUE = "missing_value"
    TOO_MANY_VALUES = "too_many_values"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    kind: DiagnosticKind
    path: str
    row: int  # 0-based, as reported by the parser
    message: str

    def __str__(self) -> str:
        return f"error: {self.path}:{self.row}: {self.message}"

    def to_dict(self) -> dict[str, str | int]:
        return {
            "kind": self.kind.value,
            "path": self.path,
            "row": self.row,
            "message": self.message,
        }
