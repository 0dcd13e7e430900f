"""treetrap error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Schema
- 4xxx: Extraction
- 9xxx: Internal

Structural problems found while walking a syntax tree (parse errors, unknown
node kinds, type mismatches, arity violations) are NOT raised. They are
collected as diagnostics, see ``treetrap.extraction.diagnostics``. Only
failures that abort a whole file or run are exceptions.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Schema (3xxx)
    SCHEMA_PARSE_ERROR = 3001
    SCHEMA_INVALID = 3002

    # Extraction (4xxx)
    EXTRACT_READ_ERROR = 4001
    EXTRACT_DECODE_ERROR = 4002
    EXTRACT_PARSE_FAILED = 4003
    EXTRACT_LANGUAGE_UNAVAILABLE = 4004

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class TreeTrapError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'EXTRACT_DECODE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TreeTrapError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class SchemaError(TreeTrapError):
    """Errors loading a grammar schema."""

    @classmethod
    def parse_error(cls, source: str, reason: str) -> "SchemaError":
        return cls(
            code=ErrorCode.SCHEMA_PARSE_ERROR,
            message=f"Failed to parse node types from {source}: {reason}",
            details={"source": source, "reason": reason},
        )

    @classmethod
    def invalid(cls, type_name: str, reason: str) -> "SchemaError":
        return cls(
            code=ErrorCode.SCHEMA_INVALID,
            message=f"Invalid schema entry '{type_name}': {reason}",
            details={"type_name": type_name, "reason": reason},
        )


class ExtractionError(TreeTrapError):
    """Failures that abort extraction of a single file."""

    @classmethod
    def read_error(cls, path: str, reason: str) -> "ExtractionError":
        return cls(
            code=ErrorCode.EXTRACT_READ_ERROR,
            message=f"Cannot read {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def decode_error(cls, path: str, row: int, reason: str) -> "ExtractionError":
        return cls(
            code=ErrorCode.EXTRACT_DECODE_ERROR,
            message=f"Failed to decode source text at {path}:{row}: {reason}",
            details={"path": path, "row": row, "reason": reason},
        )

    @classmethod
    def parse_failed(cls, path: str) -> "ExtractionError":
        return cls(
            code=ErrorCode.EXTRACT_PARSE_FAILED,
            message=f"Parser produced no tree for {path}",
            details={"path": path},
        )

    @classmethod
    def language_unavailable(cls, language: str) -> "ExtractionError":
        return cls(
            code=ErrorCode.EXTRACT_LANGUAGE_UNAVAILABLE,
            message=f"Language not available: {language}",
            details={"language": language},
        )


class InternalError(TreeTrapError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
