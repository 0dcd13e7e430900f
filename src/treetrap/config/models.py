"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TREETRAP__SECTION__KEY)
3. YAML config file (--config, or ./treetrap.yaml)
4. Built-in defaults (this file)

Examples:
    TREETRAP__LOGGING__LEVEL=DEBUG
    TREETRAP__OUTPUT__COMPRESSION=gzip
    TREETRAP__EXTRACTOR__LINK_INVALID_NODES=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
Compression = Literal["none", "gzip"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TREETRAP__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs one event per extracted file.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ExtractorConfig(BaseModel):
    """Extraction behaviour.

    Env vars:
        TREETRAP__EXTRACTOR__COMMENT_HEADER: Emit the leading comment line
        TREETRAP__EXTRACTOR__LINK_INVALID_NODES: Link nodes whose row was suppressed
        TREETRAP__EXTRACTOR__MAX_FILE_SIZE_MB: Refuse files larger than this
    """

    comment_header: bool = Field(
        default=True,
        description="Start every TRAP program with an 'Auto-generated' comment line.",
    )
    link_invalid_nodes: bool = Field(
        default=True,
        description="Append nodes whose row definition failed arity checks to their "
        "parent anyway. Keeps the historical output; the parent then references a label "
        "with no row. Set false to drop such nodes from their parent.",
    )
    max_file_size_mb: int = Field(
        default=10,
        description="Refuse to read source files larger than this (MB).",
    )

    @field_validator("max_file_size_mb")
    @classmethod
    def validate_max_file_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"max_file_size_mb must be positive, got {v}")
        return v


class OutputConfig(BaseModel):
    """Where and how TRAP files are written.

    Env vars:
        TREETRAP__OUTPUT__TRAP_DIR: Output directory
        TREETRAP__OUTPUT__COMPRESSION: none or gzip
    """

    trap_dir: str = Field(
        default="trap",
        description="Directory receiving one TRAP file per source file.",
    )
    compression: Compression = Field(
        default="none",
        description="Compress TRAP files. gzip appends '.gz' to each file name.",
    )


class TreeTrapConfig(BaseModel):
    """Root configuration object."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    extractor: ExtractorConfig = Field(default_factory=ExtractorConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
