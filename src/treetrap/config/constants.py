"""Configuration constants.

Values here are fixed by the TRAP format or by grammar packaging conventions
and are not user-configurable. For configurable values, see models.py.
"""

TRAP_SUFFIX = ".trap"
"""Suffix appended to the source file name for its TRAP file."""

GZIP_SUFFIX = ".gz"
"""Extra suffix for compressed TRAP files."""

GRAMMAR_MODULE_PREFIX = "tree_sitter_"
"""Python grammar packages are importable as ``tree_sitter_<language>``."""

DEFAULT_CONFIG_FILENAME = "treetrap.yaml"
"""Config file picked up from the working directory when --config is not given."""

BYTES_PER_MB = 1024 * 1024
