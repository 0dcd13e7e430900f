"""Resolve tree-sitter grammars from installed ``tree_sitter_<name>`` packages."""

from __future__ import annotations

import importlib
from typing import Any

import tree_sitter

from treetrap.config.constants import GRAMMAR_MODULE_PREFIX
from treetrap.core.errors import ExtractionError

# Grammars whose package exposes several languages, e.g. typescript/tsx.
_LANGUAGE_FUNCS: dict[str, tuple[str, str]] = {
    "typescript": ("tree_sitter_typescript", "language_typescript"),
    "tsx": ("tree_sitter_typescript", "language_tsx"),
    "php": ("tree_sitter_php", "language_php"),
}


def load_language(name: str) -> tree_sitter.Language:
    """Load the tree-sitter Language for ``name`` (e.g. ``"ruby"``)."""
    module_name, func_name = _LANGUAGE_FUNCS.get(
        name, (GRAMMAR_MODULE_PREFIX + name.replace("-", "_"), "language")
    )
    try:
        module: Any = importlib.import_module(module_name)
        language_fn = getattr(module, func_name)
    except (ImportError, AttributeError) as err:
        raise ExtractionError.language_unavailable(name) from err
    return tree_sitter.Language(language_fn())
