"""Tree-sitter query registry.

Maps languages to their query modules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..languages import Language
from . import go, python, rust, typescript

if TYPE_CHECKING:
    from types import ModuleType

QUERY_MODULES: dict[Language, ModuleType] = {
    Language.GO: go,
    Language.PYTHON: python,
    Language.TYPESCRIPT: typescript,
    Language.JAVASCRIPT: typescript,
    Language.RUST: rust,
}


def get_queries(language: Language) -> dict[str, str]:
    """Get all queries for a language.

    Returns:
        Dict of query_name -> query_string (empty if the language has none)
    """
    module = QUERY_MODULES.get(language)
    if module is None:
        return {}
    return module.get_all_queries()


def get_query(language: Language, query_name: str) -> str | None:
    """Get a specific query for a language, or None if not defined."""
    return get_queries(language).get(query_name)


__all__ = [
    "QUERY_MODULES",
    "get_queries",
    "get_query",
]
