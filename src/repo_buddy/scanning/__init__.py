"""Language detection, tree-sitter parsing and the structural queries."""

from .languages import Language, detect_language, supported_extensions
from .treesitter_parser import CodeParser, compile_query, get_grammar, grammar_for, run_query

__all__ = [
    "Language",
    "detect_language",
    "supported_extensions",
    "CodeParser",
    "compile_query",
    "get_grammar",
    "grammar_for",
    "run_query",
]
