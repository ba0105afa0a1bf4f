"""Tree-sitter parser wrapper.

Provides a unified interface for tree-sitter parsing across languages.

Usage:
    parser = CodeParser.for_path("service/user.go")
    if parser is not None:
        tree = parser.parse(source)        # raises ParsingError
        query = compile_query(parser.grammar, "naming", NAMING_QUERY)
        for captures in run_query(query, tree.root_node):
            ...
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Callable, Optional, Union

import tree_sitter
import tree_sitter_go
import tree_sitter_python
import tree_sitter_rust
import tree_sitter_typescript

from ..exceptions import ParsingError, QueryDefinitionError
from .languages import JSX_EXTENSIONS, Language, detect_language

# Grammar name -> function returning the raw language pointer.
# tree-sitter-typescript bundles two dialects; TSX accepts JSX syntax.
_GRAMMAR_LOADERS: dict[str, Callable[[], object]] = {
    "go": tree_sitter_go.language,
    "python": tree_sitter_python.language,
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
    "rust": tree_sitter_rust.language,
}

# JavaScript has no angle-bracket type assertions, so TSX parses any .js file.
_DEFAULT_GRAMMARS: dict[Language, str] = {
    Language.GO: "go",
    Language.PYTHON: "python",
    Language.TYPESCRIPT: "typescript",
    Language.JAVASCRIPT: "tsx",
    Language.RUST: "rust",
}


def get_supported_grammars() -> list[str]:
    """Names of all bundled grammars."""
    return list(_GRAMMAR_LOADERS)


@lru_cache(maxsize=None)
def get_grammar(name: str) -> tree_sitter.Language:
    """Load (once) the tree-sitter Language for a grammar name."""
    loader = _GRAMMAR_LOADERS.get(name)
    if loader is None:
        raise KeyError(f"No tree-sitter grammar named {name!r}")
    return tree_sitter.Language(loader())


def grammar_for(language: Language, path: Union[str, Path, None] = None) -> str:
    """Pick the grammar for a language, using the TSX dialect for .tsx files and all JavaScript."""
    if language is Language.TYPESCRIPT and path is not None:
        if Path(path).suffix.lower() in JSX_EXTENSIONS:
            return "tsx"
    return _DEFAULT_GRAMMARS[language]


def compile_query(grammar: str, query_name: str, source: str) -> tree_sitter.Query:
    """Compile a query against a grammar.

    Raises:
        QueryDefinitionError: If the query string is invalid for the grammar
    """
    try:
        return tree_sitter.Query(get_grammar(grammar), source)
    except Exception as e:
        raise QueryDefinitionError(grammar, query_name, str(e)) from e


def run_query(query: tree_sitter.Query, node: tree_sitter.Node) -> list[dict[str, list[tree_sitter.Node]]]:
    """Execute a query and return one {capture_name: [nodes]} dict per match.

    Predicates such as #eq? and #match? are applied by tree-sitter.
    """
    cursor = tree_sitter.QueryCursor(query)
    return [captures for _pattern_index, captures in cursor.matches(node)]


def node_text(node: tree_sitter.Node) -> str:
    """Decoded source text of a node."""
    if node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


class CodeParser:
    """Parses one file's source text with the grammar matching its extension.

    Parsers are created per call; tree_sitter.Parser instances are not
    shared between worker threads.
    """

    def __init__(self, path: Union[str, Path], language: Language) -> None:
        self.path = Path(path)
        self.language = language
        self.grammar = grammar_for(language, self.path)

    @classmethod
    def for_path(cls, path: Union[str, Path]) -> Optional["CodeParser"]:
        """Return a parser for the file, or None if no grammar handles it."""
        language = detect_language(path)
        if language is None:
            return None
        return cls(path, language)

    def parse(self, source: str) -> tree_sitter.Tree:
        """Parse source text into a concrete syntax tree.

        Raises:
            ParsingError: For binary content, or when the tree contains
                ERROR or MISSING nodes (malformed or truncated source)
        """
        if "\x00" in source:
            raise ParsingError(self.path, self.language.display_name, "binary content")

        parser = tree_sitter.Parser(get_grammar(self.grammar))
        tree = parser.parse(source.encode("utf-8"))
        if tree is None:
            raise ParsingError(self.path, self.language.display_name, "parser returned no tree")
        if tree.root_node.has_error:
            raise ParsingError(self.path, self.language.display_name, "syntax errors in source")
        return tree
