"""Per-language analyzers and their registry.

Adding a language means one Language member, one LanguageAnalyzer subclass
and one entry in _ANALYZER_CLASSES; call sites use get_analyzer().
"""

from __future__ import annotations

from threading import Lock
from typing import Optional

from ..exceptions import UnsupportedLanguageError
from ..scanning.languages import Language
from ..scanning.treesitter_parser import grammar_for
from .base import LanguageAnalyzer
from .go_analyzer import GoAnalyzer
from .python_analyzer import PythonAnalyzer
from .rust_analyzer import RustAnalyzer
from .typescript_analyzer import TypeScriptAnalyzer

_ANALYZER_CLASSES: dict[Language, type[LanguageAnalyzer]] = {
    Language.GO: GoAnalyzer,
    Language.PYTHON: PythonAnalyzer,
    Language.TYPESCRIPT: TypeScriptAnalyzer,
    Language.JAVASCRIPT: TypeScriptAnalyzer,
    Language.RUST: RustAnalyzer,
}

_instances: dict[tuple[Language, str], LanguageAnalyzer] = {}
_instances_lock = Lock()


def get_analyzer(language: Language, grammar: Optional[str] = None) -> LanguageAnalyzer:
    """Return the shared analyzer for a language and grammar dialect.

    Analyzers hold only compiled queries, so one instance serves all
    worker threads.

    Raises:
        UnsupportedLanguageError: If no analyzer is registered
        QueryDefinitionError: If the analyzer's queries fail to compile
    """
    cls = _ANALYZER_CLASSES.get(language)
    if cls is None:
        raise UnsupportedLanguageError(
            str(language), [lang.display_name for lang in _ANALYZER_CLASSES]
        )
    grammar = grammar or grammar_for(language)
    key = (language, grammar)
    with _instances_lock:
        analyzer = _instances.get(key)
        if analyzer is None:
            analyzer = cls(grammar, language=language)
            _instances[key] = analyzer
    return analyzer


def build_all_analyzers() -> list[LanguageAnalyzer]:
    """Build every analyzer for every grammar dialect, failing fast on bad queries."""
    analyzers = [get_analyzer(language) for language in _ANALYZER_CLASSES]
    analyzers.append(get_analyzer(Language.TYPESCRIPT, "tsx"))
    return analyzers


__all__ = [
    "LanguageAnalyzer",
    "GoAnalyzer",
    "PythonAnalyzer",
    "TypeScriptAnalyzer",
    "RustAnalyzer",
    "get_analyzer",
    "build_all_analyzers",
]
