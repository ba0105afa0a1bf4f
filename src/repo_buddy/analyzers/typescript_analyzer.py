"""TypeScript / JavaScript analyzer.

One analyzer serves .ts, .tsx, .js and .jsx files. Instances are bound to
a grammar dialect ("typescript" or "tsx") because compiled queries belong
to the grammar they were built for.
"""

from __future__ import annotations

from typing import Iterable

import tree_sitter

from ..scanning.languages import Language
from .base import AnalysisPass, LanguageAnalyzer
from .duplication import unquote
from .tech_stack import JS_SIGNATURES, TechSignature, js_package_name, match_package


class TypeScriptAnalyzer(LanguageAnalyzer):
    """Naming and tech stack."""

    language = Language.TYPESCRIPT

    def passes(self) -> list[AnalysisPass]:
        return [
            self.analyze_naming,
            self.analyze_tech_stack,
        ]

    def import_names(self, root: tree_sitter.Node) -> list[str]:
        return [unquote(text) for text in self.capture_texts("import", root, "import.source")]

    def match_technologies(self, import_name: str) -> Iterable[TechSignature]:
        package = js_package_name(import_name)
        if package is None:
            return ()
        return match_package(package, JS_SIGNATURES)
