"""Python language analyzer"""

from __future__ import annotations

from typing import Iterable

import tree_sitter

from ..scanning.languages import Language
from .base import AnalysisPass, LanguageAnalyzer
from .tech_stack import PYTHON_SIGNATURES, TechSignature, match_package, python_root_module


class PythonAnalyzer(LanguageAnalyzer):
    """Naming, tech stack and duplication. No error-handling pass yet."""

    language = Language.PYTHON

    def passes(self) -> list[AnalysisPass]:
        return [
            self.analyze_naming,
            self.analyze_tech_stack,
            self.analyze_duplication,
        ]

    def import_names(self, root: tree_sitter.Node) -> list[str]:
        return self.capture_texts("import", root, "import.module")

    def match_technologies(self, import_name: str) -> Iterable[TechSignature]:
        return match_package(python_root_module(import_name), PYTHON_SIGNATURES)
