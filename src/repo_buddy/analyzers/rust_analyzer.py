"""Rust language analyzer"""

from __future__ import annotations

from typing import Iterable

import tree_sitter

from ..models import FileFindings, add_unique
from ..scanning.languages import Language
from ..scanning.treesitter_parser import node_text
from .base import AnalysisPass, LanguageAnalyzer
from .tech_stack import RUST_SIGNATURES, TechSignature, match_substring

MONADIC_TYPES = ("Result", "Option")
PANIC_LABEL = "panic!()"


class RustAnalyzer(LanguageAnalyzer):
    """Naming, tech stack and error handling."""

    language = Language.RUST

    def passes(self) -> list[AnalysisPass]:
        return [
            self.analyze_naming,
            self.analyze_tech_stack,
            self.analyze_error_handling,
        ]

    def analyze_error_handling(self, root: tree_sitter.Node, findings: FileFindings) -> None:
        patterns = findings.error_handling.failure_patterns
        for capture_name, node in self.captures("error_handling", root):
            if capture_name == "return.type":
                type_name = node_text(node)
                if type_name in MONADIC_TYPES:
                    add_unique(patterns, f"Monadic ({type_name})")
            elif capture_name == "panic":
                add_unique(patterns, PANIC_LABEL)

    def import_names(self, root: tree_sitter.Node) -> list[str]:
        return self.capture_texts("import", root, "import.path")

    def match_technologies(self, import_name: str) -> Iterable[TechSignature]:
        return match_substring(import_name, RUST_SIGNATURES)
