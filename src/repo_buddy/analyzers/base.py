"""Base class for per-language analyzers.

An analyzer turns one file's syntax tree into a fresh FileFindings. It
never sees shared state; the aggregator merges the partial result later.
Each pass runs its own queries and does not read other passes' output.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional

import tree_sitter

from ..casing import classify_casing
from ..models import FileFindings
from ..scanning.languages import Language
from ..scanning.queries import get_queries
from ..scanning.treesitter_parser import compile_query, grammar_for, node_text, run_query
from .duplication import record_duplicates
from .tech_stack import TechSignature

AnalysisPass = Callable[[tree_sitter.Node, FileFindings], None]


class LanguageAnalyzer(ABC):
    """Runs a battery of structural queries over one language's trees.

    Queries are compiled in __init__, so a malformed query surfaces as
    QueryDefinitionError when the analyzer is built rather than mid-run.
    An analyzer class may serve several languages; the registry passes
    the one an instance reports files under.
    """

    language: Language

    def __init__(self, grammar: Optional[str] = None, language: Optional[Language] = None) -> None:
        if language is not None:
            self.language = language
        self.grammar = grammar or grammar_for(self.language)
        self._queries = {
            name: compile_query(self.grammar, name, source)
            for name, source in get_queries(self.language).items()
        }

    def analyze(self, source: str, tree: tree_sitter.Tree) -> FileFindings:
        """Populate a file-scoped partial result from a parsed file."""
        findings = FileFindings()
        root = tree.root_node
        for analysis_pass in self.passes():
            analysis_pass(root, findings)
        return findings

    @abstractmethod
    def passes(self) -> list[AnalysisPass]:
        """The passes this language runs, in order."""

    # ── Query helpers ──────────────────────────────────────────

    def matches(self, query_name: str, root: tree_sitter.Node) -> list[dict[str, list[tree_sitter.Node]]]:
        return run_query(self._queries[query_name], root)

    def captures(self, query_name: str, root: tree_sitter.Node) -> list[tuple[str, tree_sitter.Node]]:
        """All (capture_name, node) pairs of a query, in source order."""
        seen: set[tuple[str, int, int]] = set()
        result: list[tuple[str, tree_sitter.Node]] = []
        for captures in self.matches(query_name, root):
            for capture_name, nodes in captures.items():
                for node in nodes:
                    key = (capture_name, node.start_byte, node.end_byte)
                    if key in seen:
                        continue
                    seen.add(key)
                    result.append((capture_name, node))
        result.sort(key=lambda item: (item[1].start_byte, item[0]))
        return result

    def capture_texts(self, query_name: str, root: tree_sitter.Node, capture: str) -> list[str]:
        """Texts of one capture name, in source order."""
        return [node_text(node) for name, node in self.captures(query_name, root) if name == capture]

    # ── Shared passes ──────────────────────────────────────────

    def analyze_naming(self, root: tree_sitter.Node, findings: FileFindings) -> None:
        """Record the first casing seen per axis. Capture names are '<axis>.name'."""
        naming = findings.naming
        for capture_name, node in self.captures("naming", root):
            axis = capture_name.split(".", 1)[0]
            casing = classify_casing(node_text(node))
            if axis == "function":
                if naming.function_casing is None:
                    naming.function_casing = casing
            elif axis == "type":
                if naming.class_struct_naming is None:
                    naming.class_struct_naming = casing
            elif axis == "variable":
                if naming.variable_casing is None:
                    naming.variable_casing = casing

    def analyze_tech_stack(self, root: tree_sitter.Node, findings: FileFindings) -> None:
        for import_name in self.import_names(root):
            for signature in self.match_technologies(import_name):
                findings.tech_stack.add(signature.category, signature.name)

    def analyze_duplication(self, root: tree_sitter.Node, findings: FileFindings) -> None:
        record_duplicates(self.capture_texts("string", root, "string"), findings.dry)

    # ── Tech-stack hooks ───────────────────────────────────────

    def import_names(self, root: tree_sitter.Node) -> list[str]:
        """Import paths / module names declared in the file."""
        return []

    def match_technologies(self, import_name: str) -> Iterable[TechSignature]:
        return ()
