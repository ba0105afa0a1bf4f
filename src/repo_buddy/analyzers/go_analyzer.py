"""Go language analyzer"""

from __future__ import annotations

import re
from typing import Iterable

import tree_sitter

from ..models import FileFindings, add_unique
from ..scanning.languages import Language
from .base import AnalysisPass, LanguageAnalyzer
from .duplication import unquote
from .tech_stack import GO_SIGNATURES, TechSignature, match_substring

INTERFACE_PREFIX = re.compile(r"^I[A-Z]")

NIL_CHECK_LABEL = "if err != nil"
PANIC_LABEL = "panic()"
CONSTRUCTOR_INJECTION_LABEL = "Constructor Injection (NewXXX)"
FACTORY_LABEL = "Factory Pattern (NewXXX)"
SINGLETON_LABEL = "Potential Singleton (GetInstance)"
STRATEGY_LABEL = "Strategy Pattern (via Interfaces)"

# (import path fragment, label)
MOCKING_LIBRARIES = (
    ("github.com/golang/mock", "gomock"),
    ("go.uber.org/mock", "gomock"),
    ("github.com/stretchr/testify/mock", "testify/mock"),
    ("github.com/vektra/mockery", "mockery"),
)
ASSERTION_LIBRARIES = (
    ("github.com/stretchr/testify/assert", "testify/assert"),
    ("github.com/stretchr/testify/require", "testify/require"),
    ("github.com/onsi/gomega", "gomega"),
    ("github.com/matryer/is", "is"),
)
MOCKING_PACKAGES = {"gomock": "gomock"}


class GoAnalyzer(LanguageAnalyzer):
    """Naming, error handling, DI, design patterns, testing, tech stack, duplication."""

    language = Language.GO

    def passes(self) -> list[AnalysisPass]:
        return [
            self.analyze_naming,
            self.analyze_interface_naming,
            self.analyze_error_handling,
            self.analyze_di,
            self.analyze_design_patterns,
            self.analyze_testing,
            self.analyze_tech_stack,
            self.analyze_duplication,
        ]

    def analyze_interface_naming(self, root: tree_sitter.Node, findings: FileFindings) -> None:
        if findings.naming.interface_prefix is not None:
            return
        for name in self.capture_texts("interface", root, "interface.name"):
            if INTERFACE_PREFIX.match(name):
                findings.naming.interface_prefix = "I"
                return

    def analyze_error_handling(self, root: tree_sitter.Node, findings: FileFindings) -> None:
        patterns = findings.error_handling.failure_patterns
        for capture_name, _node in self.captures("error_handling", root):
            if capture_name == "nil_check":
                add_unique(patterns, NIL_CHECK_LABEL)
            elif capture_name == "panic":
                add_unique(patterns, PANIC_LABEL)

    def analyze_di(self, root: tree_sitter.Node, findings: FileFindings) -> None:
        if self.capture_texts("constructor", root, "factory.name"):
            add_unique(findings.di.injection_patterns, CONSTRUCTOR_INJECTION_LABEL)

    def analyze_design_patterns(self, root: tree_sitter.Node, findings: FileFindings) -> None:
        patterns = findings.design_patterns.patterns
        for capture_name, _node in self.captures("constructor", root):
            if capture_name == "factory":
                add_unique(patterns, FACTORY_LABEL)
            elif capture_name == "singleton":
                add_unique(patterns, SINGLETON_LABEL)
        if self.capture_texts("interface", root, "interface.name"):
            add_unique(patterns, STRATEGY_LABEL)

    def analyze_testing(self, root: tree_sitter.Node, findings: FileFindings) -> None:
        testing = findings.testing
        for path in self.import_names(root):
            for fragment, label in MOCKING_LIBRARIES:
                if fragment in path and not testing.mocking_strategy:
                    testing.mocking_strategy = label
            for fragment, label in ASSERTION_LIBRARIES:
                if fragment in path and not testing.assertion_style:
                    testing.assertion_style = label

        if not testing.mocking_strategy:
            for package in self.capture_texts("package_call", root, "call.package"):
                label = MOCKING_PACKAGES.get(package)
                if label is not None:
                    testing.mocking_strategy = label
                    break

    def import_names(self, root: tree_sitter.Node) -> list[str]:
        return [unquote(text) for text in self.capture_texts("import", root, "import.path")]

    def match_technologies(self, import_name: str) -> Iterable[TechSignature]:
        return match_substring(import_name, GO_SIGNATURES)
