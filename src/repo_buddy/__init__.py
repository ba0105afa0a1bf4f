"""
Repo Buddy - Multi-language repository convention profiler

Parses Go, Python, TypeScript/JavaScript and Rust sources with tree-sitter
and reports the naming, testing, configuration, error-handling and
architecture conventions a repository actually follows.
"""

__version__ = "0.1.0"

from .api import analyze
from .casing import Casing, classify_casing
from .models import AnalysisResult, FileFindings

__all__ = [
    "analyze",
    "AnalysisResult",
    "FileFindings",
    "Casing",
    "classify_casing",
]
