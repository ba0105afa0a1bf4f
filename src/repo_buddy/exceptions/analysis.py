"""Analysis-related exceptions: file access, parsing, query definitions."""

from pathlib import Path
from typing import List

from .base import RepoBuddyError


class AnalysisError(RepoBuddyError):
    """Base class for analysis-related errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParsingError(AnalysisError):
    """Raised when file content cannot be parsed."""

    def __init__(self, filepath: Path, language: str, reason: str):
        super().__init__(
            f"Failed to parse {language} file: {filepath}",
            details={"filepath": str(filepath), "language": language, "reason": reason},
        )
        self.filepath = filepath
        self.language = language
        self.reason = reason


class UnsupportedLanguageError(AnalysisError):
    """Raised when an analyzer is requested for a language without one."""

    def __init__(self, language: str, supported_languages: List[str]):
        super().__init__(
            f"Unsupported language: {language}",
            details={"language": language, "supported": ", ".join(supported_languages)},
        )
        self.language = language
        self.supported_languages = supported_languages


class QueryDefinitionError(AnalysisError):
    """Raised when a static tree-sitter query fails to compile.

    Query strings ship with the analyzers, so this is a programming defect
    and is raised while the analyzer is being built.
    """

    def __init__(self, language: str, query_name: str, reason: str):
        super().__init__(
            f"Invalid {language} query '{query_name}'",
            details={"language": language, "query": query_name, "reason": reason},
        )
        self.language = language
        self.query_name = query_name
        self.reason = reason


class AggregatorClosedError(AnalysisError):
    """Raised when merging into a result that has already been finalized."""

    def __init__(self, filepath: str):
        super().__init__(
            "Cannot merge findings after finalize()",
            details={"filepath": filepath},
        )
        self.filepath = filepath
