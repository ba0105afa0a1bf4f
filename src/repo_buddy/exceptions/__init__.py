"""Exception hierarchy for Repo Buddy."""

from .analysis import (
    AggregatorClosedError,
    AnalysisError,
    FileAccessError,
    ParsingError,
    QueryDefinitionError,
    UnsupportedLanguageError,
)
from .base import RepoBuddyError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)
from .llm import LLMError

__all__ = [
    "RepoBuddyError",
    "AnalysisError",
    "FileAccessError",
    "ParsingError",
    "UnsupportedLanguageError",
    "QueryDefinitionError",
    "AggregatorClosedError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "LLMError",
]
