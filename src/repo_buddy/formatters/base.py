"""Base formatter interface for Repo Buddy output rendering."""

from abc import ABC, abstractmethod

from ..models import AnalysisResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    #: File extension conventionally used for this format
    extension = ".txt"

    def render(self, result: AnalysisResult) -> None:
        """Print the formatted result to stdout."""
        print(self.format(result))

    @abstractmethod
    def format(self, result: AnalysisResult) -> str:
        """Return formatted string representation of the result."""
