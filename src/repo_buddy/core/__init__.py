"""Analysis orchestration: aggregation, the worker pool and progress display."""

from .aggregator import ResultAggregator, merge_findings
from .analyzer import ProjectAnalyzer
from .progress import ProgressReporter, SilentReporter

__all__ = [
    "ResultAggregator",
    "merge_findings",
    "ProjectAnalyzer",
    "ProgressReporter",
    "SilentReporter",
]
