"""Concurrency-safe merging of per-file findings into one project result.

Merge policies, applied field by field over the shared finding records:
    - label lists: union, insertion order kept, no duplicates
    - floats (duplication_score): summed
    - scalars (strings, casings, interface prefix): first writer wins.
      A casing of Casing.UNKNOWN counts as written but is replaced by the
      first known casing that arrives later.

In the default mode "first" means first to acquire the lock, which depends
on thread scheduling. With deterministic=True merges are buffered and
replayed in path order by finalize(), so repeated runs agree.
"""

from __future__ import annotations

import copy
from dataclasses import fields
from threading import Lock
from typing import Any, Optional

from ..casing import Casing
from ..exceptions import AggregatorClosedError
from ..models import AnalysisResult, FileFindings, Findings, RunStats, add_unique


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


def _merge_scalar(current: Any, incoming: Any) -> Any:
    if not _is_set(incoming):
        return current
    if not _is_set(current):
        return incoming
    if current is Casing.UNKNOWN and isinstance(incoming, Casing) and incoming is not Casing.UNKNOWN:
        return incoming
    return current


def merge_findings(target: Findings, source: Findings, path: str) -> None:
    """Fold one file's findings into target. Not thread-safe on its own."""
    for section_field in fields(Findings):
        target_section = getattr(target, section_field.name)
        source_section = getattr(source, section_field.name)
        for item in fields(target_section):
            current = getattr(target_section, item.name)
            incoming = getattr(source_section, item.name)
            if isinstance(current, list):
                for label in incoming:
                    if item.name == "duplicated_blocks":
                        label = f"{path}: {label}"
                    add_unique(current, label)
            elif isinstance(current, float):
                setattr(target_section, item.name, current + incoming)
            else:
                setattr(target_section, item.name, _merge_scalar(current, incoming))


class ResultAggregator:
    """Owns the project-wide AnalysisResult behind a single lock.

    Workers call merge() with file-scoped partial results; nothing else
    touches the result until finalize() hands out a copy.

    Example:
        aggregator = ResultAggregator()
        aggregator.merge("cmd/main.go", findings, language="Go")
        result = aggregator.finalize()
    """

    def __init__(self, deterministic: bool = False) -> None:
        self.deterministic = deterministic
        self._result = AnalysisResult()
        self._lock = Lock()
        self._closed = False
        self._pending: list[tuple[str, int, FileFindings, Optional[str]]] = []

    def merge(self, path: str, findings: FileFindings, language: Optional[str] = None) -> None:
        """Merge one file's findings.

        Args:
            path: Relative path of the contributing file
            findings: The file-scoped partial result
            language: Display name to count as one parsed file, if any

        Raises:
            AggregatorClosedError: If finalize() has already run
        """
        with self._lock:
            if self._closed:
                raise AggregatorClosedError(path)
            if self.deterministic:
                self._pending.append((path, len(self._pending), findings, language))
            else:
                self._apply(path, findings, language)

    def count(self, stat: str, amount: int = 1) -> None:
        """Increment one of the RunStats counters."""
        if stat not in RunStats.__dataclass_fields__:
            raise ValueError(f"Unknown run statistic: {stat!r}")
        with self._lock:
            stats = self._result.stats
            setattr(stats, stat, getattr(stats, stat) + amount)

    def finalize(self) -> AnalysisResult:
        """Close the aggregator and return a deep copy of the result."""
        with self._lock:
            if not self._closed:
                self._closed = True
                for path, _seq, findings, language in sorted(self._pending, key=lambda p: (p[0], p[1])):
                    self._apply(path, findings, language)
                self._pending.clear()
            return copy.deepcopy(self._result)

    @property
    def closed(self) -> bool:
        return self._closed

    def _apply(self, path: str, findings: FileFindings, language: Optional[str]) -> None:
        merge_findings(self._result, findings, path)
        if language is not None:
            counts = self._result.language_counts
            counts[language] = counts.get(language, 0) + 1
