"""Data models for convention findings.

Two records share the same finding categories:
    - FileFindings: the partial result of analyzing one file. Produced by the
      pre-parse heuristics and by the language analyzers, never shared.
    - AnalysisResult: the project-wide aggregate owned by ResultAggregator.

Label lists behave as ordered sets: use add_unique() to insert. Casing
fields use None for "not set yet", which is distinct from Casing.UNKNOWN
("set, but the identifier did not match any known style").
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Optional

from .casing import Casing


def add_unique(items: list[str], item: str) -> bool:
    """Append item unless already present. Returns True if it was added."""
    if item in items:
        return False
    items.append(item)
    return True


def _serialize(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    return {key: value.value if isinstance(value, Enum) else value for key, value in pairs}


@dataclass
class NamingConvention:
    """Resolved identifier casing per naming axis.

    comment_style is declared for the report but no analyzer computes it.
    """

    variable_casing: Optional[Casing] = None
    function_casing: Optional[Casing] = None
    class_struct_naming: Optional[Casing] = None
    file_naming: Optional[Casing] = None
    interface_prefix: Optional[str] = None
    comment_style: str = ""


@dataclass
class DIAnalysis:
    """Dependency-injection idioms.

    abstraction_level and global_state_usage are extension points with no
    computing rule; they stay at their defaults.
    """

    injection_patterns: list[str] = field(default_factory=list)
    abstraction_level: float = 0.0
    global_state_usage: list[str] = field(default_factory=list)


@dataclass
class TestingAnalysis:
    __test__ = False

    test_location: str = ""
    mocking_strategy: str = ""
    naming_pattern: str = ""
    assertion_style: str = ""


@dataclass
class ConfigAnalysis:
    config_sources: list[str] = field(default_factory=list)
    type_safety: str = ""
    secret_handling: str = ""


@dataclass
class SecurityAnalysis:
    """Security signals. Only hardcoded_secrets is computed."""

    hardcoded_secrets: list[str] = field(default_factory=list)
    input_sanitization: str = ""
    memory_safety: str = ""
    concurrency_safety: str = ""


@dataclass
class ErrorHandlingAnalysis:
    failure_patterns: list[str] = field(default_factory=list)
    logging_consistency: str = ""


@dataclass
class DesignPatternAnalysis:
    patterns: list[str] = field(default_factory=list)


@dataclass
class TechStack:
    """Technologies recognised from import/use declarations.

    build_tools is declared but not computed.
    """

    frameworks: list[str] = field(default_factory=list)
    libraries: list[str] = field(default_factory=list)
    databases: list[str] = field(default_factory=list)
    build_tools: list[str] = field(default_factory=list)

    def add(self, category: str, name: str) -> None:
        """Record a technology under 'framework', 'library' or 'database'."""
        target = {
            "framework": self.frameworks,
            "library": self.libraries,
            "database": self.databases,
        }.get(category)
        if target is None:
            raise ValueError(f"Unknown tech-stack category: {category!r}")
        add_unique(target, name)


@dataclass
class DRYAnalysis:
    """String-literal duplication. Counting is per file; the score adds up."""

    duplicated_blocks: list[str] = field(default_factory=list)
    duplication_score: float = 0.0


@dataclass
class ArchitectureAnalysis:
    """Directory-layout architecture. modules is declared but not computed."""

    pattern: str = ""
    layers: list[str] = field(default_factory=list)
    modules: list[str] = field(default_factory=list)


@dataclass
class RunStats:
    """Per-run diagnostics. These never influence the findings."""

    files_visited: int = 0
    files_parsed: int = 0
    files_unreadable: int = 0
    files_unsupported: int = 0
    files_parse_failed: int = 0
    files_failed: int = 0


@dataclass
class Findings:
    """Finding categories shared by per-file and project-wide records."""

    naming: NamingConvention = field(default_factory=NamingConvention)
    di: DIAnalysis = field(default_factory=DIAnalysis)
    testing: TestingAnalysis = field(default_factory=TestingAnalysis)
    config: ConfigAnalysis = field(default_factory=ConfigAnalysis)
    security: SecurityAnalysis = field(default_factory=SecurityAnalysis)
    error_handling: ErrorHandlingAnalysis = field(default_factory=ErrorHandlingAnalysis)
    design_patterns: DesignPatternAnalysis = field(default_factory=DesignPatternAnalysis)
    tech_stack: TechStack = field(default_factory=TechStack)
    dry: DRYAnalysis = field(default_factory=DRYAnalysis)
    architecture: ArchitectureAnalysis = field(default_factory=ArchitectureAnalysis)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation with stable field names."""
        return asdict(self, dict_factory=_serialize)


@dataclass
class FileFindings(Findings):
    """Partial findings contributed by a single file."""


@dataclass
class AnalysisResult(Findings):
    """Project-wide result of one analysis run."""

    language_counts: dict[str, int] = field(default_factory=dict)
    llm_summary: Optional[str] = None
    stats: RunStats = field(default_factory=RunStats)

    @property
    def dominant_language(self) -> Optional[str]:
        """Language with the most parsed files; ties go to the earliest name."""
        if not self.language_counts:
            return None
        return min(self.language_counts.items(), key=lambda kv: (-kv[1], kv[0]))[0]
