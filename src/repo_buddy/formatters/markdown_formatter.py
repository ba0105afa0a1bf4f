"""Markdown guideline report.

The report lists every finding category under a numbered heading and, for
the dominant language, adds short advisory notes ("Context" and "Best
Practice Recommendation") when a finding matches a known idiom.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..casing import Casing
from ..models import AnalysisResult
from .base import BaseFormatter

NOT_AVAILABLE = "N/A"
UNKNOWN_LANGUAGE = "Unknown"


@dataclass(frozen=True)
class Advice:
    """Advisory note shown when trigger occurs in the aspect's finding text.

    A trigger of None always applies.
    """

    trigger: Optional[str]
    context: Optional[str] = None
    recommendation: Optional[str] = None


_GO_ADVICE: dict[str, tuple[Advice, ...]] = {
    "naming": (
        Advice(
            "PascalCase",
            "In Go, PascalCase exports a symbol so other packages can use it.",
            "Use camelCase for unexported variables and functions to keep package internals encapsulated.",
        ),
    ),
    "di": (
        Advice(
            "NewXXX",
            "Factory functions (`NewXXX`) are the common Go way to build structs and inject their dependencies.",
            "Accept interfaces rather than concrete structs in constructors to improve testability and modularity.",
        ),
    ),
    "testing": (
        Advice(
            "gomock",
            "`gomock` indicates a mature testing culture built on generated mock objects.",
            "Regenerate mocks with `mockgen` whenever an interface changes.",
        ),
    ),
    "config": (
        Advice(
            "properties.yaml",
            "`properties.yaml` suggests a structured configuration approach similar to Spring Boot.",
            "Load configuration into validated structs so type safety holds at runtime.",
        ),
    ),
    "error_handling": (
        Advice(
            "if err != nil",
            "Checking `if err != nil` is the idiomatic Go way to handle failures explicitly.",
            "Wrap errors with `%w` in `fmt.Errorf` to keep context when returning them to the caller.",
        ),
    ),
    "design_patterns": (
        Advice("Factory", "The Factory pattern encapsulates the construction of complex objects."),
        Advice(
            "Singleton",
            "Singletons give global access to a single resource such as a database connection.",
            "Be careful with singletons in parallel tests; consider dependency injection instead.",
        ),
        Advice("Strategy", "The Strategy pattern is implemented through interfaces to keep algorithms swappable."),
    ),
}

_PYTHON_ADVICE: dict[str, tuple[Advice, ...]] = {
    "naming": (
        Advice(
            "snake_case",
            "Python follows PEP 8, which recommends `snake_case` for variables and functions.",
            "Reserve `PascalCase` for class names.",
        ),
    ),
    "error_handling": (
        Advice(
            None,
            "Python relies on EAFP (Easier to Ask for Forgiveness than Permission) using `try`/`except` blocks.",
            "Catch specific exceptions instead of a bare `Exception` to avoid handling errors by accident.",
        ),
    ),
}

_JS_ADVICE: dict[str, tuple[Advice, ...]] = {
    "naming": (
        Advice(
            "camelCase",
            "JavaScript and TypeScript conventionally use `camelCase` for variables and functions.",
            "Use `PascalCase` for classes and interfaces and `UPPER_SNAKE_CASE` for global constants.",
        ),
    ),
    "di": (
        Advice(
            None,
            "Constructor injection is common in the JS/TS ecosystem, especially with NestJS or InversifyJS.",
            "Depend on TypeScript interfaces so consumers and providers stay decoupled and easy to mock.",
        ),
    ),
}

_RUST_ADVICE: dict[str, tuple[Advice, ...]] = {
    "naming": (
        Advice(
            "snake_case",
            "Rust uses `snake_case` for functions and variables and `PascalCase` for types, enforced by compiler lints.",
        ),
    ),
    "error_handling": (
        Advice(
            "Monadic",
            "Returning `Result` and `Option` makes failure part of the type signature.",
            "Propagate errors with `?` and give library errors concrete types (for example with `thiserror`).",
        ),
        Advice(
            "panic!()",
            "`panic!` aborts the current thread and is reserved for unrecoverable states.",
            "Prefer returning `Result` from fallible library code instead of panicking.",
        ),
    ),
}

ADVICE: dict[str, dict[str, tuple[Advice, ...]]] = {
    "Go": _GO_ADVICE,
    "Python": _PYTHON_ADVICE,
    "TypeScript": _JS_ADVICE,
    "JavaScript": _JS_ADVICE,
    "Rust": _RUST_ADVICE,
}


def format_value(value) -> str:
    """Render a scalar finding, using N/A for unset or unknown values."""
    if value is None or value is Casing.UNKNOWN:
        return NOT_AVAILABLE
    text = str(value).strip()
    return text if text else NOT_AVAILABLE


def format_list(values: Iterable[str]) -> str:
    items = list(values)
    return ", ".join(items) if items else NOT_AVAILABLE


def advisory_lines(language: str, aspect: str, finding: str) -> list[str]:
    """Context and recommendation bullets for one report section."""
    contexts: list[str] = []
    recommendations: list[str] = []
    for advice in ADVICE.get(language, {}).get(aspect, ()):
        if advice.trigger is not None and advice.trigger not in finding:
            continue
        if advice.context:
            contexts.append(advice.context)
        if advice.recommendation:
            recommendations.append(advice.recommendation)

    lines = []
    if contexts:
        lines.append(f"- **Context**: {' '.join(contexts)}")
    if recommendations:
        lines.append(f"- **Best Practice Recommendation**: {' '.join(recommendations)}")
    return lines


class MarkdownFormatter(BaseFormatter):
    """Render the result as a Markdown guideline document."""

    extension = ".md"

    def format(self, result: AnalysisResult) -> str:
        language = result.dominant_language or UNKNOWN_LANGUAGE
        out: list[str] = [
            "# Project Guideline",
            "",
            f"> **Dominant Language**: {language}",
            "",
        ]

        def section(title: str, bullets: list[str], aspect: Optional[str] = None, finding: str = "") -> None:
            out.append(f"## {title}")
            out.extend(bullets)
            if aspect is not None:
                out.extend(advisory_lines(language, aspect, finding))
            out.append("")

        naming = result.naming
        casings = " ".join(
            format_value(c)
            for c in (naming.variable_casing, naming.function_casing, naming.class_struct_naming)
        )
        section(
            "1. Naming & Syntax Conventions",
            [
                f"- **Variable Casing**: {format_value(naming.variable_casing)}",
                f"- **Function Casing**: {format_value(naming.function_casing)}",
                f"- **Class/Struct Naming**: {format_value(naming.class_struct_naming)}",
                f"- **File Naming**: {format_value(naming.file_naming)}",
                f"- **Interface Prefix**: {format_value(naming.interface_prefix)}",
                f"- **Comment Style**: {format_value(naming.comment_style)}",
            ],
            "naming",
            casings,
        )

        di = result.di
        injection = format_list(di.injection_patterns)
        section(
            "2. Dependency Injection (DI) & Coupling",
            [
                f"- **Injection Pattern**: {injection}",
                f"- **Abstraction Level**: {di.abstraction_level:.2f}",
                f"- **Global State Dependency**: {format_list(di.global_state_usage)}",
            ],
            "di",
            injection,
        )

        testing = result.testing
        section(
            "3. Testing Culture & Style",
            [
                f"- **Test Location**: {format_value(testing.test_location)}",
                f"- **Mocking Strategy**: {format_value(testing.mocking_strategy)}",
                f"- **Naming Pattern**: {format_value(testing.naming_pattern)}",
                f"- **Assertion Style**: {format_value(testing.assertion_style)}",
            ],
            "testing",
            testing.mocking_strategy,
        )

        config = result.config
        sources = format_list(config.config_sources)
        section(
            "4. Configuration & Environment Management",
            [
                f"- **Config Source**: {sources}",
                f"- **Type Safety**: {format_value(config.type_safety)}",
                f"- **Secret Handling**: {format_value(config.secret_handling)}",
            ],
            "config",
            sources,
        )

        security = result.security
        secrets = "Potential secrets found" if security.hardcoded_secrets else "None detected"
        bullets = [f"- **Hardcoded Secrets**: {secrets}"]
        bullets.extend(f"  - {finding}" for finding in security.hardcoded_secrets)
        bullets += [
            f"- **Input Sanitization**: {format_value(security.input_sanitization)}",
            f"- **Memory Safety**: {format_value(security.memory_safety)}",
            f"- **Concurrency Safety**: {format_value(security.concurrency_safety)}",
        ]
        section("5. Security & Safety Baseline", bullets, "security", secrets)

        errors = result.error_handling
        failure = format_list(errors.failure_patterns)
        section(
            "6. Error Handling Strategy",
            [
                f"- **Failure Pattern**: {failure}",
                f"- **Logging Consistency**: {format_value(errors.logging_consistency)}",
            ],
            "error_handling",
            failure,
        )

        patterns = format_list(result.design_patterns.patterns)
        section(
            "7. Design Patterns",
            [f"- **Detected Patterns**: {patterns}"],
            "design_patterns",
            patterns,
        )

        tech = result.tech_stack
        architecture = result.architecture
        section(
            "8. Tech Stack & Architecture",
            [
                f"- **Frameworks**: {format_list(tech.frameworks)}",
                f"- **Libraries**: {format_list(tech.libraries)}",
                f"- **Databases**: {format_list(tech.databases)}",
                f"- **Build Tools**: {format_list(tech.build_tools)}",
                f"- **Architecture Pattern**: {format_value(architecture.pattern)}",
                f"- **Layers**: {format_list(architecture.layers)}",
                f"- **Languages**: {_format_counts(result.language_counts)}",
            ],
        )

        dry = result.dry
        bullets = [f"- **Duplication Score**: {dry.duplication_score:.2f}"]
        if dry.duplicated_blocks:
            bullets.append("- **Duplicated Blocks**:")
            bullets.extend(f"  - {block}" for block in dry.duplicated_blocks)
        else:
            bullets.append(f"- **Duplicated Blocks**: {NOT_AVAILABLE}")
        section("9. Code Duplication (DRY)", bullets)

        if result.llm_summary:
            out.append("## LLM Analysis Insights")
            out.append(result.llm_summary.rstrip())
            out.append("")

        return "\n".join(out)


def _format_counts(counts: dict[str, int]) -> str:
    if not counts:
        return NOT_AVAILABLE
    ordered = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
    return ", ".join(f"{name} ({count})" for name, count in ordered)
