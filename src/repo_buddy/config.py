"""Configuration loading and management for Repo Buddy.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.repo-buddy.toml)
    3. Project config (./repo-buddy.toml)
    4. Explicit config file
    5. Environment variables (REPO_BUDDY_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(workers=4, deterministic=True)
    >>> config.workers
    4
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["markdown", "json"]

ENV_PREFIX = "REPO_BUDDY_"
GLOBAL_CONFIG_NAME = ".repo-buddy.toml"
PROJECT_CONFIG_NAME = "repo-buddy.toml"

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")
_OUTPUT_FORMATS = ("markdown", "json")

# Expected value types, checked before range validation.
_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "workers": (int, type(None)),
    "max_file_size_mb": (int, float),
    "deterministic": (bool,),
    "include_hidden": (bool,),
    "skip_dirs": (list,),
    "output": (str,),
    "output_format": (str,),
    "verbosity": (str,),
    "with_llm": (bool,),
    "llm_model": (str,),
    "llm_timeout_seconds": (int,),
    "llm_language": (str,),
}

# Default worker count: CPU count, capped at 8 to avoid overwhelming I/O
DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for an analysis run.

    Attributes:
        Performance:
            workers: Number of worker threads (None = auto-detect)
            max_file_size_mb: Files above this size are skipped as unreadable

        Aggregation:
            deterministic: Resolve first-writer-wins fields by path order
                after the parallel phase instead of by arrival order

        File discovery:
            include_hidden: Visit hidden files (dotfiles such as .env)
            skip_dirs: Directory names never descended into

        Output:
            output: Report file written by the CLI
            output_format: "markdown" or "json"
            verbosity: Logging verbosity level

        LLM enrichment:
            with_llm: Ask Gemini for a prose summary of the result
            llm_model: Gemini model name
            llm_timeout_seconds: HTTP timeout for the summary request
            llm_language: Natural language requested for the summary
    """

    workers: Optional[int] = None
    max_file_size_mb: float = 5.0

    deterministic: bool = False

    include_hidden: bool = True
    skip_dirs: list[str] = field(
        default_factory=lambda: [
            ".git",
            ".hg",
            ".svn",
            "node_modules",
            "vendor",
            "target",
            "__pycache__",
            ".venv",
            "venv",
            ".tox",
            ".mypy_cache",
            ".pytest_cache",
            "dist",
            "build",
        ]
    )

    output: str = "CLAUDE.md"
    output_format: OutputFormat = "markdown"
    verbosity: Verbosity = "normal"

    with_llm: bool = False
    llm_model: str = "gemini-3-flash-preview"
    llm_timeout_seconds: int = 120
    llm_language: str = "English"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name, expected in _FIELD_TYPES.items():
            value = getattr(self, name)
            # bool is an int subclass; only bool fields accept it
            if not isinstance(value, expected) or (isinstance(value, bool) and bool not in expected):
                names = " or ".join("None" if t is type(None) else t.__name__ for t in expected)
                raise ValueError(f"{name} must be of type {names}, got {type(value).__name__}")
        if not all(isinstance(d, str) for d in self.skip_dirs):
            raise ValueError("skip_dirs must be a list of strings")
        if self.workers is not None and self.workers < 1:
            raise ValueError("workers must be at least 1")
        if self.max_file_size_mb <= 0:
            raise ValueError("max_file_size_mb must be positive")
        if self.output_format not in _OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {', '.join(_OUTPUT_FORMATS)}")
        if self.verbosity not in _VERBOSITY_LEVELS:
            raise ValueError(f"verbosity must be one of {', '.join(_VERBOSITY_LEVELS)}")
        if self.llm_timeout_seconds < 1:
            raise ValueError("llm_timeout_seconds must be at least 1")
        if not self.output:
            raise ValueError("output must not be empty")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)

    @property
    def effective_workers(self) -> int:
        """Worker count with auto-detection applied."""
        return self.workers or DEFAULT_WORKERS


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    unknown = sorted(set(merged) - set(AnalysisConfig.__dataclass_fields__))
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

    try:
        return AnalysisConfig(**merged)
    except (ValueError, TypeError) as e:
        key = str(e).split(" ", 1)[0]
        raise InvalidConfigError(key, merged.get(key), str(e))


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from REPO_BUDDY_* environment variables.

    Every scalar field of AnalysisConfig can be set this way, e.g.
    REPO_BUDDY_WORKERS=4 or REPO_BUDDY_DETERMINISTIC=true. List fields
    are only configurable through TOML.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load a TOML file, accepting either top-level keys or a [repo-buddy] table."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")

    section = data.get("repo-buddy")
    if isinstance(section, dict):
        return dict(section)
    return data
