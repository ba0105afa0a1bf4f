"""Public API for Repo Buddy.

Example:
    >>> from repo_buddy import analyze
    >>> result = analyze("/path/to/code", workers=4)
    >>> result.dominant_language
    'Go'
    >>> result.naming.function_casing
    <Casing.PASCAL_CASE: 'PascalCase'>
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import load_config
from .core import ProjectAnalyzer
from .logging_config import get_logger
from .models import AnalysisResult

logger = get_logger(__name__)


def analyze(
    path: str | Path = ".",
    config_file: Optional[Path] = None,
    **overrides,
) -> AnalysisResult:
    """Profile a repository and return the finalized result.

    Args:
        path: Repository root (default: current directory)
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g. workers=4, deterministic=True)

    Raises:
        ConfigurationError: If configuration or the path is invalid
        QueryDefinitionError: If an analyzer query fails to compile
    """
    config = load_config(config_file=config_file, **overrides)
    logger.debug(f"Analyzing {path} with {config}")
    return ProjectAnalyzer(path, config).analyze()
