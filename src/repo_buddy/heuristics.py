"""Pre-parse heuristics.

These rules look only at a file's relative path and raw text, so they run
for every readable file whether or not a grammar exists for it:
    - architecture layers from directory names
    - configuration sources from file names and extensions
    - test location, naming and mock files from file names
    - hard-coded secrets from the raw text
"""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Union

from .models import FileFindings, add_unique

# (directory token, layer label). The first group whose tokens appear in
# the directory path decides the pattern.
CLEAN_ARCHITECTURE_LAYERS = (
    ("domain", "Domain"),
    ("usecase", "UseCase"),
    ("repository", "Repository"),
    ("delivery", "Delivery/Handler"),
    ("handler", "Delivery/Handler"),
)
MVC_LAYERS = (
    ("controller", "Controller"),
    ("model", "Model"),
    ("view", "View"),
)
STANDARD_LAYOUT_TOKENS = ("internal", "pkg", "cmd")

CLEAN_ARCHITECTURE = "Clean Architecture"
MVC = "MVC"
STANDARD_LAYOUT = "Standard Layout"

CONFIG_EXTENSIONS = frozenset({".env", ".yaml", ".yml", ".json"})
STRUCTURED_CONFIG_FILES = frozenset({"properties.yaml", "application.yaml"})
STRUCTURED_TYPE_SAFETY = "Structured (Properties)"

TEST_DIRECTORIES = frozenset({"test", "tests", "__tests__", "spec"})
SEPARATE_TEST_DIR = "Separate test directory"
IN_PROJECT_TESTS = "In-project/In-file"

# (file-name suffix, mocking label)
MOCK_FILE_SUFFIXES = (
    ("_mock.go", "gomock"),
    (".mock.ts", "jest mocks"),
    (".mock.js", "jest mocks"),
    ("_mock.py", "unittest.mock"),
)

SECRET_PATTERN = re.compile(
    r"""(api_key|secret|password|token)\s*[:=]\s*["'][A-Za-z0-9]{10,}["']""",
    re.IGNORECASE,
)


def analyze_heuristics(rel_path: Union[str, PurePath], source: str) -> FileFindings:
    """Apply the path and text rules to one file.

    Args:
        rel_path: Path relative to the analysis root
        source: Decoded file content

    Returns:
        A fresh FileFindings with only heuristic fields populated
    """
    path = PurePath(rel_path)
    findings = FileFindings()
    _detect_architecture(path, findings)
    _detect_config_source(path, findings)
    _detect_testing(path, findings)
    _detect_secrets(path, source, findings)
    return findings


def _directory_segments(path: PurePath) -> list[str]:
    return [part.lower() for part in path.parent.parts if part not in ("", ".", "/")]


def _detect_architecture(path: PurePath, findings: FileFindings) -> None:
    segments = _directory_segments(path)
    if not segments:
        return

    def present(token: str) -> bool:
        return any(token in segment for segment in segments)

    architecture = findings.architecture
    for pattern, layers in ((CLEAN_ARCHITECTURE, CLEAN_ARCHITECTURE_LAYERS), (MVC, MVC_LAYERS)):
        hits = [label for token, label in layers if present(token)]
        if hits:
            architecture.pattern = pattern
            for label in hits:
                add_unique(architecture.layers, label)
            return

    if any(present(token) for token in STANDARD_LAYOUT_TOKENS):
        architecture.pattern = STANDARD_LAYOUT


def _is_dotenv(name: str) -> bool:
    return name == ".env" or name.startswith(".env.")


def _detect_config_source(path: PurePath, findings: FileFindings) -> None:
    name = path.name
    lower = name.lower()
    suffix = path.suffix.lower()
    dotenv = _is_dotenv(lower)

    if not (suffix in CONFIG_EXTENSIONS or dotenv or "config" in lower or lower in STRUCTURED_CONFIG_FILES):
        return

    if lower in STRUCTURED_CONFIG_FILES:
        label = name
        findings.config.type_safety = STRUCTURED_TYPE_SAFETY
    elif dotenv:
        label = "env"
    elif suffix:
        label = suffix[1:]
    else:
        label = "config"
    add_unique(findings.config.config_sources, label)


def _test_naming_pattern(name: str) -> str:
    stem = name.split(".", 1)[0]
    if name.startswith("test_"):
        return "test_*"
    if stem.endswith("_test"):
        return "*_test"
    if ".spec." in name:
        return "*.spec.*"
    if ".test." in name:
        return "*.test.*"
    return "test_* or *_test"


def _detect_testing(path: PurePath, findings: FileFindings) -> None:
    name = path.name.lower()
    testing = findings.testing

    if "test" in name or ".spec." in name:
        if any(segment in TEST_DIRECTORIES for segment in _directory_segments(path)):
            testing.test_location = SEPARATE_TEST_DIR
        else:
            testing.test_location = IN_PROJECT_TESTS
        testing.naming_pattern = _test_naming_pattern(name)

    for suffix, label in MOCK_FILE_SUFFIXES:
        if name.endswith(suffix):
            testing.mocking_strategy = label
            break


def _detect_secrets(path: PurePath, source: str, findings: FileFindings) -> None:
    if SECRET_PATTERN.search(source):
        add_unique(findings.security.hardcoded_secrets, f"Potential secret in {path.as_posix()}")
