"""Language identities and the extension dispatch table.

Adding a new language:
  1. Add a Language member and its extensions to _EXTENSION_TO_LANGUAGE.
  2. Register its grammar in treesitter_parser._GRAMMAR_LOADERS.
  3. Add a query module under queries/ and an analyzer under analyzers/.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional, Union


class Language(Enum):
    """Languages with grammar-aware analysis. Values are display names."""

    GO = "Go"
    PYTHON = "Python"
    TYPESCRIPT = "TypeScript"
    JAVASCRIPT = "JavaScript"
    RUST = "Rust"

    @property
    def display_name(self) -> str:
        return self.value


_EXTENSION_TO_LANGUAGE: dict[str, Language] = {
    ".go": Language.GO,
    ".py": Language.PYTHON,
    ".ts": Language.TYPESCRIPT,
    ".tsx": Language.TYPESCRIPT,
    ".js": Language.JAVASCRIPT,
    ".jsx": Language.JAVASCRIPT,
    ".rs": Language.RUST,
}

# TypeScript extensions whose sources may contain JSX and need the TSX dialect.
JSX_EXTENSIONS = frozenset({".tsx", ".jsx"})

# Binary extensions: never worth reading as text.
BINARY_EXTENSIONS = frozenset(
    {
        ".exe", ".dll", ".so", ".dylib", ".o", ".a", ".lib", ".class", ".jar",
        ".pyc", ".pyo", ".wasm", ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico",
        ".webp", ".mp3", ".mp4", ".avi", ".mov", ".wav", ".flac", ".zip", ".tar",
        ".gz", ".bz2", ".xz", ".7z", ".rar", ".pdf", ".doc", ".docx", ".xls",
        ".xlsx", ".ppt", ".pptx", ".ttf", ".otf", ".woff", ".woff2", ".eot",
        ".db", ".sqlite", ".sqlite3", ".bin", ".dat", ".img", ".iso",
    }
)


def detect_language(filepath: Union[str, Path]) -> Optional[Language]:
    """Detect language from file extension.

    Returns:
        The Language, or None when no parser is available for the extension
    """
    return _EXTENSION_TO_LANGUAGE.get(Path(filepath).suffix.lower())


def supported_extensions() -> list[str]:
    """All extensions that map to a language."""
    return sorted(_EXTENSION_TO_LANGUAGE)
