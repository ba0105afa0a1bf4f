"""File discovery for Repo Buddy.

Inside a git work tree the file list comes from the git index plus
untracked files that are not ignored, so .gitignore rules are honored
without reimplementing them. Outside git, the directory tree is walked.

Example:
    >>> files = discover_files(Path("/path/to/code"))
    >>> files[:2]
    [PosixPath('.env'), PosixPath('cmd/main.go')]
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Iterable, Optional

from .logging_config import get_logger
from .scanning.languages import BINARY_EXTENSIONS

logger = get_logger(__name__)

DEFAULT_SKIP_DIRS = frozenset({".git", ".hg", ".svn", "node_modules", "vendor", "target", "__pycache__"})


def discover_files(
    root: Path | str,
    include_hidden: bool = True,
    skip_dirs: Optional[Iterable[str]] = None,
) -> list[Path]:
    """List candidate files under root, relative to root and sorted.

    Args:
        root: Directory to analyze
        include_hidden: Include dotfiles and files under dot-directories
        skip_dirs: Directory names never entered (defaults to VCS and vendor dirs)

    Returns:
        Relative paths of regular files that exist on disk

    Raises:
        FileNotFoundError: If root doesn't exist
        NotADirectoryError: If root isn't a directory
    """
    root_path = Path(root).resolve()
    if not root_path.exists():
        raise FileNotFoundError(f"Directory not found: {root_path}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Not a directory: {root_path}")

    skip = frozenset(skip_dirs) if skip_dirs is not None else DEFAULT_SKIP_DIRS

    files: Optional[list[Path]] = None
    if _is_git_repository(root_path):
        files = _get_git_files(root_path)
    if files is None:
        files = _walk_directory(root_path, skip)

    selected = sorted(f for f in files if _is_candidate(f, include_hidden, skip))
    logger.debug(f"Discovered {len(selected)} files under {root_path}")
    return selected


def _is_git_repository(root: Path) -> bool:
    """Check if directory is inside a git work tree."""
    try:
        result = subprocess.run(
            ["git", "-C", str(root), "rev-parse", "--is-inside-work-tree"],
            capture_output=True,
            text=True,
            timeout=5,
        )
        return result.returncode == 0 and result.stdout.strip() == "true"
    except (subprocess.TimeoutExpired, FileNotFoundError):
        return False


def _get_git_files(root: Path) -> Optional[list[Path]]:
    """Tracked and untracked-but-not-ignored files, or None if git fails.

    Output is NUL-separated so non-ASCII names arrive unquoted. Paths
    listed in the index but deleted from the work tree are dropped.
    """
    try:
        result = subprocess.run(
            ["git", "-C", str(root), "ls-files", "-z", "--cached", "--others", "--exclude-standard"],
            capture_output=True,
            encoding="utf-8",
            errors="surrogateescape",
            timeout=30,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError):
        logger.warning("git ls-files failed, falling back to directory walk")
        return None

    if result.returncode != 0:
        logger.warning("git ls-files failed, falling back to directory walk")
        return None

    files: set[Path] = set()
    for name in result.stdout.split("\0"):
        if name and (root / name).is_file():
            files.add(Path(name))
    return list(files)


def _walk_directory(root: Path, skip_dirs: frozenset[str]) -> list[Path]:
    """Walk the tree without entering skipped directories or following symlinks."""
    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in skip_dirs]
        base = Path(dirpath)
        for name in filenames:
            full = base / name
            if full.is_symlink() or not full.is_file():
                continue
            files.append(full.relative_to(root))
    return files


def _is_candidate(path: Path, include_hidden: bool, skip_dirs: frozenset[str]) -> bool:
    if any(part in skip_dirs for part in path.parts[:-1]):
        return False
    if not include_hidden and any(part.startswith(".") for part in path.parts):
        return False
    return path.suffix.lower() not in BINARY_EXTENSIONS
