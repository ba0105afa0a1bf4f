"""Shared test fixtures for Repo Buddy."""

import os
from pathlib import Path

import pytest

from repo_buddy.analyzers import get_analyzer
from repo_buddy.scanning.treesitter_parser import CodeParser


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory, monkeypatch):
    """Keep user config files and REPO_BUDDY_* variables out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    for key in list(os.environ):
        if key.startswith("REPO_BUDDY_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def write_repo(tmp_path):
    """Write {relative path: content} into a fresh directory and return it."""

    def _write(files, root=None):
        root = root or tmp_path / "repo"
        root.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def analyze_source():
    """Parse source as if it lived at filename and run its language analyzer."""

    def _analyze(filename, source):
        parser = CodeParser.for_path(filename)
        assert parser is not None, f"no parser for {filename}"
        tree = parser.parse(source)
        return get_analyzer(parser.language, parser.grammar).analyze(source, tree)

    return _analyze
