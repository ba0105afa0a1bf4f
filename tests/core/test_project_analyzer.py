"""End-to-end tests for ProjectAnalyzer over small on-disk repositories."""

import pytest

from repo_buddy.casing import Casing
from repo_buddy.config import AnalysisConfig
from repo_buddy.core import ProjectAnalyzer
from repo_buddy.exceptions import InvalidPathError, LLMError

USECASE = """package usecase

type UserRepository interface {
	Find(id int) error
}

func NewUserUsecase(repo UserRepository) *UserUsecase {
	return &UserUsecase{repo: repo}
}

type UserUsecase struct {
	repo UserRepository
}
"""

DOMAIN = """package domain

type User struct {
	ID   int
	Name string
}
"""

TRUNCATED = "package usecase\n\nfunc broken() {\n\tfmt.Println("

REPO = {
    "internal/usecase/user_usecase.go": USECASE,
    "internal/domain/user.go": DOMAIN,
    "internal/usecase/broken.go": TRUNCATED,
    "config/app.yaml": "port: 8080\n",
    ".env": 'API_KEY = "abcdefghij1234"\n',
    "README.md": "# demo\n",
}


def run(root, **settings):
    return ProjectAnalyzer(root, AnalysisConfig(workers=4, **settings)).analyze()


class TestProjectAnalysis:
    def test_language_counts_exclude_unparsable_files(self, write_repo):
        result = run(write_repo(REPO))
        assert result.language_counts == {"Go": 2}

    def test_stats(self, write_repo):
        stats = run(write_repo(REPO)).stats
        assert stats.files_visited == 6
        assert stats.files_parsed == 2
        assert stats.files_parse_failed == 1
        assert stats.files_unsupported == 3
        assert stats.files_unreadable == 0
        assert stats.files_failed == 0

    def test_heuristics_run_for_every_file(self, write_repo):
        result = run(write_repo(REPO))
        assert result.config.config_sources in (["yaml", "env"], ["env", "yaml"])
        assert result.security.hardcoded_secrets == ["Potential secret in .env"]
        assert result.architecture.pattern == "Clean Architecture"
        assert set(result.architecture.layers) == {"Domain", "UseCase"}

    def test_analyzer_findings_merged(self, write_repo):
        result = run(write_repo(REPO))
        assert result.di.injection_patterns == ["Constructor Injection (NewXXX)"]
        assert set(result.design_patterns.patterns) == {
            "Factory Pattern (NewXXX)",
            "Strategy Pattern (via Interfaces)",
        }
        assert result.naming.class_struct_naming == Casing.PASCAL_CASE

    def test_file_naming_from_stem(self, write_repo):
        result = run(write_repo({"pkg/user_service.go": "package pkg\n"}))
        assert result.naming.file_naming == Casing.SNAKE_CASE

    def test_known_unpopulated_fields_stay_default(self, write_repo):
        result = run(write_repo(REPO))
        assert result.naming.comment_style == ""
        assert result.di.abstraction_level == 0.0
        assert result.config.secret_handling == ""
        assert result.tech_stack.build_tools == []
        assert result.architecture.modules == []

    def test_jsx_in_plain_js_file_is_parsed(self, write_repo):
        app = (
            "import React from 'react';\n"
            "\n"
            "export default function App() {\n"
            "  return <div>hi</div>;\n"
            "}\n"
        )
        result = run(write_repo({"src/App.js": app}))
        assert result.stats.files_parse_failed == 0
        assert result.language_counts == {"JavaScript": 1}
        assert result.tech_stack.frameworks == ["React"]

    def test_empty_repository(self, write_repo):
        result = run(write_repo({}))
        assert result.language_counts == {}
        assert result.stats.files_visited == 0


class TestDeterminism:
    def test_deterministic_runs_are_identical(self, write_repo):
        root = write_repo(REPO)
        first = run(root, deterministic=True).to_dict()
        second = run(root, deterministic=True).to_dict()
        assert first == second

    def test_deterministic_resolution_by_path(self, write_repo):
        result = run(write_repo(REPO), deterministic=True)
        assert result.architecture.layers == ["Domain", "UseCase"]
        assert result.naming.file_naming == Casing.CAMEL_CASE  # internal/domain/user.go

    def test_default_mode_sets_agree(self, write_repo):
        root = write_repo(REPO)
        first, second = run(root), run(root)
        assert set(first.architecture.layers) == set(second.architecture.layers)
        assert set(first.design_patterns.patterns) == set(second.design_patterns.patterns)
        assert first.language_counts == second.language_counts


class TestFailureIsolation:
    def test_oversized_file_is_unreadable(self, write_repo):
        root = write_repo({"big.go": "package big\n" + "// filler\n" * 200, "small.go": "package small\n"})
        result = run(root, max_file_size_mb=0.001)
        assert result.stats.files_unreadable == 1
        assert result.language_counts == {"Go": 1}

    def test_crash_in_one_file_is_contained(self, write_repo):
        root = write_repo({"a.go": "package a\n", "b.go": "package b\n"})
        analyzer = ProjectAnalyzer(root, AnalysisConfig(workers=2))
        original = analyzer.analyze_tree

        def flaky(rel_path, source, tree, language):
            if str(rel_path) == "a.go":
                raise RuntimeError("boom")
            return original(rel_path, source, tree, language)

        analyzer.analyze_tree = flaky
        result = analyzer.analyze()
        assert result.stats.files_failed == 1
        assert result.language_counts == {"Go": 1}

    def test_undecodable_bytes_are_replaced(self, write_repo):
        root = write_repo({})
        (root / "latin.py").write_bytes(b"name = '\xe9t\xe9'\n")
        result = run(root)
        assert result.language_counts == {"Python": 1}

    def test_invalid_root(self, tmp_path):
        with pytest.raises(InvalidPathError):
            ProjectAnalyzer(tmp_path / "missing")


class FakeLLM:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = 0

    def summarize(self, result):
        self.calls += 1
        if self.error:
            raise self.error
        return self.reply


class TestLLMSummary:
    def test_summary_attached(self, write_repo):
        llm = FakeLLM(reply="## Executive Summary")
        config = AnalysisConfig(workers=2, with_llm=True)
        result = ProjectAnalyzer(write_repo(REPO), config, llm_client=llm).analyze()
        assert result.llm_summary == "## Executive Summary"
        assert llm.calls == 1

    def test_failure_leaves_no_summary(self, write_repo):
        llm = FakeLLM(error=LLMError("quota exceeded", status_code=429))
        config = AnalysisConfig(workers=2, with_llm=True)
        result = ProjectAnalyzer(write_repo(REPO), config, llm_client=llm).analyze()
        assert result.llm_summary is None

    def test_not_called_when_disabled(self, write_repo):
        llm = FakeLLM(reply="unused")
        result = ProjectAnalyzer(write_repo(REPO), AnalysisConfig(workers=2), llm_client=llm).analyze()
        assert result.llm_summary is None
        assert llm.calls == 0

    def test_missing_api_key_is_a_warning(self, write_repo):
        config = AnalysisConfig(workers=2, with_llm=True)
        result = ProjectAnalyzer(write_repo(REPO), config).analyze()
        assert result.llm_summary is None
