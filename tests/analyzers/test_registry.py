"""Tests for the analyzer registry."""

import pytest

from repo_buddy.analyzers import (
    GoAnalyzer,
    PythonAnalyzer,
    RustAnalyzer,
    TypeScriptAnalyzer,
    build_all_analyzers,
    get_analyzer,
)
from repo_buddy.analyzers.base import LanguageAnalyzer
from repo_buddy.exceptions import QueryDefinitionError, UnsupportedLanguageError
from repo_buddy.scanning.languages import Language


class TestGetAnalyzer:
    @pytest.mark.parametrize(
        "language,cls",
        [
            (Language.GO, GoAnalyzer),
            (Language.PYTHON, PythonAnalyzer),
            (Language.TYPESCRIPT, TypeScriptAnalyzer),
            (Language.JAVASCRIPT, TypeScriptAnalyzer),
            (Language.RUST, RustAnalyzer),
        ],
    )
    def test_dispatch(self, language, cls):
        assert isinstance(get_analyzer(language), cls)

    def test_instances_are_shared(self):
        assert get_analyzer(Language.GO) is get_analyzer(Language.GO)

    def test_dialects_get_separate_instances(self):
        ts = get_analyzer(Language.TYPESCRIPT, "typescript")
        tsx = get_analyzer(Language.TYPESCRIPT, "tsx")
        assert ts is not tsx
        assert tsx.grammar == "tsx"

    def test_instances_report_their_language(self):
        for language in Language:
            assert get_analyzer(language).language is language

    def test_javascript_defaults_to_tsx_dialect(self):
        assert get_analyzer(Language.JAVASCRIPT).grammar == "tsx"

    def test_unsupported(self):
        with pytest.raises(UnsupportedLanguageError):
            get_analyzer("COBOL")

    def test_all_queries_compile(self):
        assert len(build_all_analyzers()) == 6


class TestQueryValidation:
    def test_bad_query_fails_at_construction(self, monkeypatch):
        import repo_buddy.analyzers.base as base

        monkeypatch.setattr(base, "get_queries", lambda language: {"naming": "(nonexistent_node) @x"})

        class BrokenAnalyzer(LanguageAnalyzer):
            language = Language.GO

            def passes(self):
                return []

        with pytest.raises(QueryDefinitionError):
            BrokenAnalyzer()
