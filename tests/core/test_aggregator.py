"""Tests for the result aggregator's merge policies."""

import threading

import pytest

from repo_buddy.casing import Casing
from repo_buddy.core.aggregator import ResultAggregator
from repo_buddy.exceptions import AggregatorClosedError
from repo_buddy.models import FileFindings


def findings(**sections):
    """Build FileFindings from section__field=value keyword pairs."""
    result = FileFindings()
    for key, value in sections.items():
        section, field_name = key.split("__")
        setattr(getattr(result, section), field_name, value)
    return result


class TestScalars:
    def test_first_writer_wins(self):
        agg = ResultAggregator()
        agg.merge("a.go", findings(testing__test_location="In-project/In-file"))
        agg.merge("b.go", findings(testing__test_location="Separate test directory"))
        assert agg.finalize().testing.test_location == "In-project/In-file"

    def test_empty_does_not_claim_field(self):
        agg = ResultAggregator()
        agg.merge("a.go", findings())
        agg.merge("b.go", findings(architecture__pattern="MVC"))
        assert agg.finalize().architecture.pattern == "MVC"

    def test_none_casing_does_not_claim_axis(self):
        agg = ResultAggregator()
        agg.merge("a.go", findings())
        agg.merge("b.go", findings(naming__function_casing=Casing.SNAKE_CASE))
        assert agg.finalize().naming.function_casing == Casing.SNAKE_CASE

    def test_unknown_casing_replaced_by_known(self):
        agg = ResultAggregator()
        agg.merge("a.go", findings(naming__variable_casing=Casing.UNKNOWN))
        agg.merge("b.go", findings(naming__variable_casing=Casing.CAMEL_CASE))
        agg.merge("c.go", findings(naming__variable_casing=Casing.SNAKE_CASE))
        assert agg.finalize().naming.variable_casing == Casing.CAMEL_CASE

    def test_known_casing_is_frozen(self):
        agg = ResultAggregator()
        agg.merge("a.go", findings(naming__file_naming=Casing.SNAKE_CASE))
        agg.merge("b.go", findings(naming__file_naming=Casing.UNKNOWN))
        assert agg.finalize().naming.file_naming == Casing.SNAKE_CASE

    def test_unknown_alone_is_kept(self):
        agg = ResultAggregator()
        agg.merge("a.go", findings(naming__variable_casing=Casing.UNKNOWN))
        assert agg.finalize().naming.variable_casing == Casing.UNKNOWN

    def test_interface_prefix(self):
        agg = ResultAggregator()
        agg.merge("a.go", findings())
        agg.merge("b.go", findings(naming__interface_prefix="I"))
        assert agg.finalize().naming.interface_prefix == "I"


class TestCollections:
    def test_union_without_duplicates(self):
        agg = ResultAggregator()
        agg.merge("a.go", findings(error_handling__failure_patterns=["if err != nil"]))
        agg.merge("b.go", findings(error_handling__failure_patterns=["panic()", "if err != nil"]))
        assert agg.finalize().error_handling.failure_patterns == ["if err != nil", "panic()"]

    def test_tech_stack_union(self):
        a, b = FileFindings(), FileFindings()
        a.tech_stack.add("framework", "Gin")
        b.tech_stack.add("framework", "Gin")
        b.tech_stack.add("database", "GORM")
        agg = ResultAggregator()
        agg.merge("a.go", a)
        agg.merge("b.go", b)
        result = agg.finalize()
        assert result.tech_stack.frameworks == ["Gin"]
        assert result.tech_stack.databases == ["GORM"]

    def test_duplication_is_additive_and_attributed(self):
        a = findings(dry__duplication_score=0.1, dry__duplicated_blocks=['String literal "x" repeated 2 times'])
        b = findings(dry__duplication_score=0.2, dry__duplicated_blocks=['String literal "x" repeated 3 times'])
        agg = ResultAggregator()
        agg.merge("a.go", a)
        agg.merge("b.go", b)
        dry = agg.finalize().dry
        assert dry.duplication_score == pytest.approx(0.3)
        assert dry.duplicated_blocks == [
            'a.go: String literal "x" repeated 2 times',
            'b.go: String literal "x" repeated 3 times',
        ]

    def test_language_counts(self):
        agg = ResultAggregator()
        agg.merge("a.go", findings(), language="Go")
        agg.merge("b.go", findings(), language="Go")
        agg.merge("c.py", findings(), language="Python")
        agg.merge("README.md", findings())
        assert agg.finalize().language_counts == {"Go": 2, "Python": 1}


class TestLifecycle:
    def test_finalize_returns_copy(self):
        agg = ResultAggregator()
        agg.merge("a.go", findings(design_patterns__patterns=["Factory Pattern (NewXXX)"]))
        first = agg.finalize()
        first.design_patterns.patterns.append("mutated")
        assert agg.finalize().design_patterns.patterns == ["Factory Pattern (NewXXX)"]

    def test_merge_after_finalize(self):
        agg = ResultAggregator()
        agg.finalize()
        assert agg.closed
        with pytest.raises(AggregatorClosedError):
            agg.merge("late.go", findings())

    def test_count(self):
        agg = ResultAggregator()
        agg.count("files_visited")
        agg.count("files_visited", 2)
        assert agg.finalize().stats.files_visited == 3

    def test_unknown_stat(self):
        with pytest.raises(ValueError):
            ResultAggregator().count("files_eaten")


class TestDeterministicMode:
    def test_scalars_resolved_by_path_order(self):
        agg = ResultAggregator(deterministic=True)
        agg.merge("z/handler.go", findings(architecture__pattern="Standard Layout"))
        agg.merge("a/usecase.go", findings(architecture__pattern="Clean Architecture"))
        assert agg.finalize().architecture.pattern == "Clean Architecture"

    def test_lists_ordered_by_path(self):
        agg = ResultAggregator(deterministic=True)
        agg.merge("b.go", findings(design_patterns__patterns=["Strategy Pattern (via Interfaces)"]))
        agg.merge("a.go", findings(design_patterns__patterns=["Factory Pattern (NewXXX)"]))
        assert agg.finalize().design_patterns.patterns == [
            "Factory Pattern (NewXXX)",
            "Strategy Pattern (via Interfaces)",
        ]

    def test_same_file_keeps_arrival_order(self):
        agg = ResultAggregator(deterministic=True)
        agg.merge("a.go", findings(testing__naming_pattern="*_test"))
        agg.merge("a.go", findings(testing__naming_pattern="test_*"))
        assert agg.finalize().testing.naming_pattern == "*_test"

    def test_counts_still_applied(self):
        agg = ResultAggregator(deterministic=True)
        agg.merge("b.go", findings(), language="Go")
        agg.merge("a.go", findings(), language="Go")
        assert agg.finalize().language_counts == {"Go": 2}


class TestConcurrency:
    def test_parallel_merges_are_not_lost(self):
        agg = ResultAggregator()
        threads = 8
        per_thread = 200

        def worker(n):
            for i in range(per_thread):
                f = findings(security__hardcoded_secrets=[f"Potential secret in f{n}_{i % 10}"])
                f.dry.duplication_score = 0.5
                agg.merge(f"f{n}_{i}.go", f, language="Go")

        pool = [threading.Thread(target=worker, args=(n,)) for n in range(threads)]
        for t in pool:
            t.start()
        for t in pool:
            t.join()

        result = agg.finalize()
        assert result.language_counts == {"Go": threads * per_thread}
        assert len(result.security.hardcoded_secrets) == threads * 10
        assert len(set(result.security.hardcoded_secrets)) == threads * 10
        assert result.dry.duplication_score == pytest.approx(0.5 * threads * per_thread)
