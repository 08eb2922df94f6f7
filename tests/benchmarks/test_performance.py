"""Performance benchmark suite for validated.

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

import pytest

from validated import check, validate
from validated.message import Leaf
from validated.result import Failure

pytest.importorskip("pytest_benchmark")


class TestPerformance10Key:
    def test_10key_flat(self, benchmark, case_10key):  # type: ignore[no-untyped-def]
        schema, doc = case_10key
        result = benchmark(validate, schema, doc)
        assert result == doc


class TestPerformance100Key:
    def test_100key_valid(self, benchmark, case_100key_valid):  # type: ignore[no-untyped-def]
        schema, doc = case_100key_valid
        result = benchmark(validate, schema, doc)
        assert result["section_0"]["note"] is None

    def test_100key_broken(self, benchmark, case_100key_broken):  # type: ignore[no-untyped-def]
        schema, doc = case_100key_broken
        outcome = benchmark(check, schema, doc)
        # The deeper "items" failure outweighs the unexpected-key one
        assert isinstance(outcome, Failure)
        assert outcome.messages == (
            Leaf('While validating value at key "section_9"'),
            Leaf('While validating value at key "leaf_9"'),
            Leaf('While validating value at key "items"'),
            Leaf("While validating value at index 1"),
            Leaf("Expected value of type number but got string"),
        )


class TestPerformance500Key:
    def test_500key_valid(self, benchmark, case_500key_valid):  # type: ignore[no-untyped-def]
        schema, doc = case_500key_valid
        result = benchmark(validate, schema, doc)
        assert len(result) == 25
