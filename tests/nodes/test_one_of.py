"""Tests for one_of(): first-match selection and merged diagnostics."""

from __future__ import annotations

from typing import Any

import pytest

from validated import SchemaError, ValidationError, check, validate
from validated.message import Alternative, Composite, Leaf
from validated.schema import boolean, number, object_, one_of, ref, sequence, string

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _reject(schema: Any, value: Any) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        validate(schema, value)
    return exc_info.value


def _branch(*texts: str) -> Composite:
    return Composite(None, tuple(Leaf(t) for t in texts))


class TestScalars:
    schema = one_of(string, number)

    def test_accepts_number(self) -> None:
        assert validate(self.schema, 1) == 1

    def test_accepts_string(self) -> None:
        assert validate(self.schema, "ok") == "ok"

    def test_rejects_boolean_listing_both(self) -> None:
        error = _reject(self.schema, True)
        assert error.messages == (
            Alternative(
                (
                    _branch("Expected value of type string but got boolean"),
                    _branch("Expected value of type number but got boolean"),
                )
            ),
        )
        assert str(error) == (
            "Either:\n"
            "- Expected value of type string but got boolean\n"
            "- Expected value of type number but got boolean"
        )

    def test_rejects_mapping(self) -> None:
        assert "got mapping" in str(_reject(self.schema, {}))


class TestContainers:
    schema = one_of(object_({"a": number}), object_({"a": string}))

    def test_accepts_either_shape(self) -> None:
        assert validate(self.schema, {"a": 1}) == {"a": 1}
        assert validate(self.schema, {"a": "ok"}) == {"a": "ok"}

    def test_failure_is_merged_at_the_diverging_field(self) -> None:
        error = _reject(self.schema, {"a": True})
        assert error.messages == (
            Leaf('While validating value at key "a"'),
            Alternative(
                (
                    _branch("Expected value of type number but got boolean"),
                    _branch("Expected value of type string but got boolean"),
                )
            ),
        )
        assert str(error) == (
            'While validating value at key "a"\n'
            "Either:\n"
            "- Expected value of type number but got boolean\n"
            "- Expected value of type string but got boolean"
        )

    def test_shared_context_is_kept_outside(self) -> None:
        schema = object_({"item": self.schema})
        error = _reject(schema, {"item": {"a": None}})
        assert error.messages[:2] == (
            Leaf('While validating value at key "item"'),
            Leaf('While validating value at key "a"'),
        )
        assert isinstance(error.messages[-1], Alternative)


class TestSelection:
    def test_first_match_wins(self) -> None:
        schema = one_of(number.and_then(lambda v, _error: v * 2), number)
        assert validate(schema, 1) == 2

    def test_later_alternative_used_when_earlier_fails(self) -> None:
        schema = one_of(string, number.and_then(lambda v, _error: v + 1))
        assert validate(schema, 1) == 2

    def test_rejecting_refinement_falls_through(self) -> None:
        def strict(value: Any, error: Any) -> Any:
            if value < 0:
                error("Expected a non-negative number")
            return value

        schema = one_of(number.and_then(strict), number.and_then(lambda v, _e: -v))
        assert validate(schema, -3) == 3
        assert validate(schema, 3) == 3

    def test_raised_refinement_error_falls_through(self) -> None:
        def always(value: Any, _error: Any) -> Any:
            raise ValidationError([Leaf("Rejected")])

        assert validate(one_of(number.and_then(always), number), 1) == 1

    def test_deeper_failure_prunes_shallow_mismatch(self) -> None:
        schema = one_of(string, object_({"a": number}))
        error = _reject(schema, {"a": True})
        assert error.messages == (
            Leaf('While validating value at key "a"'),
            Leaf("Expected value of type number but got boolean"),
        )

    def test_identical_failures_collapse(self) -> None:
        error = _reject(one_of(string, string), 1)
        assert error.messages == (
            Leaf("Expected value of type string but got number"),
        )

    def test_single_alternative_is_transparent(self) -> None:
        error = _reject(one_of(string), 1)
        assert str(error) == "Expected value of type string but got number"


class TestNesting:
    def test_nested_one_of_is_flattened(self) -> None:
        schema = one_of(one_of(string, number), boolean)
        error = _reject(schema, {})
        assert str(error) == (
            "Either:\n"
            "- Expected value of type string but got mapping\n"
            "- Expected value of type number but got mapping\n"
            "- Expected value of type boolean but got mapping"
        )

    def test_nested_one_of_inside_sequence(self) -> None:
        schema = sequence(one_of(string, number))
        error = _reject(schema, ["a", 1, None])
        assert error.messages[0] == Leaf("While validating value at index 2")
        assert isinstance(error.messages[1], Alternative)
        assert len(error.messages[1].branches) == 2


class TestDeterminism:
    def test_same_input_same_diagnostic(self) -> None:
        schema = one_of(object_({"a": number}), object_({"b": string}), boolean)
        first = _reject(schema, {"c": 1}).messages
        for _ in range(5):
            assert _reject(schema, {"c": 1}).messages == first


class TestSchemaFaults:
    def test_empty_one_of_is_a_schema_error(self) -> None:
        with pytest.raises(SchemaError):
            one_of()

    def test_unset_ref_is_not_treated_as_a_failed_alternative(self) -> None:
        schema = one_of(ref(), string)
        with pytest.raises(SchemaError, match="uninitialized ref"):
            check(schema, "ok")
