"""pytest plugin for validated.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import re
from typing import Any

import pytest

from validated.api import check
from validated.errors import ValidationError
from validated.nodes import Node
from validated.render import render_chain
from validated.result import Failure

_OMITTED: Any = object()


@pytest.fixture(scope="session")
def assert_validates() -> Any:
    """Fixture that returns a callable asserting a value matches a schema.

    Usage in tests::

        def test_port(assert_validates):
            assert_validates(number, 8080)
            assert_validates(object_({"a": string}, {"a": "x"}), {}, expected={"a": "x"})

    Returns:
        A callable ``_assert(schema, value, expected=<omitted>) -> Any`` that
        returns the decoded value, or raises ``AssertionError`` with the
        rendered diagnostic.
    """

    def _assert(schema: Node, value: Any, expected: Any = _OMITTED) -> Any:
        outcome = check(schema, value)
        if isinstance(outcome, Failure):
            raise AssertionError(
                f"value does not validate:\n"
                f"  value: {value!r}\n"
                f"{render_chain(outcome.messages)}"
            )
        if expected is not _OMITTED and outcome.value != expected:
            raise AssertionError(
                f"decoded value differs:\n"
                f"  actual:   {outcome.value!r}\n"
                f"  expected: {expected!r}"
            )
        return outcome.value

    return _assert


@pytest.fixture(scope="session")
def assert_rejects() -> Any:
    """Fixture that returns a callable asserting a value does NOT match a schema.

    Returns:
        A callable ``_assert(schema, value, match=None) -> ValidationError``.
        ``match`` is a regular expression searched in the rendered
        diagnostic.
    """

    def _assert(schema: Node, value: Any, match: str | None = None) -> ValidationError:
        outcome = check(schema, value)
        if not isinstance(outcome, Failure):
            raise AssertionError(
                f"value unexpectedly validates:\n"
                f"  value:   {value!r}\n"
                f"  decoded: {outcome.value!r}"
            )
        error = outcome.to_error()
        if match is not None and not re.search(match, str(error)):
            raise AssertionError(
                f"diagnostic does not match {match!r}:\n{error}"
            )
        return error

    return _assert
