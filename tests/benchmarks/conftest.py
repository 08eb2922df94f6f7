"""Deterministic schemas and documents for performance benchmarks.

All generators produce fixed, reproducible objects.  No random values.
Three tiers: 10-key flat, 100-key nested, 500-key deeply nested.  Each tier
provides a valid document and one that fails deep inside a ``one_of``.
"""

from __future__ import annotations

from typing import Any

import pytest

from validated import Node, maybe, number, object_, one_of, sequence, string


def flat_schema(num_keys: int) -> Node:
    return object_({f"field_{i}": string for i in range(num_keys)})


def flat_document(num_keys: int) -> dict[str, Any]:
    return {f"field_{i}": f"value_{i}" for i in range(num_keys)}


def _leaf_schema() -> Node:
    return one_of(
        object_({"kind": string, "size": number}),
        object_({"kind": string, "items": sequence(number)}),
    )


def nested_schema(sections: int, leaves: int) -> Node:
    section = object_(
        {f"leaf_{j}": _leaf_schema() for j in range(leaves)}
        | {"note": maybe(string)}
    )
    return object_({f"section_{i}": section for i in range(sections)})


def nested_document(sections: int, leaves: int, *, broken: bool = False) -> dict[str, Any]:
    doc: dict[str, Any] = {}
    for i in range(sections):
        doc[f"section_{i}"] = {
            f"leaf_{j}": (
                {"kind": "sized", "size": j}
                if j % 2
                else {"kind": "list", "items": list(range(j))}
            )
            for j in range(leaves)
        }
    if broken:
        last = doc[f"section_{sections - 1}"]
        last[f"leaf_{leaves - 1}"] = {"kind": "list", "items": [1, "two"]}
    return doc


@pytest.fixture
def case_10key() -> tuple[Node, dict[str, Any]]:
    """10-key flat object of strings."""
    return flat_schema(10), flat_document(10)


@pytest.fixture
def case_100key_valid() -> tuple[Node, dict[str, Any]]:
    """10 sections x 10 one_of leaves."""
    return nested_schema(10, 10), nested_document(10, 10)


@pytest.fixture
def case_100key_broken() -> tuple[Node, dict[str, Any]]:
    """Same shape as case_100key_valid with a failure in the very last leaf."""
    return nested_schema(10, 10), nested_document(10, 10, broken=True)


@pytest.fixture
def case_500key_valid() -> tuple[Node, dict[str, Any]]:
    """25 sections x 20 one_of leaves."""
    return nested_schema(25, 20), nested_document(25, 20)
