"""Public API functions for validated.

Each call wraps the raw value in a fresh ``ValueContext``, so validations
never share state and one schema can be used from many threads at once.
"""

from __future__ import annotations

import logging
from typing import Any

from validated.context import ValueContext
from validated.nodes import Node
from validated.result import Failure, Outcome

__all__ = ["check", "is_valid", "validate"]

logger = logging.getLogger(__name__)


def check(schema: Node, value: Any) -> Outcome:
    """Check ``value`` against ``schema`` without raising for bad data.

    Args:
        schema: Root node of the schema.
        value:  Already-parsed data (mappings, sequences, scalars, ``None``).

    Returns:
        ``Success`` holding the decoded value, or ``Failure`` holding the
        diagnostic chain.

    Raises:
        SchemaError: If the schema is misbuilt (e.g. an unassigned ``ref``).
    """
    outcome = schema.check(ValueContext(value))
    if isinstance(outcome, Failure):
        logger.debug("%s rejected value: %s", schema.kind, outcome.messages[-1])
    return outcome


def validate(schema: Node, value: Any) -> Any:
    """Validate ``value`` against ``schema`` and return the decoded value.

    The input is never mutated; containers in the result are fresh, and
    missing fields are filled from defaults.

    Raises:
        ValidationError: If ``value`` does not match ``schema``.
        SchemaError: If the schema is misbuilt.
    """
    return schema.validate(ValueContext(value)).value


def is_valid(schema: Node, value: Any) -> bool:
    """Return True if ``value`` matches ``schema``."""
    return not isinstance(check(schema, value), Failure)
