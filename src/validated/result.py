"""Success and Failure: the outcome of checking a value against a node.

Nodes return one of these instead of raising, so ``one_of`` can try each
alternative and inspect every failure without unwinding the stack.
``Failure.to_error()`` turns a failure into the ``ValidationError`` raised at
the public boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from validated.errors import ValidationError

if TYPE_CHECKING:
    from validated.context import Context
    from validated.message import Message

__all__ = ["Failure", "Outcome", "Success"]


@dataclass(frozen=True, slots=True)
class Success:
    """A decoded value and the context it was decoded in."""

    value: Any
    context: Context


@dataclass(frozen=True, slots=True)
class Failure:
    """A diagnostic chain, outermost context first and root cause last."""

    messages: tuple[Message, ...]

    def to_error(self) -> ValidationError:
        return ValidationError(self.messages)


Outcome = Success | Failure
