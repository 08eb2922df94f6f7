"""Exception types raised by validated.

Two disjoint kinds of fault:

- ``ValidationError``: the input data does not fit the schema.  Expected and
  recoverable; carries the full diagnostic chain.
- ``SchemaError``: the schema itself is misbuilt (an unassigned ``ref``, an
  empty ``one_of``...).  A programming error; do not catch it to carry on.
"""

from __future__ import annotations

from collections.abc import Sequence

from validated.message import Message
from validated.render import render_chain

__all__ = ["SchemaError", "ValidatedError", "ValidationError"]


class ValidatedError(Exception):
    """Base class for every exception raised by this package.

    Not a handler for bad data: ``except ValidatedError`` also catches
    ``SchemaError``, which means the schema is broken and validation cannot be
    trusted to continue.  To handle rejected input, catch ``ValidationError``.
    """


class ValidationError(ValidatedError):
    """Raised when a value does not match a schema.

    Attributes:
        messages: Diagnostic chain, outermost context first and the root cause
            last.
    """

    def __init__(self, messages: Sequence[Message]) -> None:
        if not messages:
            raise ValueError("ValidationError requires at least one message")
        self.messages: tuple[Message, ...] = tuple(messages)
        super().__init__(render_chain(self.messages))

    @property
    def original_message(self) -> Message:
        """The innermost message: what actually went wrong."""
        return self.messages[-1]

    @property
    def context_messages(self) -> tuple[Message, ...]:
        """The enclosing context messages, outermost first."""
        return self.messages[:-1]

    def __str__(self) -> str:
        return render_chain(self.messages)

    def __reduce__(self) -> tuple[type[ValidationError], tuple[tuple[Message, ...]]]:
        return type(self), (self.messages,)


class SchemaError(ValidatedError):
    """Raised when a schema is built or used incorrectly."""
