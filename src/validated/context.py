"""Validation contexts: the value under validation plus the path leading to it.

A ``Context`` decouples node logic from the concrete value representation.
Nodes only ever talk to the abstract capability set:

- ``build_mapping(visit)``:  walk keyed entries, one child context per entry.
- ``build_sequence(visit)``: walk ordered elements, one child context each.
- ``unwrap(check)``:         hand the raw scalar to ``check``.
- ``error(message)``:        build a ``Failure`` carrying the full path.
- ``build_message(message)``: hook to decorate a locally raised message.

Two concrete variants live here:

- ``ValueContext`` wraps plain in-memory Python values (``Mapping``,
  non-string ``Sequence``, scalars, ``None``).
- ``AbsentContext`` stands for "no value at all".  Objects use it to ask a
  missing field's node whether absence is acceptable (``maybe`` says yes,
  everything else produces a diagnostic).

Contexts are created per validation call and never shared.  ``parent`` is a
back-link used only to rebuild the diagnostic path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from validated.message import Message, coerce
from validated.result import Failure, Outcome, Success

__all__ = [
    "UNDEFINED",
    "AbsentContext",
    "Context",
    "ValueContext",
    "type_name",
]


class _Undefined:
    """Marker for "no value present"; distinct from ``None`` (null)."""

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()

VisitEntry = Callable[["Context", Any, "Context"], Outcome]
VisitElement = Callable[["Context"], Outcome]
Check = Callable[[Any], Outcome]


def type_name(value: Any) -> str:
    """Name the shape of ``value`` the way diagnostics spell it.

    bool MUST be checked before int/float: bool subclasses int in Python.
    """
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "mapping"
    if _is_sequence(value):
        return "array"
    return type(value).__name__


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


class Context(ABC):
    """Abstract validation context.

    Attributes:
        message: Message attached to this step of the path, e.g.
                 ``While validating value at key "a"``.  ``None`` for the root.
        parent:  Enclosing context, or ``None`` for the root.
    """

    __slots__ = ("message", "parent")

    def __init__(
        self, message: str | Message | None = None, parent: Context | None = None
    ) -> None:
        self.message: Message | None = None if message is None else coerce(message)
        self.parent = parent

    @abstractmethod
    def build_mapping(self, visit: VisitEntry) -> Outcome:
        """Visit every entry of a mapping-shaped value.

        ``visit(value_context, key, key_context)`` is called once per entry in
        the value's natural order.  The first ``Failure`` is returned as is;
        otherwise the visited values are collected into a fresh ``dict``.
        """

    @abstractmethod
    def build_sequence(self, visit: VisitElement) -> Outcome:
        """Visit every element of a sequence-shaped value, collecting a list."""

    @abstractmethod
    def unwrap(self, check: Check) -> Outcome:
        """Pass the raw value to ``check`` and return its outcome."""

    def build_message(self, message: Message) -> Message:
        """Decorate a message raised in this context.  Identity by default."""
        return message

    def ok(self, value: Any) -> Success:
        return Success(value, self)

    def error(self, message: str | Message) -> Failure:
        """Return a failure whose chain is this context's path plus ``message``."""
        chain: list[Message] = []
        context: Context | None = self
        while context is not None:
            if context.message is not None:
                chain.append(context.message)
            context = context.parent
        chain.reverse()
        chain.append(self.build_message(coerce(message)))
        return Failure(tuple(chain))


class ValueContext(Context):
    """Context over a plain in-memory Python value."""

    __slots__ = ("value",)

    def __init__(
        self,
        value: Any,
        message: str | Message | None = None,
        parent: Context | None = None,
    ) -> None:
        super().__init__(message, parent)
        self.value = value

    def child(self, value: Any, message: str | Message) -> ValueContext:
        # type(self) keeps subclasses (e.g. location-aware adapters) in the path.
        return type(self)(value, message, self)

    def build_mapping(self, visit: VisitEntry) -> Outcome:
        if not isinstance(self.value, Mapping):
            return self.error(
                f"Expected a mapping value but got {type_name(self.value)}"
            )
        result: dict[Any, Any] = {}
        for key, item in self.value.items():
            outcome = visit(
                self.child(item, f'While validating value at key "{key}"'),
                key,
                self.child(key, f'While validating key "{key}"'),
            )
            if isinstance(outcome, Failure):
                return outcome
            result[key] = outcome.value
        return self.ok(result)

    def build_sequence(self, visit: VisitElement) -> Outcome:
        if not _is_sequence(self.value):
            return self.error(f"Expected an array value but got {type_name(self.value)}")
        result: list[Any] = []
        for idx, item in enumerate(self.value):
            outcome = visit(self.child(item, f"While validating value at index {idx}"))
            if isinstance(outcome, Failure):
                return outcome
            result.append(outcome.value)
        return self.ok(result)

    def unwrap(self, check: Check) -> Outcome:
        return check(self.value)


class AbsentContext(Context):
    """Context standing for a value that is not there at all."""

    __slots__ = ()

    def build_mapping(self, visit: VisitEntry) -> Outcome:
        return self.error(f"Expected a mapping value but got {type_name(UNDEFINED)}")

    def build_sequence(self, visit: VisitElement) -> Outcome:
        return self.error(f"Expected an array value but got {type_name(UNDEFINED)}")

    def unwrap(self, check: Check) -> Outcome:
        return check(UNDEFINED)

    def build_message(self, message: Message) -> Message:
        # Absence has no location of its own; defer to the enclosing context.
        if self.parent is not None:
            return self.parent.build_message(message)
        return message
