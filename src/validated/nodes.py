"""Schema nodes: one class per rule, composed into a tree mirroring the data.

Every node implements ``check(context) -> Success | Failure`` and never
raises for bad data; ``validate(context)`` is the raising wrapper.  Nodes are
frozen once built (``RefNode`` allows exactly one ``set``), so a single schema
tree can serve any number of concurrent validations.

The set of node kinds is closed; ``NodeKind`` tags each class.
"""

from __future__ import annotations

import copy
import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType
from typing import Any, ClassVar, NoReturn

from validated.algorithm.disambiguation import merge_failures
from validated.algorithm.suggest import suggest
from validated.config import ObjectOptions
from validated.context import UNDEFINED, AbsentContext, Context, type_name
from validated.errors import SchemaError, ValidationError
from validated.message import Leaf, Message
from validated.result import Failure, Outcome, Success

__all__ = [
    "AnyNode",
    "BooleanNode",
    "EnumerationNode",
    "MappingNode",
    "MaybeNode",
    "Node",
    "NodeKind",
    "NumberNode",
    "ObjectNode",
    "OneOfNode",
    "RefNode",
    "RefineNode",
    "SequenceNode",
    "StringNode",
]

logger = logging.getLogger(__name__)

ErrorFn = Callable[[str | Message], NoReturn]
Refine = Callable[[Any, ErrorFn], Any]


class NodeKind(StrEnum):
    """Closed set of node kinds.  Values are the lowercased member names."""

    BOOLEAN = auto()
    STRING = auto()
    NUMBER = auto()
    ANY = auto()
    MAYBE = auto()
    MAPPING = auto()
    SEQUENCE = auto()
    OBJECT = auto()
    ENUMERATION = auto()
    ONE_OF = auto()
    REF = auto()
    REFINE = auto()


class Node(ABC):
    """Base class of all schema nodes."""

    __slots__ = ()

    kind: ClassVar[NodeKind]

    @abstractmethod
    def check(self, context: Context) -> Outcome:
        """Check the value behind ``context``; return a Success or a Failure."""

    def validate(self, context: Context) -> Success:
        """Like ``check`` but raise ``ValidationError`` on failure."""
        outcome = self.check(context)
        if isinstance(outcome, Failure):
            raise outcome.to_error()
        return outcome

    def and_then(self, refine: Refine) -> RefineNode:
        """Post-process values accepted by this node.

        ``refine(value, error)`` returns the new value.  Calling
        ``error(message)`` raises a ``ValidationError`` at the current path
        and rejects the value; so does raising ``ValidationError`` directly.
        Either way the rejection becomes an ordinary failure of this node, so
        an enclosing ``one_of`` moves on to its next alternative.
        """
        return RefineNode(self, refine)


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


class _TypeNode(Node):
    """A scalar node accepting values of one runtime type."""

    __slots__ = ()

    @abstractmethod
    def accepts(self, value: Any) -> bool: ...

    def check(self, context: Context) -> Outcome:
        def _check(value: Any) -> Outcome:
            if not self.accepts(value):
                return context.error(
                    f"Expected value of type {self.kind} but got {type_name(value)}"
                )
            return context.ok(value)

        return context.unwrap(_check)


@dataclass(frozen=True, slots=True, eq=False)
class BooleanNode(_TypeNode):
    kind: ClassVar[NodeKind] = NodeKind.BOOLEAN

    def accepts(self, value: Any) -> bool:
        return isinstance(value, bool)


@dataclass(frozen=True, slots=True, eq=False)
class StringNode(_TypeNode):
    kind: ClassVar[NodeKind] = NodeKind.STRING

    def accepts(self, value: Any) -> bool:
        return isinstance(value, str)


@dataclass(frozen=True, slots=True, eq=False)
class NumberNode(_TypeNode):
    kind: ClassVar[NodeKind] = NodeKind.NUMBER

    def accepts(self, value: Any) -> bool:
        # bool subclasses int but is not a number here
        return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True, eq=False)
class AnyNode(Node):
    """Accepts any present value; rejects null and absence."""

    kind: ClassVar[NodeKind] = NodeKind.ANY

    def check(self, context: Context) -> Outcome:
        def _check(value: Any) -> Outcome:
            if value is None or value is UNDEFINED:
                return context.error(f"Expected a value but got {type_name(value)}")
            return context.ok(value)

        return context.unwrap(_check)


@dataclass(frozen=True, slots=True, eq=False)
class EnumerationNode(Node):
    """Accepts one of a fixed, ordered set of scalar values.

    Matching is by equality within the same shape, so ``1`` does not match
    ``True`` and ``"1"`` does not match ``1``.
    """

    kind: ClassVar[NodeKind] = NodeKind.ENUMERATION

    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise SchemaError("enumeration() requires at least one value")

    def check(self, context: Context) -> Outcome:
        def _check(value: Any) -> Outcome:
            shape = type_name(value)
            for candidate in self.values:
                if type_name(candidate) == shape and candidate == value:
                    return context.ok(value)
            expectation = ", ".join(_literal(v) for v in self.values)
            return context.error(
                f"Expected value to be one of {expectation} but got {_literal(value)}"
            )

        return context.unwrap(_check)


def _literal(value: Any) -> str:
    """Stable JSON-like spelling of a scalar for diagnostics."""
    if value is UNDEFINED:
        return "undefined"
    try:
        return json.dumps(value, sort_keys=True)
    except (TypeError, ValueError):
        return repr(value)


# ---------------------------------------------------------------------------
# Wrappers and containers
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, eq=False)
class MaybeNode(Node):
    """Null or absent resolve to ``None``; anything else goes to ``value_node``."""

    kind: ClassVar[NodeKind] = NodeKind.MAYBE

    value_node: Node

    def check(self, context: Context) -> Outcome:
        def _check(value: Any) -> Outcome:
            if value is None or value is UNDEFINED:
                return context.ok(None)
            return self.value_node.check(context)

        return context.unwrap(_check)


@dataclass(frozen=True, slots=True, eq=False)
class MappingNode(Node):
    """Homogeneous keyed container: every value must match ``value_node``."""

    kind: ClassVar[NodeKind] = NodeKind.MAPPING

    value_node: Node

    def check(self, context: Context) -> Outcome:
        return context.build_mapping(
            lambda value_context, _key, _key_context: self.value_node.check(
                value_context
            )
        )


@dataclass(frozen=True, slots=True, eq=False)
class SequenceNode(Node):
    """Homogeneous ordered container: every element must match ``value_node``."""

    kind: ClassVar[NodeKind] = NodeKind.SEQUENCE

    value_node: Node

    def check(self, context: Context) -> Outcome:
        return context.build_sequence(self.value_node.check)


@dataclass(frozen=True, slots=True, eq=False)
class ObjectNode(Node):
    """A record with named fields, optional defaults and strict keys.

    Present keys are checked in input order; the first failure wins.  Then
    every declared field still missing is filled, in declared order, either
    from ``defaults`` (deep-copied, never validated) or by checking its node
    against an ``AbsentContext`` so that ``maybe`` fields become ``None`` and
    required fields fail.

    Attributes:
        fields:   Field name -> node, in declaration order.
        defaults: Field name -> default value.  May be sparse.
        options:  See ``ObjectOptions``.
    """

    kind: ClassVar[NodeKind] = NodeKind.OBJECT

    fields: Mapping[str, Node]
    defaults: Mapping[str, Any] = field(default_factory=dict)
    options: ObjectOptions = field(default_factory=ObjectOptions)

    def __post_init__(self) -> None:
        undeclared = [name for name in self.defaults if name not in self.fields]
        if undeclared:
            raise SchemaError(f"Defaults given for undeclared fields: {undeclared}")
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "defaults", MappingProxyType(dict(self.defaults)))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self.fields)

    def check(self, context: Context) -> Outcome:
        outcome = context.build_mapping(self._check_entry)
        if isinstance(outcome, Failure):
            return outcome

        value = outcome.value
        for name, node in self.fields.items():
            if name in value:
                continue
            if name in self.defaults:
                value[name] = copy.deepcopy(self.defaults[name])
                continue
            message = context.build_message(
                Leaf(f'While validating missing value for key "{name}"')
            )
            missing = node.check(AbsentContext(message, context))
            if isinstance(missing, Failure):
                return missing
            if missing.value is not UNDEFINED:
                value[name] = missing.value
        return Success(value, outcome.context)

    def _check_entry(
        self, value_context: Context, key: Any, key_context: Context
    ) -> Outcome:
        node = self.fields.get(key)
        if node is not None:
            return node.check(value_context)
        if self.options.allow_extra:
            return value_context.unwrap(value_context.ok)
        return key_context.error(self._unexpected_key(key))

    def _unexpected_key(self, key: Any) -> str:
        if self.options.suggest:
            suggestion = suggest(str(key), self.names)
            if suggestion is not None:
                return f'Unexpected key: "{key}", did you mean "{suggestion}"?'
        return f'Unexpected key: "{key}"'


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True, eq=False)
class OneOfNode(Node):
    """First alternative that accepts the value wins.

    When all of them fail, their failures are merged by
    ``merge_failures`` into the most specific single diagnostic.
    """

    kind: ClassVar[NodeKind] = NodeKind.ONE_OF

    alternatives: tuple[Node, ...]

    def __post_init__(self) -> None:
        if not self.alternatives:
            raise SchemaError("one_of() requires at least one alternative")

    def check(self, context: Context) -> Outcome:
        failures: list[Failure] = []
        for node in self.alternatives:
            outcome = node.check(context)
            if isinstance(outcome, Success):
                return outcome
            failures.append(outcome)
        return merge_failures(failures)


@dataclass(frozen=True, slots=True, eq=False)
class RefineNode(Node):
    """Validate with ``base``, then pass the value through ``refine``."""

    kind: ClassVar[NodeKind] = NodeKind.REFINE

    base: Node
    refine: Refine

    def check(self, context: Context) -> Outcome:
        outcome = self.base.check(context)
        if isinstance(outcome, Failure):
            return outcome
        def error(message: str | Message) -> NoReturn:
            raise context.error(message).to_error()

        try:
            refined = self.refine(outcome.value, error)
        except ValidationError as exc:
            return Failure(exc.messages)
        if isinstance(refined, Failure):
            return refined
        return Success(refined, outcome.context)


class RefNode(Node):
    """Single-assignment indirection for recursive and forward references.

    Example::

        tree = ref()
        tree.set(object_({"name": string, "children": sequence(tree)}))
    """

    __slots__ = ("_target",)

    kind: ClassVar[NodeKind] = NodeKind.REF

    def __init__(self) -> None:
        self._target: Node | None = None

    @property
    def is_set(self) -> bool:
        return self._target is not None

    def set(self, node: Node) -> None:
        if self._target is not None:
            raise SchemaError("ref() can only be assigned once")
        if not isinstance(node, Node):
            raise SchemaError(f"ref() target must be a Node, got {type(node)!r}")
        logger.debug("ref %#x -> %s", id(self), node.kind)
        self._target = node

    def check(self, context: Context) -> Outcome:
        if self._target is None:
            raise SchemaError("Trying to validate with an uninitialized ref")
        return self._target.check(context)

    def __repr__(self) -> str:
        target = self._target.kind if self._target is not None else "unset"
        return f"RefNode({target})"
