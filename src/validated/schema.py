"""Schema construction surface.

Leaf nodes are module-level singletons; everything else is built by a small
factory function.  ``any_`` and ``object_`` carry a trailing underscore so
they do not shadow the builtins.

Example::

    from validated.schema import maybe, number, object_, one_of, sequence, string

    server = object_(
        {"host": string, "port": number, "tags": maybe(sequence(string))},
        {"host": "localhost"},
    )
    listen = one_of(number, server)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from validated.config import ObjectOptions
from validated.nodes import (
    AnyNode,
    BooleanNode,
    EnumerationNode,
    MappingNode,
    MaybeNode,
    Node,
    NumberNode,
    ObjectNode,
    OneOfNode,
    RefNode,
    SequenceNode,
    StringNode,
)

__all__ = [
    "any_",
    "boolean",
    "enumeration",
    "mapping",
    "maybe",
    "number",
    "object_",
    "one_of",
    "partial_object",
    "ref",
    "sequence",
    "string",
]

boolean = BooleanNode()
string = StringNode()
number = NumberNode()
any_ = AnyNode()


def maybe(node: Node) -> MaybeNode:
    """Accept null or absence (both decode to ``None``) or a value of ``node``."""
    return MaybeNode(node)


def mapping(node: Node = any_) -> MappingNode:
    """A mapping with arbitrary keys whose values all match ``node``."""
    return MappingNode(node)


def sequence(node: Node = any_) -> SequenceNode:
    """A sequence whose elements all match ``node``."""
    return SequenceNode(node)


def object_(
    fields: Mapping[str, Node],
    defaults: Mapping[str, Any] | None = None,
    options: ObjectOptions | None = None,
) -> ObjectNode:
    """A record with exactly the declared ``fields``.

    Args:
        fields:   Field name -> node.
        defaults: Values used verbatim for missing fields.  They are trusted:
                  never validated against the field's node.
        options:  Defaults to ``ObjectOptions()`` (no extra keys, suggestions on).
    """
    return ObjectNode(
        fields,
        defaults if defaults is not None else {},
        options if options is not None else ObjectOptions(),
    )


def partial_object(
    fields: Mapping[str, Node], defaults: Mapping[str, Any] | None = None
) -> ObjectNode:
    """Like ``object_`` but undeclared keys pass through unvalidated."""
    return object_(fields, defaults, ObjectOptions(allow_extra=True))


def enumeration(*values: Any) -> EnumerationNode:
    return EnumerationNode(values)


def one_of(*nodes: Node) -> OneOfNode:
    return OneOfNode(nodes)


def ref() -> RefNode:
    """An unassigned reference; call ``.set(node)`` once before validating."""
    return RefNode()
