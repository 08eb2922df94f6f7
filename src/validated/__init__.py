"""validated - declarative validation for already-parsed tree-shaped data."""

from __future__ import annotations

from validated.api import check, is_valid, validate
from validated.config import ObjectOptions, RenderOptions
from validated.context import UNDEFINED, AbsentContext, Context, ValueContext
from validated.errors import SchemaError, ValidatedError, ValidationError
from validated.message import Alternative, Composite, Leaf, Message
from validated.nodes import Node, NodeKind
from validated.render import render, render_chain
from validated.result import Failure, Outcome, Success
from validated.schema import (
    any_,
    boolean,
    enumeration,
    mapping,
    maybe,
    number,
    object_,
    one_of,
    partial_object,
    ref,
    sequence,
    string,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "UNDEFINED",
    "AbsentContext",
    "Alternative",
    "Composite",
    "Context",
    "Failure",
    "Leaf",
    "Message",
    "Node",
    "NodeKind",
    "ObjectOptions",
    "Outcome",
    "RenderOptions",
    "SchemaError",
    "Success",
    "ValidatedError",
    "ValidationError",
    "ValueContext",
    "any_",
    "boolean",
    "check",
    "enumeration",
    "is_valid",
    "mapping",
    "maybe",
    "number",
    "object_",
    "one_of",
    "partial_object",
    "ref",
    "render",
    "render_chain",
    "sequence",
    "string",
    "validate",
]
