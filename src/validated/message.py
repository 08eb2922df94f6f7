"""Diagnostic message tree: Leaf, Composite and Alternative.

``Message`` is a closed union of three frozen dataclasses.  Equality is
structural and comes from the dataclass machinery:

- ``Leaf``        equal iff same text.
- ``Composite``   equal iff same text and pairwise-equal children, in order.
- ``Alternative`` equal iff pairwise-equal branches, in order.

Instances of different variants never compare equal, even when their text
matches.  Each variant also answers two questions the ``one_of``
disambiguation asks of the messages in a failure chain, so that code never
has to inspect the concrete variant:

- ``weight``:  how many chain lines the message stands for.  A bare
  ``Composite`` (the branch of a merged ``one_of``) stands for its children;
  anything else is one line.
- ``explode``: the messages this one stands for when flattening disjunctions.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Alternative", "Composite", "Leaf", "Message", "coerce"]


@dataclass(frozen=True, slots=True)
class Leaf:
    """A single line of diagnostic text."""

    text: str

    @property
    def weight(self) -> int:
        return 1

    def explode(self) -> tuple[Message, ...]:
        return (self,)


@dataclass(frozen=True, slots=True)
class Composite:
    """A headed group of messages.

    Attributes:
        text:     Heading line.  ``None`` for a bare group, which renders its
                  children in place (used for the branches of a merged
                  ``one_of`` failure).
        children: Ordered child messages.
    """

    text: str | None
    children: tuple[Message, ...] = ()

    @property
    def weight(self) -> int:
        if self.text is None:
            return sum(child.weight for child in self.children)
        return 1

    def explode(self) -> tuple[Message, ...]:
        return (self,)


@dataclass(frozen=True, slots=True)
class Alternative:
    """A disjunction: the value failed every one of ``branches``."""

    branches: tuple[Message, ...]

    @property
    def weight(self) -> int:
        return 1

    def explode(self) -> tuple[Message, ...]:
        return self.branches


Message = Leaf | Composite | Alternative


def coerce(message: str | Message) -> Message:
    """Wrap plain text in a ``Leaf``; pass messages through unchanged."""
    if isinstance(message, str):
        return Leaf(message)
    return message
