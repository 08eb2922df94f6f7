"""Plain-text rendering of Message trees and failure chains."""

from __future__ import annotations

from collections.abc import Iterable

from validated.config import RenderOptions
from validated.message import Alternative, Composite, Leaf, Message

__all__ = ["render", "render_chain"]

_DEFAULT_OPTIONS = RenderOptions()


def render(message: Message, options: RenderOptions | None = None) -> list[str]:
    """Render one message to a list of lines.

    Args:
        message: The message tree to render.
        options: Layout options.  Defaults to ``RenderOptions()``.

    Returns:
        Lines without trailing newlines.
    """
    options = options if options is not None else _DEFAULT_OPTIONS
    pad = " " * options.indent

    if isinstance(message, Leaf):
        return [message.text]

    if isinstance(message, Composite):
        lines: list[str] = []
        for child in message.children:
            lines.extend(render(child, options))
        if message.text is None:
            return lines
        return [message.text, *(pad + line for line in lines)]

    if isinstance(message, Alternative):
        lines = [options.alternative_header]
        cont = " " * len(options.bullet)
        for branch in message.branches:
            branch_lines = render(branch, options) or [""]
            lines.append(options.bullet + branch_lines[0])
            lines.extend(cont + line for line in branch_lines[1:])
        return lines

    raise TypeError(f"Unsupported message type: {type(message)!r}")


def render_chain(
    messages: Iterable[Message], options: RenderOptions | None = None
) -> str:
    """Render an outermost-first chain of messages, one or more lines each."""
    lines: list[str] = []
    for message in messages:
        lines.extend(render(message, options))
    return "\n".join(lines)
