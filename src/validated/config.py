"""ObjectOptions and RenderOptions: immutable knobs for objects and rendering.

Both are frozen dataclasses validated on construction, so a bad option is
reported where the schema is built rather than in the middle of a
validation run.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ObjectOptions", "RenderOptions"]


@dataclass(frozen=True, slots=True)
class ObjectOptions:
    """Per-object validation behaviour.

    Attributes:
        allow_extra: When True, keys that are not declared fields are passed
            through untouched instead of being rejected.  Default False.
        suggest: When True, an unexpected key is reported together with the
            nearest declared field name (if one is close enough).  Default True.
    """

    allow_extra: bool = False
    suggest: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.allow_extra, bool):
            msg = f"allow_extra must be a bool, got {self.allow_extra!r}"
            raise TypeError(msg)
        if not isinstance(self.suggest, bool):
            msg = f"suggest must be a bool, got {self.suggest!r}"
            raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Layout of rendered diagnostics.

    Attributes:
        indent: Spaces added per nesting level (>= 0).
        alternative_header: Line printed above the branches of an
            ``Alternative`` message.
        bullet: Prefix of the first line of every alternative branch.
    """

    indent: int = 2
    alternative_header: str = "Either:"
    bullet: str = "- "

    def __post_init__(self) -> None:
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
