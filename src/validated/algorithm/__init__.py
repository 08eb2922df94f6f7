"""algorithm subpackage: the pure procedures behind the node types.

- ``merge_failures``: disambiguation of ``one_of`` failures.
- ``suggest`` / ``nearest`` / ``levenshtein_distance``: typo suggestions for
  unexpected object keys.

Example::

    from validated.algorithm import suggest

    suggest("nmae", ("name", "value"))   # "name"
"""

from __future__ import annotations

from validated.algorithm.disambiguation import (
    common_prefix,
    explode,
    merge_failures,
    weigh,
)
from validated.algorithm.suggest import levenshtein_distance, nearest, suggest

__all__ = [
    "common_prefix",
    "explode",
    "levenshtein_distance",
    "merge_failures",
    "nearest",
    "suggest",
    "weigh",
]
