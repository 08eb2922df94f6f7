"""Nearest-name suggestions for unexpected object keys.

``suggest`` picks the declared field name with the smallest Levenshtein
distance to an unknown key.  Ties go to the name declared first
(``np.argmin`` returns the first minimum), so suggestions are deterministic.

Lookups are memoised in a module-level LRU cache guarded by a lock: schema
trees are shared between threads, and a typo in a config file tends to be
re-validated many times (once per ``one_of`` alternative, for instance).
"""

from __future__ import annotations

import logging
import threading

import numpy as np
from cachetools import LRUCache, cached

__all__ = ["levenshtein_distance", "nearest", "suggest"]

logger = logging.getLogger(__name__)


def levenshtein_distance(a: str, b: str) -> int:
    """Compute the Levenshtein (edit) distance between two strings.

    Rolling single-row dynamic programming, with the shorter string on the
    inner loop.

    Args:
        a: First string.
        b: Second string.

    Returns:
        The minimum number of single-character insertions, deletions or
        substitutions turning ``a`` into ``b``.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    row = list(range(len(b) + 1))
    for i, ch_a in enumerate(a, start=1):
        diagonal, row[0] = row[0], i
        for j, ch_b in enumerate(b, start=1):
            above = row[j]
            row[j] = min(
                row[j - 1] + 1,
                above + 1,
                diagonal + (ch_a != ch_b),
            )
            diagonal = above
    return row[-1]


@cached(cache=LRUCache(maxsize=1024), lock=threading.Lock())
def nearest(key: str, names: tuple[str, ...]) -> tuple[str, int] | None:
    """Return ``(name, distance)`` for the name in ``names`` closest to ``key``.

    Args:
        key:   The unknown key.
        names: Candidate names in declaration order.

    Returns:
        The closest name and its distance, or ``None`` when ``names`` is empty.
    """
    if not names:
        return None
    distances = np.fromiter(
        (levenshtein_distance(name, key) for name in names),
        dtype=np.int64,
        count=len(names),
    )
    best = int(np.argmin(distances))
    return names[best], int(distances[best])


def suggest(key: str, names: tuple[str, ...]) -> str | None:
    """Return the declared name ``key`` was probably meant to be, if any.

    A name qualifies only when its distance is strictly below ``len(key)``:
    replacing every character of the key is not a typo.
    """
    match = nearest(key, names)
    if match is None:
        return None
    name, distance = match
    logger.debug("nearest name to %r is %r (distance %d)", key, name, distance)
    if distance < len(key):
        return name
    return None
