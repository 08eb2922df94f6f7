"""Merge the failures of every ``one_of`` alternative into one diagnostic.

Runs only once all alternatives have failed.  Chains arrive outermost-first
(as ``Failure.messages`` stores them) and are processed innermost-first, so
the head of a working chain is the message raised where the alternative
actually gave up.

Steps:

1. Explode: a chain whose head is an ``Alternative`` (a nested ``one_of``
   that failed at the same position) becomes one chain per branch, each
   followed by the same rest-of-chain.
2. Weigh: a chain weighs as many lines as it spans, an exploded branch
   counting the lines it carries.  Only the heaviest chains survive: a
   failure that got deeper into a shape says more than a shallow type
   mismatch.
3. If a single distinct chain survives, it is the result, verbatim.
4. Otherwise, the longest outermost-first prefix shared by every chain
   becomes the common context, and the distinct remainders become the
   branches of one ``Alternative`` placed right after it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from validated.message import Alternative, Composite, Message
from validated.result import Failure

__all__ = ["common_prefix", "explode", "merge_failures", "weigh"]

logger = logging.getLogger(__name__)

# Innermost-first chain of messages.
Chain = tuple[Message, ...]


def explode(chain: Chain) -> list[Chain]:
    """Flatten a nested disjunction at the head of an innermost-first chain."""
    head, rest = chain[0], chain[1:]
    return [(branch, *rest) for branch in head.explode()]


def weigh(chain: Chain) -> int:
    """Number of diagnostic lines ``chain`` spans."""
    return sum(message.weight for message in chain)


def common_prefix(chains: Sequence[Chain]) -> Chain:
    """Longest prefix shared by all ``chains`` under structural equality."""
    prefix: list[Message] = []
    for column in zip(*chains, strict=False):
        first = column[0]
        if any(message != first for message in column[1:]):
            break
        prefix.append(first)
    return tuple(prefix)


def _unique(chains: Sequence[Chain]) -> list[Chain]:
    seen: list[Chain] = []
    for chain in chains:
        if chain not in seen:
            seen.append(chain)
    return seen


def merge_failures(failures: Sequence[Failure]) -> Failure:
    """Build the single most informative failure out of ``failures``.

    Args:
        failures: One failure per ``one_of`` alternative, in declared order.
            Must not be empty.

    Returns:
        Either the one most specific failure, or a failure made of the
        shared context followed by an ``Alternative`` of what differs.
    """
    if not failures:
        raise ValueError("merge_failures requires at least one failure")

    candidates: list[Chain] = []
    for failure in failures:
        candidates.extend(explode(tuple(reversed(failure.messages))))

    max_weight = max(weigh(chain) for chain in candidates)
    survivors = _unique([c for c in candidates if weigh(c) == max_weight])
    logger.debug(
        "one_of: %d failures, %d candidates, %d survive at weight %d",
        len(failures),
        len(candidates),
        len(survivors),
        max_weight,
    )

    if len(survivors) == 1:
        return Failure(tuple(reversed(survivors[0])))

    outermost_first = [tuple(reversed(chain)) for chain in survivors]
    shared = common_prefix(outermost_first)
    logger.debug("one_of: shared context depth %d", len(shared))

    branches: list[Message] = []
    for chain in outermost_first:
        branch = Composite(None, chain[len(shared) :])
        if branch not in branches:
            branches.append(branch)

    return Failure((*shared, Alternative(tuple(branches))))
