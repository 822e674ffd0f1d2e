"""Full normalization by iterated normal-order steps."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..ast import Term
from ..names import NameSupply, resolve
from .beta import try_step

logger = logging.getLogger(__name__)


def reduction_chain(term: Term, names: NameSupply | None = None) -> Iterator[Term]:
    """Yield ``term`` and every term it steps to, ending with its normal form.

    The generator never ends for a term without a normal form; callers that
    need a budget can stop iterating.
    """

    supply = resolve(names)
    count = 0
    current: Term | None = term
    while current is not None:
        yield current
        logger.debug("step %d: %s", count, current)
        current = try_step(current, supply)
        count += 1


def reduce(term: Term, verbose: bool = False, names: NameSupply | None = None) -> Term:
    """Reduce ``term`` to beta-normal form.

    With ``verbose`` each term is printed before it is stepped. Does not
    return if ``term`` has no normal form. Recursion follows term depth, so
    very deep terms need ``m3lc.core.limits.recursion_limit``.
    """

    previous: Term | None = None
    for current in reduction_chain(term, names):
        if verbose and previous is not None:
            print(previous)
        previous = current
    assert previous is not None
    return previous


__all__ = ["reduction_chain", "reduce"]
