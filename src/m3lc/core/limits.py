"""Interpreter recursion limit for deep terms.

The engine recurses once per level of term depth, so a Church numeral much
past a thousand does not fit under Python's default limit.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager

DEFAULT_RECURSION_LIMIT = 10_000


@contextmanager
def recursion_limit(limit: int = DEFAULT_RECURSION_LIMIT) -> Iterator[None]:
    """Raise the recursion limit to at least ``limit`` inside the block."""
    previous = sys.getrecursionlimit()
    if limit > previous:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


__all__ = ["DEFAULT_RECURSION_LIMIT", "recursion_limit"]
