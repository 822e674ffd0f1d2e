"""Fresh variable names for alpha-renaming.

Generated names have the form ``<stem>.<n>``. The parser rejects ``.`` in
identifiers, so a generated name can never collide with a user-written one.
Every supply draws ``n`` from one process-wide counter, so a name is never
handed out twice, even when a term built in one session is reduced in
another.
"""

from __future__ import annotations

import itertools
import threading

SEPARATOR = "."

_COUNTER = itertools.count(1)
_LOCK = threading.Lock()


def stem(name: str) -> str:
    """Return ``name`` without any generated ``.<n>`` suffix."""
    return name.split(SEPARATOR, 1)[0]


class NameSupply:
    """A reduction session's handle on the fresh-name counter.

    Sessions share the counter but keep their own tally of how many names
    they used, which the command-line front end reports.
    """

    def __init__(self) -> None:
        self.issued = 0

    def fresh(self, base: str) -> str:
        with _LOCK:
            n = next(_COUNTER)
            self.issued += 1
        return f"{stem(base)}{SEPARATOR}{n}"


_DEFAULT = NameSupply()


def default_supply() -> NameSupply:
    return _DEFAULT


def resolve(names: NameSupply | None) -> NameSupply:
    return _DEFAULT if names is None else names


__all__ = ["NameSupply", "default_supply", "resolve", "stem"]
