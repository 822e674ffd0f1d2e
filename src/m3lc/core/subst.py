"""Capture-avoiding substitution.

    [s/x] x           = s
    [s/x] y           = y
    [s/x] (fn x => t) = fn x => t
    [s/x] (fn y => t) = fn z => [s/x] ([z/y] t)     for fresh z
    [s/x] (t1 t2)     = ([s/x] t1) ([s/x] t2)

Every abstraction the substitution passes through gets a fresh binder, even
when no capture is possible. The renaming ``[z/y]`` and the outer ``[s/x]``
are carried together in one mapping, so each node is visited once no matter
how deeply abstractions nest.
"""

from __future__ import annotations

from collections.abc import Mapping

from .ast import Appl, Lam, Term, Var
from .names import NameSupply, resolve


def subst(
    term: Term, name: str, replacement: Term, names: NameSupply | None = None
) -> Term:
    """Replace free occurrences of ``name`` in ``term`` with ``replacement``."""

    return _subst(term, {name: replacement}, resolve(names))


def _subst(term: Term, mapping: Mapping[str, Term], names: NameSupply) -> Term:
    if not mapping:
        return term

    match term:
        case Var(name):
            return mapping.get(name, term)

        case Lam(param, body):
            inner = {k: v for k, v in mapping.items() if k != param}
            if not inner:
                # the binder shadows every pending substitution
                return term
            fresh = names.fresh(param)
            inner[param] = Var(fresh)
            return Lam(fresh, _subst(body, inner, names))

        case Appl(left, right):
            return Appl(_subst(left, mapping, names), _subst(right, mapping, names))

    raise TypeError(f"Unexpected term in subst: {term!r}")


def free_vars(term: Term) -> frozenset[str]:
    """Return the names occurring free in ``term``."""

    match term:
        case Var(name):
            return frozenset((name,))
        case Lam(param, body):
            return free_vars(body) - {param}
        case Appl(left, right):
            return free_vars(left) | free_vars(right)

    raise TypeError(f"Unexpected term in free_vars: {term!r}")


__all__ = ["subst", "free_vars"]
