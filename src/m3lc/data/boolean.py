"""Church booleans: ``true`` picks its first argument, ``false`` its second."""

from __future__ import annotations

from m3lc.core.ast import Appl, Lam, Term, Var
from m3lc.core.names import NameSupply

TRUE: Term = Lam("t", Lam("e", Var("t")))
FALSE: Term = Lam("t", Lam("e", Var("e")))
AND: Term = Lam("a", Lam("b", Appl(Appl(Var("a"), Var("b")), FALSE)))


def boolean(value: bool) -> Term:
    return TRUE if value else FALSE


def and_(left: Term, right: Term, names: NameSupply | None = None) -> Term:
    """Reduce ``AND left right``."""
    return Appl(Appl(AND, left), right).reduce(names=names)


def as_boolean(term: Term) -> bool | None:
    """Return the boolean ``term`` is alpha-equivalent to, if any."""
    if term.alpha_equiv(TRUE):
        return True
    if term.alpha_equiv(FALSE):
        return False
    return None


__all__ = ["TRUE", "FALSE", "AND", "boolean", "and_", "as_boolean"]
