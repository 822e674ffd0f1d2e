"""Church numerals.

``n`` is encoded as ``fn f => fn a => f (f (... (f a)))`` with ``n``
applications of ``f``. Arithmetic is left to lambda-calculus programs; this
module only builds numerals, takes successors and recognizes results.
"""

from __future__ import annotations

from m3lc.core.ast import Appl, Lam, Term, Var
from m3lc.core.names import NameSupply

SUCC: Term = Lam(
    "n",
    Lam("f", Lam("a", Appl(Var("f"), Appl(Appl(Var("n"), Var("f")), Var("a"))))),
)


def numeral(n: int) -> Term:
    """Return the Church numeral for ``n``."""
    if n < 0:
        raise ValueError(f"Church numerals are natural numbers, got {n}")
    body: Term = Var("a")
    for _ in range(n):
        body = Appl(Var("f"), body)
    return Lam("f", Lam("a", body))


def succ(term: Term, names: NameSupply | None = None) -> Term:
    """Reduce ``SUCC term``.

    Numerals past about a thousand need a raised recursion limit, see
    ``m3lc.core.limits.recursion_limit``.
    """
    return Appl(SUCC, term).reduce(names=names)


def as_numeral(term: Term) -> int | None:
    """Return the number ``term`` encodes, or ``None`` if it is not a numeral.

    Bound names do not matter: ``fn g => fn x => g x`` is 1.
    """
    if not isinstance(term, Lam) or not isinstance(term.body, Lam):
        return None
    f, a = term.param, term.body.param
    if f == a:
        # the inner binder shadows f, so only 0 is possible
        return 0 if term.body.body == Var(a) else None

    count = 0
    current = term.body.body
    while isinstance(current, Appl):
        if current.left != Var(f):
            return None
        count += 1
        current = current.right
    return count if current == Var(a) else None


__all__ = ["SUCC", "numeral", "succ", "as_numeral"]
