"""Alpha-equivalence of lambda terms.

Binders of the two terms are paired in an ordered context as the comparison
descends. Two variables match when the innermost pair binding either of them
binds both, or when neither is bound and the names are equal. This does not
go through ``subst``, so it can check substitution results independently of
how fresh names are generated.
"""

from __future__ import annotations

from .ast import Appl, Lam, Term, Var


def alpha_equiv(left: Term, right: Term) -> bool:
    """Return ``True`` if the terms are equal up to bound-variable names."""

    return _alpha_equiv(left, right, [])


def _alpha_equiv(left: Term, right: Term, ctx: list[tuple[str, str]]) -> bool:
    match left, right:
        case Var(x), Var(y):
            for a, b in reversed(ctx):
                if a == x or b == y:
                    return a == x and b == y
            return x == y

        case Lam(p1, body1), Lam(p2, body2):
            ctx.append((p1, p2))
            try:
                return _alpha_equiv(body1, body2, ctx)
            finally:
                ctx.pop()

        case Appl(l1, r1), Appl(l2, r2):
            return _alpha_equiv(l1, l2, ctx) and _alpha_equiv(r1, r2, ctx)

    return False


__all__ = ["alpha_equiv"]
