"""Single normal-order beta steps."""

from __future__ import annotations

from ..ast import Appl, Lam, Term, Var
from ..names import NameSupply, resolve
from ..subst import subst


class IrreducibleTermError(RuntimeError):
    """Raised when asked to step a term that is already in normal form."""

    def __init__(self, term: Term) -> None:
        super().__init__(f"Term is already in normal form: {term}")
        self.term = term


def is_irreducible(term: Term) -> bool:
    """Return ``True`` if ``term`` contains no redex."""

    match term:
        case Var():
            return True
        case Lam(_, body):
            return is_irreducible(body)
        case Appl(Lam(), _):
            return False
        case Appl(left, right):
            return is_irreducible(left) and is_irreducible(right)

    raise TypeError(f"Unexpected term in is_irreducible: {term!r}")


def try_step(term: Term, names: NameSupply) -> Term | None:
    """Contract the leftmost-outermost redex, or return ``None`` if there is none."""

    match term:
        case Appl(Lam(param, body), arg):
            return subst(body, param, arg, names)

        case Appl(left, right):
            left1 = try_step(left, names)
            if left1 is not None:
                return Appl(left1, right)
            right1 = try_step(right, names)
            if right1 is not None:
                return Appl(left, right1)
            return None

        case Lam(param, body):
            body1 = try_step(body, names)
            if body1 is not None:
                return Lam(param, body1)
            return None

        case Var():
            return None

    raise TypeError(f"Unexpected term in step: {term!r}")


def step(term: Term, names: NameSupply | None = None) -> Term:
    """One normal-order beta step.

    The left side of an application is reduced before the right, and a redex
    at the root is always contracted before anything inside it, so an
    argument that is never used is never evaluated.
    """

    reduced = try_step(term, resolve(names))
    if reduced is None:
        raise IrreducibleTermError(term)
    return reduced


__all__ = ["IrreducibleTermError", "is_irreducible", "step", "try_step"]
