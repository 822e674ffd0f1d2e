"""Abstract syntax tree nodes for the untyped lambda calculus."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from .names import NameSupply


@dataclass(frozen=True)
class Term:
    """Base class for all lambda terms.

    Terms are immutable, so a subtree that an operation leaves untouched is
    shared between its input and output instead of being copied.
    """

    def __call__(self, arg: Term) -> Appl:
        """Apply this term to ``arg``."""
        return Appl(self, arg)

    # --- Substitution ---------------------------------------------------------
    def subst(
        self, name: str, replacement: Term, names: NameSupply | None = None
    ) -> Term:
        """Substitute ``replacement`` for free occurrences of ``name``."""
        from .subst import subst

        return subst(self, name, replacement, names)

    def free_vars(self) -> frozenset[str]:
        from .subst import free_vars

        return free_vars(self)

    # --- Reduction ------------------------------------------------------------
    def is_irreducible(self) -> bool:
        from .reduce.beta import is_irreducible

        return is_irreducible(self)

    def step(self, names: NameSupply | None = None) -> Term:
        """Perform the leftmost-outermost beta step."""
        from .reduce.beta import step

        return step(self, names)

    def reduce(self, verbose: bool = False, names: NameSupply | None = None) -> Term:
        """Reduce to beta-normal form. May not return if there is none."""
        from .reduce.normalize import reduce

        return reduce(self, verbose=verbose, names=names)

    def reduction_chain(self, names: NameSupply | None = None) -> Iterator[Term]:
        from .reduce.normalize import reduction_chain

        return reduction_chain(self, names)

    # --- Comparison -----------------------------------------------------------
    def alpha_equiv(self, other: Term) -> bool:
        """Structural equality up to renaming of bound variables."""
        from .alpha import alpha_equiv

        return alpha_equiv(self, other)

    # --- Display --------------------------------------------------------------
    def __str__(self) -> str:
        from .pretty import pretty

        return pretty(self)


@dataclass(frozen=True)
class Var(Term):
    """A named variable, bound or free.

    Args:
        name: Opaque identifier. Names containing ``.`` are reserved for
            generated fresh names and never come out of the parser.
    """

    name: str


@dataclass(frozen=True)
class Lam(Term):
    """Lambda abstraction binding ``param`` over ``body``."""

    param: str
    body: Term


@dataclass(frozen=True)
class Appl(Term):
    """Function application ``left right``."""

    left: Term
    right: Term


@dataclass(frozen=True)
class Defn:
    """A named term, resolved later by substitution."""

    name: str
    term: Term

    def __str__(self) -> str:
        from .pretty import pretty_defn

        return pretty_defn(self)


@dataclass(frozen=True)
class File:
    """A sequence of definitions followed by a ``main`` term."""

    defns: Sequence[Defn]
    main: Term

    def unroll(self) -> Term:
        """Collapse the definitions into a single term.

        Each definition abstracts over everything after it and is applied to
        its own right-hand side, so::

            d1 := t1;
            d2 := t2;
            main := t3;

        becomes ``(fn d1 => (fn d2 => t3) t2) t1``.
        """
        term = self.main
        for defn in reversed(self.defns):
            term = Appl(Lam(defn.name, term), defn.term)
        return term

    def __str__(self) -> str:
        from .pretty import pretty_file

        return pretty_file(self)


__all__ = ["Term", "Var", "Lam", "Appl", "Defn", "File"]
