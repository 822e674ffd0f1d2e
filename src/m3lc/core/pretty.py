"""Pretty-printing of lambda terms in the surface syntax.

Output uses as few parentheses as the grammar allows:

* an abstraction on the left of an application is parenthesized;
* an application on the right of an application is parenthesized;
* an abstraction on the right of an application is parenthesized unless it
  ends the enclosing text, since its body would otherwise swallow whatever
  follows.

Parsing the output gives back an alpha-equivalent term.
"""

from __future__ import annotations

from .ast import Appl, Defn, File, Lam, Term, Var


def _paren(text: str) -> str:
    return f"({text})"


def _fmt(term: Term, tail: bool) -> str:
    """Render ``term``; ``tail`` is true when nothing is printed after it."""

    match term:
        case Var(name):
            return name

        case Lam(param, body):
            return f"fn {param} => {_fmt(body, True)}"

        case Appl(left, right):
            if isinstance(left, Lam):
                left_text = _paren(_fmt(left, True))
            else:
                left_text = _fmt(left, False)

            if isinstance(right, Appl) or (isinstance(right, Lam) and not tail):
                right_text = _paren(_fmt(right, True))
            else:
                right_text = _fmt(right, tail)
            return f"{left_text} {right_text}"

    raise TypeError(f"Cannot pretty-print unknown term: {term!r}")


def pretty(term: Term) -> str:
    """Return the canonical text of ``term``.

    Recurses once per level of nesting, like the rest of the engine.
    """

    return _fmt(term, True)


def pretty_defn(defn: Defn) -> str:
    return f"{defn.name} := {pretty(defn.term)}"


def pretty_file(file: File) -> str:
    lines = [f"{pretty_defn(defn)};" for defn in file.defns]
    lines.append(f"main := {pretty(file.main)};")
    return "\n".join(lines)


__all__ = ["pretty", "pretty_defn", "pretty_file"]
