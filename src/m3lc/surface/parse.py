"""Parser for the surface syntax.

    ident    := [A-Za-z_][A-Za-z0-9_]*
    lam      := "fn" ident "=>" appl
    appl     := term (term)*
    term     := lam | ident | "(" appl ")"
    defn     := ident ":=" appl ";"
    file     := defn* "main" ":=" appl ";"

``#`` starts a comment that runs to the end of the line. An abstraction body
extends as far right as possible, so an abstraction can only be the last
term of an application; the grammar below spells that out to stay free of
conflicts.
"""

from __future__ import annotations

from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from m3lc.common.span import Span
from m3lc.core.ast import Appl, Defn, File, Lam, Term, Var
from m3lc.surface.errors import ParseError

_SOURCE: str = ""

reserved = {
    "fn": "FN",
    "main": "MAIN",
}

tokens = (
    "IDENT",
    "DARROW",
    "DEFINE",
    "LPAREN",
    "RPAREN",
    "SEMI",
    *tuple(reserved.values()),
)

t_DARROW = r"=>"
t_DEFINE = r":="
t_LPAREN = r"\("
t_RPAREN = r"\)"
t_SEMI = r";"

t_ignore = " \t\r"
t_ignore_COMMENT = r"\#.*"


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_IDENT(t: lex.LexToken) -> lex.LexToken:
    r"[A-Za-z_][A-Za-z0-9_]*"
    t.type = reserved.get(t.value, "IDENT")
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span(t.lexpos, t.lexpos + 1)
    char = t.value[0]
    if char == ".":
        raise ParseError("Identifiers may not contain '.'", span, _SOURCE)
    raise ParseError(f"Unexpected character {char!r}", span, _SOURCE)


def p_file(p: yacc.YaccProduction) -> None:
    "file : defns MAIN DEFINE appl SEMI"
    p[0] = File(defns=tuple(p[1]), main=p[4])


def p_defns_multi(p: yacc.YaccProduction) -> None:
    "defns : defns defn"
    p[0] = p[1] + [p[2]]


def p_defns_empty(p: yacc.YaccProduction) -> None:
    "defns :"
    p[0] = []


def p_defn(p: yacc.YaccProduction) -> None:
    "defn : IDENT DEFINE appl SEMI"
    p[0] = Defn(p[1], p[3])


def p_appl_atoms(p: yacc.YaccProduction) -> None:
    "appl : atoms"
    p[0] = p[1]


def p_appl_atoms_lam(p: yacc.YaccProduction) -> None:
    "appl : atoms lam"
    p[0] = Appl(p[1], p[2])


def p_appl_lam(p: yacc.YaccProduction) -> None:
    "appl : lam"
    p[0] = p[1]


def p_atoms_multi(p: yacc.YaccProduction) -> None:
    "atoms : atoms atom"
    p[0] = Appl(p[1], p[2])


def p_atoms_single(p: yacc.YaccProduction) -> None:
    "atoms : atom"
    p[0] = p[1]


def p_atom_ident(p: yacc.YaccProduction) -> None:
    "atom : IDENT"
    p[0] = Var(p[1])


def p_atom_paren(p: yacc.YaccProduction) -> None:
    "atom : LPAREN appl RPAREN"
    p[0] = p[2]


def p_lam(p: yacc.YaccProduction) -> None:
    "lam : FN IDENT DARROW appl"
    p[0] = Lam(p[2], p[4])


def _tok_span(tok: lex.LexToken) -> Span:
    return Span(tok.lexpos, tok.lexpos + len(str(tok.value)))


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span(len(_SOURCE), len(_SOURCE))
        raise ParseError("Unexpected end of input", span, _SOURCE)
    tok = cast(lex.LexToken, p)
    raise ParseError(f"Unexpected token {tok.value!r}", _tok_span(tok), _SOURCE)


_LEXER = None
_PARSERS: dict[str, yacc.LRParser] = {}


def _parse(source: str, start: str) -> object:
    global _SOURCE, _LEXER
    _SOURCE = source
    if _LEXER is None:
        _LEXER = lex.lex()
    lexer = _LEXER.clone()
    lexer.lineno = 1
    parser = _PARSERS.get(start)
    if parser is None:
        parser = yacc.yacc(
            start=start,
            debug=False,
            write_tables=False,
            errorlog=yacc.NullLogger(),
        )
        _PARSERS[start] = parser
    return parser.parse(source, lexer=lexer)


def parse_term(source: str) -> Term:
    """Parse a single application, e.g. ``(fn x => x) y``."""
    return cast(Term, _parse(source, "appl"))


def parse_file(source: str) -> File:
    """Parse a definition file ending in ``main := ...;``."""
    return cast(File, _parse(source, "file"))


__all__ = ["parse_term", "parse_file"]
