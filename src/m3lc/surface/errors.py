"""Parse error type."""

from __future__ import annotations

from dataclasses import dataclass

from m3lc.common.span import Span


@dataclass
class ParseError(Exception):
    message: str
    span: Span
    source: str | None = None

    def __str__(self) -> str:
        if self.source is None:
            return f"{self.message} @ {self.span.start}:{self.span.end}"
        line, col = self.span.line_col(self.source)
        snippet = self.span.extract(self.source)
        return f"{self.message} @ {line}:{col}: {snippet!r}"


__all__ = ["ParseError"]
