"""
Tokenizer wyrażeń algebraicznych.

Tokeny: number | var | op (+ - * /) | lparen | rparen.
  - liczba: maksymalny ciąg cyfr dziesiętnych (bez znaku i kropki)
  - zmienna: maksymalny ciąg liter ASCII ("abc" to jedna zmienna)
  - białe znaki pomijane
Każdy inny znak → ExprSyntaxError.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from contracts import ExprSyntaxError

TokenKind = Literal["number", "var", "op", "lparen", "rparen"]

_TOKEN_RE = re.compile(
    r'(?P<number>[0-9]+)'
    r'|(?P<var>[A-Za-z]+)'
    r'|(?P<op>[+\-*/])'
    r'|(?P<lparen>\()'
    r'|(?P<rparen>\))'
    r'|(?P<ws>\s+)'
    r'|(?P<error>.)',
    re.DOTALL,
)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int

    @property
    def value(self) -> int:
        """Wartość tokenu liczbowego."""
        try:
            return int(self.text)
        except ValueError:
            # limit długości konwersji str → int w CPythonie
            raise ExprSyntaxError(
                f"Number literal too long ({len(self.text)} digits) at position {self.position}",
                found=self.text,
                position=self.position,
            ) from None

    def describe(self) -> str:
        if self.kind == "number":
            return f"number {self.text}"
        if self.kind == "var":
            return f"variable {self.text!r}"
        return repr(self.text)


def tokenize(text: str) -> list[Token]:
    """Zamienia tekst na listę tokenów (zachłannie, przed parsowaniem)."""
    tokens: list[Token] = []
    for m in _TOKEN_RE.finditer(text):
        kind = m.lastgroup
        if kind == "ws":
            continue
        if kind == "error":
            raise ExprSyntaxError(
                f"Unexpected character: {m.group()!r} at position {m.start()}",
                found=m.group(),
                position=m.start(),
            )
        tokens.append(Token(kind=kind, text=m.group(), position=m.start()))  # type: ignore[arg-type]
    return tokens
