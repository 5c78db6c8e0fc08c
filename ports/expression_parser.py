"""
Port: ExpressionParser
Odpowiedzialność: zamiana tekstu wyrażenia na drzewo AlgExpr.
"""
from typing import Protocol, runtime_checkable

from contracts import AlgExpr


@runtime_checkable
class ExpressionParser(Protocol):
    def parse(self, text: str) -> AlgExpr:
        """
        Parses an algebraic expression into an AlgExpr tree.

        Grammar (lowest to highest precedence, left-associative):
          AddSub  := MulDiv (('+' | '-') MulDiv)*
          MulDiv  := Primary (('*' | '/') Primary)*
          Primary := '-' Primary | NUMBER | VAR | '(' AddSub ')'

        Raises ExprSyntaxError (a SyntaxError) on an unexpected character,
        unexpected end of input, a missing ')' or trailing tokens.
        """
        ...
