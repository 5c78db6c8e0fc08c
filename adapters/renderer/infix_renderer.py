"""
Adapter: InfixRenderer
Implementuje port Renderer: w pełni nawiasowana notacja infiksowa.

  Add(1, 2) → "(1 + 2)"
  Neg(x)    → "(-x)"
"""
from __future__ import annotations

from contracts import AlgExpr, Add, Div, Int, Mul, Neg, Sub, Var

_SYMBOLS = {Add: "+", Sub: "-", Mul: "*", Div: "/"}


class InfixRenderer:

    def render(self, ast: AlgExpr) -> str:
        if isinstance(ast, Int):
            return str(ast.value)
        if isinstance(ast, Var):
            return ast.name
        if isinstance(ast, Neg):
            return f"(-{self.render(ast.arg)})"
        symbol = _SYMBOLS[type(ast)]
        return f"({self.render(ast.arg1)} {symbol} {self.render(ast.arg2)})"
