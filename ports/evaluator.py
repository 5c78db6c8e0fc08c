"""
Port: Evaluator
Odpowiedzialność: redukcja drzewa AlgExpr do postaci normalnej.
"""
from typing import Protocol, runtime_checkable

from contracts import AlgExpr, EvalResult


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, ast: AlgExpr) -> AlgExpr:
        """
        Reduces numeric subtrees bottom-up and returns a new tree.
        Numeric results come out as Int(n) (n >= 0) or Neg(Int(n)).
        Division that does not divide evenly is left unevaluated.
        Variables are never combined across (4 + x + 1 stays as is).
        """
        ...

    def trace(self, ast: AlgExpr) -> EvalResult:
        """
        Same reduction as evaluate(), also returning the list of
        human-readable reduction steps (e.g. "4 / 2 = 2").
        """
        ...
