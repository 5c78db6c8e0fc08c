"""
Adapter: ASTEvaluator
Implementuje port Evaluator: rekurencyjne (post-order) przejście AlgExpr.

evaluate() - redukcja do postaci normalnej:
  - Add/Sub/Mul: zwijane tylko gdy OBA dzieci są liczbowe
  - Div: zwijane tylko gdy dzielnik != 0 i dzielna jest dokładną wielokrotnością
  - Neg(Neg(x)) → x
  Brak przestawiania: 4 + x + 1 zostaje Add(Add(4, x), 1).
trace()    - to samo co evaluate() + lista kroków redukcji
fold()     - wartość rzeczywista drzewa bez zmiennych (prawdziwe dzielenie,
             NaN przy dzieleniu przez zero); liczona na Fraction przez
             fold_value(), do float zamieniana dopiero na końcu
"""
from __future__ import annotations

import logging
import math
from fractions import Fraction
from typing import Callable, Optional

from contracts import (
    AlgExpr,
    Add,
    BINARY_NODES,
    Div,
    EvalResult,
    EvaluationError,
    Int,
    Mul,
    Neg,
    Sub,
    Var,
)
from adapters.renderer.infix_renderer import InfixRenderer

logger = logging.getLogger("algebra_engine.evaluator")

# Mapowanie typów węzłów na symbol i operację całkowitoliczbową
_INT_OPS: dict[type, tuple[str, Callable[[int, int], int]]] = {
    Add: ("+", lambda a, b: a + b),
    Sub: ("-", lambda a, b: a - b),
    Mul: ("*", lambda a, b: a * b),
}

_FOLD_OPS: dict[type, Callable[[Fraction, Fraction], Fraction]] = {
    Add: lambda a, b: a + b,
    Sub: lambda a, b: a - b,
    Mul: lambda a, b: a * b,
}

_render = InfixRenderer().render


def is_numeric(node: AlgExpr) -> bool:
    """True dla Int oraz Neg(Int)."""
    return isinstance(node, Int) or (isinstance(node, Neg) and isinstance(node.arg, Int))


def numeric_value(node: AlgExpr) -> int:
    """Wartość węzła liczbowego; EvaluationError dla każdego innego."""
    if isinstance(node, Int):
        return node.value
    if isinstance(node, Neg) and isinstance(node.arg, Int):
        return -node.arg.value
    raise EvaluationError(f"Expression is not a number: {_render(node)}")


def standardize(n: int) -> AlgExpr:
    """Liczba całkowita → Int(n) albo Neg(Int(|n|))."""
    if n < 0:
        return Neg(arg=Int(value=-n))
    return Int(value=n)


class ASTEvaluator:
    """Redukcja wyrażeń algebraicznych do postaci znormalizowanej."""

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, ast: AlgExpr) -> AlgExpr:
        return self._reduce(ast, None)

    def trace(self, ast: AlgExpr) -> EvalResult:
        steps: list[str] = []
        result = self._reduce(ast, steps)
        logger.debug("Reduced %s to %s in %d steps.", _render(ast), _render(result), len(steps))
        return EvalResult(result=result, steps=steps)

    # -- Składanie do wartości rzeczywistej --------------------------------

    def fold(self, ast: AlgExpr) -> float:
        """
        Wartość rzeczywista drzewa bez zmiennych.
        Dzielenie przez zero → math.nan. Zmienna → EvaluationError.
        Wartość spoza zakresu float → ±math.inf.
        """
        value = fold_value(ast)
        if value is None:
            return math.nan
        return to_float(value)

    # -- Prywatne ----------------------------------------------------------

    def _reduce(self, node: AlgExpr, steps: Optional[list[str]]) -> AlgExpr:
        if isinstance(node, (Int, Var)):
            return node

        if isinstance(node, Neg):
            inner = self._reduce(node.arg, steps)
            if isinstance(inner, Neg):
                if steps is not None:
                    steps.append(f"-(-{_render(inner.arg)}) = {_render(inner.arg)}")
                return inner.arg
            return Neg(arg=inner)

        if isinstance(node, Div):
            left = self._reduce(node.arg1, steps)
            right = self._reduce(node.arg2, steps)
            if is_numeric(left) and is_numeric(right):
                a, b = numeric_value(left), numeric_value(right)
                if b != 0 and a % b == 0:
                    result = a // b
                    if steps is not None:
                        steps.append(f"{_fmt(a)} / {_fmt(b)} = {result}")
                    return standardize(result)
            return Div(arg1=left, arg2=right)

        if isinstance(node, BINARY_NODES):
            left = self._reduce(node.arg1, steps)
            right = self._reduce(node.arg2, steps)
            if is_numeric(left) and is_numeric(right):
                symbol, fn = _INT_OPS[type(node)]
                a, b = numeric_value(left), numeric_value(right)
                result = fn(a, b)
                if steps is not None:
                    steps.append(f"{_fmt(a)} {symbol} {_fmt(b)} = {result}")
                return standardize(result)
            return type(node)(arg1=left, arg2=right)

        raise TypeError(f"Nieznany typ węzła AST: {type(node)}")


def fold_value(node: AlgExpr) -> Optional[Fraction]:
    """
    Dokładna wartość drzewa bez zmiennych (prawdziwe dzielenie).
    None = niezdefiniowana (dzielenie przez zero). Zmienna → EvaluationError.
    """
    if isinstance(node, Int):
        return Fraction(node.value)

    if isinstance(node, Var):
        raise EvaluationError(f"Niezwiązana zmienna: {node.name!r}")

    if isinstance(node, Neg):
        value = fold_value(node.arg)
        return None if value is None else -value

    if isinstance(node, BINARY_NODES):
        left = fold_value(node.arg1)
        right = fold_value(node.arg2)
        if left is None or right is None:
            return None
        if isinstance(node, Div):
            if right == 0:
                return None
            return left / right
        return _FOLD_OPS[type(node)](left, right)

    raise TypeError(f"Nieznany typ węzła AST: {type(node)}")


def to_float(value: Fraction) -> float:
    """Fraction → float; poza zakresem float daje ±inf zamiast OverflowError."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _fmt(v: int) -> str:
    """Liczby ujemne w nawiasach, żeby krok był czytelny."""
    return f"({v})" if v < 0 else str(v)
