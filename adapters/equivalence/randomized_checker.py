"""
Adapter: RandomizedEquivalenceChecker
Implementuje port EquivalenceChecker: test Monte Carlo.

Dla każdej próby (domyślnie 10):
  1. każda zmienna z obu wyrażeń dostaje losową liczbę z [low, high)
  2. podstawienie Var → Int / Neg(Int) w obu drzewach
  3. evaluate() + fold_value() do dokładnej wartości (Fraction, prawdziwe dzielenie)
  4. wartość niezdefiniowana po którejkolwiek stronie → próba pominięta
     |a - b| > tolerance → NIE są równoważne (natychmiast)

Porównanie odbywa się na Fraction, więc wartości spoza zakresu float
nie powodują błędu. Do float zamieniany jest tylko kontrprzykład.

To nie jest dowód. Wyrażenie niezdefiniowane we wszystkich próbach
(np. x / 0) zostanie uznane za równoważne dowolnemu innemu.
"""
from __future__ import annotations

import logging
import random
from fractions import Fraction
from typing import Optional

from contracts import (
    AlgExpr,
    BINARY_NODES,
    Counterexample,
    EquivalenceReport,
    Neg,
    Var,
)
from adapters.evaluator.ast_evaluator import ASTEvaluator, fold_value, standardize, to_float
from ports.equivalence_checker import EquivalenceConfig
from ports.evaluator import Evaluator

logger = logging.getLogger("algebra_engine.equivalence")


def collect_variables(*exprs: AlgExpr) -> set[str]:
    """Suma zbiorów nazw zmiennych występujących w wyrażeniach."""
    names: set[str] = set()

    def _walk(node: AlgExpr) -> None:
        if isinstance(node, Var):
            names.add(node.name)
        elif isinstance(node, Neg):
            _walk(node.arg)
        elif isinstance(node, BINARY_NODES):
            _walk(node.arg1)
            _walk(node.arg2)

    for expr in exprs:
        _walk(expr)
    return names


def substitute(expr: AlgExpr, assignment: dict[str, int]) -> AlgExpr:
    """
    Zastępuje liście Var wartościami z assignment (ujemne jako Neg(Int)).
    Zmienne spoza assignment zostają bez zmian.
    """
    if isinstance(expr, Var):
        if expr.name in assignment:
            return standardize(assignment[expr.name])
        return expr
    if isinstance(expr, Neg):
        return Neg(arg=substitute(expr.arg, assignment))
    if isinstance(expr, BINARY_NODES):
        return type(expr)(
            arg1=substitute(expr.arg1, assignment),
            arg2=substitute(expr.arg2, assignment),
        )
    return expr  # Int


class RandomizedEquivalenceChecker:
    """
    Probabilistyczny test równoważności.
    rng: wstrzykiwane źródło losowości (random.Random z seedem w testach).
    """

    def __init__(
        self,
        config: Optional[EquivalenceConfig] = None,
        rng: Optional[random.Random] = None,
        evaluator: Optional[Evaluator] = None,
    ) -> None:
        self._config = config or EquivalenceConfig()
        self._rng = rng or random.Random()
        self._evaluator = evaluator or ASTEvaluator()

    @property
    def config(self) -> EquivalenceConfig:
        return self._config

    # -- EquivalenceChecker protocol ----------------------------------------

    def check(self, expr1: AlgExpr, expr2: AlgExpr) -> EquivalenceReport:
        cfg = self._config
        variables = sorted(collect_variables(expr1, expr2))
        tolerance = Fraction(cfg.tolerance)
        skipped = 0

        for trial in range(1, cfg.trials + 1):
            # randrange: przedział półotwarty [low, high)
            assignment = {
                name: self._rng.randrange(cfg.sample_low, cfg.sample_high)
                for name in variables
            }
            value1 = self._value(expr1, assignment)
            value2 = self._value(expr2, assignment)

            if value1 is None or value2 is None:
                skipped += 1
                logger.debug("Trial %d skipped (undefined value) for %s.", trial, assignment)
                continue

            if abs(value1 - value2) > tolerance:
                counterexample = Counterexample(
                    assignment=assignment,
                    value1=to_float(value1),
                    value2=to_float(value2),
                )
                logger.info(
                    "Counterexample in trial %d: %s gives %r vs %r.",
                    trial, assignment, counterexample.value1, counterexample.value2,
                )
                return EquivalenceReport(
                    equivalent=False,
                    variables=variables,
                    trials_run=trial,
                    trials_skipped=skipped,
                    counterexample=counterexample,
                )

        if skipped == cfg.trials:
            logger.warning("All %d trials were undefined; equivalence not disproved.", skipped)
        return EquivalenceReport(
            equivalent=True,
            variables=variables,
            trials_run=cfg.trials,
            trials_skipped=skipped,
        )

    def are_equivalent(self, expr1: AlgExpr, expr2: AlgExpr) -> bool:
        return self.check(expr1, expr2).equivalent

    # -- Prywatne -----------------------------------------------------------

    def _value(self, expr: AlgExpr, assignment: dict[str, int]) -> Optional[Fraction]:
        reduced = self._evaluator.evaluate(substitute(expr, assignment))
        return fold_value(reduced)
