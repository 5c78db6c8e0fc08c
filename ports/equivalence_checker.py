"""
Port: EquivalenceChecker
Odpowiedzialność: probabilistyczne sprawdzanie równoważności dwóch wyrażeń.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from contracts import AlgExpr, EquivalenceReport


@dataclass(frozen=True)
class EquivalenceConfig:
    trials: int = 10
    sample_low: int = -50     # włącznie
    sample_high: int = 50     # wyłącznie
    tolerance: float = 1e-4

    def __post_init__(self) -> None:
        if self.trials < 1:
            raise ValueError("trials must be >= 1")
        if self.sample_low >= self.sample_high:
            raise ValueError("sample_low must be < sample_high")


@runtime_checkable
class EquivalenceChecker(Protocol):
    def check(self, expr1: AlgExpr, expr2: AlgExpr) -> EquivalenceReport:
        """
        Substitutes random integers for every variable of both expressions,
        evaluates, folds to real values and compares within tolerance.
        Trials where either side divides by zero are skipped (inconclusive).
        Returns EquivalenceReport; a counterexample is attached on mismatch.
        """
        ...

    def are_equivalent(self, expr1: AlgExpr, expr2: AlgExpr) -> bool:
        """Shorthand for check(expr1, expr2).equivalent."""
        ...
