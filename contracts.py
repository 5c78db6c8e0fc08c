"""
contracts.py: Jedyne źródło prawdy dla typów danych silnika wyrażeń.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.

AlgExpr to zamknięty zbiór 7 wariantów (Int, Var, Add, Sub, Mul, Div, Neg).
Węzły są niemutowalne (frozen) i porównywane strukturalnie.
"""
from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

CONTRACTS_VERSION = "1.0.0"

_FROZEN = ConfigDict(frozen=True)


# ─────────────────────────── Błędy ───────────────────────────────────────

class ExprSyntaxError(SyntaxError):
    """Tokenizacja lub parsowanie nie powiodło się."""

    def __init__(
        self,
        message: str,
        *,
        found: Optional[str] = None,
        position: Optional[int] = None,
        expected: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.found = found          # None = koniec wejścia
        self.position = position
        self.expected = expected


class EvaluationError(ValueError):
    """Naruszenie niezmiennika: węzeł nie jest w postaci liczbowej."""


# ─────────────────────────── AST ─────────────────────────────────────────

class Int(BaseModel):
    model_config = _FROZEN

    node_type: Literal["int"] = "int"
    value: int = Field(ge=0)   # liczby ujemne wyłącznie jako Neg(Int)


class Var(BaseModel):
    model_config = _FROZEN

    node_type: Literal["var"] = "var"
    name: str


class Add(BaseModel):
    model_config = _FROZEN

    node_type: Literal["add"] = "add"
    arg1: "AlgExpr"
    arg2: "AlgExpr"


class Sub(BaseModel):
    model_config = _FROZEN

    node_type: Literal["sub"] = "sub"
    arg1: "AlgExpr"
    arg2: "AlgExpr"


class Mul(BaseModel):
    model_config = _FROZEN

    node_type: Literal["mul"] = "mul"
    arg1: "AlgExpr"
    arg2: "AlgExpr"


class Div(BaseModel):
    model_config = _FROZEN

    node_type: Literal["div"] = "div"
    arg1: "AlgExpr"
    arg2: "AlgExpr"


class Neg(BaseModel):
    model_config = _FROZEN

    node_type: Literal["neg"] = "neg"
    arg: "AlgExpr"


AlgExpr = Annotated[
    Union[Int, Var, Add, Sub, Mul, Div, Neg],
    Field(discriminator="node_type"),
]
BINARY_NODES: tuple[type, ...] = (Add, Sub, Mul, Div)

Add.model_rebuild()
Sub.model_rebuild()
Mul.model_rebuild()
Div.model_rebuild()
Neg.model_rebuild()

# Walidacja/serializacja drzew z JSON (API, CLI --json)
AlgExprAdapter: TypeAdapter = TypeAdapter(AlgExpr)


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    result: AlgExpr
    steps: list[str] = Field(default_factory=list)  # czytelne kroki redukcji


# ─────────────────────────── EquivalenceChecker ──────────────────────────

class Counterexample(BaseModel):
    assignment: dict[str, int]   # podstawienie, które obaliło równoważność
    value1: float
    value2: float


class EquivalenceReport(BaseModel):
    equivalent: bool
    variables: list[str]
    trials_run: int
    trials_skipped: int            # próby z dzieleniem przez zero (NaN)
    counterexample: Optional[Counterexample] = None
