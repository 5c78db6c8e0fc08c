"""
schemas.py: Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from contracts import AlgExpr, EquivalenceReport


# ─────────────────────────── wejście ─────────────────────────────

class ExpressionInput(BaseModel):
    """Wyrażenie jako tekst źródłowy ALBO gotowe drzewo JSON."""
    text: Optional[str] = Field(default=None, max_length=10_000)
    tree: Optional[AlgExpr] = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "ExpressionInput":
        if (self.text is None) == (self.tree is None):
            raise ValueError("Provide exactly one of 'text' or 'tree'.")
        return self


# ─────────────────────────── /parse ──────────────────────────────

class ParseRequest(BaseModel):
    text: str = Field(..., max_length=10_000)


class ExpressionView(BaseModel):
    tree: AlgExpr
    infix: str
    typeset: str


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(ExpressionInput):
    steps: bool = False


class EvaluateResponse(BaseModel):
    input: ExpressionView
    result: ExpressionView
    steps: list[str] = []


# ─────────────────────────── /render ─────────────────────────────

class RenderResponse(BaseModel):
    infix: str
    typeset: str


# ─────────────────────────── /equivalence ────────────────────────

class EquivalenceRequest(BaseModel):
    expr1: ExpressionInput
    expr2: ExpressionInput
    seed: Optional[int] = None          # powtarzalne losowanie
    trials: Optional[int] = Field(default=None, ge=1, le=1000)


class EquivalenceResponse(BaseModel):
    report: EquivalenceReport


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
