"""
Router: POST /equivalence
Probabilistyczne porównanie dwóch wyrażeń (Monte Carlo).
"""
from __future__ import annotations

from fastapi import APIRouter, Request

from api.dependencies import build_checker, resolve_tree
from api.schemas import EquivalenceRequest, EquivalenceResponse

router = APIRouter(prefix="/equivalence", tags=["equivalence"])


@router.post("", response_model=EquivalenceResponse)
def check_equivalence(body: EquivalenceRequest, request: Request):
    expr1 = resolve_tree(request, body.expr1.text, body.expr1.tree)
    expr2 = resolve_tree(request, body.expr2.text, body.expr2.tree)
    checker = build_checker(request, seed=body.seed, trials=body.trials)
    return EquivalenceResponse(report=checker.check(expr1, expr2))
