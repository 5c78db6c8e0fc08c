"""
dependencies.py: FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

import random
from typing import Optional

from fastapi import Request

from adapters.equivalence.randomized_checker import RandomizedEquivalenceChecker
from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.recursive_descent_parser import RecursiveDescentParser
from adapters.renderer.infix_renderer import InfixRenderer
from adapters.renderer.latex_renderer import LatexRenderer
from config import Settings
from contracts import AlgExpr
from ports.equivalence_checker import EquivalenceConfig


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_parser(request: Request) -> RecursiveDescentParser:
    return request.app.state.parser


def get_evaluator(request: Request) -> ASTEvaluator:
    return request.app.state.evaluator


def get_infix_renderer(request: Request) -> InfixRenderer:
    return request.app.state.infix_renderer


def get_latex_renderer(request: Request) -> LatexRenderer:
    return request.app.state.latex_renderer


def build_checker(
    request: Request,
    seed: Optional[int] = None,
    trials: Optional[int] = None,
) -> RandomizedEquivalenceChecker:
    """Nowy checker na każde żądanie: rng nie jest współdzielony."""
    settings: Settings = request.app.state.settings
    config = EquivalenceConfig(
        trials=trials if trials is not None else settings.equivalence_trials,
        sample_low=settings.sample_low,
        sample_high=settings.sample_high,
        tolerance=settings.tolerance,
    )
    rng = random.Random(seed if seed is not None else settings.random_seed)
    return RandomizedEquivalenceChecker(
        config=config, rng=rng, evaluator=request.app.state.evaluator,
    )


def resolve_tree(request: Request, text: Optional[str], tree: Optional[AlgExpr]) -> AlgExpr:
    """Tekst → parser; drzewo przekazywane bez zmian."""
    if tree is not None:
        return tree
    return request.app.state.parser.parse(text or "")
