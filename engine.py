"""
engine.py: publiczne operacje silnika wyrażeń.

    parse(text)                -> AlgExpr
    render(expr)               -> str   "(1 + 2)"
    render_typeset(expr)       -> str   "\\frac{1}{2}"
    evaluate(expr)             -> AlgExpr
    are_equivalent(e1, e2)     -> bool

Funkcje są czyste i bezstanowe; jedynym źródłem niedeterminizmu jest
rng przekazywany do are_equivalent()/check_equivalence().
"""
from __future__ import annotations

import random
from typing import Optional

from adapters.equivalence.randomized_checker import RandomizedEquivalenceChecker
from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.recursive_descent_parser import RecursiveDescentParser
from adapters.renderer.infix_renderer import InfixRenderer
from adapters.renderer.latex_renderer import LatexRenderer
from contracts import AlgExpr, EquivalenceReport, EvalResult
from ports.equivalence_checker import EquivalenceConfig

_PARSER = RecursiveDescentParser()
_EVALUATOR = ASTEvaluator()
_INFIX = InfixRenderer()
_LATEX = LatexRenderer()


def parse(text: str) -> AlgExpr:
    return _PARSER.parse(text)


def render(expr: AlgExpr) -> str:
    return _INFIX.render(expr)


def render_typeset(expr: AlgExpr) -> str:
    return _LATEX.render(expr)


def evaluate(expr: AlgExpr) -> AlgExpr:
    return _EVALUATOR.evaluate(expr)


def evaluate_with_steps(expr: AlgExpr) -> EvalResult:
    return _EVALUATOR.trace(expr)


def check_equivalence(
    expr1: AlgExpr,
    expr2: AlgExpr,
    rng: Optional[random.Random] = None,
    config: Optional[EquivalenceConfig] = None,
) -> EquivalenceReport:
    checker = RandomizedEquivalenceChecker(config=config, rng=rng, evaluator=_EVALUATOR)
    return checker.check(expr1, expr2)


def are_equivalent(
    expr1: AlgExpr,
    expr2: AlgExpr,
    rng: Optional[random.Random] = None,
    config: Optional[EquivalenceConfig] = None,
) -> bool:
    return check_equivalence(expr1, expr2, rng=rng, config=config).equivalent
