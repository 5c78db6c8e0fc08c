"""
Router: /parse, /evaluate, /render
Bezstanowe operacje na pojedynczym wyrażeniu.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.recursive_descent_parser import RecursiveDescentParser
from adapters.renderer.infix_renderer import InfixRenderer
from adapters.renderer.latex_renderer import LatexRenderer
from api.dependencies import (
    get_evaluator,
    get_infix_renderer,
    get_latex_renderer,
    get_parser,
    resolve_tree,
)
from api.schemas import (
    EvaluateRequest,
    EvaluateResponse,
    ExpressionInput,
    ExpressionView,
    ParseRequest,
    RenderResponse,
)
from contracts import AlgExpr

router = APIRouter(tags=["expressions"])


def _view(tree: AlgExpr, infix: InfixRenderer, latex: LatexRenderer) -> ExpressionView:
    return ExpressionView(tree=tree, infix=infix.render(tree), typeset=latex.render(tree))


@router.post("/parse", response_model=ExpressionView)
def parse_expression(
    body: ParseRequest,
    parser: RecursiveDescentParser = Depends(get_parser),
    infix: InfixRenderer = Depends(get_infix_renderer),
    latex: LatexRenderer = Depends(get_latex_renderer),
):
    return _view(parser.parse(body.text), infix, latex)


@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate_expression(
    body: EvaluateRequest,
    request: Request,
    evaluator: ASTEvaluator = Depends(get_evaluator),
    infix: InfixRenderer = Depends(get_infix_renderer),
    latex: LatexRenderer = Depends(get_latex_renderer),
):
    tree = resolve_tree(request, body.text, body.tree)
    traced = evaluator.trace(tree)
    return EvaluateResponse(
        input=_view(tree, infix, latex),
        result=_view(traced.result, infix, latex),
        steps=traced.steps if body.steps else [],
    )


@router.post("/render", response_model=RenderResponse)
def render_expression(
    body: ExpressionInput,
    request: Request,
    infix: InfixRenderer = Depends(get_infix_renderer),
    latex: LatexRenderer = Depends(get_latex_renderer),
):
    tree = resolve_tree(request, body.text, body.tree)
    return RenderResponse(infix=infix.render(tree), typeset=latex.render(tree))
