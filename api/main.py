"""
api/main.py: punkt wejścia FastAPI.

Lifespan:
  - Inicjalizuje bezstanowe adaptery (parser, evaluator, renderery)
  - Checker równoważności tworzony per żądanie (osobny rng)

Błędy:
  ExprSyntaxError → 422 z informacją co i gdzie nie pasowało
  EvaluationError → 500 (naruszenie niezmiennika evaluatora)
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.recursive_descent_parser import RecursiveDescentParser
from adapters.renderer.infix_renderer import InfixRenderer
from adapters.renderer.latex_renderer import LatexRenderer
from api.routers import equivalence, expressions
from api.schemas import HealthResponse
from config import Settings
from contracts import EvaluationError, ExprSyntaxError

logger = logging.getLogger("algebra_engine")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Adaptery bezstanowe: tworzone raz
    app.state.parser = RecursiveDescentParser()
    app.state.evaluator = ASTEvaluator()
    app.state.infix_renderer = InfixRenderer()
    app.state.latex_renderer = LatexRenderer()

    logger.info("AlgebraEngine API ready.")
    yield
    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(expressions.router)
    app.include_router(equivalence.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Globalne handlery błędów
    @app.exception_handler(ExprSyntaxError)
    async def syntax_error_handler(request: Request, exc: ExprSyntaxError):
        return JSONResponse(
            status_code=422,
            content={
                "detail": str(exc),
                "found": exc.found,
                "position": exc.position,
                "expected": exc.expected,
            },
        )

    @app.exception_handler(EvaluationError)
    async def evaluation_error_handler(request: Request, exc: EvaluationError):
        logger.error("Evaluation invariant violated: %s", exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


app = create_app()
