"""
Port: Renderer
Odpowiedzialność: AST → napis do wyświetlenia.
"""
from typing import Protocol, runtime_checkable

from contracts import AlgExpr


@runtime_checkable
class Renderer(Protocol):
    def render(self, ast: AlgExpr) -> str:
        """Returns a display string for the tree. Never raises."""
        ...
