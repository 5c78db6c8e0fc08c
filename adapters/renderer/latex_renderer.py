"""
Adapter: LatexRenderer
Implementuje port Renderer: zapis dla składu matematycznego (MathJax/KaTeX).

Dzielenie jako \\frac{a}{b}, mnożenie jako a \\cdot b, reszta infiksowo
bez wymuszonych nawiasów.
"""
from __future__ import annotations

from contracts import AlgExpr, Add, Div, Int, Mul, Neg, Sub, Var


class LatexRenderer:

    def render(self, ast: AlgExpr) -> str:
        if isinstance(ast, Int):
            return str(ast.value)
        if isinstance(ast, Var):
            return ast.name
        if isinstance(ast, Neg):
            return f"-{self.render(ast.arg)}"
        if isinstance(ast, Div):
            return f"\\frac{{{self.render(ast.arg1)}}}{{{self.render(ast.arg2)}}}"
        if isinstance(ast, Mul):
            return f"{self.render(ast.arg1)} \\cdot {self.render(ast.arg2)}"
        if isinstance(ast, Add):
            return f"{self.render(ast.arg1)} + {self.render(ast.arg2)}"
        if isinstance(ast, Sub):
            return f"{self.render(ast.arg1)} - {self.render(ast.arg2)}"
        raise TypeError(f"Nieznany typ węzła AST: {type(ast)}")
