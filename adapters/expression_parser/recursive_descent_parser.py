"""
Adapter: RecursiveDescentParser
Implementuje port ExpressionParser.

Precedence climbing parser (wszystkie operatory binarne lewostronne):
  expr    = primary (('+'|'-'|'*'|'/') primary)*   z mocą wiązania
  primary = '-' primary | NUMBER | VAR | '(' expr ')'

Unarny minus wiąże mocniej niż '*' i '/': "-2*3" → Mul(Neg(2), 3).
Może się powtarzać: "--x" → Neg(Neg(x)).

Głębokość drzewa jest ograniczona do MAX_DEPTH: evaluator i renderery
są rekurencyjne. Głębsze wejście → ExprSyntaxError.
"""
from __future__ import annotations

import logging

from contracts import AlgExpr, Add, BINARY_NODES, Div, ExprSyntaxError, Int, Mul, Neg, Sub, Var
from adapters.expression_parser.tokenizer import Token, tokenize

logger = logging.getLogger("algebra_engine.parser")

# Lewy binding power operatorów binarnych
_LEFT_BP: dict[str, int] = {"+": 10, "-": 10, "*": 20, "/": 20}

_BINARY = {"+": Add, "-": Sub, "*": Mul, "/": Div}

MAX_DEPTH = 150


def _too_deep(position: int | None = None, found: str | None = None) -> ExprSyntaxError:
    where = f" at position {position}" if position is not None else ""
    return ExprSyntaxError(
        f"Expression nested too deep (limit {MAX_DEPTH}){where}",
        found=found,
        position=position,
    )


def tree_depth(node: AlgExpr) -> int:
    """Głębokość drzewa (liść = 1), liczona iteracyjnie."""
    deepest = 0
    stack: list[tuple[AlgExpr, int]] = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        if isinstance(current, Neg):
            stack.append((current.arg, depth + 1))
        elif isinstance(current, BINARY_NODES):
            stack.append((current.arg1, depth + 1))
            stack.append((current.arg2, depth + 1))
    return deepest


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._nesting = 0  # aktywne '-' i '(' w _primary

    def _peek(self) -> Token | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _consume(self) -> Token:
        t = self._tokens[self._pos]
        self._pos += 1
        return t

    def _enter(self, tok: Token) -> None:
        self._nesting += 1
        if self._nesting > MAX_DEPTH:
            raise _too_deep(tok.position, tok.text)

    def _end_of_input(self, expected: str) -> ExprSyntaxError:
        return ExprSyntaxError(
            f"Unexpected end of input, expected {expected}",
            expected=expected,
        )

    def parse(self) -> AlgExpr:
        node = self._expr(0)
        tok = self._peek()
        if tok is not None:
            raise ExprSyntaxError(
                f"Unexpected {tok.describe()} after expression at position {tok.position}",
                found=tok.text,
                position=tok.position,
                expected="end of input",
            )
        return node

    def _expr(self, min_bp: int) -> AlgExpr:
        left = self._primary()
        while True:
            tok = self._peek()
            if tok is None or tok.kind != "op":
                break
            bp = _LEFT_BP[tok.text]
            if bp <= min_bp:
                break
            self._consume()
            # Lewostronne wiązanie: right_bp = bp (nie bp+1) dla left-assoc
            right = self._expr(bp)
            left = _BINARY[tok.text](arg1=left, arg2=right)
        return left

    def _primary(self) -> AlgExpr:
        tok = self._peek()
        if tok is None:
            raise self._end_of_input("an operand")
        if tok.kind == "op" and tok.text == "-":
            self._consume()
            self._enter(tok)
            node = Neg(arg=self._primary())
            self._nesting -= 1
            return node
        if tok.kind == "number":
            self._consume()
            return Int(value=tok.value)
        if tok.kind == "var":
            self._consume()
            return Var(name=tok.text)
        if tok.kind == "lparen":
            self._consume()
            self._enter(tok)
            node = self._expr(0)
            self._nesting -= 1
            closing = self._peek()
            if closing is None:
                raise self._end_of_input("')'")
            if closing.kind != "rparen":
                raise ExprSyntaxError(
                    f"Expected ')', got {closing.describe()} at position {closing.position}",
                    found=closing.text,
                    position=closing.position,
                    expected="')'",
                )
            self._consume()
            return node
        raise ExprSyntaxError(
            f"Unexpected token: {tok.describe()} at position {tok.position}",
            found=tok.text,
            position=tok.position,
            expected="an operand",
        )


class RecursiveDescentParser:
    """Parsuje tekst wyrażenia do AlgExpr. Błędy składni propaguje do wołającego."""

    # -- ExpressionParser protocol ------------------------------------------

    def parse(self, text: str) -> AlgExpr:
        tokens = tokenize(text)
        ast = _Parser(tokens).parse()
        # długie łańcuchy operatorów binarnych budowane są pętlą, nie rekurencją
        if tree_depth(ast) > MAX_DEPTH:
            raise _too_deep()
        logger.debug("Parsed %r into %d tokens.", text, len(tokens))
        return ast
