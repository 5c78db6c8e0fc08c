import math
from fractions import Fraction

import pytest

from adapters.evaluator.ast_evaluator import (
    ASTEvaluator,
    fold_value,
    is_numeric,
    numeric_value,
    standardize,
    to_float,
)
from adapters.expression_parser.recursive_descent_parser import RecursiveDescentParser
from contracts import Add, Div, EvaluationError, Int, Mul, Neg, Sub, Var
from ports.evaluator import Evaluator

_parse = RecursiveDescentParser().parse


def _i(n: int) -> Int:
    return Int(value=n)


@pytest.fixture
def evaluator() -> ASTEvaluator:
    return ASTEvaluator()


def test_evaluator_implements_port(evaluator):
    assert isinstance(evaluator, Evaluator)


@pytest.mark.parametrize("text, expected", [
    ("1 + 10", Int(value=11)),
    ("5 - 9", Neg(arg=Int(value=4))),
    ("4 / 2", Int(value=2)),
    ("2 * 3 * 4", Int(value=24)),
    ("-2*3", Neg(arg=Int(value=6))),
    ("-4 / 2", Neg(arg=Int(value=2))),
    ("-6 / -3", Int(value=2)),
    ("--5", Int(value=5)),
    ("---5", Neg(arg=Int(value=5))),
    ("(1 + 2) * (3 - 5)", Neg(arg=Int(value=6))),
    ("0 / 7", Int(value=0)),
])
def test_evaluate_numeric_expressions(evaluator, text, expected):
    assert evaluator.evaluate(_parse(text)) == expected


def test_evaluate_leaves_non_dividing_division_unreduced(evaluator):
    assert evaluator.evaluate(_parse("4 / 3")) == Div(arg1=_i(4), arg2=_i(3))


def test_evaluate_leaves_division_by_zero_unreduced(evaluator):
    assert evaluator.evaluate(_parse("4 / 0")) == Div(arg1=_i(4), arg2=_i(0))
    assert evaluator.evaluate(_parse("0 / 0")) == Div(arg1=_i(0), arg2=_i(0))


def test_evaluate_reduces_children_of_unreduced_division(evaluator):
    result = evaluator.evaluate(_parse("(1 + 3) / (5 - 8)"))

    assert result == Div(arg1=_i(4), arg2=Neg(arg=_i(3)))


def test_evaluate_does_not_combine_numbers_across_variable(evaluator):
    # Only immediately adjacent numeric operands fold; no reassociation.
    result = evaluator.evaluate(_parse("4 + x + 1"))

    assert result == Add(arg1=Add(arg1=_i(4), arg2=Var(name="x")), arg2=_i(1))
    assert result != Add(arg1=_i(5), arg2=Var(name="x"))


def test_evaluate_reduces_numeric_subtree_next_to_variable(evaluator):
    result = evaluator.evaluate(_parse("x * (2 + 3)"))

    assert result == Mul(arg1=Var(name="x"), arg2=_i(5))


def test_evaluate_cancels_double_negation_of_variable(evaluator):
    assert evaluator.evaluate(_parse("--x")) == Var(name="x")
    assert evaluator.evaluate(_parse("---x")) == Neg(arg=Var(name="x"))
    assert evaluator.evaluate(_parse("x - --y")) == Sub(arg1=Var(name="x"), arg2=Var(name="y"))


def test_evaluate_keeps_negative_zero_as_written(evaluator):
    assert evaluator.evaluate(_parse("-0")) == Neg(arg=_i(0))


def test_evaluate_does_not_mutate_input(evaluator):
    tree = _parse("(1 + 2) * x")
    snapshot = tree.model_copy(deep=True)

    evaluator.evaluate(tree)

    assert tree == snapshot


def test_trace_lists_reduction_steps(evaluator):
    traced = evaluator.trace(_parse("4 / 2 + 5 - 9"))

    assert traced.result == Neg(arg=_i(2))
    assert traced.steps == ["4 / 2 = 2", "2 + 5 = 7", "7 - 9 = -2"]


def test_trace_records_double_negation(evaluator):
    traced = evaluator.trace(_parse("--5"))

    assert traced.result == _i(5)
    assert traced.steps == ["-(-5) = 5"]


def test_trace_parenthesizes_negative_operands(evaluator):
    traced = evaluator.trace(_parse("-2 * 3"))

    assert traced.steps == ["(-2) * 3 = -6"]


def test_trace_has_no_steps_for_irreducible_expression(evaluator):
    traced = evaluator.trace(_parse("x / 3"))

    assert traced.result == Div(arg1=Var(name="x"), arg2=_i(3))
    assert traced.steps == []


def test_numeric_helpers():
    assert is_numeric(_i(3))
    assert is_numeric(Neg(arg=_i(3)))
    assert not is_numeric(Neg(arg=Neg(arg=_i(3))))
    assert not is_numeric(Var(name="x"))
    assert numeric_value(Neg(arg=_i(3))) == -3
    assert standardize(-7) == Neg(arg=_i(7))
    assert standardize(0) == _i(0)


def test_numeric_value_rejects_non_numeric_node():
    with pytest.raises(EvaluationError):
        numeric_value(Var(name="x"))
    with pytest.raises(EvaluationError, match="not a number"):
        numeric_value(Add(arg1=_i(1), arg2=_i(2)))


def test_fold_uses_true_division(evaluator):
    value = evaluator.fold(evaluator.evaluate(_parse("1 / 3 + 1 / 3")))

    assert value == pytest.approx(2 / 3)


def test_fold_returns_nan_for_division_by_zero(evaluator):
    assert math.isnan(evaluator.fold(_parse("1 / (2 - 2)")))
    assert math.isnan(evaluator.fold(_parse("-(5 / 0) + 1")))


def test_fold_rejects_unbound_variable(evaluator):
    with pytest.raises(EvaluationError):
        evaluator.fold(_parse("x + 1"))


def test_fold_value_is_exact_fraction():
    assert fold_value(_parse("1 / 3 + 1 / 3")) == Fraction(2, 3)
    assert fold_value(_parse("-(7 / 2)")) == Fraction(-7, 2)


def test_fold_value_returns_none_for_division_by_zero():
    assert fold_value(_parse("2 * 0 + 1 / 0")) is None


def test_fold_of_value_beyond_float_range_is_infinite(evaluator):
    huge = "9" * 400

    assert evaluator.fold(_parse(huge)) == math.inf
    assert evaluator.fold(_parse(f"-{huge}")) == -math.inf
    assert evaluator.fold(_parse(f"{huge} / {huge}")) == 1.0


def test_to_float_saturates_instead_of_overflowing():
    assert to_float(Fraction(10) ** 400) == math.inf
    assert to_float(-(Fraction(10) ** 400)) == -math.inf
    assert to_float(Fraction(1, 4)) == 0.25
