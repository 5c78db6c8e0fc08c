import sys

import pytest

from adapters.expression_parser.tokenizer import tokenize
from contracts import ExprSyntaxError


def test_tokenize_splits_numbers_variables_operators_and_parens():
    tokens = tokenize("12+ab*(3)")

    assert [(t.kind, t.text) for t in tokens] == [
        ("number", "12"),
        ("op", "+"),
        ("var", "ab"),
        ("op", "*"),
        ("lparen", "("),
        ("number", "3"),
        ("rparen", ")"),
    ]
    assert tokens[0].value == 12


def test_tokenize_skips_whitespace_and_records_positions():
    tokens = tokenize("  x \t-\n 10 ")

    assert [t.text for t in tokens] == ["x", "-", "10"]
    assert [t.position for t in tokens] == [2, 5, 8]


def test_tokenize_multi_letter_identifier_is_single_variable():
    tokens = tokenize("abc")

    assert len(tokens) == 1
    assert tokens[0].kind == "var"
    assert tokens[0].text == "abc"


def test_tokenize_leading_zeros_are_plain_integer():
    assert tokenize("007")[0].value == 7


def test_tokenize_empty_input_gives_no_tokens():
    assert tokenize("") == []


@pytest.mark.parametrize("text, bad, position", [
    ("1 $ 2", "$", 2),
    ("3.5", ".", 1),
    ("x²", "²", 1),
    ("x = 1", "=", 2),
])
def test_tokenize_rejects_unexpected_character(text, bad, position):
    with pytest.raises(ExprSyntaxError) as exc_info:
        tokenize(text)

    assert exc_info.value.found == bad
    assert exc_info.value.position == position
    assert repr(bad) in str(exc_info.value)


_INT_DIGIT_LIMIT = getattr(sys, "get_int_max_str_digits", lambda: 0)()


@pytest.mark.skipif(_INT_DIGIT_LIMIT == 0, reason="interpreter has no int digit limit")
def test_number_literal_over_int_digit_limit_is_syntax_error():
    text = "1 + " + "7" * (_INT_DIGIT_LIMIT + 1)
    token = tokenize(text)[2]

    with pytest.raises(ExprSyntaxError, match="too long") as exc_info:
        token.value

    assert exc_info.value.position == 4
    assert exc_info.value.found == token.text
