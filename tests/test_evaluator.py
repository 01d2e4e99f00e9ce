import logging

import pytest

from calc.evaluator import (
    OPERATOR_PRECEDENCE,
    BinaryOperator,
    DivisionByZero,
    MalformedExpression,
    evaluate,
    truncating_div,
)
from calc.tokenizer import tokenize


@pytest.mark.parametrize(
    "a, b, expected",
    [
        pytest.param(7, 2, 3),
        pytest.param(-7, 2, -3),
        pytest.param(7, -2, -3),
        pytest.param(-7, -2, 3),
        pytest.param(0, 5, 0),
        pytest.param(6, 3, 2),
        pytest.param(10**30 + 1, 10**15, 10**15),
    ],
)
def test_truncating_div(a: int, b: int, expected: int) -> None:
    assert truncating_div(a, b) == expected


def test_precedence_tiers() -> None:
    assert OPERATOR_PRECEDENCE[BinaryOperator.ADD] == OPERATOR_PRECEDENCE[BinaryOperator.SUB]
    assert OPERATOR_PRECEDENCE[BinaryOperator.MUL] == OPERATOR_PRECEDENCE[BinaryOperator.DIV]
    assert OPERATOR_PRECEDENCE[BinaryOperator.ADD] < OPERATOR_PRECEDENCE[BinaryOperator.MUL]


def test_evaluate_long_expression() -> None:
    # no recursion, so depth is bounded only by memory
    depth = 5000
    tokens = tokenize("(" * depth + "1" + " + 1)" * depth)
    assert evaluate(tokens) == depth + 1


@pytest.mark.parametrize(
    "code, errmsg, error_token_idx",
    [
        pytest.param("(2 + 3", "Unclosed bracket", 0),
        pytest.param("2 + 3)", "Unmatched closing bracket", 3),
        pytest.param("+ 2", "Missing left operand for ADD", 0),
        pytest.param("2 + 3 *", "Missing right operand for MUL", 3),
        pytest.param("2 * * 3", "Missing left operand for MUL", 2),
        pytest.param("(- 2)", "Missing left operand for SUB", 1),
        pytest.param("2 + ()", "Missing operand for ADD", 1),
        pytest.param("1 2 + 1", "Expected a single value, 2 left without an operator", 4),
        pytest.param("", "Empty expression", 0),
        pytest.param("(1)(2)", "Expected a single value, 2 left without an operator", 6),
    ],
)
def test_malformed_expression_details(code: str, errmsg: str, error_token_idx: int) -> None:
    with pytest.raises(MalformedExpression) as exc_info:
        evaluate(tokenize(code))
    assert exc_info.value.errmsg == errmsg
    assert exc_info.value.error_token_idx == error_token_idx


def test_division_by_zero_points_at_operator() -> None:
    with pytest.raises(DivisionByZero) as exc_info:
        evaluate(tokenize("1 + 12 / (3 - 3)"))
    assert exc_info.value.error_token_idx == 3
    assert str(exc_info.value).splitlines() == [
        "Division by zero: 12 / 0",
        "1 + 12 / ( 3 - 3 )",
        "       ^",
    ]


def test_malformed_expression_str() -> None:
    with pytest.raises(MalformedExpression) as exc_info:
        evaluate(tokenize("2 +"))
    assert str(exc_info.value).splitlines() == ["Malformed expression: Missing right operand for ADD", "2 +", "  ^"]


def test_reductions_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="calc.evaluator"):
        assert evaluate(tokenize("2 + 3 * 4")) == 14
    assert [r.getMessage() for r in caplog.records] == ["3 MUL 4 = 12", "2 ADD 12 = 14"]
