import enum
import logging
import operator
from dataclasses import dataclass
from typing import Callable

from calc.tokenizer import PrintableEnum, Token, TokenType, untokenize

logger = logging.getLogger(__name__)


@dataclass
class EvaluationError(Exception):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    kind = "Evaluation error"

    def __str__(self) -> str:
        # tokens are rendered one space apart, see untokenize
        caret_offset = sum(len(t.lexeme) + 1 for t in self.tokens[: self.error_token_idx])
        return "\n".join([f"{self.kind}: {self.errmsg}", untokenize(self.tokens), " " * caret_offset + "^"])


class MalformedExpression(EvaluationError):
    kind = "Malformed expression"


class DivisionByZero(EvaluationError):
    kind = "Division by zero"


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()


OPERATOR_TOKENS = {
    TokenType.PLUS: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.SUB,
    TokenType.STAR: BinaryOperator.MUL,
    TokenType.SLASH: BinaryOperator.DIV,
}

OPERATOR_PRECEDENCE = {
    BinaryOperator.ADD: 1,
    BinaryOperator.SUB: 1,
    BinaryOperator.MUL: 2,
    BinaryOperator.DIV: 2,
}


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, unlike Python's floor division."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


OPERATION_IMPLS: dict[BinaryOperator, Callable[[int, int], int]] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUB: operator.sub,
    BinaryOperator.MUL: operator.mul,
    BinaryOperator.DIV: truncating_div,
}


def evaluate(tokens: list[Token]) -> int:
    """Reduce a token list to a single integer.

    Uses an operand stack and a stack of pending operators and open brackets.
    Operators of equal precedence are applied left to right. Pending entries
    are kept as indices into tokens so that errors can point at the culprit.
    """
    operands: list[int] = []
    pending: list[int] = []
    # true at the start and after an operator or open bracket
    expect_operand = True

    for i, token in enumerate(tokens):
        if token.type is TokenType.NUMBER:
            operands.append(int(token.lexeme))
            expect_operand = False
        elif token.type is TokenType.BRACKET_OPEN:
            pending.append(i)
            expect_operand = True
        elif token.type is TokenType.BRACKET_CLOSE:
            while True:
                if not pending:
                    raise MalformedExpression("Unmatched closing bracket", tokens=tokens, error_token_idx=i)
                top_idx = pending.pop()
                if tokens[top_idx].type is TokenType.BRACKET_OPEN:
                    break
                _reduce(tokens, top_idx, operands)
            expect_operand = False
        else:
            op = OPERATOR_TOKENS[token.type]
            if expect_operand:
                raise MalformedExpression(f"Missing left operand for {op}", tokens=tokens, error_token_idx=i)
            precedence = OPERATOR_PRECEDENCE[op]
            while pending and _precedence_at(tokens, pending[-1]) >= precedence:
                _reduce(tokens, pending.pop(), operands)
            pending.append(i)
            expect_operand = True

    if tokens and tokens[-1].type in OPERATOR_TOKENS:
        raise MalformedExpression(
            f"Missing right operand for {OPERATOR_TOKENS[tokens[-1].type]}",
            tokens=tokens,
            error_token_idx=len(tokens) - 1,
        )

    while pending:
        top_idx = pending.pop()
        if tokens[top_idx].type is TokenType.BRACKET_OPEN:
            raise MalformedExpression("Unclosed bracket", tokens=tokens, error_token_idx=top_idx)
        _reduce(tokens, top_idx, operands)

    if not operands:
        raise MalformedExpression("Empty expression", tokens=tokens, error_token_idx=len(tokens))
    if len(operands) > 1:
        raise MalformedExpression(
            f"Expected a single value, {len(operands)} left without an operator",
            tokens=tokens,
            error_token_idx=len(tokens),
        )
    return operands[0]


def _precedence_at(tokens: list[Token], idx: int) -> int:
    """Open brackets rank below every operator."""
    op = OPERATOR_TOKENS.get(tokens[idx].type)
    return 0 if op is None else OPERATOR_PRECEDENCE[op]


def _reduce(tokens: list[Token], op_idx: int, operands: list[int]) -> None:
    op = OPERATOR_TOKENS[tokens[op_idx].type]
    if len(operands) < 2:
        raise MalformedExpression(f"Missing operand for {op}", tokens=tokens, error_token_idx=op_idx)
    right = operands.pop()
    left = operands.pop()
    if op is BinaryOperator.DIV and right == 0:
        raise DivisionByZero(f"{left} / {right}", tokens=tokens, error_token_idx=op_idx)
    result = OPERATION_IMPLS[op](left, right)
    logger.debug("%s %s %s = %s", left, op, right, result)
    operands.append(result)
