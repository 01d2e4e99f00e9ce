"""
calc - integer arithmetic expression evaluator

Evaluates expressions built from non-negative integer literals, the binary
operators + - * / and brackets. Division truncates toward zero.

Example:
    >>> from calc import process
    >>> process("(2 * 4) - 2")
    6
"""

__version__ = "0.1.0"

from calc.evaluator import DivisionByZero, EvaluationError, MalformedExpression, evaluate
from calc.tokenizer import Token, TokenizerError, TokenType, tokenize


def process(code: str, strict: bool = False) -> int:
    return evaluate(tokenize(code, strict=strict))


__all__ = [
    "__version__",
    "DivisionByZero",
    "EvaluationError",
    "MalformedExpression",
    "Token",
    "TokenizerError",
    "TokenType",
    "evaluate",
    "process",
    "tokenize",
]
