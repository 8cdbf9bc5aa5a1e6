"""Infix to postfix conversion and postfix evaluation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Callable, Union

OPERATORS = "+-*/%^"
_EVALUATED = "+-*/^"


class ExpressionError(ValueError):
    """Raised for malformed expressions or unsupported operators."""


def precedence(op: str) -> int:
    """Return the binding strength of an operator, -1 for anything else."""
    if op == "^":
        return 2
    if op in ("/", "*", "%"):
        return 1
    if op in ("+", "-"):
        return 0
    return -1


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix."""
    output: list[str] = []
    stack: list[str] = []
    for ch in expression:
        if ch == "(":
            stack.append(ch)
        elif ch.isascii() and ch.isalnum():
            output.append(ch)
        elif ch in OPERATORS:
            while stack and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ExpressionError("unbalanced ')'")
            stack.pop()
    while stack:
        op = stack.pop()
        if op == "(":
            raise ExpressionError("unbalanced '('")
        output.append(op)
    return "".join(output)


def _truncating_divide(left: int, right: int) -> int:
    if right == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def apply_operator(left: int, right: int, op: str) -> int:
    """Apply a binary operator with integer semantics (division truncates)."""
    if op == "+":
        return left + right
    if op == "-":
        return left - right
    if op == "*":
        return left * right
    if op == "/":
        return _truncating_divide(left, right)
    if op == "^":
        if right < 0:
            return int(left**right)
        return left**right
    raise ExpressionError(f"unsupported operator {op!r}")


def evaluate_postfix(
    expression: str, values: Union[Mapping[str, int], Iterable[int]]
) -> int:
    """Evaluate a postfix expression whose operands are letters.

    With a mapping, each letter is looked up by name; otherwise one value
    is taken from the iterable for every letter, in order of appearance.
    """
    operand: Callable[[str], int]
    if isinstance(values, Mapping):

        def operand(name: str) -> int:
            try:
                return values[name]
            except KeyError:
                raise ExpressionError(f"no value for operand {name!r}") from None

    else:
        supply = iter(values)

        def operand(name: str) -> int:
            try:
                return next(supply)
            except StopIteration:
                raise ExpressionError(f"no value for operand {name!r}") from None

    stack: list[int] = []
    for ch in expression:
        if ch.isalpha():
            stack.append(operand(ch))
        elif ch in _EVALUATED:
            if len(stack) < 2:
                raise ExpressionError(f"operator {ch!r} lacks operands")
            right = stack.pop()
            left = stack.pop()
            stack.append(apply_operator(left, right, ch))
    if len(stack) != 1:
        raise ExpressionError("expression does not reduce to a single value")
    return stack[0]