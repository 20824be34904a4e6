"""Tree-walking evaluator for calcpad expression forests."""

from __future__ import annotations

import math
import operator
from typing import Callable, Optional, Sequence

from calcpad.models import (
    BinaryExpr,
    EvaluationError,
    Expression,
    GroupingExpr,
    NumberExpr,
    TokenKind,
)


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 is ±inf and 0/0 is nan instead of an exception."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


_BIN_OPS: dict[TokenKind, Callable[[float, float], float]] = {
    TokenKind.ADD: operator.add,
    TokenKind.SUBTRACT: operator.sub,
    TokenKind.MULTIPLY: operator.mul,
    TokenKind.DIVIDE: _divide,
}


def evaluate(forest: Sequence[Expression]) -> Optional[float]:
    """Reduce a parsed forest to a single number.

    Top-level nodes are multiplied together left to right, so ``(2)(3)``
    gives 6. An empty forest means nothing was entered and returns None.

    Raises:
        EvaluationError: on a malformed number or an unknown node type.
    """
    if not forest:
        return None

    value = 1.0
    for node in forest:
        value *= evaluate_node(node)
    return value


def evaluate_node(node: Expression) -> float:
    """Recursively evaluate a single expression tree."""
    if isinstance(node, NumberExpr):
        try:
            return float(node.lexeme)
        except ValueError as e:
            raise EvaluationError(f"Invalid number: {node.lexeme!r}") from e

    if isinstance(node, GroupingExpr):
        return evaluate_node(node.inner)

    if isinstance(node, BinaryExpr):
        op = _BIN_OPS.get(node.operator.kind)
        if op is None:
            raise EvaluationError(f"Unsupported operator: {node.operator.lexeme!r}")
        left = evaluate_node(node.left)
        right = evaluate_node(node.right)
        return op(left, right)

    raise EvaluationError(f"Unsupported expression: {type(node).__name__}")
