"""Data models for the calcpad expression pipeline.

TokenKind, Token, the expression node variants, the error types and the
Outcome result: all the typed structures that flow through
tokenizer → parser → evaluator → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class TokenKind(str, Enum):
    """Lexical token kinds."""

    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    NUMBER = "number"


OPERATOR_KINDS = frozenset({
    TokenKind.ADD,
    TokenKind.SUBTRACT,
    TokenKind.MULTIPLY,
    TokenKind.DIVIDE,
})


@dataclass(frozen=True)
class Token:
    """A single lexeme and its kind."""

    kind: TokenKind
    lexeme: str


# ---------------------------------------------------------------------------
# Expression nodes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NumberExpr:
    """A numeric literal. The lexeme is converted at evaluation time."""

    lexeme: str


@dataclass(frozen=True)
class BinaryExpr:
    """``left <operator> right`` for one of the four arithmetic operators."""

    left: Expression
    operator: Token
    right: Expression

    def __post_init__(self) -> None:
        if self.operator.kind not in OPERATOR_KINDS:
            raise ValueError(f"Not an arithmetic operator: {self.operator.kind.name}")


@dataclass(frozen=True)
class GroupingExpr:
    """A parenthesized sub-expression."""

    inner: Expression


Expression = Union[NumberExpr, BinaryExpr, GroupingExpr]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class CalculatorError(Exception):
    """Base class for failures that abort a single evaluation."""


class ExpressionSyntaxError(CalculatorError):
    """The token stream does not form a valid expression."""

    def __init__(self, message: str, position: int = 0):
        super().__init__(message)
        self.position = position


class EvaluationError(CalculatorError):
    """A parsed tree could not be reduced to a number."""


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------

class Status(str, Enum):
    """How a calculation ended."""

    OK = "ok"
    EMPTY = "empty"
    SYNTAX_ERROR = "syntax-error"
    EVALUATION_ERROR = "evaluation-error"


@dataclass
class Outcome:
    """Result of running the whole pipeline over one input string."""

    status: Status
    value: Optional[float] = None
    message: str = ""
    text: str = ""

    @property
    def ok(self) -> bool:
        return self.status == Status.OK

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "status": self.status.value,
            "value": self.value,
            "message": self.message,
            "text": self.text,
        }
