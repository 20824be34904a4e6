"""Recursive-descent parser: list of Tokens → forest of expression trees.

Grammar, loosest binding first:

    forest         := expression*
    expression     := additive
    additive       := multiplicative (('+'|'-') multiplicative)*
    multiplicative := atom (('*'|'/') atom)*
    atom           := '(' expression ')'
                    | NUMBER ['(' expression ')']

A NUMBER directly followed by '(' is an implicit multiplication. Two complete
expressions back to back with no operator between them, like ``(2)(3)``,
come out as separate top-level nodes; the evaluator multiplies them.
"""

from __future__ import annotations

from typing import Optional, Sequence

from calcpad.models import (
    BinaryExpr,
    Expression,
    ExpressionSyntaxError,
    GroupingExpr,
    NumberExpr,
    Token,
    TokenKind,
)

_IMPLICIT_MULTIPLY = Token(TokenKind.MULTIPLY, "*")


class TokenCursor:
    """Read position over an immutable token sequence.

    Only ever looks one token ahead and one token back.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens: tuple[Token, ...] = tuple(tokens)
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def current(self) -> Optional[Token]:
        """The token under the cursor, or None past the end."""
        if self.at_end():
            return None
        return self.tokens[self.pos]

    def previous(self) -> Token:
        """The most recently consumed token."""
        return self.tokens[self.pos - 1]

    def match(self, *kinds: TokenKind) -> bool:
        """Consume the current token if it is one of ``kinds``."""
        token = self.current()
        if token is not None and token.kind in kinds:
            self.pos += 1
            return True
        return False

    def expect(self, kind: TokenKind, message: str) -> Token:
        """Consume a token of ``kind`` or raise ExpressionSyntaxError."""
        if self.match(kind):
            return self.previous()
        raise ExpressionSyntaxError(message, self.pos)


def parse(tokens: Sequence[Token]) -> list[Expression]:
    """Parse a token sequence into a forest of top-level expressions.

    Raises:
        ExpressionSyntaxError: on an unclosed '(' or a missing/invalid atom.
    """
    cursor = TokenCursor(tokens)
    forest: list[Expression] = []
    while not cursor.at_end():
        forest.append(_expression(cursor))
    return forest


def _expression(cursor: TokenCursor) -> Expression:
    return _additive(cursor)


def _additive(cursor: TokenCursor) -> Expression:
    expr = _multiplicative(cursor)
    while cursor.match(TokenKind.ADD, TokenKind.SUBTRACT):
        operator = cursor.previous()
        right = _multiplicative(cursor)
        expr = BinaryExpr(expr, operator, right)
    return expr


def _multiplicative(cursor: TokenCursor) -> Expression:
    expr = _atom(cursor)
    while cursor.match(TokenKind.MULTIPLY, TokenKind.DIVIDE):
        operator = cursor.previous()
        right = _atom(cursor)
        expr = BinaryExpr(expr, operator, right)
    return expr


def _group(cursor: TokenCursor) -> GroupingExpr:
    """Body of a group whose '(' has already been consumed."""
    inner = _expression(cursor)
    cursor.expect(TokenKind.RIGHT_PAREN, 'Expected ")" after expression')
    return GroupingExpr(inner)


def _atom(cursor: TokenCursor) -> Expression:
    if cursor.match(TokenKind.LEFT_PAREN):
        return _group(cursor)

    if cursor.match(TokenKind.NUMBER):
        number = NumberExpr(cursor.previous().lexeme)
        # 2(3+4) → 2 * (3+4)
        if cursor.match(TokenKind.LEFT_PAREN):
            return BinaryExpr(number, _IMPLICIT_MULTIPLY, _group(cursor))
        return number

    raise ExpressionSyntaxError("Invalid expression", cursor.pos)
