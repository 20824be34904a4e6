"""Tokenizer: flat character sequence → list of Tokens.

Single left-to-right pass with one character of lookahead. Characters that
don't start a token are reported on the console and skipped; tokenizing
never fails.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape

from calcpad.models import Token, TokenKind

_SINGLE_CHAR_KINDS: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "+": TokenKind.ADD,
    "-": TokenKind.SUBTRACT,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
}

_DIGITS = frozenset("0123456789")

# Lexical notices go to stderr unless the caller supplies its own console.
_notice_console = Console(stderr=True)


def _is_number_char(char: str) -> bool:
    return char in _DIGITS or char == "."


def tokenize(text: str, console: Optional[Console] = None) -> list[Token]:
    """Scan ``text`` into tokens.

    A digit starts a NUMBER token that swallows the whole run of digits and
    dots after it; whether that run is a well-formed decimal is checked at
    evaluation time, not here.

    Args:
        text: The assembled input, e.g. ``"2(3+4)"``.
        console: Rich Console for lexical notices. Defaults to stderr.

    Returns:
        Tokens in source order. Empty input gives an empty list.
    """
    out = console or _notice_console
    tokens: list[Token] = []
    i = 0
    n = len(text)

    while i < n:
        char = text[i]

        kind = _SINGLE_CHAR_KINDS.get(char)
        if kind is not None:
            tokens.append(Token(kind, char))
            i += 1
            continue

        if char in _DIGITS:
            start = i
            while i < n and _is_number_char(text[i]):
                i += 1
            tokens.append(Token(TokenKind.NUMBER, text[start:i]))
            continue

        out.print(f"[yellow]Skipping invalid character[/yellow] {escape(repr(char))} at {i}")
        i += 1

    return tokens
