"""CLI for the calcpad expression calculator.

Usage:
    python -m calcpad eval "2(3+4)"             # Evaluate an expression
    python -m calcpad eval 1/3 --precision 4    # Round the displayed result
    python -m calcpad eval "(2+3" --json        # Machine-readable outcome
    python -m calcpad tokens "12.5*(3-1)"       # Show the token stream
    python -m calcpad tree "(2)(3)+1"           # Show the parsed forest
    python -m calcpad keypad                    # Interactive keypad session
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from calcpad.config import Settings
from calcpad.keypad import KeypadBuffer
from calcpad.models import ExpressionSyntaxError, Status
from calcpad.parser import parse
from calcpad.pipeline import calculate, format_number
from calcpad.render import render_forest, render_tokens
from calcpad.tokenizer import tokenize

app = typer.Typer(
    name="calcpad",
    help="Arithmetic expression calculator with implicit multiplication",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()

_EXIT_CODES = {
    Status.OK: 0,
    Status.SYNTAX_ERROR: 1,
    Status.EVALUATION_ERROR: 1,
    Status.EMPTY: 2,
}


def _join(parts: list[str]) -> str:
    """Assemble the input text; whitespace between shell words is dropped."""
    return "".join("".join(parts).split())


def _settings(precision: Optional[int], quiet: bool) -> Settings:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    if precision is not None:
        settings = Settings(precision=precision, notices=settings.notices)
    if quiet:
        settings = Settings(precision=settings.precision, notices=False)
    return settings


@app.command("eval")
def cmd_eval(
    expression: list[str] = typer.Argument(help="Expression to evaluate, e.g. '2(3+4)'"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=1, help="Significant digits in the result"),
    as_json: bool = typer.Option(False, "--json", help="Print the outcome as JSON"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Silence invalid-character notices"),
) -> None:
    """Evaluate an expression and print the result."""
    settings = _settings(precision, quiet)
    outcome = calculate(_join(expression), console=settings.console())

    if as_json:
        out.print_json(json.dumps(outcome.to_dict()))
    elif outcome.ok:
        out.print(format_number(outcome.value, settings.precision))
    elif outcome.status == Status.EMPTY:
        console.print("[yellow]Nothing to evaluate.[/yellow]")
    else:
        console.print(f"[red]Error:[/red] {escape(outcome.message)}")

    code = _EXIT_CODES[outcome.status]
    if code:
        raise typer.Exit(code)


@app.command("tokens")
def cmd_tokens(
    expression: list[str] = typer.Argument(help="Expression to tokenize"),
) -> None:
    """Show the token stream for an expression."""
    tokens = tokenize(_join(expression), console=console)
    render_tokens(tokens, out)


@app.command("tree")
def cmd_tree(
    expression: list[str] = typer.Argument(help="Expression to parse"),
) -> None:
    """Show the parsed expression forest."""
    tokens = tokenize(_join(expression), console=console)
    try:
        forest = parse(tokens)
    except ExpressionSyntaxError as e:
        console.print(f"[red]Syntax error:[/red] {escape(str(e))} (token {e.position})")
        raise typer.Exit(1)
    render_forest(forest, out)


@app.command("keypad")
def cmd_keypad(
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=1, help="Significant digits in results"),
) -> None:
    """Interactive keypad: type keys, '=' evaluates, 'c' clears, '<' deletes, 'q' quits."""
    settings = _settings(precision, quiet=False)
    buffer = KeypadBuffer(console=console, precision=settings.precision)
    console.print("[dim]Keys: 0-9 . + - * / ( )  = evaluate  c clear  < delete  q quit[/dim]")

    while True:
        try:
            line = input()
        except EOFError:
            break
        if line.strip().lower() == "q":
            break
        for char in line:
            if char.isspace():
                continue
            buffer.press_key(char)
        out.print(buffer.text or "0")


if __name__ == "__main__":
    app()
