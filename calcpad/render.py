"""Rich rendering for tokens and expression forests."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from calcpad.models import BinaryExpr, Expression, GroupingExpr, NumberExpr, Token, TokenKind

_KIND_STYLES = {
    TokenKind.NUMBER: "cyan",
    TokenKind.LEFT_PAREN: "magenta",
    TokenKind.RIGHT_PAREN: "magenta",
}


def format_expression(node: Expression) -> str:
    """Fully parenthesized prefix form, e.g. ``(+ 2 (* 3 4))``."""
    if isinstance(node, NumberExpr):
        return node.lexeme
    if isinstance(node, GroupingExpr):
        return f"(group {format_expression(node.inner)})"
    if isinstance(node, BinaryExpr):
        return f"({node.operator.lexeme} {format_expression(node.left)} {format_expression(node.right)})"
    raise TypeError(f"Not an expression node: {type(node).__name__}")


def render_tokens(tokens: Sequence[Token], console: Console) -> None:
    """Render a token table."""
    if not tokens:
        console.print("[yellow]No tokens.[/yellow]")
        return

    table = Table(title="Tokens", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind", min_width=12)
    table.add_column("Lexeme", justify="right")

    for i, token in enumerate(tokens):
        style = _KIND_STYLES.get(token.kind, "green")
        table.add_row(str(i), f"[{style}]{token.kind.name}[/{style}]", escape(token.lexeme))

    console.print()
    console.print(table)
    console.print()


def _add_node(parent: Tree, node: Expression) -> None:
    if isinstance(node, NumberExpr):
        parent.add(f"[cyan]{escape(node.lexeme)}[/cyan]")
    elif isinstance(node, GroupingExpr):
        branch = parent.add("[magenta]( )[/magenta]")
        _add_node(branch, node.inner)
    elif isinstance(node, BinaryExpr):
        branch = parent.add(f"[bold green]{escape(node.operator.lexeme)}[/bold green]")
        _add_node(branch, node.left)
        _add_node(branch, node.right)
    else:
        raise TypeError(f"Not an expression node: {type(node).__name__}")


def build_tree(forest: Sequence[Expression]) -> Tree:
    """Build a Rich tree with one branch per top-level node."""
    if len(forest) == 1:
        label = "expression"
    elif len(forest) > 1:
        label = f"forest [dim](implicit product of {len(forest)})[/dim]"
    else:
        label = "forest"
    root = Tree(f"[bold]{label}[/bold]")
    for node in forest:
        _add_node(root, node)
    return root


def render_forest(forest: Sequence[Expression], console: Console) -> None:
    """Render the parsed forest as a tree."""
    if not forest:
        console.print("[yellow]Empty expression.[/yellow]")
        return
    console.print(build_tree(forest))
