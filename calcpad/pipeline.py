"""Pipeline entry point: text → Outcome, plus display formatting.

calculate() is what collaborators call. It never raises a CalculatorError;
syntax and evaluation failures come back as an Outcome with the matching
Status so callers can branch on the kind of failure.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Optional

from rich.console import Console

from calcpad.evaluator import evaluate
from calcpad.models import EvaluationError, ExpressionSyntaxError, Outcome, Status
from calcpad.parser import parse
from calcpad.tokenizer import tokenize


def calculate(text: str, console: Optional[Console] = None) -> Outcome:
    """Tokenize, parse and evaluate ``text``.

    Args:
        text: Assembled input, e.g. ``"2(3+4)"``.
        console: Rich Console that receives lexical notices.

    Returns:
        Outcome with status OK and a value, EMPTY when there was nothing to
        evaluate, or SYNTAX_ERROR / EVALUATION_ERROR with a message.
    """
    try:
        forest = parse(tokenize(text, console=console))
        value = evaluate(forest)
    except ExpressionSyntaxError as e:
        return Outcome(status=Status.SYNTAX_ERROR, text=text, message=str(e))
    except EvaluationError as e:
        return Outcome(status=Status.EVALUATION_ERROR, text=text, message=str(e))

    if value is None:
        return Outcome(status=Status.EMPTY, text=text, message="No expression entered")
    return Outcome(status=Status.OK, text=text, value=value)


def format_number(value: float, precision: Optional[int] = None) -> str:
    """Render a result for the display.

    Always plain decimal text ('0.000001', '10000000000000000', never
    exponent form) so the keypad can feed a result back to the tokenizer.
    '14' rather than '14.0'; Infinity/-Infinity/NaN for non-finite values.
    With ``precision``, round to that many significant digits.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if precision is not None:
        value = float(f"{value:.{precision}g}")

    if value.is_integer():
        return str(int(value))
    # repr() is the shortest round-tripping form; Decimal expands its exponent.
    return format(Decimal(repr(value)), "f")
