"""Tests for the evaluator, plus the end-to-end arithmetic properties."""

import math

import pytest

from calcpad.evaluator import evaluate, evaluate_node
from calcpad.models import (
    BinaryExpr,
    EvaluationError,
    GroupingExpr,
    NumberExpr,
    Token,
    TokenKind,
)
from calcpad.parser import parse
from calcpad.tokenizer import tokenize


@pytest.fixture
def run(console):
    """evaluate(parse(tokenize(text)))"""
    def _run(text):
        return evaluate(parse(tokenize(text, console=console)))
    return _run


# --- Arithmetic ---

@pytest.mark.parametrize("text, expected", [
    ("2+3", 5.0),
    ("10-4", 6.0),
    ("3*7", 21.0),
    ("15/4", 3.75),
    ("2+3*4", 14.0),
    ("(2+3)*4", 20.0),
    ("10-2*3+4/2", 6.0),
    ("10-2-3", 5.0),
    ("8/4/2", 1.0),
    ("((2+3)*(4-1))", 15.0),
    ("(((1+2)))", 3.0),
    ("3.14*2", 6.28),
])
def test_arithmetic(run, text, expected):
    assert run(text) == pytest.approx(expected)


# --- Implicit multiplication ---

def test_number_before_group(run):
    assert run("2(3+4)") == pytest.approx(14.0)


def test_juxtaposed_groups(run):
    assert run("(2)(3)") == pytest.approx(6.0)


def test_juxtaposed_implicit_products(run):
    assert run("2(3)4(5)") == pytest.approx(120.0)


def test_juxtaposition_binds_looser_than_addition(run):
    """(1)(2)+3 is (1) times (2+3): each top-level node is a full expression."""
    assert run("(1)(2)+3") == pytest.approx(5.0)


# --- Division by zero (IEEE-754) ---

def test_positive_over_zero(run):
    assert run("1/0") == math.inf


def test_zero_over_zero_is_nan(run):
    assert math.isnan(run("0/0"))


def test_negative_over_zero(run):
    assert run("(0-1)/0") == -math.inf


def test_division_by_negative_zero():
    node = BinaryExpr(NumberExpr("1"), Token(TokenKind.DIVIDE, "/"), NumberExpr("-0.0"))
    assert evaluate_node(node) == -math.inf


# --- Empty forest ---

def test_empty_forest_is_no_result():
    assert evaluate([]) is None


def test_empty_input_end_to_end(run):
    assert run("") is None


# --- Errors ---

def test_malformed_number():
    with pytest.raises(EvaluationError, match="Invalid number"):
        evaluate([NumberExpr("1.2.3")])


def test_malformed_number_end_to_end(run):
    with pytest.raises(EvaluationError):
        run("1.2.3+1")


def test_unknown_node_type():
    with pytest.raises(EvaluationError, match="Unsupported expression: str"):
        evaluate(["2"])


# --- Purity ---

def test_evaluation_is_idempotent(console):
    forest = parse(tokenize("2(3+4)-(1)/4", console=console))
    snapshot = list(forest)
    first = evaluate(forest)
    second = evaluate(forest)
    assert first == second
    assert forest == snapshot


def test_grouping_is_transparent():
    assert evaluate_node(GroupingExpr(GroupingExpr(NumberExpr("9")))) == 9.0


def test_result_is_float(run):
    assert isinstance(run("2+2"), float)
