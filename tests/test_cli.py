"""Tests for the typer command line."""

import json

import pytest
from typer.testing import CliRunner

from calcpad.__main__ import app


@pytest.fixture
def runner():
    return CliRunner()


# --- eval ---

def test_eval_prints_result(runner):
    result = runner.invoke(app, ["eval", "2(3+4)"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "14"


def test_eval_joins_words_and_drops_whitespace(runner):
    result = runner.invoke(app, ["eval", "2", "+", "3 * 4"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "14"


def test_eval_precision_option(runner):
    result = runner.invoke(app, ["eval", "1/3", "--precision", "4"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "0.3333"


def test_eval_precision_from_env(runner):
    result = runner.invoke(app, ["eval", "2/3"], env={"CALCPAD_PRECISION": "2"})
    assert result.exit_code == 0
    assert result.stdout.strip() == "0.67"


def test_eval_bad_precision_env(runner):
    result = runner.invoke(app, ["eval", "2/3"], env={"CALCPAD_PRECISION": "lots"})
    assert result.exit_code == 1
    assert "CALCPAD_PRECISION" in result.output


def test_eval_syntax_error_exit_code(runner):
    result = runner.invoke(app, ["eval", "(2+3"])
    assert result.exit_code == 1
    assert "Expected" in result.output


def test_eval_evaluation_error_exit_code(runner):
    result = runner.invoke(app, ["eval", "1.2.3"])
    assert result.exit_code == 1
    assert "Invalid number" in result.output


def test_eval_empty_exit_code(runner):
    result = runner.invoke(app, ["eval", "   "])
    assert result.exit_code == 2


def test_eval_json(runner):
    result = runner.invoke(app, ["eval", "6/4", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "status": "ok",
        "text": "6/4",
        "value": 1.5,
        "message": "",
    }


def test_eval_json_syntax_error(runner):
    result = runner.invoke(app, ["eval", "2+", "--json", "--quiet"])
    assert result.exit_code == 1
    assert json.loads(result.stdout)["status"] == "syntax-error"


# --- tokens / tree ---

def test_tokens_command(runner):
    result = runner.invoke(app, ["tokens", "12.5*(3-1)"])
    assert result.exit_code == 0
    assert "NUMBER" in result.stdout
    assert "12.5" in result.stdout


def test_tree_command(runner):
    result = runner.invoke(app, ["tree", "(2)(3)"])
    assert result.exit_code == 0
    assert "implicit product of 2" in result.stdout


def test_tree_syntax_error(runner):
    result = runner.invoke(app, ["tree", "(2"])
    assert result.exit_code == 1
    assert "Syntax error" in result.output


# --- keypad ---

def test_keypad_session(runner):
    result = runner.invoke(app, ["keypad"], input="2(3+4)=\nq\n")
    assert result.exit_code == 0
    assert "14" in result.stdout.splitlines()


def test_keypad_shows_pending_input(runner):
    result = runner.invoke(app, ["keypad"], input="1.5+\n2\n")
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert "1.5+" in lines
    assert "1.5+2" in lines


def test_keypad_error_keeps_input(runner):
    result = runner.invoke(app, ["keypad"], input="(1=\nq\n")
    assert result.exit_code == 0
    assert "(1" in result.stdout.splitlines()
    assert "Error:" in result.output
