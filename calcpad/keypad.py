"""Keypad input buffer: assembles the expression text from button presses.

The buffer is a list of display entries rather than a plain string so that
DELETE removes whatever the last press added (a digit, an operator, the
"0." inserted by a leading dot, or a whole previous result).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from rich.console import Console
from rich.markup import escape

from calcpad.models import Outcome
from calcpad.pipeline import calculate, format_number


class Button(str, Enum):
    """Keypad buttons."""

    DIGIT = "digit"
    LEFT_PAREN = "left-paren"
    RIGHT_PAREN = "right-paren"
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    DOT = "dot"
    DELETE = "delete"
    CANCEL = "cancel"
    EQUALS = "equals"


_OPERATOR_VALUES = {
    Button.ADD: "+",
    Button.SUBTRACT: "-",
    Button.MULTIPLY: "*",
    Button.DIVIDE: "/",
}

_DIGITS = "0123456789"

_PAREN_VALUES = {
    Button.LEFT_PAREN: "(",
    Button.RIGHT_PAREN: ")",
}

# Keyboard character → button. Digits are handled separately.
KEY_BINDINGS: dict[str, Button] = {
    "(": Button.LEFT_PAREN,
    ")": Button.RIGHT_PAREN,
    "+": Button.ADD,
    "-": Button.SUBTRACT,
    "*": Button.MULTIPLY,
    "/": Button.DIVIDE,
    ".": Button.DOT,
    "=": Button.EQUALS,
    "\n": Button.EQUALS,
    "\r": Button.EQUALS,
    "c": Button.CANCEL,
    "C": Button.CANCEL,
    "<": Button.DELETE,
    "\b": Button.DELETE,
    "\x7f": Button.DELETE,
}


class KeypadBuffer:
    """Input state machine behind the calculator display.

    Enforces at most one decimal point per number before the text ever
    reaches the tokenizer. A failed evaluation leaves the entries untouched
    so the user can fix the input and press equals again.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        precision: Optional[int] = None,
    ) -> None:
        self.console = console or Console(stderr=True)
        self.precision = precision
        self.entries: list[str] = []
        self.has_decimal = False

    @property
    def text(self) -> str:
        """What the display shows."""
        return "".join(self.entries)

    def press(self, button: Button, value: str = "") -> Optional[Outcome]:
        """Apply one button press.

        Args:
            button: Which button was pressed.
            value: The digit for Button.DIGIT; ignored otherwise.

        Returns:
            The Outcome for a non-empty EQUALS press, None for everything else.
        """
        if button == Button.CANCEL:
            self.entries = []
            self.has_decimal = False
        elif button == Button.DELETE:
            if self.entries:
                removed = self.entries.pop()
                if "." in removed:
                    self.has_decimal = False
        elif button == Button.EQUALS:
            return self._equals()
        elif button == Button.DOT:
            self._dot()
        elif button in _OPERATOR_VALUES:
            self.has_decimal = False
            self.entries.append(_OPERATOR_VALUES[button])
        elif button in _PAREN_VALUES:
            self.has_decimal = False
            self.entries.append(_PAREN_VALUES[button])
        elif button == Button.DIGIT:
            if len(value) != 1 or value not in _DIGITS:
                raise ValueError(f"DIGIT needs a single digit value, got {value!r}")
            self.entries.append(value)
        return None

    def press_key(self, char: str) -> Optional[Outcome]:
        """Map a keyboard character to a button and press it."""
        if len(char) == 1 and char in _DIGITS:
            return self.press(Button.DIGIT, char)
        button = KEY_BINDINGS.get(char)
        if button is None:
            self.console.print(f"[yellow]Ignoring unknown key[/yellow] {escape(repr(char))}")
            return None
        return self.press(button)

    def _dot(self) -> None:
        if self.has_decimal:
            return
        self.has_decimal = True
        last = self.entries[-1] if self.entries else ""
        if last and last[-1] in _DIGITS:
            self.entries.append(".")
        else:
            self.entries.append("0.")

    def _equals(self) -> Optional[Outcome]:
        if not self.entries:
            return None

        outcome = calculate(self.text, console=self.console)
        if outcome.ok:
            result = format_number(outcome.value, self.precision)
            self.entries = [result]
            self.has_decimal = "." in result
        else:
            self.console.print(f"[red]Error:[/red] {escape(outcome.message)}")
        return outcome
