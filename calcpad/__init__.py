"""calcpad: arithmetic expression calculator.

Three-stage pipeline: tokenize the keypad text, parse it into a forest of
expression trees (standard precedence, implicit multiplication), and walk the
trees to a float. A keypad input buffer and a small CLI sit on top.

Usage:
    python -m calcpad eval "2(3+4)"      # 14
    python -m calcpad tree "(2)(3)"      # Show the parsed forest
    python -m calcpad keypad             # Interactive keypad session
"""
