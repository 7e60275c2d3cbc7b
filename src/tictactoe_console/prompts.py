"""
Reading integers from a human.
Notes:
- A line is accepted when it starts with an integer; trailing characters
  are ignored ("123asdf" reads as 123).
- Zero is only accepted when the line is exactly "0", so empty lines and
  words do not sneak through as 0.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from .console import Console
from .game_basics import BOARD_CELLS

INVALID_INTEGER_MESSAGE = "Invalid input: please enter an integer number."

_LEADING_INT = re.compile(r"\s*([+-]?)0*([0-9]*)", re.ASCII)

# Digit runs longer than this are clamped to an off-board index.
MAX_DIGITS = 18


def parse_int(text: str) -> Optional[int]:
    m = _LEADING_INT.match(text)
    sign, digits = m.group(1), m.group(2)
    if not digits:
        # "0" is the only way to spell zero
        if text == "0":
            return 0
        return None
    if len(digits) > MAX_DIGITS:
        return -BOARD_CELLS if sign == "-" else BOARD_CELLS
    value = int(digits)
    return -value if sign == "-" else value


def input_int(message: str, console: Console) -> int:
    """Prompt with ``message`` until the reply parses as an integer."""
    while True:
        console.write(message)
        raw = console.read_line()
        value = parse_int(raw)
        if value is not None:
            return value
        logging.debug("Rejected non-integer input: %r", raw)
        console.puts(INVALID_INTEGER_MESSAGE)
        console.blank_line()
