"""
Running-accumulator state machine behind the calculator keypad.

Each operation is a pure function taking the current state and returning the
next one. The state is one of three immutable variants:

- Idle: no operator chosen since the last clear.
- OperatorPending: an operator was just chosen; the next digit starts a new operand.
- Accumulating: editing the operand that follows a chosen operator.

Evaluation is strictly left to right with no operator precedence:
2 + 3 × 4 = shows 20.
"""
import math
import re
from dataclasses import dataclass
from decimal import Decimal

from app.projects.calculator.core.constants import (
    ADD,
    DIGITS,
    DIVIDE,
    INITIAL_DISPLAY,
    MULTIPLY,
    OPERATORS,
    SUBTRACT,
)
from app.projects.calculator.core.errors import InvalidKeyError

# Longest numeric prefix, the way a browser's parseFloat reads a string
_NUMERIC_PREFIX = re.compile(
    r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


@dataclass(frozen=True)
class Idle:
    display: str = INITIAL_DISPLAY

    @property
    def previous_operand(self):
        return None

    @property
    def pending_operator(self):
        return None

    @property
    def awaiting_fresh_operand(self) -> bool:
        return False


@dataclass(frozen=True)
class OperatorPending:
    display: str
    previous_operand: float
    pending_operator: str

    @property
    def awaiting_fresh_operand(self) -> bool:
        return True


@dataclass(frozen=True)
class Accumulating:
    display: str
    previous_operand: float
    pending_operator: str

    @property
    def awaiting_fresh_operand(self) -> bool:
        return False


def initial_state() -> Idle:
    """State of a freshly mounted calculator."""
    return Idle()


def parse_display(display: str) -> float:
    """
    Read the numeric value of a display string.

    Uses the longest leading numeral ("5." is 5.0, "1e+21" is 1e21,
    "Infinity" is inf). Text with no numeric prefix reads as NaN.
    """
    match = _NUMERIC_PREFIX.match(display.strip())
    if not match:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))


def format_number(value: float) -> str:
    """
    Shortest decimal text for a result.

    Integral values drop the trailing ".0"; exponent notation is used only for
    magnitudes of 1e21 and above or below 1e-6.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # position of the decimal point relative to the first digit
    n = k + exponent

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + text


def apply(a: float, b: float, op: str) -> float:
    """
    Apply a binary operator.

    Division by zero gives 0. "=" and any unrecognised operator return b.
    """
    if op == ADD:
        return a + b
    if op == SUBTRACT:
        return a - b
    if op == MULTIPLY:
        return a * b
    if op == DIVIDE:
        return a / b if b != 0 else 0.0
    return b


def input_digit(state, digit):
    digit = str(digit)
    if digit not in DIGITS:
        raise InvalidKeyError(f"Not a digit: {digit!r}")

    if state.awaiting_fresh_operand:
        return Accumulating(digit, state.previous_operand, state.pending_operator)

    display = digit if state.display == INITIAL_DISPLAY else state.display + digit
    return _with_display(state, display)


def input_decimal_point(state):
    if state.awaiting_fresh_operand:
        return Accumulating("0.", state.previous_operand, state.pending_operator)
    if "." in state.display:
        return state
    return _with_display(state, state.display + ".")


def clear(state=None) -> Idle:
    return initial_state()


def choose_operator(state, op: str) -> OperatorPending:
    """
    Commit the displayed operand and record the next operator.

    The first operator of an expression stores the displayed value as the left
    operand. Later operators first collapse the pending operation against the
    displayed value and show the result. "=" is stored like any other operator.
    """
    if op not in OPERATORS:
        raise InvalidKeyError(f"Not an operator: {op!r}")

    input_value = parse_display(state.display)
    display = state.display

    if state.previous_operand is None:
        previous = input_value
    elif state.pending_operator is not None:
        current = state.previous_operand
        if math.isnan(current):
            current = 0.0
        previous = apply(current, input_value, state.pending_operator)
        display = format_number(previous)
    else:
        previous = state.previous_operand

    return OperatorPending(display, previous, op)


def _with_display(state, display):
    if isinstance(state, Idle):
        return Idle(display)
    return Accumulating(display, state.previous_operand, state.pending_operator)