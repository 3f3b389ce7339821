"""
Plain-dict form of calculator states for the browser session and the JSON API.
"""
import math
import re

from app.projects.calculator.core.accumulator import (
    Accumulating,
    Idle,
    OperatorPending,
)
from app.projects.calculator.core.constants import OPERATORS
from app.projects.calculator.core.errors import InvalidStateError

_MODES = {
    Idle: "idle",
    OperatorPending: "operator_pending",
    Accumulating: "accumulating",
}
# Typed operands ("12", "0.", "3.25") and formatted results ("-2.5", "1e+21", "Infinity", "NaN")
_DISPLAY_PATTERN = re.compile(
    r"\d+\.?\d*"
    r"|-?\d+(?:\.\d+)?(?:e[+-]\d+)?"
    r"|-?Infinity"
    r"|NaN"
)


def state_to_dict(state) -> dict:
    previous = state.previous_operand
    return {
        "mode": _MODES[type(state)],
        "display": state.display,
        "previous_operand": _encode_float(previous),
        "pending_operator": state.pending_operator,
        "awaiting_fresh_operand": state.awaiting_fresh_operand,
    }


def state_from_dict(data):
    """
    Rebuild a state from its dict form.

    Raises:
        InvalidStateError: if the payload is not a well-formed state
    """
    if not isinstance(data, dict):
        raise InvalidStateError("State must be an object")

    mode = data.get("mode")
    display = data.get("display")
    if not isinstance(display, str) or not display:
        raise InvalidStateError("State display must be a non-empty string")
    if not _DISPLAY_PATTERN.fullmatch(display):
        raise InvalidStateError(f"State display is not a number: {display!r}")

    if mode == "idle":
        return Idle(display)

    if mode not in ("operator_pending", "accumulating"):
        raise InvalidStateError(f"Unknown state mode: {mode!r}")

    previous = _decode_float(data.get("previous_operand"))
    operator = data.get("pending_operator")
    if operator not in OPERATORS:
        raise InvalidStateError(f"Unknown pending operator: {operator!r}")

    if mode == "operator_pending":
        return OperatorPending(display, previous, operator)
    return Accumulating(display, previous, operator)


def _encode_float(value):
    # JSON has no inf/nan literals
    if value is None or math.isfinite(value):
        return value
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def _decode_float(value):
    if isinstance(value, bool):
        raise InvalidStateError("Previous operand must be a number")
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError as e:
            raise InvalidStateError("Previous operand is too large") from e
    if value in ("NaN", "Infinity", "-Infinity"):
        return float(value.replace("Infinity", "inf"))
    raise InvalidStateError("Previous operand must be a number")
