"""
Dispatch keypad presses to accumulator operations.
"""
from app.projects.calculator.core import accumulator
from app.projects.calculator.core.constants import (
    CLEAR,
    DECIMAL_POINT,
    DIGITS,
    KEY_ALIASES,
    KEYS,
    OPERATORS,
)
from app.projects.calculator.core.errors import InvalidKeyError


def normalize_key(raw) -> str:
    """
    Map a raw key (keypad label or keyboard alias) to its keypad label.

    Raises:
        InvalidKeyError: if the key is not on the keypad
    """
    if raw is None:
        raise InvalidKeyError("No key given")
    key = str(raw).strip()
    key = KEY_ALIASES.get(key, key)
    if key not in KEYS:
        raise InvalidKeyError(f"Unknown key: {raw!r}")
    return key


def press(state, raw_key):
    """Apply a single key press and return the next state."""
    key = normalize_key(raw_key)
    if key in DIGITS:
        return accumulator.input_digit(state, key)
    if key == DECIMAL_POINT:
        return accumulator.input_decimal_point(state)
    if key == CLEAR:
        return accumulator.clear(state)
    if key in OPERATORS:
        return accumulator.choose_operator(state, key)
    # KEYS and the branches above cover the same alphabet
    raise InvalidKeyError(f"Unhandled key: {key!r}")


def press_sequence(keys, state=None):
    """Fold key presses over a state, starting from a fresh calculator by default."""
    if state is None:
        state = accumulator.initial_state()
    for key in keys:
        state = press(state, key)
    return state


def tokenize(text: str) -> list[str]:
    """
    Split compact key text such as "2+3×4=" into single keys.

    Whitespace is ignored. Named keys ("Enter", "Escape") are accepted only as
    the whole text.
    """
    text = text.strip()
    if text in KEY_ALIASES:
        return [text]
    return [ch for ch in text if not ch.isspace()]
