class CalculatorError(ValueError):
    """Base error for input the calculator cannot accept."""


class InvalidKeyError(CalculatorError):
    """A key outside the keypad alphabet."""


class InvalidStateError(CalculatorError):
    """A serialized calculator state that cannot be decoded."""
