"""
Keypad alphabet for the calculator.
"""
ADD = "+"
SUBTRACT = "-"
MULTIPLY = "×"
DIVIDE = "÷"
EQUALS = "="

DIGITS = tuple("0123456789")
DECIMAL_POINT = "."
CLEAR = "C"
OPERATORS = (ADD, SUBTRACT, MULTIPLY, DIVIDE, EQUALS)

INITIAL_DISPLAY = "0"

# Keyboard and ASCII spellings accepted for keypad labels
KEY_ALIASES = {
    "*": MULTIPLY,
    "x": MULTIPLY,
    "X": MULTIPLY,
    "/": DIVIDE,
    ",": DECIMAL_POINT,
    "Enter": EQUALS,
    "Escape": CLEAR,
    "c": CLEAR,
    "−": SUBTRACT,
}

# Keypad rows as rendered on the page: (label, css class)
KEYPAD_ROWS = [
    [(CLEAR, "function"), (DIVIDE, "operator"), (MULTIPLY, "operator"), (SUBTRACT, "operator")],
    [("7", ""), ("8", ""), ("9", ""), (ADD, "operator tall")],
    [("4", ""), ("5", ""), ("6", "")],
    [("1", ""), ("2", ""), ("3", ""), (EQUALS, "operator tall")],
    [("0", "wide"), (DECIMAL_POINT, "")],
]

KEYS = tuple(label for row in KEYPAD_ROWS for label, _ in row)
