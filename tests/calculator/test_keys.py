"""
Unit tests for keypad dispatch and state serialization.
"""
import math
import unittest

from app.projects.calculator.core.accumulator import (
    Accumulating,
    Idle,
    OperatorPending,
    initial_state,
)
from app.projects.calculator.core.constants import KEYS
from app.projects.calculator.core.errors import InvalidKeyError, InvalidStateError
from app.projects.calculator.core.keys import normalize_key, press, press_sequence, tokenize
from app.projects.calculator.core.serialization import state_from_dict, state_to_dict


class TestNormalizeKey(unittest.TestCase):

    def test_keypad_labels_pass_through(self):
        for key in KEYS:
            with self.subTest(key=key):
                self.assertEqual(normalize_key(key), key)

    def test_keypad_has_every_trigger(self):
        self.assertEqual(
            set(KEYS),
            set("0123456789") | {".", "C", "+", "-", "×", "÷", "="},
        )

    def test_aliases(self):
        self.assertEqual(normalize_key("*"), "×")
        self.assertEqual(normalize_key("/"), "÷")
        self.assertEqual(normalize_key("Enter"), "=")
        self.assertEqual(normalize_key("Escape"), "C")
        self.assertEqual(normalize_key(" 7 "), "7")

    def test_unknown_keys_rejected(self):
        for raw in ["", "a", "%", "12", None]:
            with self.subTest(raw=raw):
                with self.assertRaises(InvalidKeyError):
                    normalize_key(raw)


class TestPress(unittest.TestCase):

    def test_each_key_kind(self):
        state = press(initial_state(), "7")
        self.assertEqual(state, Idle("7"))
        state = press(state, ".")
        self.assertEqual(state, Idle("7."))
        state = press(state, "*")
        self.assertEqual(state, OperatorPending("7.", 7.0, "×"))
        state = press(state, "2")
        self.assertEqual(state, Accumulating("2", 7.0, "×"))
        state = press(state, "Enter")
        self.assertEqual(state.display, "14")
        self.assertEqual(press(state, "C"), initial_state())

    def test_press_sequence_from_given_state(self):
        state = press_sequence("3+")
        self.assertEqual(press_sequence("4=", state).display, "7")

    def test_invalid_key_propagates(self):
        with self.assertRaises(InvalidKeyError):
            press(initial_state(), "?")


class TestTokenize(unittest.TestCase):

    def test_splits_characters(self):
        self.assertEqual(tokenize("2+3×4="), ["2", "+", "3", "×", "4", "="])

    def test_ignores_whitespace(self):
        self.assertEqual(tokenize(" 1 + 2 "), ["1", "+", "2"])

    def test_named_keys_kept_whole(self):
        self.assertEqual(tokenize("Enter"), ["Enter"])


class TestSerialization(unittest.TestCase):

    def test_idle_dict(self):
        self.assertEqual(state_to_dict(initial_state()), {
            "mode": "idle",
            "display": "0",
            "previous_operand": None,
            "pending_operator": None,
            "awaiting_fresh_operand": False,
        })

    def test_states_survive_dict_form(self):
        for keys in ["", "12.5", "2+", "2+3", "6-2==", "1÷3="]:
            with self.subTest(keys=keys):
                state = press_sequence(keys)
                self.assertEqual(state_from_dict(state_to_dict(state)), state)

    def test_infinite_operand_encoded_as_text(self):
        big = "9" * 200
        state = press_sequence(big + "×" + big + "=")
        data = state_to_dict(state)
        self.assertEqual(data["previous_operand"], "Infinity")
        self.assertEqual(state_from_dict(data).previous_operand, math.inf)

    def test_result_displays_accepted(self):
        for display in ["0.", "12", "-2.5", "0.000001", "1e+21", "-2.5e-8", "Infinity", "-Infinity", "NaN"]:
            with self.subTest(display=display):
                self.assertEqual(state_from_dict({"mode": "idle", "display": display}), Idle(display))

    def test_integer_operand_accepted(self):
        state = state_from_dict({
            "mode": "accumulating",
            "display": "3",
            "previous_operand": 4,
            "pending_operator": "+",
        })
        self.assertEqual(state, Accumulating("3", 4.0, "+"))

    def test_invalid_payloads_rejected(self):
        bad = [
            None,
            [],
            {"mode": "idle"},
            {"mode": "idle", "display": ""},
            {"mode": "idle", "display": "abc"},
            {"mode": "idle", "display": "1.2.3"},
            {"mode": "idle", "display": "5abc"},
            {"mode": "idle", "display": "NaNxyz"},
            {"mode": "idle", "display": " 7"},
            {"mode": "idle", "display": "1e5"},
            {"mode": "accumulating", "display": "1", "previous_operand": 10 ** 400, "pending_operator": "+"},
            {"mode": "busy", "display": "1"},
            {"mode": "accumulating", "display": "1", "previous_operand": None, "pending_operator": "+"},
            {"mode": "accumulating", "display": "1", "previous_operand": True, "pending_operator": "+"},
            {"mode": "operator_pending", "display": "1", "previous_operand": 1, "pending_operator": "^"},
        ]
        for payload in bad:
            with self.subTest(payload=payload):
                with self.assertRaises(InvalidStateError):
                    state_from_dict(payload)


if __name__ == "__main__":
    unittest.main()
