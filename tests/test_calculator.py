"""Whole key sequences through Calculator.press, as the keypad sends them."""

import pytest


def test_press_returns_display(calc):
    assert calc.press("5") == {"display": "5"}


def test_addition(press_all):
    assert press_all(["1", "2", "+", "3", "="])[-1] == "15"


def test_division_by_zero(press_all):
    assert press_all(["5", "÷", "0", "="])[-1] == "Erro"


def test_chain_off_previous_result(calc, press_all):
    shown = press_all(["7", "=", "+"])
    assert shown[1] == "7"
    assert calc.state.buffer == "7+"
    assert shown[2] == "7+"
    assert press_all(["3", "="])[-1] == "10"


def test_decimal_result(press_all):
    assert press_all(["0", ",", "5", "="])[-1] == "0.5"


def test_backspace_after_evaluation_clears(press_all):
    assert press_all(["9", "=", "⌫"])[-1] == "0"


def test_trailing_operator_is_dropped_on_evaluate(press_all):
    assert press_all(["3", "+", "="])[-1] == "3"


def test_evaluate_empty_buffer(press_all):
    assert press_all(["="]) == ["0"]


@pytest.mark.parametrize("keys", [
    [],
    ["1", "2", "+"],
    ["5", "÷", "0", "="],
    ["9", "="],
    ["1", ",", "5", "×"],
])
def test_clear_always_shows_zero(press_all, keys):
    press_all(keys)
    assert press_all(["AC"]) == ["0"]


def test_digit_after_error_starts_fresh(press_all):
    assert press_all(["5", "÷", "0", "=", "4", "+", "1", "="])[-1] == "5"


def test_precedence(press_all):
    assert press_all(["2", "+", "3", "×", "4", "="])[-1] == "14"
    assert press_all(["1", "0", "%", "4", "−", "1", "="])[-1] == "1"


def test_operator_switch(press_all):
    assert press_all(["8", "+", "×", "÷", "2", "="])[-1] == "4"


def test_repeated_equals_reevaluates(press_all):
    assert press_all(["6", "×", "7", "=", "="])[-2:] == ["42", "42"]


def test_leading_zeros(press_all):
    assert press_all(["0", "0", "7", "+", "1", "="])[-1] == "8"


def test_unknown_key_is_ignored(press_all):
    assert press_all(["1", "x", "2"]) == ["1", "1", "12"]


def test_locale_glyph_display(settings):
    from calcpad.Calculator import Calculator

    settings["locale_glyphs"] = True
    calc = Calculator(settings=settings)
    for key in ["1", ",", "5", "×", "3"]:
        shown = calc.press(key)["display"]
    assert shown == "1,5×3"
    assert calc.press("=")["display"] == "4,5"


def test_decimal_places_setting(settings):
    from calcpad.Calculator import Calculator

    settings["decimal_places"] = 3
    calc = Calculator(settings=settings)
    for key in ["2", "÷", "3"]:
        calc.press(key)
    assert calc.press("=")["display"] == "0.667"


def test_operator_after_error_keeps_the_marker(press_all):
    assert press_all(["5", "÷", "0", "=", "+"])[-1] == "Erro+"
    assert press_all(["3", "="])[-1] == "Erro"


def test_long_remainder_is_not_an_error(press_all):
    assert press_all(["1"] * 55 + ["%", "7", "="])[-1] == "1"
