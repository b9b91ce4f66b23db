"""Keypad smoke test on Qt's offscreen platform."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

QtWidgets = pytest.importorskip("PySide6.QtWidgets")
from PySide6.QtCore import Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtCore import QEvent

from calcpad.UI import KeypadWindow


@pytest.fixture(scope="module")
def app():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def window(app, calc):
    window = KeypadWindow(calc)
    yield window
    window.close()


def click(window, labels):
    for label in labels:
        window.button_objects[label].click()


def test_starts_at_zero(window):
    assert window.display.text() == "0"


def test_buttons_drive_the_engine(window):
    click(window, ["1", "2", "+", "3"])
    assert window.display.text() == "12+3"
    click(window, ["="])
    assert window.display.text() == "15"


def test_error_and_clear(window):
    click(window, ["5", "÷", "0", "="])
    assert window.display.text() == "Erro"
    click(window, ["AC"])
    assert window.display.text() == "0"


def test_keyboard_input(window):
    for key, text in [(Qt.Key.Key_9, "9"), (Qt.Key.Key_Asterisk, "*"), (Qt.Key.Key_2, "2")]:
        window.keyPressEvent(QKeyEvent(QEvent.Type.KeyPress, key, Qt.KeyboardModifier.NoModifier, text))
    window.keyPressEvent(QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Return, Qt.KeyboardModifier.NoModifier))
    assert window.display.text() == "18"
    window.keyPressEvent(QKeyEvent(QEvent.Type.KeyPress, Qt.Key.Key_Backspace, Qt.KeyboardModifier.NoModifier))
    assert window.display.text() == "0"
