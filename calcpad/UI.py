# UI.py
""""PySide6 keypad for the calculator engine.

Structure
---------
- KeypadWindow: read-only display and the button grid

Responsibilities
----------------
- Build window, display, layout and buttons
- Forward button clicks and keyboard keys to Calculator.press
- Show the display string the engine returns

The window holds no calculator logic of its own. Every key is applied
synchronously on the UI thread, one at a time, so fast repeated input
(including press-and-hold) cannot overtake a running evaluation.
"""""

from PySide6 import QtWidgets
from PySide6.QtCore import Qt, QTimer
import sys

from . import Calculator as Calculator


# Keyboard keys that have no printable text of their own
SPECIAL_KEYS = {
    int(Qt.Key.Key_Return): "=",
    int(Qt.Key.Key_Enter): "=",
    int(Qt.Key.Key_Backspace): "⌫",
    int(Qt.Key.Key_Escape): "AC",
    int(Qt.Key.Key_Delete): "AC",
}


class KeypadWindow(QtWidgets.QWidget):
    # --- Class-level attributes for button hold logic ---
    initial_delay = 500
    repeat_interval = 100

    def __init__(self, calculator=None):
        super().__init__()

        # --- 1. Engine Session ---
        self.calculator = calculator if calculator is not None else Calculator.Calculator()

        # --- 2. Hold State ---
        self.was_held = False
        self.held_button_value = None
        self.hold_timer = QTimer(self)  # Timer for button hold
        self.hold_timer.timeout.connect(self.handle_hold_tick)

        # --- 3. Window Setup ---
        self.button_objects = {}  # Dictionary to store button widgets
        self.setWindowTitle("Calculator")
        self.resize(320, 480)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        # Makes widgets expand to fill space
        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- 4. Display Setup ---
        self.display = QtWidgets.QLineEdit(self.calculator.display())
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.setReadOnly(True)
        self.display.setFocusPolicy(Qt.FocusPolicy.NoFocus)  # Keys go to the window
        self.display.setSizePolicy(expanding_policy)
        main_v_layout.addWidget(self.display, 1)

        # --- 5. Button Grid Setup ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 4)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(0)
        button_grid.setContentsMargins(0, 0, 0, 0)

        # (text, row, column, column span)
        self.buttons = [
            ('⌫', 0, 0, 1), ('AC', 0, 1, 1), ('%', 0, 2, 1), ('÷', 0, 3, 1),
            ('7', 1, 0, 1), ('8', 1, 1, 1), ('9', 1, 2, 1), ('×', 1, 3, 1),
            ('4', 2, 0, 1), ('5', 2, 1, 1), ('6', 2, 2, 1), ('−', 2, 3, 1),
            ('1', 3, 0, 1), ('2', 3, 1, 1), ('3', 3, 2, 1), ('+', 3, 3, 1),
            ('0', 4, 0, 2), (',', 4, 2, 1), ('=', 4, 3, 1)
        ]

        # Buttons that support "press and hold"
        HOLD_BUTTONS = ['0', '1', '2', '3', '4', '5', '6', '7', '8', '9', '⌫']

        # --- 6. Button Creation Loop ---
        for text, row, col, span in self.buttons:
            button = QtWidgets.QPushButton(text)
            button.setSizePolicy(expanding_policy)
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)

            if text in HOLD_BUTTONS:
                # Use press/release signals for hold logic
                button.pressed.connect(lambda val=text: self.handle_button_pressed_hold(val))
                button.released.connect(self.handle_button_released_hold)
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_clicked_hold(val))
            else:
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))

            button_grid.addWidget(button, row, col, 1, span)
            self.button_objects[text] = button

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    # --- Button Hold Logic ---
    def handle_button_pressed_hold(self, value):
        self.was_held = False  # Reset flag on new press
        self.held_button_value = value
        self.hold_timer.setInterval(self.initial_delay)
        self.hold_timer.start()

    def handle_button_released_hold(self):
        self.hold_timer.stop()
        self.held_button_value = None

    def handle_button_clicked_hold(self, value):
        # A click that ends a hold has already been handled by the ticks
        if not self.was_held:
            self.handle_button_press(value)

    def handle_hold_tick(self):
        self.was_held = True
        if self.hold_timer.interval() == self.initial_delay:
            self.hold_timer.setInterval(self.repeat_interval)

        if self.held_button_value:
            self.handle_button_press(self.held_button_value)

    # --- Key Event Handler ---
    def keyPressEvent(self, event):
        value = SPECIAL_KEYS.get(int(event.key()), event.text())
        if value:
            self.handle_button_press(value)
            event.accept()
        else:
            super().keyPressEvent(event)

    def handle_button_press(self, value):
        response = self.calculator.press(value)
        self.display.setText(response["display"])


def main():
    # --- Main Application Entry Point ---
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    window = KeypadWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
