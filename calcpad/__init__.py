"""calcpad: key-press calculator engine with a small PySide6 keypad."""
