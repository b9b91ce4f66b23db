# Calculator.py
from . import config_manager as config_manager
from . import Display as Display
from . import InputEngine as InputEngine


class Calculator:
    """One interactive session: owns the state and turns key presses into display text.

    Each press is applied completely before the method returns, so the caller can
    feed keys one after another without any locking.
    """

    def __init__(self, settings=None):
        if settings is None:
            settings = config_manager.load_setting_value("all")
        self.settings = settings
        self.state = InputEngine.CalculatorState()

    def press(self, key):
        """Apply one key (label or Token) and return {"display": text}."""
        self.state = InputEngine.apply(self.state, key, self.settings.get("decimal_places"))
        return {"display": self.display()}

    def display(self):
        return Display.format_display(self.state, self.settings.get("locale_glyphs", False))
