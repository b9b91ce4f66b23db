import pytest

from calcpad import config_manager
from calcpad.Calculator import Calculator


@pytest.fixture
def settings():
    return dict(config_manager.DEFAULT_SETTINGS)


@pytest.fixture
def calc(settings):
    """A fresh session that ignores whatever config.json holds."""
    return Calculator(settings=settings)


@pytest.fixture
def press_all(calc):
    """Press every key in order and return the display after each one."""
    def _press_all(keys):
        return [calc.press(key)["display"] for key in keys]
    return _press_all
