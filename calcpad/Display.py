# Display.py
from . import MathEngine as MathEngine


# Canonical symbol -> locale glyph, the reverse of MathEngine.GLYPHS
LOCALE_GLYPHS = {symbol: glyph for glyph, symbol in MathEngine.GLYPHS.items()}


def to_locale(text):
    """Render canonical symbols with the keypad's glyphs ("1.5*2" -> "1,5×2")."""
    return "".join(LOCALE_GLYPHS.get(char, char) for char in text)


def format_display(state, locale_glyphs=False):
    """Text for the display. Reads the state, never changes it.

    After "=" the result (or the error marker) is shown. Otherwise the buffer is
    shown as typed, a trailing operator included, and an empty buffer reads "0".
    """
    if state.just_evaluated:
        text = state.last_result
    elif state.buffer:
        text = state.buffer
    else:
        text = "0"

    if locale_glyphs:
        return to_locale(text)
    return text
