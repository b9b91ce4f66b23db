# InputEngine.py
"""""
Key-press handling for the keypad calculator.

Every key the UI sends is first read into a Token, then applied to the current
CalculatorState. `apply()` never mutates the state it receives; it returns the
next one. The "=" token is the only one that reaches MathEngine.
"""""

from . import MathEngine as MathEngine


# Token kinds
DIGIT = "digit"
DECIMAL = "decimal"
OPERATOR = "operator"
CLEAR = "clear"
BACKSPACE = "backspace"
EVALUATE = "evaluate"

OPERATOR_NAMES = {
    "+": "add",
    "-": "sub",
    "*": "mul",
    "/": "div",
    "%": "mod",
}

# Labels the UI (or a keyboard) may send for the non-character keys
CLEAR_KEYS = ["AC", "C"]
BACKSPACE_KEYS = ["⌫", "<"]
EVALUATE_KEYS = ["=", "⏎"]


class Token:
    """One key press in canonical form: a kind plus its symbol (digit, operator or '.')."""
    __slots__ = ("kind", "symbol")

    def __init__(self, kind, symbol=None):
        self.kind = kind
        self.symbol = symbol

    @property
    def operator(self):
        """Name of the operation (add, sub, mul, div, mod) for operator tokens."""
        return OPERATOR_NAMES.get(self.symbol) if self.kind == OPERATOR else None

    def __eq__(self, other):
        return isinstance(other, Token) and (self.kind, self.symbol) == (other.kind, other.symbol)

    def __hash__(self):
        return hash((self.kind, self.symbol))

    def __repr__(self):
        if self.symbol is None:
            return f"Token({self.kind})"
        return f"Token({self.kind}, {self.symbol!r})"


def read_token(key):
    """Map a raw key label to a Token, or None when the key is not part of the keypad.

    Locale glyphs are translated here, so the rest of the engine only ever sees
    the canonical symbols.
    """
    if isinstance(key, Token):
        return key if is_valid(key) else None
    if not isinstance(key, str):
        return None

    if key in CLEAR_KEYS:
        return Token(CLEAR)
    if key in BACKSPACE_KEYS:
        return Token(BACKSPACE)
    if key in EVALUATE_KEYS:
        return Token(EVALUATE)

    symbol = MathEngine.GLYPHS.get(key, key)
    if len(symbol) != 1:
        return None
    if symbol in "0123456789":
        return Token(DIGIT, symbol)
    if symbol == MathEngine.DECIMAL_SEPARATOR:
        return Token(DECIMAL, symbol)
    if MathEngine.isOp(symbol) != -1:
        return Token(OPERATOR, symbol)
    return None


def is_valid(token):
    """Check a Token built by the caller against the same rules a key label goes through."""
    if token.kind in (CLEAR, BACKSPACE, EVALUATE):
        return token.symbol is None
    if not isinstance(token.symbol, str) or len(token.symbol) != 1:
        return False
    if token.kind == DIGIT:
        return token.symbol in "0123456789"
    if token.kind == DECIMAL:
        return token.symbol == MathEngine.DECIMAL_SEPARATOR
    if token.kind == OPERATOR:
        return MathEngine.isOp(token.symbol) != -1
    return False


class CalculatorState:
    """Buffer, last result and whether the display currently shows that result."""
    __slots__ = ("buffer", "last_result", "just_evaluated")

    def __init__(self, buffer="", last_result="0", just_evaluated=False):
        self.buffer = buffer
        self.last_result = last_result
        self.just_evaluated = just_evaluated

    def replace(self, **changes):
        values = {name: getattr(self, name) for name in self.__slots__}
        values.update(changes)
        return CalculatorState(**values)

    def __eq__(self, other):
        if not isinstance(other, CalculatorState):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __repr__(self):
        return (f"CalculatorState(buffer={self.buffer!r}, last_result={self.last_result!r}, "
                f"just_evaluated={self.just_evaluated})")


def trailing_number(buffer):
    """Return the numeric run after the last operator (the whole buffer if there is none)."""
    b = len(buffer)
    while b > 0 and MathEngine.isOp(buffer[b - 1]) == -1:
        b -= 1
    return buffer[b:]


def append_operator(buffer, operator):
    """Collapse trailing operators into `operator`.

    Stripping stops as soon as the same operator turns up, so pressing it twice
    changes nothing. An operator can never start the expression.
    """
    new_buffer = buffer
    while new_buffer and MathEngine.isOp(new_buffer[-1]) != -1:
        if new_buffer[-1] == operator:
            return new_buffer
        new_buffer = new_buffer[:-1]

    if not new_buffer:
        return ""
    return new_buffer + operator


def apply(state, token, decimal_places=None):
    """Return the state that follows `state` after `token` was pressed."""
    token = read_token(token)
    if token is None:
        # Keys outside the keypad leave everything as it is
        return state

    if token.kind == CLEAR:
        return CalculatorState()

    elif token.kind == BACKSPACE:
        if state.just_evaluated:
            # The display shows a result, there is nothing to edit
            return CalculatorState()
        return state.replace(buffer=state.buffer[:-1])

    elif token.kind == EVALUATE:
        output, _ = MathEngine.evaluate(state.buffer, decimal_places)
        return state.replace(last_result=output, just_evaluated=True)

    elif token.kind in (DIGIT, DECIMAL):
        if state.just_evaluated:
            return state.replace(buffer=token.symbol, just_evaluated=False)

        if token.kind == DECIMAL and MathEngine.DECIMAL_SEPARATOR in trailing_number(state.buffer):
            return state

        return state.replace(buffer=state.buffer + token.symbol)

    elif token.kind == OPERATOR:
        if state.just_evaluated:
            # Chain off the previous result; a "0" result starts fresh
            if state.last_result == "0":
                chained = ""
            else:
                chained = state.last_result
            return state.replace(buffer=chained + token.symbol, just_evaluated=False)

        return state.replace(buffer=append_operator(state.buffer, token.symbol))

    return state
