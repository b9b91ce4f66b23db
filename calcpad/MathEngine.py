# MathEngine.py
"""""
Evaluation engine for the keypad calculator.

Pipeline
--------
1) Sanitizer: rewrites the raw key-press buffer into canonical arithmetic form.
2) Tokenizer: converts the sanitized string into a flat list of tokens.
3) Parser (AST): builds an Abstract Syntax Tree (recursive-descent, precedence aware).
4) Evaluator: computes the tree with Decimal arithmetic.
5) Formatter: renders the result as a plain decimal string.

`calculate()` raises MathError subclasses; `evaluate()` is the boundary used by the
keypad and never raises.
"""""

import re
from decimal import Decimal, Context, localcontext, Overflow, InvalidOperation

from . import config_manager as config_manager
from . import error as E

# Debug toggle for optional prints in this module
debug = config_manager.load_setting_value("debug")

# Canonical operators and the decimal separator
Operations = ["+", "-", "*", "/", "%"]
DECIMAL_SEPARATOR = "."

# Locale glyph -> canonical symbol
GLYPHS = {
    "÷": "/",
    "×": "*",
    "−": "-",
    ",": ".",
}

# Precision of intermediate results and the largest finite exponent (double-like range)
PRECISION = 50
MAX_EXPONENT = 308

_SYMBOLS = set(Operations) | {DECIMAL_SEPARATOR}


# -----------------------------
# Utilities / small helpers
# -----------------------------

def isOp(zahl):
    """Return index of a known operator or -1 if unknown."""
    try:
        return Operations.index(zahl)
    except ValueError:
        return -1


def translate_glyphs(problem):
    """Replace locale glyphs (÷ × − ,) by their canonical symbols."""
    for glyph, symbol in GLYPHS.items():
        problem = problem.replace(glyph, symbol)
    return problem


# -----------------------------
# Sanitizer
# -----------------------------

def sanitize(problem):
    """Rewrite a raw buffer into a form the parser accepts.

    - trailing operators / separators are dropped ("3+" -> "3")
    - a doubled leading symbol loses its first character, a single leading '-' stays
    - an earlier '.' is removed when a second one follows in the same number
    - leading zeros of a number are removed ("007" -> "7"), a lone "0" is kept
    """
    sanitized = translate_glyphs(problem)

    while sanitized and sanitized[-1] in _SYMBOLS:
        sanitized = sanitized[:-1]

    while len(sanitized) > 1 and sanitized[0] in _SYMBOLS and sanitized[1] in _SYMBOLS:
        sanitized = sanitized[1:]

    sanitized = re.sub(r"\.(?=\d*\.)", "", sanitized)

    # Fraction digits ("1.05") are not a leading-zero run
    sanitized = re.sub(r"(?<![\d.])0+(?=\d)", "", sanitized)

    if debug == True:
        print(f"Sanitized {problem!r} -> {sanitized!r}")
    return sanitized


# -----------------------------
# AST node types
# -----------------------------

class Number:
    """AST node for numeric literal backed by Decimal."""
    def __init__(self, value):
        # Always normalize input to Decimal via string to avoid float artifacts
        if not isinstance(value, Decimal):
            value = str(value)
        self.value = Decimal(value)

    def evaluate(self):
        """Return Decimal value for this literal."""
        return self.value

    def __repr__(self):
        return f"Number({self.value})"


class BinOp:
    """AST node for a binary operation: left <operator> right."""
    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator
        self.right = right

    def evaluate(self):
        """Evaluate numeric subtree and apply the binary operator."""
        left_value = self.left.evaluate()
        right_value = self.right.evaluate()

        if self.operator == '+':
            return left_value + right_value
        elif self.operator == '-':
            return left_value - right_value
        elif self.operator == '*':
            return left_value * right_value
        elif self.operator == '/':
            if right_value == 0:
                raise E.InvalidExpression("Division by zero", code="3003")
            return left_value / right_value
        elif self.operator == '%':
            if right_value == 0:
                raise E.InvalidExpression("Modulo by zero", code="3031")
            # The integer quotient must fit the precision, so widen it for long dividends
            with localcontext() as ctx:
                ctx.prec = max(PRECISION, left_value.adjusted() - right_value.adjusted() + PRECISION)
                # Decimal keeps the sign of the dividend, same as a truncating remainder
                return left_value % right_value
        else:
            raise E.InvalidExpression(f"Unknown operator: {self.operator}", code="3004")

    def __repr__(self):
        return f"BinOp({self.operator!r}, left={self.left}, right={self.right})"


class Negate:
    """AST node for unary minus."""
    def __init__(self, operand):
        self.operand = operand

    def evaluate(self):
        return -self.operand.evaluate()

    def __repr__(self):
        return f"Negate({self.operand})"


# -----------------------------
# Tokenizer
# -----------------------------

def translator(problem):
    """Convert a sanitized string into a token list of Decimals and operator strings."""
    full_problem = []
    b = 0

    while b < len(problem):
        current_char = problem[b]

        # --- Numbers: digits and decimal separator ---
        if current_char.isdigit() or current_char == DECIMAL_SEPARATOR:
            str_number = current_char
            while (b + 1 < len(problem)) and (problem[b + 1].isdigit() or problem[b + 1] == DECIMAL_SEPARATOR):
                b += 1
                str_number += problem[b]

            try:
                full_problem.append(Decimal(str_number))
            except InvalidOperation:
                # "." alone or "1.2.3" slipped through
                raise E.InvalidExpression(f"Unexpected token: {str_number}", code="3011")

        # --- Operators ---
        elif isOp(current_char) != -1:
            full_problem.append(current_char)

        # --- Whitespace (ignored) ---
        elif current_char == " ":
            pass

        else:
            raise E.InvalidExpression(f"Unexpected token: {current_char}", code="3011")

        b = b + 1

    return full_problem


# -----------------------------
# Parser (recursive descent)
# -----------------------------

def ast(received_string):
    """Parse a sanitized string into an AST.
    Implements precedence via nested functions: factor → unary → term → sum.
    """
    analysed = translator(received_string)

    if debug == True:
        print(analysed)

    # ---- Parsing functions in precedence order ----

    def parse_factor(tokens):
        """Numeric literals."""
        if len(tokens) > 0:
            token = tokens.pop(0)
        else:
            raise E.InvalidExpression("Missing Number.", code="3027")

        if isinstance(token, Decimal):
            return Number(token)
        else:
            raise E.InvalidExpression(f"Unexpected token: {token}", code="3011")

    def parse_unary(tokens):
        """Handle leading '+'/'-' at the start or after an operator."""
        if tokens and tokens[0] in ('+', '-'):
            operator = tokens.pop(0)
            operand = parse_unary(tokens)

            if operator == '-':
                return Negate(operand)
            else:
                return operand
        return parse_factor(tokens)

    def parse_term(tokens):
        """Multiplication, division and modulo."""
        aktueller_baum = parse_unary(tokens)
        while tokens and tokens[0] in ("*", "/", "%"):
            operator = tokens.pop(0)
            rechtes_teil = parse_unary(tokens)
            aktueller_baum = BinOp(aktueller_baum, operator, rechtes_teil)
        return aktueller_baum

    def parse_sum(tokens):
        """Addition and subtraction."""
        aktueller_baum = parse_term(tokens)
        while tokens and tokens[0] in ("+", "-"):
            operator = tokens.pop(0)
            rechte_seite = parse_term(tokens)
            aktueller_baum = BinOp(aktueller_baum, operator, rechte_seite)
        return aktueller_baum

    finaler_baum = parse_sum(analysed)

    # Anything left over means two numbers or operators met without a link
    if analysed:
        raise E.InvalidExpression(f"Unexpected token: {analysed[0]}", code="3011")

    if debug == True:
        print("Final AST:")
        print(finaler_baum)

    return finaler_baum


# -----------------------------
# Result formatting
# -----------------------------

def cleanup(ergebnis, decimal_places):
    """Render a Decimal as a plain string: no exponent, no trailing zeros, no '-0'.

    Non-integral results are rounded to `decimal_places` digits.
    """
    if ergebnis == ergebnis.to_integral_value():
        gerundetes_ergebnis = ergebnis
    else:
        # Quantize needs room for every digit left of the point plus the requested ones
        with localcontext() as ctx:
            ctx.prec = 128
            gerundetes_ergebnis = ergebnis.quantize(Decimal(1).scaleb(-decimal_places))

    if gerundetes_ergebnis == 0:
        return "0"

    return format(gerundetes_ergebnis.normalize(Context(prec=128)), "f")


# -----------------------------
# Public entry points
# -----------------------------

def calculate(problem, decimal_places=None):
    """Sanitize → parse → evaluate → format. Raises EvaluationError subclasses."""
    if decimal_places is None:
        decimal_places = config_manager.load_setting_value("decimal_places")

    sanitized = sanitize(problem)
    if not sanitized:
        raise E.EmptyExpression(equation=problem)

    try:
        with localcontext() as ctx:
            ctx.prec = PRECISION
            ctx.Emax = MAX_EXPONENT
            ctx.Emin = -MAX_EXPONENT
            ctx.traps[Overflow] = True

            finaler_baum = ast(sanitized)
            # Unary plus applies the context, so an oversized literal overflows too
            ergebnis = +finaler_baum.evaluate()

        return cleanup(ergebnis, decimal_places)

    # Known numeric overflow
    except Overflow:
        raise E.InvalidExpression(
            message="Number too large (Arithmetic overflow).",
            code="3026",
            equation=problem
        )
    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = problem
        raise e
    # Undefined Decimal operations
    except InvalidOperation as e:
        raise E.InvalidExpression(message=f"Invalid operation: {e}", code="3026", equation=problem)
    # Convert unexpected Python exceptions to our unified error type
    except (ValueError, TypeError) as e:
        raise E.InvalidExpression(message=str(e).strip(), code="9999", equation=problem)


def evaluate(buffer, decimal_places=None):
    """Evaluate a key-press buffer without raising.

    Returns:
        (output, error) where output is the display string ("0" for an empty
        buffer, the error marker on failure) and error is None or the
        EvaluationError that was absorbed.
    """
    try:
        return calculate(buffer, decimal_places), None

    except E.EmptyExpression as e:
        return "0", e

    except E.EvaluationError as e:
        if debug == True:
            print(f"Error {e.code}: {E.ERROR_MESSAGES.get(e.code, 'Unknown error')}")
            print(f"Details: {e.message}\nEquation: {e.equation}")
        return E.ERROR_MARKER, e
