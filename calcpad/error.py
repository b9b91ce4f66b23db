# error.py
from enum import Enum


ERROR_MARKER = "Erro"  # Shown on the display instead of a number


class ErrorKind(Enum):
    EMPTY = "empty"
    INVALID = "invalid"


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation


class EvaluationError(MathError):
    kind = ErrorKind.INVALID


class EmptyExpression(EvaluationError):
    """Nothing left to compute after sanitizing. Resolves to "0", not a failure."""
    kind = ErrorKind.EMPTY

    def __init__(self, message="Empty expression.", code="3100", equation=None):
        super().__init__(message, code=code, equation=equation)


class InvalidExpression(EvaluationError):
    kind = ErrorKind.INVALID



#Error Messages are structured in:
# 1. Digit: Main Error (3 = Calculator, 9 = Unexpected)
# 2. Digit: Specification
# 3. and 4. Digit: Error Number

ERROR_MESSAGES = {
    "3003" : "Division by Zero",
    "3004" : "Invalid Operator: ", # + operator
    "3011" : "Unexpected Token: ", # + Token
    "3026" : "Number too big.",
    "3027" : "Missing Number.",
    "3031" : "Modulo by Zero",
    "3100" : "Empty expression.",

    "9999" : "Unexpected Error: " #+error
}
