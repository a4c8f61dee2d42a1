# error.py
"""""
Error types and coded messages for the Scientific Calculator.

Every failure inside the core is raised as (or collapsed from) a MathError with a
four digit code. Nothing of this leaves the core except ERROR_MARKER, the literal
text the display shows.
"""""

ERROR_MARKER = "Error"


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

class SyntaxError(MathError):
    pass

class CalculationError(MathError):
    pass

class DomainError(CalculationError):
    pass

class OverflowError(CalculationError):
    pass

class InputError(MathError):
    pass


def is_error(value):
    """Return True if value is the error marker (and not a number that happens to compare equal)."""
    return isinstance(value, str) and value == ERROR_MARKER


#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number


ERROR_MESSAGES = {
    "2000" : "Division by zero.",
    "2001" : "Square root of a negative number.",

    "3000" : "Empty expression.",
    "3001" : "Missing Number.",
    "3002" : "Missing ')'. ",
    "3003" : "Missing '('. ",
    "3004" : "Unexpected Token: ", # + Token
    "3005" : "More than one '.' in one number.",
    "3006" : "Unknown character: ", # + Character
    "3007" : "Result is not finite.",
    "3008" : "Expression nested too deeply.",

    "4001" : "Unknown key: ", # + Label
    "4002" : "Unknown key category: ", # + Category

    "5001" : "Not all Settings could be saved: ", # + Error raising setting

    "9999" : "Unexpected Error: " #+error
}
