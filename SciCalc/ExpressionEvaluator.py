# ExpressionEvaluator.py
"""""
Expression engine for the Scientific Calculator.

Pipeline
--------
1) Translator: converts the expression text into a flat list of tokens and
   substitutes the calculator glyphs on the way (π and e become numbers,
   × and ÷ become * and /, ** becomes ^).
2) Parser (AST): builds an Abstract Syntax Tree (recursive-descent, precedence aware).
3) Evaluator: walks the tree using MathOperations.
4) Formatter: renders numbers the way the display shows them.

evaluate() is the only entry point the state machine uses. It has no side effects
and never raises: any failure comes back as ERROR_MARKER.
"""""

import logging
import math
import re

from . import MathOperations
from . import error as E

logger = logging.getLogger(__name__)

DIGITS = "0123456789"

# Glyph -> token, tried in this order (so '**' is matched before '*')
SUBSTITUTIONS = (
    ("π", MathOperations.PI),
    ("e", MathOperations.E),
    ("×", "*"),
    ("÷", "/"),
    ("√", "√"),
    ("**", "^"),
)

# Single character tokens taken over as they are
SYMBOLS = ("+", "-", "*", "/", "^", "(", ")", "²")

_EXPONENT = re.compile(r"e([+-])0*(\d+)")


# -----------------------------
# AST node types
# -----------------------------

class Number:
    """AST node for a numeric literal (constants are numbers too once translated)."""
    def __init__(self, value):
        self.value = float(value)

    def evaluate(self):
        return self.value

    def __repr__(self):
        return f"Number({self.value!r})"


class UnaryOp:
    """AST node for '-' (negation), '√' (prefix square root) and '²' (postfix square)."""
    def __init__(self, operator, operand):
        self.operator = operator
        self.operand = operand

    def evaluate(self):
        value = self.operand.evaluate()

        if self.operator == '-':
            return MathOperations.negate(value)
        elif self.operator == '√':
            if value < 0:
                raise E.DomainError("Square root of a negative number", code="2001")
            return MathOperations.sqrt(value)
        elif self.operator == '²':
            return MathOperations.square(value)
        else:
            raise E.SyntaxError(f"Unknown operator: {self.operator}", code="3004")

    def __repr__(self):
        return f"UnaryOp({self.operator!r}, {self.operand})"


class BinOp:
    """AST node for a binary operation: left <operator> right."""
    def __init__(self, left, operator, right):
        self.left = left
        self.operator = operator
        self.right = right

    def evaluate(self):
        left_value = self.left.evaluate()
        right_value = self.right.evaluate()

        if self.operator == '+':
            return MathOperations.add(left_value, right_value)
        elif self.operator == '-':
            return MathOperations.subtract(left_value, right_value)
        elif self.operator == '*':
            return MathOperations.multiply(left_value, right_value)
        elif self.operator == '^':
            return MathOperations.power(left_value, right_value)
        elif self.operator == '/':
            result = MathOperations.divide(left_value, right_value)
            if E.is_error(result):
                raise E.DomainError("Division by zero", code="2000")
            return result
        else:
            raise E.SyntaxError(f"Unknown operator: {self.operator}", code="3004")

    def __repr__(self):
        return f"BinOp({self.operator!r}, left={self.left}, right={self.right})"


# -----------------------------
# Tokenizer
# -----------------------------

def translator(problem):
    """Convert the expression text into a token list (floats and operator/paren strings)."""
    tokens = []
    b = 0

    while b < len(problem):
        current_char = problem[b]

        # --- Numbers: digits and decimal point ---
        if current_char in DIGITS or current_char == ".":
            start = b
            has_point = False
            while b < len(problem) and (problem[b] in DIGITS or problem[b] == "."):
                if problem[b] == ".":
                    if has_point:
                        raise E.SyntaxError("Double decimal point.", code="3005")
                    has_point = True
                b += 1

            str_number = problem[start:b]
            if str_number == ".":
                raise E.SyntaxError("Decimal point without digits.", code="3001")
            tokens.append(float(str_number))
            continue

        # --- Whitespace (ignored) ---
        if current_char == " ":
            b += 1
            continue

        # --- Glyph substitution ---
        for glyph, replacement in SUBSTITUTIONS:
            if problem.startswith(glyph, b):
                tokens.append(replacement)
                b += len(glyph)
                break
        else:
            if current_char in SYMBOLS:
                tokens.append(current_char)
                b += 1
            else:
                raise E.SyntaxError(f"Unknown character: {current_char}", code="3006")

    return tokens


# -----------------------------
# Parser (recursive descent)
# -----------------------------

def ast(tokens, auto_close_parentheses=False):
    """Parse a token list into an AST.

    Precedence, from loosest to tightest: + -, * /, unary -, ^, postfix ², factor.
    With auto_close_parentheses, '(' still open when the tokens run out counts as closed.
    """
    tokens = list(tokens)
    if not tokens:
        raise E.SyntaxError("Empty expression.", code="3000")

    def parse_factor(tokens):
        """Numbers, sub-expressions in '()' and the prefix square root."""
        if not tokens:
            raise E.SyntaxError("Missing Number.", code="3001")
        token = tokens.pop(0)

        if token == "(":
            subtree = parse_sum(tokens)
            if not tokens:
                if auto_close_parentheses:
                    return subtree
                raise E.SyntaxError("Missing closing parenthesis ')'", code="3002")
            closing = tokens.pop(0)
            if closing != ")":
                raise E.SyntaxError(f"Unexpected token: {closing}", code="3004")
            return subtree

        elif token == "√":
            return UnaryOp("√", parse_postfix(tokens))

        elif isinstance(token, float):
            return Number(token)

        else:
            raise E.SyntaxError(f"Unexpected token: {token}", code="3004")

    def parse_postfix(tokens):
        """Postfix square: 3² -> 9.

        The x² key writes '²' into the expression, so '²' has to be readable here
        for "3², +, 1, =" to give 10 rather than Error.
        """
        tree = parse_factor(tokens)
        while tokens and tokens[0] == "²":
            tokens.pop(0)
            tree = UnaryOp("²", tree)
        return tree

    def parse_power(tokens):
        """Exponentiation '^'. The exponent goes through parse_unary, which makes it right associative."""
        tree = parse_postfix(tokens)
        while tokens and tokens[0] == "^":
            operator = tokens.pop(0)
            right = parse_unary(tokens)
            tree = BinOp(tree, operator, right)
        return tree

    def parse_unary(tokens):
        """Leading '+'/'-'; binds looser than '^', so -2^2 is -4."""
        if tokens and tokens[0] in ('+', '-'):
            operator = tokens.pop(0)
            operand = parse_unary(tokens)
            if operator == '-':
                return UnaryOp('-', operand)
            return operand
        return parse_power(tokens)

    def parse_term(tokens):
        tree = parse_unary(tokens)
        while tokens and tokens[0] in ("*", "/"):
            operator = tokens.pop(0)
            right = parse_unary(tokens)
            tree = BinOp(tree, operator, right)
        return tree

    def parse_sum(tokens):
        tree = parse_term(tokens)
        while tokens and tokens[0] in ("+", "-"):
            operator = tokens.pop(0)
            right = parse_term(tokens)
            tree = BinOp(tree, operator, right)
        return tree

    final_tree = parse_sum(tokens)

    if tokens:
        if tokens[0] == ")":
            raise E.SyntaxError("Missing opening parenthesis '('", code="3003")
        raise E.SyntaxError(f"Unexpected token: {tokens[0]}", code="3004")

    return final_tree


# -----------------------------
# Result formatting
# -----------------------------

def format_result(value):
    """Render a result for the display.

    Integral values print without a fraction, nan/inf print as NaN/Infinity and
    exponents lose their leading zeros (1e-07 -> 1e-7).
    """
    if E.is_error(value):
        return E.ERROR_MARKER

    if isinstance(value, int) and abs(value) < 10 ** 21:
        return str(value)

    try:
        value = float(value)
    except OverflowError:
        # int too large for a float
        value = math.inf if value > 0 else -math.inf

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    text = repr(value)
    if "e" in text and 1e-6 <= abs(value) < 1e-4:
        # repr switches to an exponent below 1e-4, the display only below 1e-6
        mantissa, exponent = text.lstrip("-").split("e")
        digits = mantissa.replace(".", "")
        sign = "-" if value < 0 else ""
        return f"{sign}0.{'0' * (-int(exponent) - 1)}{digits}"

    return _EXPONENT.sub(r"e\1\2", text)


# -----------------------------
# Public entry point
# -----------------------------

def evaluate(problem, auto_close_parentheses=False):
    """Main API: translate -> parse -> evaluate. Returns a finite float or ERROR_MARKER."""
    try:
        tokens = translator(problem)
        logger.debug("Tokens: %s", tokens)

        final_tree = ast(tokens, auto_close_parentheses)
        logger.debug("Final AST: %s", final_tree)

        result = final_tree.evaluate()
        if not math.isfinite(result):
            raise E.OverflowError("Result is not finite.", code="3007")
        return result

    except E.MathError as e:
        e.equation = problem
        logger.debug("Error %s: %s (%r)", e.code, e.message, problem)
        return E.ERROR_MARKER

    except RecursionError:
        logger.debug("Error 3008: expression nested too deeply (%r)", problem)
        return E.ERROR_MARKER

    except (ArithmeticError, ValueError) as e:
        logger.debug("Error 9999: %s (%r)", e, problem)
        return E.ERROR_MARKER
