# InputStateMachine.py
"""""
Key press handling for the Scientific Calculator.

The InputStateMachine owns one CalculatorSession and turns each key press into the
next session state. One press is processed completely before the next one.

Functions come in two kinds:
- eager: computed right away from the number on the display
  (sin, cos, tan, ln, log, x², n!, 1/x, |x|)
- deferred: √ and xʸ need an operand that has not been typed yet, so they are
  written into the expression text and only computed on '='.
"""""

import logging
import math
from collections import namedtuple
from enum import Enum
from functools import partial
from types import MappingProxyType

from . import ExpressionEvaluator
from . import MathOperations
from . import error as E
from .keypad import KEY_TABLE, KeyCategory

logger = logging.getLogger(__name__)


class AngleMode(Enum):
    DEGREES = "DEG"
    RADIANS = "RAD"


# What the UI renders after every key press
DisplayState = namedtuple("DisplayState", ["display_buffer", "expression_text", "angle_mode"])


def _factorial(value):
    if not math.isfinite(value):
        return E.ERROR_MARKER
    return MathOperations.factorial(math.floor(value))


# label -> (function, argument is an angle)
EAGER_FUNCTIONS = MappingProxyType({
    "sin": (MathOperations.sin, True),
    "cos": (MathOperations.cos, True),
    "tan": (MathOperations.tan, True),
    "ln": (MathOperations.naturalLog, False),
    "log": (MathOperations.log10, False),
    "x²": (MathOperations.square, False),
    "n!": (_factorial, False),
    "1/x": (MathOperations.reciprocal, False),
    "|x|": (MathOperations.absolute, False),
})

# label -> text appended to the expression instead of computing anything
DEFERRED_FUNCTIONS = MappingProxyType({
    "√": "√(",
    "xʸ": "^",
})

# Eager functions that still leave a mark in the expression
EXPRESSION_SUFFIX = MappingProxyType({
    "x²": "²",
})

CONSTANTS = MappingProxyType({
    "π": MathOperations.PI,
    "e": MathOperations.E,
})


def parse_number(text):
    """Read display text as a float. Text that is not a number (e.g. 'Error' or '.') reads as nan."""
    try:
        return float(text)
    except ValueError:
        return math.nan


class CalculatorSession:
    """The live state of one calculator."""

    def __init__(self, angle_mode=AngleMode.DEGREES):
        self.angle_mode = angle_mode
        self.last_result = None
        self.reset()

    def reset(self):
        # Angle mode is not part of a reset
        self.display_buffer = "0"
        self.expression_text = ""
        self.awaiting_new_entry = True

    def snapshot(self):
        return DisplayState(self.display_buffer, self.expression_text, self.angle_mode)


class InputStateMachine:
    """Applies key presses to a CalculatorSession.

    keys maps every accepted label to its KeyCategory; evaluator takes the finished
    expression text and returns a number or ERROR_MARKER.
    """

    def __init__(self, keys=KEY_TABLE, evaluator=None, angle_mode=AngleMode.DEGREES):
        self.keys = MappingProxyType(dict(keys))
        self.evaluator = evaluator or ExpressionEvaluator.evaluate
        self.session = CalculatorSession(angle_mode)

        self._handlers = {
            KeyCategory.NUMBER: self.handle_number,
            KeyCategory.OPERATOR: self.handle_operator,
            KeyCategory.FUNCTION: self.handle_function,
            KeyCategory.CONSTANT: self.handle_constant,
            KeyCategory.CLEAR: self.handle_clear,
            KeyCategory.BACKSPACE: self.handle_backspace,
            KeyCategory.EVALUATE: self.handle_evaluate,
            KeyCategory.MODE_TOGGLE: self.handle_mode_toggle,
        }

    @classmethod
    def from_settings(cls, settings):
        """Build a machine from the config.json settings (see config_manager.load_settings)."""
        if settings.get("start_in_radians", False):
            angle_mode = AngleMode.RADIANS
        else:
            angle_mode = AngleMode.DEGREES
        machine = cls(angle_mode=angle_mode)
        machine.apply_settings(settings)
        return machine

    def apply_settings(self, settings):
        """Rebind the evaluator to changed settings. The running session (angle mode included) is kept."""
        self.evaluator = partial(
            ExpressionEvaluator.evaluate,
            auto_close_parentheses=settings.get("auto_close_parentheses", False),
        )

    @property
    def state(self):
        return self.session.snapshot()

    # --- Entry points ---

    def press(self, label):
        """Look up the category of a keypad label and apply it."""
        category = self.keys.get(label)
        if category is None:
            raise E.InputError(f"Unknown key: {label}", code="4001")
        return self.transition(label, category)

    def transition(self, label, category):
        """Apply one (label, category) key press and return the new DisplayState."""
        handler = self._handlers.get(category)
        if handler is None:
            raise E.InputError(f"Unknown key category: {category}", code="4002")

        handler(label)

        state = self.session.snapshot()
        logger.debug("%s (%s) -> display=%r expression=%r",
                     label, category.name, state.display_buffer, state.expression_text)
        return state

    # --- Helpers ---

    def convert_angle(self, value):
        """Degrees -> radians unless the session is already in radians."""
        if self.session.angle_mode == AngleMode.RADIANS:
            return value
        return value * MathOperations.PI / 180

    def _show_result(self, result):
        session = self.session
        session.display_buffer = ExpressionEvaluator.format_result(result)
        session.last_result = result
        session.awaiting_new_entry = True

    # --- Handlers, one per KeyCategory ---

    def handle_number(self, label):
        session = self.session
        if session.awaiting_new_entry:
            session.display_buffer = label
            session.awaiting_new_entry = False
        elif session.display_buffer == "0":
            session.display_buffer = label
        else:
            session.display_buffer += label
        session.expression_text += label

    def handle_operator(self, label):
        session = self.session
        if label == "±":
            # Sign of the number being entered only; the expression keeps what was typed
            value = MathOperations.negate(parse_number(session.display_buffer))
            session.display_buffer = ExpressionEvaluator.format_result(value)
            return
        session.expression_text += label
        session.awaiting_new_entry = True

    def handle_function(self, label):
        session = self.session

        if label in DEFERRED_FUNCTIONS:
            session.expression_text += DEFERRED_FUNCTIONS[label]
            session.awaiting_new_entry = True
            return

        if label not in EAGER_FUNCTIONS:
            raise E.InputError(f"Unknown key: {label}", code="4001")

        function, takes_angle = EAGER_FUNCTIONS[label]
        value = parse_number(session.display_buffer)
        if takes_angle:
            # Mode at the time of the key press, not at '='
            value = self.convert_angle(value)

        result = function(value)
        if E.is_error(result):
            logger.debug("%s(%s) is undefined", label, session.display_buffer)

        session.expression_text += EXPRESSION_SUFFIX.get(label, "")
        self._show_result(result)

    def handle_constant(self, label):
        session = self.session
        if label not in CONSTANTS:
            raise E.InputError(f"Unknown key: {label}", code="4001")
        session.display_buffer = ExpressionEvaluator.format_result(CONSTANTS[label])
        session.expression_text += label
        session.awaiting_new_entry = True

    def handle_clear(self, label):
        self.session.reset()

    def handle_backspace(self, label):
        session = self.session
        if len(session.display_buffer) > 1:
            session.display_buffer = session.display_buffer[:-1]
            session.expression_text = session.expression_text[:-1]
        else:
            session.display_buffer = "0"
            session.expression_text = ""

    def handle_evaluate(self, label):
        session = self.session
        result = self.evaluator(session.expression_text.replace("^", "**"))
        self._show_result(result)
        session.expression_text = ""

    def handle_mode_toggle(self, label):
        session = self.session
        if session.angle_mode == AngleMode.DEGREES:
            session.angle_mode = AngleMode.RADIANS
        else:
            session.angle_mode = AngleMode.DEGREES
