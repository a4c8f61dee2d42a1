# keypad.py
"""""
The calculator's 35 keys.

Each key is a (label, category) pair. The table is immutable and is handed to the
InputStateMachine (which only needs label -> category) and to the UI (which also
needs the panel order). Nothing in here changes at runtime.
"""""

from collections import namedtuple
from enum import Enum
from types import MappingProxyType


class KeyCategory(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    CONSTANT = "constant"
    CLEAR = "clear"
    BACKSPACE = "backspace"
    EVALUATE = "equals"
    MODE_TOGGLE = "mode"


Key = namedtuple("Key", ["label", "category"])

# Label of the angle mode key; the UI shows the current mode on it instead.
MODE_KEY = "DEG/RAD"

SCIENTIFIC_PANEL = (
    Key("sin", KeyCategory.FUNCTION),
    Key("cos", KeyCategory.FUNCTION),
    Key("tan", KeyCategory.FUNCTION),
    Key("ln", KeyCategory.FUNCTION),
    Key("log", KeyCategory.FUNCTION),
    Key("x²", KeyCategory.FUNCTION),
    Key("√", KeyCategory.FUNCTION),
    Key("xʸ", KeyCategory.FUNCTION),
    Key("n!", KeyCategory.FUNCTION),
    Key("1/x", KeyCategory.FUNCTION),
    Key("|x|", KeyCategory.FUNCTION),
    Key("π", KeyCategory.CONSTANT),
    Key("e", KeyCategory.CONSTANT),
    Key("(", KeyCategory.OPERATOR),
    Key(")", KeyCategory.OPERATOR),
    Key(MODE_KEY, KeyCategory.MODE_TOGGLE),
)

STANDARD_PANEL = (
    Key("C", KeyCategory.CLEAR),
    Key("←", KeyCategory.BACKSPACE),
    Key("÷", KeyCategory.OPERATOR),
    Key("×", KeyCategory.OPERATOR),
    Key("7", KeyCategory.NUMBER),
    Key("8", KeyCategory.NUMBER),
    Key("9", KeyCategory.NUMBER),
    Key("-", KeyCategory.OPERATOR),
    Key("4", KeyCategory.NUMBER),
    Key("5", KeyCategory.NUMBER),
    Key("6", KeyCategory.NUMBER),
    Key("+", KeyCategory.OPERATOR),
    Key("1", KeyCategory.NUMBER),
    Key("2", KeyCategory.NUMBER),
    Key("3", KeyCategory.NUMBER),
    Key("=", KeyCategory.EVALUATE),
    Key("0", KeyCategory.NUMBER),
    Key(".", KeyCategory.NUMBER),
    Key("±", KeyCategory.OPERATOR),
)

KEYS = SCIENTIFIC_PANEL + STANDARD_PANEL

# label -> category, read-only
KEY_TABLE = MappingProxyType({key.label: key.category for key in KEYS})
