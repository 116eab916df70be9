DIGITS = ('0', '1', '2', '3', '4', '5', '6', '7', '8', '9')
DECIMAL_POINT = '.'
EQUALS = '='
CLEAR = 'C'

# Unary operators: U+221A square root, U+00B1 plus-or-minus
SQRT = '√'
SQUARE = 'x²'
SIGN = '±'

BINARY_OPERATORS = ('+', '-', '*', '/')
UNARY_OPERATORS = (SQRT, SIGN, SQUARE)
OPERATORS = BINARY_OPERATORS + (EQUALS,) + UNARY_OPERATORS

ALPHABET = frozenset(DIGITS + (DECIMAL_POINT, CLEAR) + OPERATORS)

# Keypad in reading order, five rows of four
BUTTON_LABELS = (
    (CLEAR, SQRT, '/', '*'),
    ('7', '8', '9', '-'),
    ('4', '5', '6', '+'),
    ('1', '2', '3', SQUARE),
    (DECIMAL_POINT, '0', SIGN, EQUALS),
)


def is_digit(s):
    return s in DIGITS


def is_operator(s):
    """True for binary, unary and equals symbols."""
    return s in OPERATORS


def is_unary(s):
    return s in UNARY_OPERATORS


def is_binary(s):
    return s in BINARY_OPERATORS


def is_recognized(s):
    """True if s is one of the calculator's button symbols."""
    return isinstance(s, str) and s in ALPHABET
