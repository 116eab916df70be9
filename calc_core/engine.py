import math
from dataclasses import dataclass, replace
from typing import Callable, Optional

from calc_core.formatting import format_result, format_significant, parse_number
from calc_core.symbols import (
    CLEAR, DECIMAL_POINT, EQUALS, SIGN, SQRT, SQUARE,
    is_binary, is_digit, is_operator, is_recognized, is_unary,
)

DIV_BY_ZERO = 'Error: / by 0'
UNDEFINED = 'Error: Undefined'

DISPLAY_SIZE = 10
SIGNIFICANT_DIGITS = 9


@dataclass(frozen=True)
class CalculatorState:
    """Everything the calculator remembers between two button presses."""
    entry: str = '0'                          # numeric text currently shown
    pending_operator: Optional[str] = None    # binary operator awaiting its right operand
    left_operand: float = 0.0
    last_pressed: str = '0'
    trailing_operator: Optional[str] = None   # operator glyph drawn after the entry
    error: Optional[str] = None

    @property
    def display(self) -> str:
        if self.error:
            return self.error
        return self.entry + (self.trailing_operator or '')

    @property
    def value(self) -> float:
        return parse_number(self.entry)


def initial_state():
    return CalculatorState()


def step(state: CalculatorState, symbol: str, max_length: int = DISPLAY_SIZE) -> CalculatorState:
    """Apply one button press to `state` and return the resulting state.

    Unrecognized symbols leave the state untouched.
    """
    if not is_recognized(symbol):
        return state
    if symbol == CLEAR:
        return initial_state()
    # A unary operator has no single number to act on while an operator is shown
    if is_unary(symbol) and state.trailing_operator and not state.error:
        return state

    if is_digit(symbol) or symbol == DECIMAL_POINT:
        state = process_numeric(state, symbol, max_length)
    else:
        state = process_operator(state, symbol)
    return replace(state, last_pressed=symbol)


def process_numeric(state, symbol, max_length=DISPLAY_SIZE):
    """Extend the number being typed with a digit or decimal point."""
    # An operator (or error) was shown last: this press begins a new number
    if is_operator(state.last_pressed) or state.error:
        state = replace(state, entry='0', trailing_operator=None, error=None)

    entry = state.entry
    if state.last_pressed == EQUALS or entry == '0':
        fresh = '0.' if symbol == DECIMAL_POINT else symbol
        return replace(state, entry=fresh)

    if len(entry) >= max_length:
        return state
    if symbol == DECIMAL_POINT:
        if DECIMAL_POINT in entry:
            return state
        return replace(state, entry=entry + symbol)
    if is_digit(state.last_pressed) or state.last_pressed == DECIMAL_POINT:
        return replace(state, entry=entry + symbol)
    return state


def process_operator(state, op):
    """React to an operator press, evaluating a pending expression when needed."""
    if state.error:
        state = initial_state()

    if is_unary(op):
        return _UNARY[op](state)

    last = state.last_pressed
    if is_operator(last) and not is_unary(last):
        # An operator is already waiting for its right operand: swap it
        if op != EQUALS:
            left = state.value
            state = replace(state, left_operand=left, entry=format_result(left), trailing_operator=op)
    elif state.pending_operator is None:
        if op == EQUALS:
            return state
        state = replace(state, left_operand=state.value, trailing_operator=op)
    else:
        state = process_equals(state, op)

    if op == EQUALS:
        return replace(state, pending_operator=None)
    return replace(state, pending_operator=op)


def process_equals(state, op):
    """Apply the pending operator to the left operand and the entry on display."""
    right = state.value
    left = state.left_operand
    pending = state.pending_operator
    if pending == '+':
        left += right
    elif pending == '-':
        left -= right
    elif pending == '*':
        left *= right
    elif pending == '/':
        if right == 0:
            return replace(state, error=DIV_BY_ZERO, trailing_operator=None)
        left /= right

    trailing = op if is_binary(op) else None
    return replace(state, left_operand=left, entry=format_result(left), trailing_operator=trailing)


def process_sqrt(state):
    try:
        value = _unary_operand(state)
    except ValueError:
        return state
    if value < 0:
        return replace(state, error=UNDEFINED)
    return replace(state, entry=format_significant(math.sqrt(value), SIGNIFICANT_DIGITS))


def process_square(state):
    try:
        value = _unary_operand(state)
    except ValueError:
        return state
    return replace(state, entry=format_significant(value * value, SIGNIFICANT_DIGITS))


def process_plus_minus(state):
    try:
        value = _unary_operand(state)
    except ValueError:
        return state
    entry = state.entry
    if entry.startswith('-'):
        entry = entry[1:]
    elif value != 0:
        entry = '-' + entry
    return replace(state, entry=entry)


def _unary_operand(state):
    # A dangling binary operator means there is no single number to act on
    if state.trailing_operator:
        raise ValueError(f'incomplete expression: {state.display!r}')
    return state.value


_UNARY = {
    SQRT: process_sqrt,
    SQUARE: process_square,
    SIGN: process_plus_minus,
}


class CalculatorEngine:
    """Owns one calculator's state and turns button symbols into display text."""

    DISPLAY_SIZE = DISPLAY_SIZE

    def __init__(self, max_length: Optional[int] = None, logger: Callable[[str], None] = None):
        self.max_length = self.DISPLAY_SIZE if max_length is None else max_length
        self.logger = logger
        self.state = initial_state()

    def _log(self, message: str):
        if self.logger:
            self.logger(message)

    @property
    def display(self) -> str:
        return self.state.display

    def clear(self):
        """Reset calculator to its start state."""
        self.state = initial_state()
        return self.display

    def handle_input(self, symbol: str) -> str:
        """Process one button press and return the text to render."""
        if not is_recognized(symbol):
            self._log(f'Ignoring unrecognized input {symbol!r}')
            return self.display
        if symbol == CLEAR:
            self._log('Clear')
            return self.clear()

        previous_error = self.state.error
        self.state = step(self.state, symbol, self.max_length)
        if self.state.error and self.state.error != previous_error:
            self._log(f'{self.state.error} after {symbol!r}')
        return self.display
