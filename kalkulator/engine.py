"""
Calculator Engine
=================
Holds the state of one calculator session and the key-press transitions on it.

The engine is strictly binary: one pending operator and one pending left
operand at a time. Every ``press_*`` method is a complete state transition;
the caller renders ``state.display`` afterwards.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from kalkulator.config import ERROR_TEXT, FACTORIAL_LIMIT, FRACTION_DIGITS
from kalkulator.formatting import format_result, parse_operand
from kalkulator.functions import (
    CONSTANT_VALUES,
    Constant,
    DisplayError,
    Number,
    UnaryFunction,
    apply_unary,
)

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
POINT = "."
PARENTHESES = "()"


class Operator(Enum):
    NONE = ""
    ADD = "+"
    SUB = "-"
    MUL = "×"
    DIV = "÷"
    POW = "^"


# ASCII spellings accepted alongside the display symbols
_OPERATOR_ALIASES = {"*": Operator.MUL, "/": Operator.DIV, "**": Operator.POW}


def to_operator(op: Union[Operator, str]) -> Operator:
    if isinstance(op, Operator):
        return op
    if op in _OPERATOR_ALIASES:
        return _OPERATOR_ALIASES[op]
    try:
        return Operator(op)
    except ValueError:
        pass
    try:
        return Operator[op.upper()]
    except KeyError:
        raise ValueError(f"Unknown operator: {op!r}") from None


def apply_operator(op: Operator, a: float, b: float) -> float:
    """Binary arithmetic. Division by zero gives NaN instead of raising."""
    if op is Operator.ADD:
        return a + b
    if op is Operator.SUB:
        return a - b
    if op is Operator.MUL:
        return a * b
    if op is Operator.DIV:
        return a / b if b != 0 else math.nan
    if op is Operator.POW:
        return math.pow(a, b)
    raise ValueError(f"No binary operation for {op!r}")


@dataclass
class CalculatorState:
    display: str = "0"
    current_input: str = ""
    operator: Operator = Operator.NONE
    first_operand: float = 0.0
    scientific_panel_visible: bool = True


class CalculatorEngine:
    def __init__(self, fraction_digits: int = FRACTION_DIGITS,
                 factorial_limit: int = FACTORIAL_LIMIT) -> None:
        self.fraction_digits = fraction_digits
        self.factorial_limit = factorial_limit
        self.state = CalculatorState()

    # ==========================
    # Helpers
    # ==========================
    @property
    def display(self) -> str:
        return self.state.display

    @property
    def is_pending(self) -> bool:
        return self.state.operator is not Operator.NONE

    def _format(self, value: Number) -> str:
        return format_result(value, self.fraction_digits)

    def _show_input(self) -> None:
        self.state.display = self.state.current_input or "0"

    def _show_result(self, text: str) -> None:
        self.state.display = text
        self.state.current_input = text

    # ==========================
    # Entry
    # ==========================
    def press_digit_or_point(self, token: str) -> None:
        if len(token) != 1 or token not in DIGITS + POINT:
            raise ValueError(f"Not a digit or decimal point: {token!r}")

        s = self.state
        # typing after an error starts a new number
        if s.current_input == ERROR_TEXT:
            s.current_input = ""

        if token == POINT:
            if POINT in s.current_input:
                return
            if not s.current_input:
                s.current_input = "0"

        s.current_input += token
        s.display = s.current_input

    def press_parenthesis(self, token: str) -> None:
        # kept in the buffer as typed, never evaluated
        if len(token) != 1 or token not in PARENTHESES:
            raise ValueError(f"Not a parenthesis: {token!r}")
        s = self.state
        if s.current_input == ERROR_TEXT:
            s.current_input = ""
        s.current_input += token
        s.display = s.current_input

    def press_backspace(self) -> None:
        s = self.state
        if not s.current_input:
            return
        if s.current_input == ERROR_TEXT:
            s.current_input = ""
        else:
            s.current_input = s.current_input[:-1]
        self._show_input()

    def press_clear(self) -> None:
        s = self.state
        s.current_input = ""
        s.operator = Operator.NONE
        s.first_operand = 0.0
        s.display = "0"
        logger.info("Calculator cleared.")

    # ==========================
    # Operations
    # ==========================
    def press_operator(self, op: Union[Operator, str]) -> None:
        op = to_operator(op)
        if op is Operator.NONE:
            raise ValueError("Operator.NONE cannot be pressed")

        s = self.state
        if not s.current_input:
            logger.debug("Operator %s ignored, no operand entered", op.value)
            return

        s.first_operand = parse_operand(s.current_input)
        s.operator = op
        s.current_input = ""
        logger.debug("Pending %r %s", s.first_operand, op.value)

    def press_equals(self) -> None:
        s = self.state
        if not s.current_input or s.operator is Operator.NONE:
            return

        second = parse_operand(s.current_input)
        try:
            result = apply_operator(s.operator, s.first_operand, second)
        except (ValueError, OverflowError) as e:
            logger.debug("%r %s %r failed: %s", s.first_operand, s.operator.value, second, e)
            result = math.nan

        self._show_result(self._format(result))
        logger.debug("%r %s %r = %s", s.first_operand, s.operator.value, second, s.display)
        s.operator = Operator.NONE

    def press_unary_function(self, fn: Union[UnaryFunction, str]) -> None:
        if not isinstance(fn, UnaryFunction):
            fn = UnaryFunction(fn)

        s = self.state
        if not s.current_input:
            return

        value = parse_operand(s.current_input)
        if fn is UnaryFunction.RECIPROCAL and value == 0:
            return

        try:
            result = apply_unary(fn, value, self.factorial_limit)
        except (DisplayError, ValueError, ZeroDivisionError, OverflowError) as e:
            logger.debug("%s(%r) failed: %s", fn.value, value, e)
            result = math.nan

        self._show_result(self._format(result))
        logger.debug("%s(%r) = %s", fn.value, value, s.display)

    def press_constant(self, which: Union[Constant, str]) -> None:
        if not isinstance(which, Constant):
            which = Constant(which)
        self._show_result(self._format(CONSTANT_VALUES[which]))

    # ==========================
    # UI toggles
    # ==========================
    def toggle_scientific_panel(self) -> bool:
        s = self.state
        s.scientific_panel_visible = not s.scientific_panel_visible
        return s.scientific_panel_visible
