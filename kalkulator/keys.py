"""
Keypad labels -> engine calls.

The window's buttons and the physical keyboard both go through press_key, so
the label set here is the whole input vocabulary of the calculator.
"""
from __future__ import annotations

from typing import Callable, Dict

from kalkulator.engine import DIGITS, PARENTHESES, POINT, CalculatorEngine, Operator
from kalkulator.functions import Constant, UnaryFunction

OPERATOR_LABELS: Dict[str, Operator] = {
    "+": Operator.ADD,
    "-": Operator.SUB,
    "×": Operator.MUL,
    "÷": Operator.DIV,
    "x^y": Operator.POW,
}

FUNCTION_LABELS: Dict[str, UnaryFunction] = {
    "√x": UnaryFunction.SQRT,
    "x²": UnaryFunction.SQUARE,
    "1/x": UnaryFunction.RECIPROCAL,
    "%": UnaryFunction.PERCENT,
    "x!": UnaryFunction.FACTORIAL,
    "sin": UnaryFunction.SIN,
    "cos": UnaryFunction.COS,
    "tan": UnaryFunction.TAN,
    "log": UnaryFunction.LOG10,
    "ln": UnaryFunction.LN,
    "±": UnaryFunction.NEGATE,
}

CONSTANT_LABELS: Dict[str, Constant] = {
    "π": Constant.PI,
    "e": Constant.E,
}

COMMAND_LABELS: Dict[str, Callable[[CalculatorEngine], None]] = {
    "=": CalculatorEngine.press_equals,
    "AC": CalculatorEngine.press_clear,
    "⌫": CalculatorEngine.press_backspace,
}

# Tk keysym / char -> keypad label
KEYSYM_LABELS: Dict[str, str] = {
    "plus": "+",
    "minus": "-",
    "asterisk": "×",
    "slash": "÷",
    "asciicircum": "x^y",
    "percent": "%",
    "exclam": "x!",
    "period": ".",
    "comma": ".",
    "parenleft": "(",
    "parenright": ")",
    "Return": "=",
    "KP_Enter": "=",
    "equal": "=",
    "BackSpace": "⌫",
    "Escape": "AC",
    "Delete": "AC",
    "KP_Add": "+",
    "KP_Subtract": "-",
    "KP_Multiply": "×",
    "KP_Divide": "÷",
    "KP_Decimal": ".",
}
for _d in DIGITS:
    KEYSYM_LABELS[_d] = _d
    KEYSYM_LABELS[f"KP_{_d}"] = _d


def press_key(engine: CalculatorEngine, label: str) -> None:
    """Runs the transition bound to a keypad ``label``."""
    if len(label) == 1 and label in DIGITS + POINT:
        engine.press_digit_or_point(label)
    elif len(label) == 1 and label in PARENTHESES:
        engine.press_parenthesis(label)
    elif label in OPERATOR_LABELS:
        engine.press_operator(OPERATOR_LABELS[label])
    elif label in FUNCTION_LABELS:
        engine.press_unary_function(FUNCTION_LABELS[label])
    elif label in CONSTANT_LABELS:
        engine.press_constant(CONSTANT_LABELS[label])
    elif label in COMMAND_LABELS:
        COMMAND_LABELS[label](engine)
    else:
        raise KeyError(label)


def label_for_keysym(keysym: str) -> str | None:
    return KEYSYM_LABELS.get(keysym)
