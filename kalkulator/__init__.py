from kalkulator.engine import CalculatorEngine, CalculatorState, Operator
from kalkulator.formatting import format_result, parse_operand
from kalkulator.functions import Constant, DisplayError, UnaryFunction

__all__ = [
    "CalculatorEngine",
    "CalculatorState",
    "Constant",
    "DisplayError",
    "Operator",
    "UnaryFunction",
    "format_result",
    "parse_operand",
]
