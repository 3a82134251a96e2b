"""
Number <-> display text conversions.

The formatted text is also what the engine keeps as its input buffer after a
computation, so "3" (never "3.0") is what the next digit gets appended to.
"""
import math

from kalkulator.config import (
    ERROR_TEXT,
    FONT_SIZE_DEFAULT,
    FONT_SIZE_STEPS,
    FRACTION_DIGITS,
)


def parse_operand(text: str) -> float:
    # malformed text counts as zero
    try:
        return float(text)
    except ValueError:
        return 0.0


def format_result(value: float, fraction_digits: int = FRACTION_DIGITS) -> str:
    """Render a computed value for the display.

    NaN, infinities and integers beyond float range become ERROR_TEXT.
    Whole numbers lose the decimal point; anything else is fixed-point with
    trailing zeros stripped.
    """
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError:
            return ERROR_TEXT
        return str(value)

    if math.isnan(value) or math.isinf(value):
        return ERROR_TEXT

    if value == int(value):
        return str(int(value))

    text = f"{value:.{fraction_digits}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def display_font_size(text: str) -> int:
    length = len(text)
    for min_length, size in FONT_SIZE_STEPS:
        if length > min_length:
            return size
    return FONT_SIZE_DEFAULT
