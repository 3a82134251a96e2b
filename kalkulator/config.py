"""
Global constants for the calculator: number formatting policy and theme.
"""

# ----------------------------
# Number formatting
# ----------------------------

ERROR_TEXT = "Error"
FRACTION_DIGITS = 8
# 21! no longer fits a signed 64-bit integer
FACTORIAL_LIMIT = 20

# (min length exclusive, font size), checked top to bottom
FONT_SIZE_STEPS = (
    (15, 28),
    (12, 36),
    (9, 44),
    (6, 52),
)
FONT_SIZE_DEFAULT = 60

# ----------------------------
# Window / theme
# ----------------------------

APP_TITLE = "Calculator"
WINDOW_GEOMETRY = "400x680"
APPEARANCE_MODE = "light"
COLOR_THEME = "blue"
FONT_FAMILY = "Segoe UI"

BG = "#F5F5F5"
FG = "#000000"
BTN_NUMBER = "#FFFFFF"
BTN_NUMBER_HOVER = "#E8E8E8"
BTN_OPERATOR = "#FF9800"
BTN_OPERATOR_HOVER = "#F57C00"
BTN_SCIENTIFIC = "#E0E0E0"
BTN_SCIENTIFIC_HOVER = "#D0D0D0"
BTN_EQUALS = "#2196F3"
BTN_EQUALS_HOVER = "#1976D2"
BTN_CLEAR = "#7a2e2e"
