import logging

import customtkinter as ctk

from kalkulator.config import (
    APP_TITLE,
    APPEARANCE_MODE,
    BG,
    BTN_CLEAR,
    BTN_EQUALS,
    BTN_EQUALS_HOVER,
    BTN_NUMBER,
    BTN_NUMBER_HOVER,
    BTN_OPERATOR,
    BTN_OPERATOR_HOVER,
    BTN_SCIENTIFIC,
    BTN_SCIENTIFIC_HOVER,
    COLOR_THEME,
    FG,
    FONT_FAMILY,
    WINDOW_GEOMETRY,
)
from kalkulator.engine import CalculatorEngine
from kalkulator.formatting import display_font_size
from kalkulator.keys import label_for_keysym, press_key

logger = logging.getLogger(__name__)

SCIENTIFIC_ROWS = (
    ("x^y", "√x", "x!", "π"),
    ("sin", "cos", "tan", "e"),
    ("log", "ln", "x²", "1/x"),
    ("(", ")", "±"),
)

PAD_ROWS = (
    ("AC", "⌫", "%", "÷"),
    ("7", "8", "9", "×"),
    ("4", "5", "6", "-"),
    ("1", "2", "3", "+"),
)

OPERATOR_KEYS = {"+", "-", "×", "÷", "AC", "⌫", "%"}


class CalculatorApp(ctk.CTk):
    def __init__(self, engine=None):
        super().__init__()

        self.title(APP_TITLE)
        self.geometry(WINDOW_GEOMETRY)
        self.configure(fg_color=BG)

        self.engine = engine or CalculatorEngine()

        # ===== Header =====
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.pack(padx=16, pady=(16, 8), fill="x")
        ctk.CTkLabel(
            header,
            text=APP_TITLE,
            font=(FONT_FAMILY, 18, "bold"),
            text_color=FG
        ).pack(side="left")
        self.sci_toggle = ctk.CTkButton(
            header,
            text="Sci ▲",
            width=70,
            corner_radius=14,
            fg_color=BTN_SCIENTIFIC,
            hover_color=BTN_SCIENTIFIC_HOVER,
            text_color=FG,
            command=self.toggle_scientific
        )
        self.sci_toggle.pack(side="right")

        # ===== Display =====
        self.display = ctk.CTkEntry(
            self,
            height=90,
            corner_radius=14,
            border_width=0,
            fg_color=BG,
            text_color=FG,
            font=(FONT_FAMILY, display_font_size("0")),
            justify="right",
            state="readonly"
        )
        self.display.pack(padx=16, pady=(8, 10), fill="x")

        # ===== Buttons =====
        self.sci_frame = ctk.CTkFrame(self, corner_radius=16, fg_color="transparent")
        self.pad_frame = ctk.CTkFrame(self, corner_radius=16, fg_color="transparent")
        self.create_buttons()
        if self.engine.state.scientific_panel_visible:
            self.sci_frame.pack(padx=10, pady=(0, 4), fill="x")
        self.pad_frame.pack(padx=10, pady=(4, 12), fill="both", expand=True)

        self.bind("<Key>", self.on_keypress)
        self.render()

    # ==========================
    # UI helpers
    # ==========================
    def set_display(self, text: str):
        # read-only outside of this method so typing cannot desync it
        self.display.configure(state="normal")
        self.display.delete(0, "end")
        self.display.insert(0, text)
        self.display.configure(state="readonly")

    def render(self):
        text = self.engine.display
        self.set_display(text)
        self.display.configure(font=(FONT_FAMILY, display_font_size(text)))

    def on_press(self, label: str):
        press_key(self.engine, label)
        self.render()

    def on_keypress(self, event):
        label = label_for_keysym(event.keysym)
        if label is None:
            return None
        self.on_press(label)
        return "break"

    def toggle_scientific(self):
        visible = self.engine.toggle_scientific_panel()
        if visible:
            self.sci_frame.pack(before=self.pad_frame, padx=10, pady=(0, 4), fill="x")
        else:
            self.sci_frame.pack_forget()
        self.sci_toggle.configure(text="Sci ▲" if visible else "Sci ▼")
        logger.debug("Scientific panel %s", "shown" if visible else "hidden")

    # ==========================
    # Buttons
    # ==========================
    def btn(self, frame, text, row, col, colspan=1, fg=BTN_NUMBER, hover=BTN_NUMBER_HOVER,
            text_color=FG, height=60):
        b = ctk.CTkButton(
            frame,
            text=text,
            height=height,
            corner_radius=14,
            font=(FONT_FAMILY, 18),
            command=lambda: self.on_press(text),
            fg_color=fg,
            hover_color=hover,
            text_color=text_color
        )
        b.grid(row=row, column=col, columnspan=colspan, padx=4, pady=4, sticky="nsew")

    def create_buttons(self):
        for c in range(4):
            self.sci_frame.grid_columnconfigure(c, weight=1)
            self.pad_frame.grid_columnconfigure(c, weight=1)
        for r in range(len(PAD_ROWS) + 1):
            self.pad_frame.grid_rowconfigure(r, weight=1)

        for r, row in enumerate(SCIENTIFIC_ROWS):
            for c, text in enumerate(row):
                self.btn(self.sci_frame, text, r, c, fg=BTN_SCIENTIFIC,
                         hover=BTN_SCIENTIFIC_HOVER, height=44)

        for r, row in enumerate(PAD_ROWS):
            for c, text in enumerate(row):
                if text == "AC":
                    self.btn(self.pad_frame, text, r, c, fg=BTN_CLEAR, hover=BTN_CLEAR,
                             text_color="white")
                elif text in OPERATOR_KEYS:
                    self.btn(self.pad_frame, text, r, c, fg=BTN_OPERATOR,
                             hover=BTN_OPERATOR_HOVER, text_color="white")
                else:
                    self.btn(self.pad_frame, text, r, c)

        # Last row
        last = len(PAD_ROWS)
        self.btn(self.pad_frame, "0", last, 0)
        self.btn(self.pad_frame, ".", last, 1)
        self.btn(self.pad_frame, "=", last, 2, colspan=2, fg=BTN_EQUALS,
                 hover=BTN_EQUALS_HOVER, text_color="white")


def main(engine=None):
    ctk.set_appearance_mode(APPEARANCE_MODE)
    ctk.set_default_color_theme(COLOR_THEME)
    app = CalculatorApp(engine)
    logger.info("Calculator window started.")
    app.mainloop()
