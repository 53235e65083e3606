# src/ui/strength_meter.py
import customtkinter as ctk

from core.strength import analyze
from ui.theme import BODY_FONT, BORDER, MUTED, SUB_FONT, strength_style


class StrengthMeter(ctk.CTkFrame):
    """Icon + proportional bar + category label, with suggestions below.

    Call update_for(password) on every keystroke.
    """

    def __init__(self, master, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(1, weight=1)

        self.icon = ctk.CTkLabel(self, text="", width=20, font=BODY_FONT)
        self.icon.grid(row=0, column=0, padx=(0, 6))

        self.bar = ctk.CTkProgressBar(self, height=8, fg_color=BORDER)
        self.bar.grid(row=0, column=1, sticky="ew")
        self.bar.set(0)

        self.label = ctk.CTkLabel(self, text="", width=80, font=BODY_FONT)
        self.label.grid(row=0, column=2, padx=(8, 0))

        self.hints = ctk.CTkLabel(
            self, text="", font=SUB_FONT, text_color=MUTED, justify="left", anchor="w"
        )
        self.hints.grid(row=1, column=0, columnspan=3, sticky="w", pady=(4, 0))

        self.assessment = None

    def update_for(self, password: str):
        self.assessment = result = analyze(password)
        color, glyph = strength_style(result.category)
        self.icon.configure(text=glyph, text_color=color)
        self.bar.configure(progress_color=color)
        self.bar.set(result.score / 100)
        self.label.configure(text=result.category.capitalize(), text_color=color)
        self.hints.configure(text="\n".join(f"• {s}" for s in result.suggestions))
