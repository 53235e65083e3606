# src/pages/tutorial.py
import customtkinter as ctk

from ui.theme import (
    BODY_FONT,
    CARD_BG,
    HEADING_FONT,
    MUTED,
    ON_PRIMARY,
    OUTLINE_BR,
    OUTLINE_H,
    PRIMARY,
    PRIMARY_H,
    TEXT,
)

# (title, description)
TUTORIAL_STEPS = [
    (
        "Welcome to Your Password Vault",
        "Your vault is where all your passwords are stored. "
        'Click "Add Password" to save your first credential.',
    ),
    (
        "Save Passwords Securely",
        "Add your username, password, and optional details. "
        "CloudLock analyzes password strength as you type.",
    ),
    (
        "Password Strength Analysis",
        "The meter scores length, character variety and common patterns, "
        "and lists what would make a password stronger.",
    ),
    (
        "Find Anything Fast",
        "Search filters your vault by title, username or website.",
    ),
    (
        "Emergency Self-Destruct",
        "In case of a security breach, activate the emergency self-destruct "
        "to wipe your vault after a short countdown.",
    ),
]


class TutorialDialog(ctk.CTkToplevel):
    """First-login walkthrough. on_close() fires when dismissed or finished."""

    def __init__(self, master, on_close, steps=TUTORIAL_STEPS):
        super().__init__(master)
        self._on_close = on_close
        self.steps = list(steps)
        self.index = 0

        self.title("Welcome to CloudLock")
        self.geometry("460x280")
        self.configure(fg_color=CARD_BG)
        self.grid_columnconfigure(0, weight=1)
        self.transient(master)
        self.protocol("WM_DELETE_WINDOW", self.close)

        self.heading = ctk.CTkLabel(self, text="", font=HEADING_FONT, text_color=TEXT)
        self.heading.grid(row=0, column=0, sticky="w", padx=22, pady=(20, 8))
        self.body = ctk.CTkLabel(
            self, text="", font=BODY_FONT, text_color=TEXT, wraplength=410, justify="left"
        )
        self.body.grid(row=1, column=0, sticky="nw", padx=22)
        self.progress = ctk.CTkLabel(self, text="", font=BODY_FONT, text_color=MUTED)
        self.progress.grid(row=2, column=0, sticky="w", padx=22, pady=(12, 0))

        nav = ctk.CTkFrame(self, fg_color="transparent")
        nav.grid(row=3, column=0, sticky="e", padx=22, pady=(12, 18))
        self.back_btn = ctk.CTkButton(
            nav,
            text="Back",
            width=90,
            fg_color="transparent",
            border_width=1,
            border_color=OUTLINE_BR,
            hover_color=OUTLINE_H,
            text_color=TEXT,
            command=self.back,
        )
        self.back_btn.grid(row=0, column=0, padx=(0, 8))
        self.next_btn = ctk.CTkButton(
            nav,
            text="Next",
            width=90,
            fg_color=PRIMARY,
            hover_color=PRIMARY_H,
            text_color=ON_PRIMARY,
            command=self.next,
        )
        self.next_btn.grid(row=0, column=1)

        self._render()

    def _render(self):
        title, desc = self.steps[self.index]
        self.heading.configure(text=title)
        self.body.configure(text=desc)
        self.progress.configure(text=f"Step {self.index + 1} of {len(self.steps)}")
        self.back_btn.configure(state="normal" if self.index > 0 else "disabled")
        last = self.index == len(self.steps) - 1
        self.next_btn.configure(text="Get Started" if last else "Next")

    def back(self):
        if self.index > 0:
            self.index -= 1
            self._render()

    def next(self):
        if self.index >= len(self.steps) - 1:
            self.close()
            return
        self.index += 1
        self._render()

    def close(self):
        self.destroy()
        self._on_close()
