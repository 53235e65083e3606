# src/ui/search_bar.py
import customtkinter as ctk

from ui.theme import BG, BORDER, MUTED, OUTLINE_H, TEXT

DEBOUNCE_MS = 300


class SearchBar(ctk.CTkFrame):
    """Entry that calls on_search(query) once typing pauses for 300 ms."""

    def __init__(self, master, on_search, placeholder="Search passwords...", **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._on_search = on_search
        self._job = None
        self.grid_columnconfigure(0, weight=1)

        self.entry = ctk.CTkEntry(
            self,
            placeholder_text=placeholder,
            height=36,
            corner_radius=8,
            fg_color=BG,
            border_color=BORDER,
            border_width=1,
            text_color=TEXT,
        )
        self.entry.grid(row=0, column=0, sticky="ew")
        self.entry.bind("<KeyRelease>", self._schedule)

        self.clear_btn = ctk.CTkButton(
            self,
            text="✕",
            width=32,
            height=32,
            fg_color="transparent",
            hover_color=OUTLINE_H,
            text_color=MUTED,
            command=self.clear,
        )
        self.clear_btn.grid(row=0, column=1, padx=(6, 0))

    def _schedule(self, _event=None):
        if self._job is not None:
            self.after_cancel(self._job)
        self._job = self.after(DEBOUNCE_MS, self._fire)

    def _fire(self):
        self._job = None
        self._on_search(self.entry.get())

    def clear(self):
        if self._job is not None:
            self.after_cancel(self._job)
            self._job = None
        self.entry.delete(0, "end")
        self._on_search("")
        self.entry.focus_set()
