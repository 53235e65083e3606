# src/ui/entry_card.py
import customtkinter as ctk

from core.models import PasswordEntry
from ui.brand_chip import render_brand_chip
from ui.theme import (
    BODY_FONT,
    BORDER,
    CARD_BG,
    DANGER,
    DANGER_H,
    HEADING_FONT,
    MUTED,
    OUTLINE_BR,
    OUTLINE_H,
    TEXT,
)


class EntryCard(ctk.CTkFrame):
    """One vault entry: brand chip, title, username and quick buttons."""

    def __init__(self, master, entry: PasswordEntry, on_edit, on_delete, on_copy, on_open_url):
        super().__init__(
            master, corner_radius=10, border_width=1, border_color=BORDER, fg_color=CARD_BG
        )
        self.entry = entry
        self.grid_columnconfigure(1, weight=1)

        img = render_brand_chip(entry.url, entry.title)
        self._chip = ctk.CTkImage(light_image=img, dark_image=img, size=img.size)
        ctk.CTkLabel(self, text="", image=self._chip).grid(
            row=0, column=0, rowspan=2, padx=(12, 10), pady=10
        )

        ctk.CTkLabel(self, text=entry.title, font=HEADING_FONT, text_color=TEXT, anchor="w")\
            .grid(row=0, column=1, sticky="ew", pady=(10, 0))
        ctk.CTkLabel(self, text=entry.username, font=BODY_FONT, text_color=MUTED, anchor="w")\
            .grid(row=1, column=1, sticky="ew", pady=(0, 10))

        actions = ctk.CTkFrame(self, fg_color="transparent")
        actions.grid(row=0, column=2, rowspan=2, padx=10)

        buttons = [
            ("Copy user", lambda: on_copy(entry.username)),
            ("Copy password", lambda: on_copy(entry.password)),
        ]
        if entry.url:
            buttons.append(("Open", lambda: on_open_url(entry.url)))
        buttons.append(("Edit", lambda: on_edit(entry)))

        for col, (label, cmd) in enumerate(buttons):
            ctk.CTkButton(
                actions,
                text=label,
                width=70,
                height=30,
                corner_radius=8,
                fg_color="transparent",
                border_width=1,
                border_color=OUTLINE_BR,
                hover_color=OUTLINE_H,
                text_color=TEXT,
                command=cmd,
            ).grid(row=0, column=col, padx=3)

        ctk.CTkButton(
            actions,
            text="Delete",
            width=70,
            height=30,
            corner_radius=8,
            fg_color=DANGER,
            hover_color=DANGER_H,
            command=lambda: on_delete(entry),
        ).grid(row=0, column=len(buttons), padx=3)
