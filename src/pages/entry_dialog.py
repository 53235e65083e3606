# src/pages/entry_dialog.py
import customtkinter as ctk

from core.models import PasswordEntry, make_payload
from core.validation import validate_entry_payload
from ui.strength_meter import StrengthMeter
from ui.theme import (
    BG,
    BODY_FONT,
    BORDER,
    CARD_BG,
    DANGER,
    HEADING_FONT,
    MUTED,
    ON_PRIMARY,
    OUTLINE_BR,
    OUTLINE_H,
    PRIMARY,
    PRIMARY_H,
    TEXT,
)

# Prefill used by the "Add Amazon" quick action
AMAZON_TEMPLATE = {
    "title": "Amazon",
    "url": "https://www.amazon.com",
    "notes": "Amazon account credentials",
}


class EntryDialog(ctk.CTkToplevel):
    """Add/edit form. on_save(payload, entry_or_None) is called with a
    validated payload; the dialog stays open until close() is called so
    backend errors can be shown in place.
    """

    def __init__(self, master, on_save, entry: PasswordEntry = None, prefill=None):
        super().__init__(master)
        self.entry = entry
        self._on_save = on_save
        self.title("Edit password" if entry else "Add password")
        self.geometry("480x560")
        self.configure(fg_color=CARD_BG)
        self.grid_columnconfigure(0, weight=1)
        self.transient(master)

        ctk.CTkLabel(
            self, text=self.title(), font=HEADING_FONT, text_color=TEXT, anchor="w"
        ).grid(row=0, column=0, sticky="ew", padx=22, pady=(18, 10))

        form = ctk.CTkFrame(self, fg_color="transparent")
        form.grid(row=1, column=0, sticky="nsew", padx=22)
        form.grid_columnconfigure(0, weight=1)

        self._fields = {}
        for row, (key, label, show) in enumerate(
            [
                ("title", "Title", None),
                ("username", "Username", None),
                ("password", "Password", "*"),
                ("url", "URL (optional)", None),
            ]
        ):
            e = ctk.CTkEntry(
                form,
                placeholder_text=label,
                height=36,
                corner_radius=8,
                fg_color=BG,
                border_color=BORDER,
                border_width=1,
                text_color=TEXT,
                show=show,
            )
            e.grid(row=row * 2, column=0, sticky="ew", pady=(4, 4))
            self._fields[key] = e
            if key == "password":
                self.meter = StrengthMeter(form)
                self.meter.grid(row=row * 2 + 1, column=0, sticky="ew", pady=(0, 6))
                e.bind("<KeyRelease>", lambda _e: self.meter.update_for(self._fields["password"].get()))

        self._show_pw = ctk.BooleanVar(value=False)
        ctk.CTkCheckBox(
            form,
            text="Show password",
            variable=self._show_pw,
            command=lambda: self._fields["password"].configure(
                show="" if self._show_pw.get() else "*"
            ),
            text_color=MUTED,
            border_color=OUTLINE_BR,
            fg_color=PRIMARY,
            hover_color=OUTLINE_H,
            checkbox_height=16,
            checkbox_width=16,
        ).grid(row=8, column=0, sticky="w", pady=(4, 6))

        self.notes = ctk.CTkTextbox(
            form, height=80, fg_color=BG, border_color=BORDER, border_width=1, text_color=TEXT
        )
        self.notes.grid(row=9, column=0, sticky="ew", pady=(4, 4))

        self.status = ctk.CTkLabel(self, text="", font=BODY_FONT, text_color=DANGER, wraplength=420)
        self.status.grid(row=2, column=0, sticky="w", padx=22, pady=(6, 0))

        actions = ctk.CTkFrame(self, fg_color="transparent")
        actions.grid(row=3, column=0, sticky="e", padx=22, pady=(8, 18))
        ctk.CTkButton(
            actions,
            text="Cancel",
            width=100,
            fg_color="transparent",
            border_width=1,
            border_color=OUTLINE_BR,
            hover_color=OUTLINE_H,
            text_color=TEXT,
            command=self.close,
        ).grid(row=0, column=0, padx=(0, 8))
        self.save_btn = ctk.CTkButton(
            actions,
            text="Save",
            width=100,
            fg_color=PRIMARY,
            hover_color=PRIMARY_H,
            text_color=ON_PRIMARY,
            command=self._save,
        )
        self.save_btn.grid(row=0, column=1)

        values = dict(prefill or {})
        if entry is not None:
            values = {
                "title": entry.title,
                "username": entry.username,
                "password": entry.password,
                "url": entry.url or "",
                "notes": entry.notes or "",
            }
        for key, widget in self._fields.items():
            if values.get(key):
                widget.insert(0, values[key])
        if values.get("notes"):
            self.notes.insert("1.0", values["notes"])
        self.meter.update_for(self._fields["password"].get())

        self.after(50, self.grab_set)

    def payload(self):
        return make_payload(
            self._fields["title"].get().strip(),
            self._fields["username"].get().strip(),
            self._fields["password"].get(),
            self._fields["url"].get().strip(),
            self.notes.get("1.0", "end").strip(),
        )

    def show_error(self, msg: str):
        self.status.configure(text=msg)
        self.save_btn.configure(state="normal")

    def _save(self):
        payload = self.payload()
        ok, errors = validate_entry_payload(payload)
        if not ok:
            self.show_error("\n".join(errors))
            return
        self.status.configure(text="")
        self.save_btn.configure(state="disabled")
        self._on_save(payload, self.entry)

    def close(self):
        self.grab_release()
        self.destroy()
