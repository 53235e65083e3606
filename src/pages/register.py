# src/pages/register.py
import threading

import customtkinter as ctk

from api_client_supabase import register_user as sb_register
from ui.strength_meter import StrengthMeter
from ui.theme import (
    BG,
    BODY_FONT,
    BORDER,
    CARD_BG,
    DANGER,
    MUTED,
    ON_PRIMARY,
    OUTLINE_BR,
    OUTLINE_H,
    PRIMARY,
    PRIMARY_H,
    SUB_FONT,
    TEXT,
    TITLE_FONT,
)


class RegisterPage(ctk.CTkFrame):
    def __init__(self, master, switch_page):
        super().__init__(master, fg_color=BG)
        self.switch_page = switch_page
        self._show_pw = ctk.BooleanVar(value=False)
        self._busy = False

        center = ctk.CTkFrame(
            self, corner_radius=12, border_width=1, border_color=BORDER, fg_color=CARD_BG
        )
        center.place(relx=0.5, rely=0.5, anchor="center")
        center.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(center, text="Create account", font=TITLE_FONT, text_color=TEXT)\
            .grid(row=0, column=0, sticky="w", padx=26, pady=(22, 2))
        ctk.CTkLabel(
            center, text="Your vault is tied to this email", font=SUB_FONT, text_color=MUTED
        ).grid(row=1, column=0, sticky="w", padx=26, pady=(0, 10))

        form = ctk.CTkFrame(center, fg_color="transparent")
        form.grid(row=2, column=0, sticky="ew", padx=26)
        form.grid_columnconfigure(0, weight=1)

        def field(row, placeholder, show=None):
            e = ctk.CTkEntry(
                form,
                placeholder_text=placeholder,
                width=360,
                height=38,
                corner_radius=8,
                fg_color=BG,
                border_color=BORDER,
                border_width=1,
                text_color=TEXT,
                show=show,
            )
            e.grid(row=row, column=0, sticky="ew", pady=(2, 8))
            return e

        self.email_entry = field(0, "Email address")
        self.password_entry = field(1, "Password", show="*")
        self.password_entry.bind(
            "<KeyRelease>", lambda e: self.meter.update_for(self.password_entry.get())
        )
        self.meter = StrengthMeter(form)
        self.meter.grid(row=2, column=0, sticky="ew", pady=(0, 8))
        self.confirm_password_entry = field(3, "Confirm password", show="*")

        ctk.CTkCheckBox(
            form,
            text="Show passwords",
            variable=self._show_pw,
            command=self._toggle_password,
            text_color=MUTED,
            border_color=OUTLINE_BR,
            fg_color=PRIMARY,
            hover_color=OUTLINE_H,
            checkbox_height=16,
            checkbox_width=16,
            corner_radius=4,
        ).grid(row=4, column=0, sticky="w")

        self.status = ctk.CTkLabel(center, text="", font=BODY_FONT, text_color=MUTED)
        self.status.grid(row=3, column=0, sticky="w", padx=26, pady=(6, 8))

        actions = ctk.CTkFrame(center, fg_color="transparent")
        actions.grid(row=4, column=0, sticky="ew", padx=26, pady=(4, 22))
        actions.grid_columnconfigure(0, weight=1)

        self.register_btn = ctk.CTkButton(
            actions,
            text="Register",
            width=120,
            height=38,
            corner_radius=8,
            fg_color=PRIMARY,
            hover_color=PRIMARY_H,
            text_color=ON_PRIMARY,
            command=self._do_register,
        )
        self.register_btn.grid(row=0, column=0, sticky="w")

        ctk.CTkButton(
            actions,
            text="Back to sign in",
            width=140,
            height=38,
            corner_radius=8,
            fg_color="transparent",
            border_width=1,
            border_color=OUTLINE_BR,
            hover_color=OUTLINE_H,
            text_color=TEXT,
            command=lambda: self.switch_page("login"),
        ).grid(row=0, column=1, sticky="e", padx=(10, 0))

    def on_enter(self):
        self._reset_fields()

    # ---------- UI helpers ----------
    def _toggle_password(self):
        show = "" if self._show_pw.get() else "*"
        self.password_entry.configure(show=show)
        self.confirm_password_entry.configure(show=show)

    def _set_status(self, msg: str, error: bool = False):
        self.status.configure(text=msg, text_color=(DANGER if error else MUTED))

    def _reset_fields(self):
        for f in (self.email_entry, self.password_entry, self.confirm_password_entry):
            f.delete(0, "end")
        self._show_pw.set(False)
        self._toggle_password()
        self.meter.update_for("")
        self._set_status("")

    # ---------- Registration Logic ----------
    def _do_register(self):
        if self._busy:
            return

        email = (self.email_entry.get() or "").strip()
        password = self.password_entry.get() or ""
        confirm_password = self.confirm_password_entry.get() or ""

        if not all([email, password, confirm_password]):
            self._set_status("Fill in all fields.", error=True)
            return
        if password != confirm_password:
            self._set_status("Passwords do not match.", error=True)
            return

        self._busy = True
        self.register_btn.configure(state="disabled")
        self._set_status("Registering…")

        def worker():
            try:
                ok, result = sb_register(email, password)
            except RuntimeError as e:
                ok, result = False, f"Error: {e}"
            self.after(0, self._register_done, ok, result)

        threading.Thread(target=worker, daemon=True).start()

    def _register_done(self, ok, result):
        self._busy = False
        self.register_btn.configure(state="normal")
        if not ok:
            self._set_status(str(result), error=True)
            return
        self._reset_fields()
        self._set_status("Registration successful! Please log in.")
        self.after(1000, lambda: self.switch_page("login"))
