# src/pages/login.py
import threading

import customtkinter as ctk

from api_client_supabase import login as sb_login
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

NEXT_PAGE = "vault"


class LoginPage(ctk.CTkFrame):
    def __init__(self, master, switch_page, on_login):
        super().__init__(master, fg_color=BG)
        self.switch_page = switch_page
        self._on_login = on_login

        # ---------- State ----------
        self._show_password = ctk.BooleanVar(value=False)
        self._busy = False

        # Center container
        center = ctk.CTkFrame(
            self,
            corner_radius=12,
            border_width=1,
            border_color=BORDER,
            fg_color=CARD_BG,
        )
        center.place(relx=0.5, rely=0.5, anchor="center")
        center.grid_columnconfigure(0, weight=1)

        # ---------- Header ----------
        ctk.CTkLabel(center, text="CloudLock", font=TITLE_FONT, text_color=TEXT)\
            .grid(row=0, column=0, sticky="w", padx=26, pady=(22, 2))
        ctk.CTkLabel(
            center,
            text="Sign in to open your vault",
            font=SUB_FONT,
            text_color=MUTED,
        ).grid(row=1, column=0, sticky="w", padx=26, pady=(0, 10))

        # ---------- Form ----------
        form = ctk.CTkFrame(center, fg_color="transparent")
        form.grid(row=2, column=0, sticky="ew", padx=26)
        form.grid_columnconfigure(0, weight=1)

        self.email_entry = ctk.CTkEntry(
            form,
            placeholder_text="Email address",
            width=360,
            height=38,
            corner_radius=8,
            fg_color=BG,
            border_color=BORDER,
            border_width=1,
            text_color=TEXT,
        )
        self.email_entry.grid(row=0, column=0, sticky="ew", pady=(2, 8))

        self.password_entry = ctk.CTkEntry(
            form,
            placeholder_text="Password",
            height=38,
            corner_radius=8,
            fg_color=BG,
            border_color=BORDER,
            border_width=1,
            text_color=TEXT,
            show="*",
        )
        self.password_entry.grid(row=1, column=0, sticky="ew")
        self.password_entry.bind("<Return>", lambda e: self._do_login())

        ctk.CTkCheckBox(
            form,
            text="Show password",
            variable=self._show_password,
            command=self._toggle_password,
            text_color=MUTED,
            border_color=OUTLINE_BR,
            fg_color=PRIMARY,
            hover_color=OUTLINE_H,
            checkbox_height=16,
            checkbox_width=16,
            corner_radius=4,
        ).grid(row=2, column=0, sticky="w", pady=(8, 0))

        # Status label
        self.status = ctk.CTkLabel(center, text="", font=BODY_FONT, text_color=MUTED)
        self.status.grid(row=3, column=0, sticky="w", padx=26, pady=(6, 8))

        # ---------- Actions ----------
        actions = ctk.CTkFrame(center, fg_color="transparent")
        actions.grid(row=4, column=0, sticky="ew", padx=26, pady=(4, 22))
        actions.grid_columnconfigure(0, weight=1)

        self.login_btn = ctk.CTkButton(
            actions,
            text="Sign in",
            width=120,
            height=38,
            corner_radius=8,
            fg_color=PRIMARY,
            hover_color=PRIMARY_H,
            text_color=ON_PRIMARY,
            command=self._do_login,
        )
        self.login_btn.grid(row=0, column=0, sticky="w")

        ctk.CTkButton(
            actions,
            text="Create account",
            width=140,
            height=38,
            corner_radius=8,
            fg_color="transparent",
            border_width=1,
            border_color=OUTLINE_BR,
            hover_color=OUTLINE_H,
            text_color=TEXT,
            command=lambda: self.switch_page("register"),
        ).grid(row=0, column=1, sticky="e", padx=(10, 0))

    # ---------- Lifecycle ----------
    def on_enter(self):
        self._reset_fields()
        self._set_status("")

    # ---------- UI helpers ----------
    def _toggle_password(self):
        self.password_entry.configure(show="" if self._show_password.get() else "*")

    def _set_status(self, msg: str, error: bool = False):
        self.status.configure(text=msg, text_color=(DANGER if error else MUTED))

    def _set_busy(self, busy: bool):
        self._busy = busy
        self.login_btn.configure(state="disabled" if busy else "normal")

    def _reset_fields(self):
        self.email_entry.delete(0, "end")
        self.password_entry.delete(0, "end")
        self._show_password.set(False)
        self.password_entry.configure(show="*")

    # ---------- Email/password login ----------
    def _do_login(self):
        if self._busy:
            return
        email = (self.email_entry.get() or "").strip()
        password = self.password_entry.get() or ""
        if not email or not password:
            self._set_status("Enter email and password.", error=True)
            return

        self._set_busy(True)
        self._set_status("Signing in…")

        def worker():
            ok, token_or_err, user = sb_login(email, password)
            self.after(0, self._login_done, ok, token_or_err, user)

        threading.Thread(target=worker, daemon=True).start()

    def _login_done(self, ok, token_or_err, user):
        self._set_busy(False)
        if not ok or not user:
            self._set_status(f"{token_or_err}", error=True)
            return
        self._reset_fields()
        self._set_status("")
        self._on_login(token_or_err, user)
        self.switch_page(NEXT_PAGE)
