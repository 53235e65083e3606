# src/pages/self_destruct.py
import logging
import threading

import customtkinter as ctk

from api_client_supabase import (
    cancel_self_destruct,
    execute_self_destruct,
    get_self_destruct_settings,
)
from ui.theme import (
    BODY_FONT,
    CARD_BG,
    DANGER,
    DANGER_H,
    HEADING_FONT,
    MUTED,
    OUTLINE_BR,
    OUTLINE_H,
    TEXT,
    TITLE_FONT,
)
from ui.worker import run_in_background

logger = logging.getLogger(__name__)

WARNING_TEXT = (
    "Warning: this action cannot be undone.\n\n"
    "Activating self-destruct will immediately:\n"
    "  • delete all stored passwords\n"
    "  • sign this device out"
)


class SelfDestructDialog(ctk.CTkToplevel):
    """Confirm, count down, then wipe the vault. Cancel works until the wipe starts."""

    def __init__(self, master, token: str, user_id: str, on_complete):
        super().__init__(master)
        self.token = token
        self.user_id = user_id
        self._on_complete = on_complete
        self.countdown = 30
        self._confirmed = False
        self._processing = False
        self._tick_job = None

        self.title("Emergency Self-Destruct")
        self.geometry("460x360")
        self.configure(fg_color=CARD_BG)
        self.grid_columnconfigure(0, weight=1)
        self.transient(master)
        self.protocol("WM_DELETE_WINDOW", self._cancel)

        ctk.CTkLabel(
            self, text="Emergency Self-Destruct", font=HEADING_FONT, text_color=DANGER
        ).grid(row=0, column=0, sticky="w", padx=22, pady=(18, 8))

        self.body = ctk.CTkLabel(
            self, text=WARNING_TEXT, font=BODY_FONT, text_color=TEXT, justify="left"
        )
        self.body.grid(row=1, column=0, sticky="w", padx=22)

        self.counter = ctk.CTkLabel(self, text="", font=TITLE_FONT, text_color=DANGER)
        self.counter.grid(row=2, column=0, pady=(10, 0))

        self.status = ctk.CTkLabel(self, text="", font=BODY_FONT, text_color=MUTED, wraplength=400)
        self.status.grid(row=3, column=0, sticky="w", padx=22, pady=(6, 0))

        actions = ctk.CTkFrame(self, fg_color="transparent")
        actions.grid(row=4, column=0, sticky="e", padx=22, pady=(12, 18))
        self.cancel_btn = ctk.CTkButton(
            actions,
            text="Cancel",
            width=100,
            fg_color="transparent",
            border_width=1,
            border_color=OUTLINE_BR,
            hover_color=OUTLINE_H,
            text_color=TEXT,
            command=self._cancel,
        )
        self.cancel_btn.grid(row=0, column=0, padx=(0, 8))
        self.confirm_btn = ctk.CTkButton(
            actions,
            text="Activate Self-Destruct",
            fg_color=DANGER,
            hover_color=DANGER_H,
            command=self._confirm,
        )
        self.confirm_btn.grid(row=0, column=1)

        self._load_settings()
        self.after(50, self.grab_set)

    def _load_settings(self):
        run_in_background(
            lambda: get_self_destruct_settings(self.token, self.user_id),
            self._apply_settings,
            lambda _msg: self.status.configure(text="Failed to load settings"),
            self._schedule,
            what="self-destruct settings",
        )

    def _schedule(self, cb, arg):
        self.after(0, cb, arg)

    def _apply_settings(self, s):
        if not self._confirmed:
            self.countdown = s.cooldown_seconds
        if s.require_2fa:
            self.status.configure(text="2FA verification required before proceeding")

    # ---------- Countdown ----------
    def _confirm(self):
        self._confirmed = True
        self.confirm_btn.grid_remove()
        self.cancel_btn.configure(text="Cancel Self-Destruct")
        self._tick()

    def _tick(self):
        self._tick_job = None
        if self.countdown <= 0:
            self.counter.configure(text="0")
            self._execute()
            return
        self.counter.configure(text=str(self.countdown))
        self.body.configure(text=f"Self-destruct will execute in {self.countdown} seconds")
        self.countdown -= 1
        self._tick_job = self.after(1000, self._tick)

    def _execute(self):
        self._processing = True
        self.cancel_btn.configure(state="disabled")
        self.status.configure(text="Wiping vault…", text_color=MUTED)

        run_in_background(
            lambda: execute_self_destruct(self.token, self.user_id),
            lambda _: self._done(),
            self._failed,
            self._schedule,
            what="self-destruct",
        )

    def _failed(self, msg: str):
        self._processing = False
        self.cancel_btn.configure(state="normal", text="Close")
        self.status.configure(text=msg, text_color=DANGER)

    def _done(self):
        self.grab_release()
        self.destroy()
        self._on_complete()

    def _cancel(self):
        if self._processing:
            return
        if self._tick_job is not None:
            self.after_cancel(self._tick_job)
            self._tick_job = None
        if self._confirmed:
            token, uid = self.token, self.user_id

            def worker():
                try:
                    cancel_self_destruct(token, uid)
                except Exception as e:
                    logger.warning("could not log cancellation: %s", e)

            threading.Thread(target=worker, daemon=True).start()
        self.grab_release()
        self.destroy()
