# src/pages/vault.py
import logging
import tkinter.messagebox as messagebox
import webbrowser

import customtkinter as ctk

import settings
from api_client_supabase import (
    create_password,
    delete_password,
    get_passwords,
    update_password,
)
from core.search import filter_entries
from pages.entry_dialog import AMAZON_TEMPLATE, EntryDialog
from pages.self_destruct import SelfDestructDialog
from ui.entry_card import EntryCard
from ui.search_bar import SearchBar
from ui.theme import (
    BG,
    BODY_FONT,
    DANGER,
    DANGER_H,
    MUTED,
    OFFLINE_BG,
    OFFLINE_FG,
    ON_PRIMARY,
    OUTLINE_BR,
    OUTLINE_H,
    PRIMARY,
    PRIMARY_H,
    SUB_FONT,
    TEXT,
    TITLE_FONT,
    apply_theme,
)
from ui.worker import run_in_background

logger = logging.getLogger(__name__)

THEME_LABELS = {"Light": "light", "Dark": "dark", "System": "system"}


class VaultPage(ctk.CTkFrame):
    def __init__(self, master, switch_page, get_session, on_sign_out):
        super().__init__(master, fg_color=BG)
        self.switch_page = switch_page
        self._get_session = get_session
        self._on_sign_out = on_sign_out
        self.entries = []
        self.query = ""
        self._dialog = None

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(4, weight=1)

        # ---------- Header ----------
        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=24, pady=(20, 4))
        header.grid_columnconfigure(0, weight=1)
        ctk.CTkLabel(header, text="Your Vault", font=TITLE_FONT, text_color=TEXT)\
            .grid(row=0, column=0, sticky="w")
        self.user_label = ctk.CTkLabel(header, text="", font=SUB_FONT, text_color=MUTED)
        self.user_label.grid(row=1, column=0, sticky="w")

        self.theme_var = ctk.StringVar(value="System")
        ctk.CTkSegmentedButton(
            header,
            values=list(THEME_LABELS),
            variable=self.theme_var,
            command=self._change_theme,
        ).grid(row=0, column=1, rowspan=2, sticky="e")

        # ---------- Offline banner ----------
        self.banner = ctk.CTkLabel(
            self,
            text="Connection lost. Retrying…",
            font=BODY_FONT,
            fg_color=OFFLINE_BG,
            text_color=OFFLINE_FG,
            corner_radius=8,
            height=32,
        )

        # ---------- Quick actions ----------
        actions = ctk.CTkFrame(self, fg_color="transparent")
        actions.grid(row=2, column=0, sticky="ew", padx=24, pady=(10, 6))
        quick = [
            ("Add Password", self._open_add, "primary"),
            ("Add Amazon", self._open_add_amazon, "secondary"),
            ("Self-Destruct", self._open_self_destruct, "danger"),
            ("Sign Out", self._on_sign_out, "secondary"),
        ]
        for col, (label, cmd, variant) in enumerate(quick):
            ctk.CTkButton(actions, text=label, command=cmd, height=34, corner_radius=8,
                          **_variant(variant)).grid(row=0, column=col, padx=(0, 8))

        self.search = SearchBar(self, on_search=self.apply_search)
        self.search.grid(row=3, column=0, sticky="new", padx=24, pady=(4, 8))

        self.list_frame = ctk.CTkScrollableFrame(self, fg_color="transparent")
        self.list_frame.grid(row=4, column=0, sticky="nsew", padx=18)
        self.list_frame.grid_columnconfigure(0, weight=1)

        self.status = ctk.CTkLabel(self, text="", font=BODY_FONT, text_color=MUTED, anchor="w")
        self.status.grid(row=5, column=0, sticky="ew", padx=24, pady=(4, 12))

    # ---------- Lifecycle ----------
    def on_enter(self):
        token, user = self._get_session()
        self.user_label.configure(text=(user or {}).get("email") or "")
        label = {v: k for k, v in THEME_LABELS.items()}.get(settings.get_theme(), "System")
        self.theme_var.set(label)
        self.refresh()

    def reset_ui(self):
        self.entries = []
        self.query = ""
        self.search.entry.delete(0, "end")
        self._render()
        self._set_status("")

    def set_offline(self, offline: bool):
        if offline:
            self.banner.grid(row=1, column=0, sticky="ew", padx=24, pady=(6, 0))
        else:
            self.banner.grid_remove()

    # ---------- Helpers ----------
    def _set_status(self, msg: str, error: bool = False):
        self.status.configure(text=msg, text_color=(DANGER if error else MUTED))

    def _run(self, fn, on_ok, what: str):
        """Run fn on a worker thread; on_ok(result) back on the Tk thread."""
        run_in_background(
            fn, on_ok, self._failed, lambda cb, arg: self.after(0, cb, arg), what=what
        )

    def _failed(self, msg: str):
        self._set_status(msg, error=True)
        if self._dialog is not None and self._dialog.winfo_exists():
            self._dialog.show_error(msg)

    # ---------- Data ----------
    def refresh(self):
        token, _ = self._get_session()
        if not token:
            return
        self._set_status("Loading…")
        self._run(lambda: get_passwords(token), self._loaded, "load")

    def _loaded(self, entries):
        self.entries = entries
        self._set_status(f"{len(entries)} saved password{'s' if len(entries) != 1 else ''}")
        self._render()

    def apply_search(self, query: str):
        self.query = query
        self._render()

    def _render(self):
        for child in self.list_frame.winfo_children():
            child.destroy()
        visible = filter_entries(self.entries, self.query)
        if not visible:
            msg = "No matches." if self.entries else "Your vault is empty. Add a password to get started."
            ctk.CTkLabel(self.list_frame, text=msg, font=BODY_FONT, text_color=MUTED)\
                .grid(row=0, column=0, pady=30)
            return
        for row, entry in enumerate(visible):
            EntryCard(
                self.list_frame,
                entry,
                on_edit=self._open_edit,
                on_delete=self._delete,
                on_copy=self._copy,
                on_open_url=webbrowser.open,
            ).grid(row=row, column=0, sticky="ew", padx=6, pady=4)

    # ---------- Actions ----------
    def _open_dialog(self, entry=None, prefill=None):
        if self._dialog is not None and self._dialog.winfo_exists():
            self._dialog.focus()
            return
        self._dialog = EntryDialog(self, on_save=self._save, entry=entry, prefill=prefill)

    def _open_add(self):
        self._open_dialog()

    def _open_add_amazon(self):
        self._open_dialog(prefill=AMAZON_TEMPLATE)

    def _open_edit(self, entry):
        self._open_dialog(entry=entry)

    def _save(self, payload, entry):
        token, user = self._get_session()
        if entry is None:
            fn = lambda: create_password(token, user["id"], payload)
        else:
            fn = lambda: update_password(token, entry.id, payload)
        self._run(fn, self._saved, "save")

    def _saved(self, _entry):
        if self._dialog is not None and self._dialog.winfo_exists():
            self._dialog.close()
        self._dialog = None
        self.refresh()

    def _delete(self, entry):
        if not messagebox.askyesno(
            "Delete password", f"Delete '{entry.title}'? This cannot be undone.", parent=self
        ):
            return
        token, _ = self._get_session()
        self._run(lambda: delete_password(token, entry.id), lambda _: self.refresh(), "delete")

    def _copy(self, value: str):
        self.clipboard_clear()
        self.clipboard_append(value)
        self._set_status("Copied to clipboard.")

    def _open_self_destruct(self):
        token, user = self._get_session()
        if not token or not user:
            return
        SelfDestructDialog(self, token, user["id"], on_complete=self._on_sign_out)

    def _change_theme(self, label: str):
        theme = THEME_LABELS.get(label, "system")
        settings.set_theme(theme)
        apply_theme(theme)


def _variant(name: str) -> dict:
    if name == "primary":
        return {"fg_color": PRIMARY, "hover_color": PRIMARY_H, "text_color": ON_PRIMARY}
    if name == "danger":
        return {"fg_color": DANGER, "hover_color": DANGER_H, "text_color": ON_PRIMARY}
    return {
        "fg_color": "transparent",
        "border_width": 1,
        "border_color": OUTLINE_BR,
        "hover_color": OUTLINE_H,
        "text_color": TEXT,
    }
