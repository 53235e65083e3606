import logging

import customtkinter as ctk

import settings
from api_client_supabase import check_connection, logout as sb_logout
from connectivity import ConnectionMonitor
from pages import LoginPage, RegisterPage, TutorialDialog, VaultPage
from ui.theme import apply_theme

logger = logging.getLogger(__name__)


class App(ctk.CTk):
    def __init__(self):
        super().__init__()
        self.title("CloudLock")
        self.geometry("1000x720")
        self.minsize(760, 560)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self.auth_token = None
        self.current_user = None

        # --- Instantiate pages ---
        self._pages = {
            "login": LoginPage(self, self.switch_page, on_login=self._on_login),
            "register": RegisterPage(self, self.switch_page),
            "vault": VaultPage(
                self,
                self.switch_page,
                get_session=lambda: (self.auth_token, self.current_user),
                on_sign_out=self.logout,
            ),
        }

        for p in self._pages.values():
            p.grid(row=0, column=0, sticky="nsew")
            p.grid_remove()

        self._current_page_name = "login"
        self.switch_page(self._current_page_name)

        # Connectivity banner; callbacks arrive on the monitor thread
        self.monitor = ConnectionMonitor(
            check=check_connection,
            on_change=lambda ok: self.after(0, self._on_connectivity, ok),
            interval=max(1.0, settings.get_poll_interval()),
        )
        self.monitor.start()

        self._closing = False
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # -------- Navigation --------
    def switch_page(self, name: str):
        self._current_page_name = name
        for n, page in self._pages.items():
            if n == name:
                page.grid()
                if hasattr(page, "on_enter"):
                    page.on_enter()
            else:
                page.grid_remove()

    # -------- Session --------
    def _on_login(self, token: str, user: dict):
        self.auth_token = token
        self.current_user = user
        uid = user.get("id")
        if uid and not settings.has_seen_tutorial(uid):
            self.after(200, lambda: TutorialDialog(self, on_close=lambda: settings.mark_tutorial_seen(uid)))

    def logout(self):
        sb_logout()
        self.auth_token = None
        self.current_user = None
        self._pages["vault"].reset_ui()
        self.switch_page("login")

    def _on_connectivity(self, ok: bool):
        if self._closing:
            return
        self._pages["vault"].set_offline(not ok)

    def _on_close(self):
        self._closing = True
        self.monitor.stop(timeout=0.5)
        self.destroy()


def main():
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    ctk.set_default_color_theme("blue")
    apply_theme(settings.get_theme())
    App().mainloop()


if __name__ == "__main__":
    main()
