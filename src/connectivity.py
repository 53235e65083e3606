"""Background connectivity polling.

ConnectionMonitor runs a check callable on a daemon thread, polling every
`interval` seconds while online and every `retry_interval` seconds while
offline. `on_change(connected)` fires for the first result and then only
when the state flips, so a UI can show or hide an offline banner.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class ConnectionMonitor:
    def __init__(
        self,
        check: Callable[[], bool],
        on_change: Callable[[bool], None],
        interval: float = 30.0,
        retry_interval: float = 5.0,
    ):
        self._check = check
        self._on_change = on_change
        self.interval = interval
        self.retry_interval = retry_interval
        self.connected: Optional[bool] = None
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def check_once(self) -> bool:
        """Run one check and report a state change. Returns the new state."""
        try:
            ok = bool(self._check())
        except Exception as e:
            logger.warning("connectivity check raised: %s", e)
            ok = False
        logger.debug("connectivity check: %s", "online" if ok else "offline")
        if ok != self.connected:
            self.connected = ok
            self._on_change(ok)
        return ok

    def _run(self, stop: threading.Event):
        while not stop.is_set():
            ok = self.check_once()
            stop.wait(self.interval if ok else self.retry_interval)

    def start(self):
        if self._thread is not None and self._thread.is_alive():
            return
        # fresh Event per run; a thread left over from a timed-out stop()
        # keeps its own (set) Event and exits after its current check
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(self._stop,), name="connection-monitor", daemon=True
        )
        self._thread.start()

    def stop(self, timeout: Optional[float] = 2.0):
        self._stop.set()
        t = self._thread
        if t is not None and t is not threading.current_thread():
            t.join(timeout)
        self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
