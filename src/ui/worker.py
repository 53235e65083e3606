# src/ui/worker.py
"""Background calls for pages.

run_in_background(fn, on_ok, on_error, schedule) runs fn on a daemon
thread and hands the outcome to schedule(callback, arg), which pages bind
to `self.after(0, ...)` so callbacks land on the Tk thread.
"""

import logging
import threading

logger = logging.getLogger(__name__)


def run_in_background(fn, on_ok, on_error, schedule, what: str = "task") -> threading.Thread:
    def worker():
        try:
            result = fn()
        except Exception as e:
            # every failure must reach on_error or the page stays busy
            logger.exception("%s failed", what)
            schedule(on_error, str(e))
            return
        schedule(on_ok, result)

    t = threading.Thread(target=worker, name=f"worker-{what}", daemon=True)
    t.start()
    return t
