import threading

from connectivity import ConnectionMonitor


def _monitor(results, **kw):
    seen = []
    it = iter(results)

    def check():
        r = next(it)
        if isinstance(r, Exception):
            raise r
        return r

    return ConnectionMonitor(check, seen.append, **kw), seen


def test_reports_first_result_then_only_changes():
    m, seen = _monitor([True, True, False, False, True])
    for _ in range(5):
        m.check_once()
    assert seen == [True, False, True]
    assert m.connected is True


def test_check_exception_counts_as_offline():
    m, seen = _monitor([True, RuntimeError("boom")])
    m.check_once()
    assert m.check_once() is False
    assert seen == [True, False]


def test_thread_polls_and_stops():
    calls = threading.Event()
    count = {"n": 0}

    def check():
        count["n"] += 1
        if count["n"] >= 3:
            calls.set()
        return count["n"] % 2 == 0

    states = []
    m = ConnectionMonitor(check, states.append, interval=0.01, retry_interval=0.01)
    m.start()
    assert calls.wait(2.0)
    m.stop()
    assert not m.running
    assert states[:3] == [False, True, False]


def test_restart_after_timed_out_stop_leaves_one_poller():
    gate = threading.Event()
    entered = threading.Event()

    def check():
        entered.set()
        gate.wait(2.0)
        return True

    m = ConnectionMonitor(check, lambda ok: None, interval=0.01, retry_interval=0.01)
    m.start()
    assert entered.wait(2.0)
    stale = m._thread
    m.stop(timeout=0.05)
    assert stale.is_alive()

    m.start()
    gate.set()
    stale.join(2.0)
    try:
        assert not stale.is_alive()
        live = [t for t in threading.enumerate() if t.name == "connection-monitor" and t.is_alive()]
        assert live == [m._thread]
    finally:
        m.stop()


def test_offline_uses_retry_interval():
    m, _ = _monitor([False, True], interval=30.0, retry_interval=5.0)
    waits = []

    class FakeStop:
        def __init__(self):
            self.flag = False

        def is_set(self):
            return self.flag

        def wait(self, timeout):
            waits.append(timeout)
            if len(waits) == 2:
                self.flag = True
            return self.flag

    m._run(FakeStop())
    assert waits == [5.0, 30.0]
