import threading
import types

import pytest

import pages.self_destruct as sdmod


def _dialog(confirmed, countdown, tick_job="after#1"):
    events = []
    stub = types.SimpleNamespace(
        token="tok",
        user_id="u1",
        _processing=False,
        _confirmed=confirmed,
        countdown=countdown,
        _tick_job=tick_job,
        after_cancel=lambda job: events.append(("after_cancel", job)),
        grab_release=lambda: events.append("grab_release"),
        destroy=lambda: events.append("destroy"),
    )
    return stub, events


@pytest.fixture
def logged(monkeypatch):
    done = threading.Event()
    calls = []

    def fake_cancel(token, uid):
        calls.append((token, uid))
        done.set()

    monkeypatch.setattr(sdmod, "cancel_self_destruct", fake_cancel)
    return calls, done


@pytest.mark.parametrize("countdown", [5, 0])
def test_cancel_after_confirm_is_logged_even_in_last_second(logged, countdown):
    calls, done = logged
    stub, events = _dialog(confirmed=True, countdown=countdown)
    sdmod.SelfDestructDialog._cancel(stub)
    assert done.wait(2.0)
    assert calls == [("tok", "u1")]
    assert ("after_cancel", "after#1") in events
    assert events[-1] == "destroy"


def test_cancel_before_confirm_is_not_logged(logged):
    calls, done = logged
    stub, events = _dialog(confirmed=False, countdown=30, tick_job=None)
    sdmod.SelfDestructDialog._cancel(stub)
    assert not done.wait(0.1)
    assert calls == []
    assert events == ["grab_release", "destroy"]


def test_cancel_ignored_while_wiping(logged):
    calls, _ = logged
    stub, events = _dialog(confirmed=True, countdown=0)
    stub._processing = True
    sdmod.SelfDestructDialog._cancel(stub)
    assert events == []
    assert calls == []
