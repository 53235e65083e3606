import logging

from ui.worker import run_in_background


def _run(fn):
    calls = []
    t = run_in_background(
        fn,
        lambda result: calls.append(("ok", result)),
        lambda msg: calls.append(("error", msg)),
        lambda cb, arg: cb(arg),
        what="save",
    )
    t.join(2.0)
    assert not t.is_alive()
    return calls


def test_result_goes_to_on_ok():
    assert _run(lambda: 42) == [("ok", 42)]


def test_runtime_error_goes_to_on_error():
    def fail():
        raise RuntimeError("backend down")

    assert _run(fail) == [("error", "backend down")]


def test_unexpected_exception_still_reaches_on_error(caplog):
    def fail():
        raise KeyError("id")

    with caplog.at_level(logging.ERROR, logger="ui.worker"):
        calls = _run(fail)
    assert calls == [("error", "'id'")]
    assert any("save failed" in r.getMessage() for r in caplog.records)
