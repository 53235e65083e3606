import json
import threading
import urllib.error
import urllib.request

import pytest

import server


@pytest.fixture
def running_server():
    srv = server.make_server("127.0.0.1", 0)
    t = threading.Thread(target=srv.serve_forever, daemon=True)
    t.start()
    yield f"http://127.0.0.1:{srv.server_address[1]}"
    srv.shutdown()
    srv.server_close()


def test_health_check(running_server):
    with urllib.request.urlopen(running_server + "/") as resp:
        assert resp.status == 200
        assert resp.headers["Access-Control-Allow-Origin"] == "*"
        assert json.loads(resp.read()) == {"message": "CloudLock API"}


def test_unknown_path_is_404(running_server):
    with pytest.raises(urllib.error.HTTPError) as exc:
        urllib.request.urlopen(running_server + "/passwords")
    assert exc.value.code == 404
    assert json.loads(exc.value.read()) == {"error": "not found"}


def test_default_port_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "4123")
    assert server.default_port() == 4123
    monkeypatch.setenv("PORT", "abc")
    assert server.default_port() == server.DEFAULT_PORT
    monkeypatch.delenv("PORT")
    assert server.default_port() == 3000
