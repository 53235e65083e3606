import json

import cli


def test_check_json_output(capsys):
    rc = cli.main(["check", "password", "--json"])
    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["category"] == "weak"
    assert out["score"] == 15
    assert out["suggestions"][-1] == "Avoid common password patterns"


def test_check_text_output(capsys):
    cli.main(["check", "Tr0ub4dor&3XyZ"])
    out = capsys.readouterr().out
    assert "Strength: strong (100/100)" in out
    assert "  - " not in out


def test_check_prompts_when_password_omitted(monkeypatch, capsys):
    monkeypatch.setattr(cli.getpass, "getpass", lambda prompt="": "Aa1!")
    cli.main(["check"])
    out = capsys.readouterr().out
    assert "Strength: strong (80/100)" in out
    assert "Use at least 8 characters" in out


def test_serve_uses_arguments(monkeypatch):
    called = {}
    monkeypatch.setattr(cli, "serve", lambda host, port: called.update(host=host, port=port))
    assert cli.main(["serve", "--host", "0.0.0.0", "--port", "8080"]) == 0
    assert called == {"host": "0.0.0.0", "port": 8080}
