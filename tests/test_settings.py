import pytest

import settings


def test_theme_defaults_and_persists(isolated_settings):
    assert settings.get_theme() == "system"
    settings.set_theme("dark")
    assert settings.get_theme() == "dark"
    assert settings.settings_path().exists()
    assert str(settings.settings_path()).startswith(str(isolated_settings))


def test_invalid_theme_rejected(isolated_settings):
    with pytest.raises(ValueError):
        settings.set_theme("neon")
    settings.set_setting("theme", "neon")
    assert settings.get_theme() == "system"


def test_tutorial_flags_are_per_user(isolated_settings):
    assert not settings.has_seen_tutorial("u1")
    settings.mark_tutorial_seen("u1")
    assert settings.has_seen_tutorial("u1")
    assert not settings.has_seen_tutorial("u2")


def test_poll_interval(isolated_settings):
    assert settings.get_poll_interval() == 30.0
    settings.set_poll_interval(-5)
    assert settings.get_poll_interval() == 0.0
    settings.set_poll_interval("not a number")
    assert settings.get_poll_interval() == 0.0
    settings.set_poll_interval(12)
    assert settings.get_poll_interval() == 12.0


def test_corrupt_file_is_ignored(isolated_settings):
    settings.settings_path().write_text("{ not json", encoding="utf-8")
    assert settings.load_settings() == {}
    settings.set_theme("light")
    assert settings.get_theme() == "light"


def test_failed_write_keeps_original_error(isolated_settings, monkeypatch):
    from pathlib import Path

    def fail_replace(src, dst):
        raise OSError("replace failed")

    def fail_unlink(self, missing_ok=False):
        raise OSError("unlink failed")

    monkeypatch.setattr(settings.os, "replace", fail_replace)
    monkeypatch.setattr(Path, "unlink", fail_unlink)
    with pytest.raises(OSError, match="replace failed"):
        settings.save_settings({"theme": "dark"})
