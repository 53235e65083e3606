"""Simple cross-platform settings storage for the app.

Stores a small JSON settings file in a per-user application data location
and exposes helpers for the theme preference, the per-user "tutorial seen"
flags and the connectivity poll interval.

Writes use an atomic replace. On POSIX systems the settings directory and
file are created with restrictive permissions where possible.
"""

from __future__ import annotations

import json
import logging
import os
import platform
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_APP_NAME = "CloudLock"
_SETTINGS_FILE = "settings.json"

THEMES = ("light", "dark", "system")
DEFAULT_THEME = "system"
DEFAULT_POLL_INTERVAL = 30.0


def _get_user_data_dir() -> Path:
    """Return a platform-appropriate per-user data directory for the app."""
    system = platform.system()
    home = Path.home()
    if system == "Windows":
        appdata = os.getenv("APPDATA")
        if appdata:
            return Path(appdata) / _APP_NAME
        return home / f".{_APP_NAME}"
    if system == "Darwin":
        return home / "Library" / "Application Support" / _APP_NAME
    # Linux / other: honor XDG_DATA_HOME if set
    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / _APP_NAME
    return home / ".local" / "share" / _APP_NAME


def ensure_settings_dir() -> Path:
    d = _get_user_data_dir()
    d.mkdir(parents=True, exist_ok=True)
    if os.name == "posix":
        try:
            d.chmod(0o700)
        except OSError as e:
            logger.debug("could not restrict %s: %s", d, e)
    return d


def settings_path() -> Path:
    return ensure_settings_dir() / _SETTINGS_FILE


def load_settings() -> Dict[str, Any]:
    p = settings_path()
    if not p.exists():
        return {}
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", p, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_settings(data: Dict[str, Any]) -> None:
    p = settings_path()
    # atomic write: write to temp then replace
    tmp = p.with_suffix(".tmp")
    try:
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        if os.name == "posix":
            try:
                tmp.chmod(0o600)
            except OSError:
                pass
        os.replace(str(tmp), str(p))
    finally:
        if tmp.exists():
            try:
                tmp.unlink()
            except OSError as e:
                logger.debug("could not remove %s: %s", tmp, e)


def get_setting(key: str, default: Optional[Any] = None) -> Any:
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> None:
    s = load_settings()
    s[key] = value
    save_settings(s)


def get_theme() -> str:
    val = get_setting("theme")
    return val if val in THEMES else DEFAULT_THEME


def set_theme(theme: str) -> None:
    if theme not in THEMES:
        raise ValueError(f"Unknown theme {theme!r}; expected one of {THEMES}")
    set_setting("theme", theme)


def has_seen_tutorial(user_id: str) -> bool:
    seen = get_setting("tutorial_seen", {})
    return bool(isinstance(seen, dict) and seen.get(user_id))


def mark_tutorial_seen(user_id: str) -> None:
    s = load_settings()
    seen = s.get("tutorial_seen")
    if not isinstance(seen, dict):
        seen = {}
    seen[user_id] = True
    s["tutorial_seen"] = seen
    save_settings(s)


def get_poll_interval() -> float:
    """Seconds between connectivity checks while online (default 30)."""
    val = get_setting("poll_interval")
    try:
        if val is None:
            return DEFAULT_POLL_INTERVAL
        return float(val)
    except (TypeError, ValueError):
        return DEFAULT_POLL_INTERVAL


def set_poll_interval(seconds: float) -> None:
    try:
        secs = float(seconds)
    except (TypeError, ValueError):
        # ignore invalid values
        return
    if secs < 0:
        secs = 0.0
    set_setting("poll_interval", secs)
