import sys
from pathlib import Path

import pytest

# Make the top-level modules under src/ importable ('core', 'settings',
# 'api_client_supabase', ...) when running tests from a checkout.
repo_root = Path(__file__).resolve().parents[1]
src_dir = repo_root / "src"
if src_dir.exists() and str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings store at a temp dir on every platform."""
    monkeypatch.setenv("APPDATA", str(tmp_path))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path
