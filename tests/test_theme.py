import importlib
from pathlib import Path

import theme


def test_color_is_passthrough_when_disabled():
    assert theme.color("Pending", "\033[1m") == "Pending"


def test_color_wraps_when_enabled(monkeypatch):
    monkeypatch.setattr(theme, "_ENABLE", True)
    assert theme.color("x", "\033[1m") == "\033[1mx" + theme.RESET


def test_disable(monkeypatch):
    monkeypatch.setattr(theme, "_ENABLE", True)
    theme.disable()
    assert theme.enabled() is False


def test_env_overrides(tmp_path: Path):
    env = tmp_path / ".env"
    env.write_text("# palette\nTODOLIST_PENDING=112233\nTODOLIST_PRIMARY=#zzzzzz\nOTHER=#445566\n")
    assert theme.load_env_overrides(env) == {"TODOLIST_PENDING": "#112233"}


def test_missing_env_file(tmp_path: Path):
    assert theme.load_env_overrides(tmp_path / ".env") == {}


def test_env_file_read_from_working_directory(tmp_path: Path, monkeypatch):
    (tmp_path / ".env").write_text("TODOLIST_COMPLETED=#010203\n")
    monkeypatch.delenv("TODOLIST_COMPLETED", raising=False)
    with monkeypatch.context() as mp:
        mp.chdir(tmp_path)
        importlib.reload(theme)
        assert theme.HEX_COMPLETED == "#010203"
    importlib.reload(theme)
