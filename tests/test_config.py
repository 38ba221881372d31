# tests/test_config.py

from pathlib import Path

import pytest

from taskz.config import default_data_dir, get_settings
from taskz.matching import DEFAULT_THRESHOLD


def test_defaults(tmp_path: Path) -> None:
    settings = get_settings()
    assert settings.data_dir == default_data_dir()
    assert settings.data_dir.name == "taskz"
    assert settings.match_threshold == DEFAULT_THRESHOLD
    assert settings.log_level == "WARNING"
    assert settings.install_path is None


def test_environment_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKZ_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("TASKZ_MATCH_THRESHOLD", "0.6")
    monkeypatch.setenv("TASKZ_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKZ_INSTALL_PATH", str(tmp_path / "bin" / "taskz"))

    settings = get_settings()
    assert settings.data_dir == tmp_path / "data"
    assert settings.match_threshold == 0.6
    assert settings.log_level == "DEBUG"
    assert settings.install_path == tmp_path / "bin" / "taskz"


@pytest.mark.parametrize("raw", ["abc", "1.5", "-0.2", " "])
def test_bad_threshold_falls_back(raw: str, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKZ_MATCH_THRESHOLD", raw)
    assert get_settings().match_threshold == DEFAULT_THRESHOLD
