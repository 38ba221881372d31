# tests/conftest.py

from pathlib import Path
from typing import List

import pytest

from taskz.manager import TaskManager
from taskz.schema import Task

from .helpers import make_tasks


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep tests away from the real ~/.local/share/taskz"""
    for name in ("TASKZ_DATA_DIR", "TASKZ_MATCH_THRESHOLD", "TASKZ_LOG_LEVEL", "TASKZ_INSTALL_PATH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path / "home"))


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "taskz"


@pytest.fixture()
def manager(data_dir: Path) -> TaskManager:
    m = TaskManager(data_dir)
    m.load()
    return m


@pytest.fixture()
def pets() -> List[Task]:
    return make_tasks("make a cool rap song", "talk to my cat", "pet my hamster")


@pytest.fixture()
def songs() -> List[Task]:
    return make_tasks("make a cool rap song", "feed my cat", "make a disstrack song on my hamster")
