# tests/test_installer.py

import sys
from pathlib import Path

import pytest

from taskz.installer import Installer, default_install_path


@pytest.fixture()
def launcher(tmp_path: Path) -> Path:
    path = tmp_path / "launcher"
    path.write_bytes(b"#!/bin/sh\necho taskz\n")
    return path


def test_default_install_path() -> None:
    expected = "taskz.exe" if sys.platform == "win32" else "taskz"
    assert default_install_path().name == expected


def test_install_copies_launcher(tmp_path: Path, launcher: Path) -> None:
    target = tmp_path / "taskz"
    installer = Installer(target=target, source=launcher)

    assert not installer.is_installed()
    assert installer.install()
    assert target.read_bytes() == launcher.read_bytes()
    assert installer.is_installed()


def test_install_missing_source(tmp_path: Path) -> None:
    installer = Installer(target=tmp_path / "taskz", source=tmp_path / "nope")
    assert not installer.install()


def test_install_permission_denied(tmp_path: Path, launcher: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def deny(*args, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr("taskz.installer.shutil.copy2", deny)
    installer = Installer(target=tmp_path / "taskz", source=launcher)
    assert not installer.install()


def test_install_into_missing_directory(tmp_path: Path, launcher: Path) -> None:
    installer = Installer(target=tmp_path / "no" / "such" / "taskz", source=launcher)
    assert not installer.install()


def test_uninstall(tmp_path: Path, launcher: Path) -> None:
    installer = Installer(target=tmp_path / "taskz", source=launcher)
    assert not installer.uninstall()

    installer.install()
    assert installer.uninstall()
    assert not installer.is_installed()
