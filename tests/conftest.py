"""Shared test fixtures."""

from __future__ import annotations

import os

import pytest

from folder_crawler.settings import Settings


@pytest.fixture
def tree(tmp_path):
    """Create ``d/{a.txt, b.txt, sub/c.txt}`` and return ``d``."""
    root = tmp_path / "d"
    root.mkdir()
    (root / "a.txt").write_text("hello")
    (root / "b.txt").write_bytes(b"x" * 2048)
    (root / "sub").mkdir()
    (root / "sub" / "c.txt").write_text("c")
    return root


@pytest.fixture
def isolate_settings(tmp_path, monkeypatch):
    """Point the settings store at a temp config dir."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setattr(Settings, "_instance", None)
    return config_home / "folder-crawler" / "settings.json"


class FailingScandir:
    """Scandir iterator that raises after yielding *fail_after* entries."""

    def __init__(self, it, fail_after: int) -> None:
        self._it = it
        self._remaining = fail_after

    def __iter__(self):
        return self

    def __next__(self):
        if self._remaining == 0:
            raise OSError(5, "Input/output error")
        self._remaining -= 1
        return next(self._it)

    def close(self) -> None:
        self._it.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.close()


@pytest.fixture
def fake_scandir(monkeypatch):
    """Control os.scandir per path.

    Returns a pair ``(denied, failing)``: paths in ``denied`` cannot be
    opened, and paths mapped in ``failing`` break after that many entries.
    """
    denied: set[str] = set()
    failing: dict[str, int] = {}
    real_scandir = os.scandir

    def scandir(path="."):
        key = os.fspath(path)
        if key in denied:
            raise PermissionError(13, "Permission denied", key)
        it = real_scandir(path)
        if key in failing:
            return FailingScandir(it, failing[key])
        return it

    monkeypatch.setattr(os, "scandir", scandir)
    return denied, failing
