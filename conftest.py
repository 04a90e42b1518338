"""
Shared fixtures.

Every split writes into the current directory by default, so tests that
split anything run inside a fresh tmp_path.
"""
import pytest


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_patch(tmp_path):
    def _write(content, name="input.diff", encoding="utf-8"):
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return path
    return _write
