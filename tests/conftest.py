import json

import pytest

from neocli.config import loader as loader_module
from neocli.config import settings as settings_module
from neocli.network import protocol as protocol_module


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Every test starts with nothing published and no profile selected."""
    monkeypatch.delenv("NEO_NETWORK", raising=False)
    monkeypatch.delenv("NEO_LOG_LEVEL", raising=False)
    settings_module.reset_settings()
    monkeypatch.setattr(protocol_module, "_protocol_settings", None)
    yield
    settings_module.reset_settings()


@pytest.fixture
def search_dirs(tmp_path, monkeypatch):
    """Three empty candidate directories standing in for cwd / entry point / package."""
    dirs = [tmp_path / "cwd", tmp_path / "entry", tmp_path / "lib"]
    for d in dirs:
        d.mkdir()
    monkeypatch.chdir(dirs[0])
    monkeypatch.setattr(loader_module, "default_search_paths", lambda: list(dirs))
    return dirs


@pytest.fixture
def write_config():
    def _write(directory, data, name="config.json"):
        path = directory / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
