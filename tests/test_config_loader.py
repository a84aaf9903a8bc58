import os
from pathlib import Path

import pytest

from neocli.config import loader as loader_module
from neocli.config.loader import ConfigLoader, load_config
from neocli.core.exceptions import ConfigFileError


def test_file_name_without_profile():
    assert ConfigLoader("config", search_paths=[]).file_name == "config.json"


def test_file_name_with_profile(monkeypatch):
    monkeypatch.setenv("NEO_NETWORK", "testnet")
    assert ConfigLoader("config", search_paths=[]).file_name == "config.testnet.json"


def test_blank_profile_is_ignored(monkeypatch):
    monkeypatch.setenv("NEO_NETWORK", "   ")
    assert ConfigLoader("config", search_paths=[]).file_name == "config.json"


def test_missing_file_returns_empty_tree(search_dirs):
    tree = load_config("config")
    assert not tree.exists()


def test_first_candidate_wins(search_dirs, write_config):
    cwd, entry, lib = search_dirs
    write_config(entry, {"ApplicationConfiguration": {"Storage": {"Engine": "entry"}}})
    write_config(lib, {"ApplicationConfiguration": {"Storage": {"Engine": "lib"}}})

    assert load_config().get_value("ApplicationConfiguration:Storage:Engine") == "entry"

    write_config(cwd, {"ApplicationConfiguration": {"Storage": {"Engine": "cwd"}}})
    assert load_config().get_value("ApplicationConfiguration:Storage:Engine") == "cwd"


def test_falls_through_to_library_dir(search_dirs, write_config):
    write_config(search_dirs[2], {"ApplicationConfiguration": {"P2P": {"Port": 1}}})
    assert load_config().get_value("ApplicationConfiguration:P2P:Port") == "1"


def test_profile_file_searched_instead_of_plain(search_dirs, write_config, monkeypatch):
    cwd, entry, _ = search_dirs
    write_config(cwd, {"ApplicationConfiguration": {"P2P": {"Port": 10333}}})
    write_config(entry, {"ApplicationConfiguration": {"P2P": {"Port": 20333}}}, name="config.testnet.json")
    monkeypatch.setenv("NEO_NETWORK", "testnet")

    loader = ConfigLoader("config")
    assert loader.file_name == "config.testnet.json"
    assert loader.find() == entry / "config.testnet.json"
    assert loader.load().get_value("ApplicationConfiguration:P2P:Port") == "20333"


def test_profile_without_file_falls_back_to_empty(search_dirs, write_config, monkeypatch):
    # the plain config.json is not a fallback for a missing profile file
    write_config(search_dirs[0], {"ApplicationConfiguration": {"P2P": {"Port": 1}}})
    monkeypatch.setenv("NEO_NETWORK", "testnet")
    assert not load_config().exists()


def test_malformed_json_is_fatal(search_dirs):
    (search_dirs[0] / "config.json").write_text("{ not json", encoding="utf-8")
    with pytest.raises(ConfigFileError) as exc_info:
        load_config()
    assert exc_info.value.error_code == "CONFIG_FILE_ERROR"
    assert exc_info.value.context["path"].endswith("config.json")


def test_non_object_document_is_fatal(search_dirs):
    (search_dirs[0] / "config.json").write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ConfigFileError):
        load_config()


def test_utf8_bom_is_accepted(search_dirs):
    (search_dirs[0] / "config.json").write_bytes(
        b'\xef\xbb\xbf{"ApplicationConfiguration": {"Storage": {"Engine": "RocksDBStore"}}}'
    )
    assert load_config().get_value("ApplicationConfiguration:Storage:Engine") == "RocksDBStore"


def test_yaml_config(tmp_path):
    (tmp_path / "config.yaml").write_text(
        "ApplicationConfiguration:\n  P2P:\n    Port: 30333\n  Logger:\n    Active: true\n",
        encoding="utf-8",
    )
    tree = ConfigLoader("config", search_paths=[tmp_path], extension="yaml").load()
    assert tree.get_value("ApplicationConfiguration:P2P:Port") == "30333"
    assert tree.get_value("ApplicationConfiguration:Logger:Active") == "true"


def test_malformed_yaml_is_fatal(tmp_path):
    (tmp_path / "config.yml").write_text("a: [1, 2\n", encoding="utf-8")
    with pytest.raises(ConfigFileError):
        ConfigLoader("config", search_paths=[tmp_path], extension=".yml").load()


def test_default_search_paths_order(tmp_path, monkeypatch):
    entry = tmp_path / "bin"
    entry.mkdir()
    script = entry / "neo-cli.py"
    script.write_text("", encoding="utf-8")

    class _Main:
        __file__ = str(script)

    monkeypatch.chdir(tmp_path)
    monkeypatch.setitem(loader_module.sys.modules, "__main__", _Main())

    paths = loader_module.default_search_paths()
    assert paths == [Path(os.getcwd()), entry.resolve(), loader_module.LIBRARY_DIR]


def test_default_search_paths_drops_duplicates(tmp_path, monkeypatch):
    monkeypatch.chdir(loader_module.LIBRARY_DIR)
    monkeypatch.setattr(loader_module, "entry_point_dir", lambda: None)
    assert loader_module.default_search_paths() == [Path(os.getcwd())]


def test_invalid_utf8_is_fatal(search_dirs):
    (search_dirs[0] / "config.json").write_bytes(b'{"a": "\xff\xfe"}')
    with pytest.raises(ConfigFileError) as exc_info:
        load_config()
    assert exc_info.value.context["path"].endswith("config.json")
