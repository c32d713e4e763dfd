import json

from services.config_manager import ConfigManager


def test_defaults_when_no_file(isolated_config):
    manager = ConfigManager()

    assert manager.config_file == isolated_config / "config.json"
    assert manager.character_base() == 1
    assert manager.short_hash_length() == 7
    assert manager.language_overrides() == {}


def test_save_and_reload(isolated_config):
    manager = ConfigManager()
    manager.set("languages", {"tf": "hcl"})

    reloaded = ConfigManager()
    assert reloaded.language_overrides() == {"tf": "hcl"}
    assert json.loads((isolated_config / "config.json").read_text())["languages"] == {"tf": "hcl"}


def test_corrupt_file_falls_back_to_defaults(isolated_config):
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text("{not json")

    assert ConfigManager().get_config()["git"] == {"shortHashLength": 7}


def test_explicit_directory_wins(tmp_path):
    manager = ConfigManager(str(tmp_path / "explicit"))

    assert manager.config_file == tmp_path / "explicit" / "config.json"


def test_singleton():
    assert ConfigManager.get_instance() is ConfigManager.get_instance()
