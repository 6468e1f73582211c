import json

from installer.services.settings_file import SettingsFileStore, settings_write_warning


def test_read_missing_file_returns_default(tmp_path):
    store = SettingsFileStore(tmp_path / "settings.json")
    assert store.read("config_directories.staging") is None
    assert store.read("install_profile", "standard") == "standard"


def test_write_then_read_round_trip(tmp_path):
    store = SettingsFileStore(tmp_path / "site" / "settings.json")

    assert store.write("config_directories.staging", "/custom/staging") is True
    assert store.read("config_directories.staging") == "/custom/staging"
    assert SettingsFileStore(store.path).read("config_directories.staging") == "/custom/staging"


def test_write_keeps_other_keys(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"install_profile": "standard", "config_directories": {"sync": "/sync"}}))
    store = SettingsFileStore(path)

    store.write("config_directories.staging", "/custom/staging")

    data = json.loads(path.read_text())
    assert data == {
        "install_profile": "standard",
        "config_directories": {"sync": "/sync", "staging": "/custom/staging"},
    }


def test_rewriting_same_value_is_a_no_op(tmp_path):
    store = SettingsFileStore(tmp_path / "settings.json")
    store.write("install_profile", "standard")

    assert store.write("install_profile", "standard") is False
    assert store.read("install_profile") == "standard"


def test_no_temp_files_left_behind(tmp_path):
    store = SettingsFileStore(tmp_path / "settings.json")
    store.write("install_profile", "standard")
    store.write("install_profile", "minimal")

    assert [p.name for p in tmp_path.iterdir()] == ["settings.json"]


def test_default_path_comes_from_settings(site_settings):
    assert SettingsFileStore().path == site_settings.SITE_SETTINGS_FILE


def test_warning_while_settings_are_writable(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{}")
    assert settings_write_warning(path) is True
