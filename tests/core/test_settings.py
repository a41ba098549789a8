import json

from palettekit.core import settings


def test_missing_settings_file_is_empty():
    assert settings.load_settings() == {}
    assert settings.get_setting("palette", "Default") == "Default"


def test_set_setting_round_trips(tmp_path):
    settings.set_setting("palette", "Amethyst")

    assert settings.get_setting("palette") == "Amethyst"
    assert settings.settings_path().parent == tmp_path / "config"


def test_set_setting_keeps_other_keys():
    settings.set_setting("palette", "Amethyst")
    settings.set_setting("asset_dirs", ["/opt/icons"])

    data = settings.load_settings()
    assert data == {"palette": "Amethyst", "asset_dirs": ["/opt/icons"]}


def test_invalid_json_is_treated_as_empty():
    path = settings.settings_path()
    path.parent.mkdir(parents=True)
    path.write_text("{not json", encoding="utf-8")

    assert settings.load_settings() == {}


def test_non_object_json_is_treated_as_empty():
    path = settings.settings_path()
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(["palette"]), encoding="utf-8")

    assert settings.load_settings() == {}
