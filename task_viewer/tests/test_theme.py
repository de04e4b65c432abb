import json

import pytest

from task_viewer.models.theme import DARK, LIGHT, ThemePreference, icon


def test_defaults_to_light_without_file(tmp_path):
    assert ThemePreference(tmp_path / "theme.json").load() == LIGHT


def test_toggle_persists(tmp_path):
    path = tmp_path / "nested" / "theme.json"
    pref = ThemePreference(path)

    assert pref.toggle() == DARK
    assert json.loads(path.read_text()) == {"theme": "dark"}
    assert ThemePreference(path).load() == DARK

    assert pref.toggle() == LIGHT
    assert ThemePreference(path).load() == LIGHT


def test_garbage_file_reads_as_light(tmp_path):
    path = tmp_path / "theme.json"

    path.write_text("{not json")
    assert ThemePreference(path).load() == LIGHT

    path.write_text(json.dumps({"theme": "sepia"}))
    assert ThemePreference(path).load() == LIGHT

    path.write_text(json.dumps(["dark"]))
    assert ThemePreference(path).load() == LIGHT


def test_save_rejects_unknown_theme(tmp_path):
    with pytest.raises(ValueError):
        ThemePreference(tmp_path / "theme.json").save("sepia")


def test_icon_offers_the_other_theme():
    assert icon(DARK) == "☀️"
    assert icon(LIGHT) == "🌙"
