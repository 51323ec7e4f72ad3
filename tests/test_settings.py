import pytest
from diceroll.engine.errors import SettingsError
from diceroll.engine.settings import Settings, load_settings

def test_missing_file_raises(tmp_path):
    path = tmp_path / "settings.json"
    with pytest.raises(SettingsError):
        load_settings(path)
    assert not path.exists()

def test_load_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text('{"strict_parse": true, "rng_seed": 42}', encoding="utf-8")
    s = load_settings(path)
    assert s.strict_parse is True
    assert s.warn_invalid is False
    assert s.rng_seed == 42

def test_load_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("warn_invalid: true\n", encoding="utf-8")
    assert load_settings(path) == Settings(warn_invalid=True)

def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "settings.yml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == Settings()

@pytest.mark.parametrize("name,text", [
    ("settings.json", "{not json"),
    ("settings.json", '{"rng_seed": "lots"}'),
    ("settings.yaml", "- just\n- a list\n"),
])
def test_invalid_settings_raise(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    with pytest.raises(SettingsError):
        load_settings(path)
