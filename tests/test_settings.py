import pytest
from pydantic import ValidationError

from levelgate import GlobalConfig, LevelGateSettings, Logger
from levelgate.config import get_config, reset_config

def test_defaults_with_empty_environment():
    settings = LevelGateSettings(_env_file=None)
    assert settings.filter == ""
    assert settings.max_level == 5
    assert settings.timestamps is False

def test_environment_variables_are_read(monkeypatch):
    monkeypatch.setenv("LEVELGATE_FILTER", "Worker,-Cache")
    monkeypatch.setenv("LEVELGATE_MAX_LEVEL", "3")
    monkeypatch.setenv("LEVELGATE_TIMESTAMPS", "true")
    settings = LevelGateSettings(_env_file=None)
    assert settings.filter == "Worker,-Cache"
    assert settings.max_level == 3
    assert settings.timestamps is True

def test_max_level_out_of_range_is_rejected(monkeypatch):
    monkeypatch.setenv("LEVELGATE_MAX_LEVEL", "9")
    with pytest.raises(ValidationError):
        LevelGateSettings(_env_file=None)

def test_env_file_is_read(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("LEVELGATE_FILTER=-Noisy\nLEVELGATE_TIMESTAMPS=1\n")
    settings = LevelGateSettings(_env_file=env_file)
    assert settings.filter == "-Noisy"
    assert settings.timestamps is True

def test_config_from_settings():
    settings = LevelGateSettings(_env_file=None, filter="A,-B", max_level=2, timestamps=True)
    config = GlobalConfig.from_settings(settings)
    assert config.allow_list == ["A"]
    assert config.deny_list == ["B"]
    assert config.max_level == 2
    assert config.prepend_timestamp is True

def test_default_config_is_seeded_from_environment(monkeypatch, sink):
    monkeypatch.setenv("LEVELGATE_FILTER", "-Noisy")
    monkeypatch.setenv("LEVELGATE_MAX_LEVEL", "4")
    reset_config(LevelGateSettings(_env_file=None))
    assert get_config().deny_list == ["Noisy"]

    noisy = Logger("Noisy", "debug", sink=sink)
    assert noisy.level == 4
    noisy.error("dropped")
    Logger("Quiet", "debug", sink=sink).error("kept")
    assert sink.outputs == [["kept"]]

def test_dotenv_in_working_directory_is_ignored(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("LEVELGATE_FILTER=-Everything\nLEVELGATE_MAX_LEVEL=1\n")
    monkeypatch.chdir(tmp_path)
    settings = LevelGateSettings()
    assert settings.filter == ""
    assert settings.max_level == 5
