import dataclasses

import pytest

from guessgame import ConfigurationError, GameSettings


def test_defaults():
    settings = GameSettings()
    assert (settings.min_number, settings.max_number, settings.max_attempts) == (
        1,
        100,
        5,
    )


def test_immutable():
    settings = GameSettings(1, 10, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.max_attempts = 10


def test_single_number_range():
    assert GameSettings(5, 5, 1).contains(5)


def test_contains():
    settings = GameSettings(1, 10, 3)
    assert settings.contains(1)
    assert settings.contains(10)
    assert not settings.contains(0)
    assert not settings.contains(11)


def test_zero_attempts():
    assert GameSettings(1, 10, 0).max_attempts == 0


def test_invalid():
    with pytest.raises(ConfigurationError):
        GameSettings(10, 1, 3)
    with pytest.raises(ConfigurationError):
        GameSettings(1, 10, -1)
    with pytest.raises(ConfigurationError):
        GameSettings("1", 10, 3)
    with pytest.raises(ConfigurationError):
        GameSettings(1, 10, True)


def test_from_json(tmpdir):
    cfg = tmpdir.join("settings.json")
    cfg.write('{"minimum": 1, "maximum": 10, "attempts": 3}')
    assert GameSettings.from_file(cfg.strpath) == GameSettings(1, 10, 3)


def test_from_yaml(tmpdir):
    cfg = tmpdir.join("settings.yaml")
    cfg.write("minimum: -5\nmaximum: 5")
    assert GameSettings.from_file(cfg.strpath) == GameSettings(-5, 5, 5)


def test_from_toml(tmpdir):
    cfg = tmpdir.join("settings.toml")
    cfg.write("attempts = 8\n")
    assert GameSettings.from_file(cfg.strpath) == GameSettings(1, 100, 8)


def test_from_cfg(tmpdir):
    cfg = tmpdir.join("settings.cfg")
    cfg.write("[default]\nminimum = 2\nmaximum = 20\nattempts = 4\n")
    assert GameSettings.from_file(cfg.strpath) == GameSettings(2, 20, 4)


def test_from_file_invalid(tmpdir):
    cfg = tmpdir.join("settings.json")
    cfg.write('{"minimum": 50, "maximum": 10}')
    with pytest.raises(ConfigurationError):
        GameSettings.from_file(cfg.strpath)

    cfg.write('{"attempts": "many"}')
    with pytest.raises(ConfigurationError):
        GameSettings.from_file(cfg.strpath)

    cfg.write("[1, 2, 3]")
    with pytest.raises(ConfigurationError):
        GameSettings.from_file(cfg.strpath)

    cfg.write('{"minimum": 1.9, "maximum": 10, "attempts": 3.7}')
    with pytest.raises(ConfigurationError):
        GameSettings.from_file(cfg.strpath)

    cfg.write('{"attempts": 3.0}')
    with pytest.raises(ConfigurationError):
        GameSettings.from_file(cfg.strpath)

    cfg.write('{"attempts": true}')
    with pytest.raises(ConfigurationError):
        GameSettings.from_file(cfg.strpath)


def test_from_cfg_invalid(tmpdir):
    cfg = tmpdir.join("settings.cfg")
    cfg.write("[default]\nattempts = 3.7\n")
    with pytest.raises(ConfigurationError):
        GameSettings.from_file(cfg.strpath)


def test_from_file_missing(tmpdir):
    with pytest.raises(FileNotFoundError):
        GameSettings.from_file(tmpdir.join("nothere.json").strpath)


def test_from_file_unknown_format(tmpdir):
    cfg = tmpdir.join("settings.whatisthis")
    cfg.write("minimum: 1")
    with pytest.raises(OSError):
        GameSettings.from_file(cfg.strpath)
