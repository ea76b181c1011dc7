import dataclasses
import json

import pytest

from kitchen_utils.settings import DEFAULT_SETTINGS, MatchSettings, load_settings


def test_defaults():
    assert DEFAULT_SETTINGS.partial_min_confidence == 60
    assert DEFAULT_SETTINGS.partial_max_confidence == 90
    assert DEFAULT_SETTINGS.fuzzy_min_confidence == 40
    assert DEFAULT_SETTINGS.fuzzy_max_confidence == 60
    assert DEFAULT_SETTINGS.availability_threshold == 50


@pytest.mark.parametrize(
    "overrides",
    [
        {"partial_max_confidence": 100},
        {"fuzzy_min_confidence": -1},
        {"fuzzy_max_confidence": 70},
        {"partial_min_confidence": 95},
        {"availability_threshold": 101},
        {"min_fuzzy_word_length": 0},
    ],
)
def test_invalid_settings_raise(overrides):
    with pytest.raises(ValueError):
        MatchSettings(**overrides)


def test_settings_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SETTINGS.availability_threshold = 10


def test_load_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"availability_threshold": 70, "min_fuzzy_word_length": 4}))

    settings = load_settings(path)

    assert settings.availability_threshold == 70
    assert settings.min_fuzzy_word_length == 4
    assert settings.partial_min_confidence == DEFAULT_SETTINGS.partial_min_confidence


def test_load_settings_unknown_key(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"global_confidence": 95}))

    with pytest.raises(ValueError, match="global_confidence"):
        load_settings(path)


def test_load_settings_requires_object(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]")

    with pytest.raises(ValueError):
        load_settings(path)


def test_load_settings_validates_values(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"fuzzy_max_confidence": 75}))

    with pytest.raises(ValueError):
        load_settings(path)
