import json

import pytest

from vermada.cjson import JsonParseError
from vermada.config import DEADZONE_SCALE, DEFAULT_DEADZONE, load_config, parse_config
from vermada.defs import Control


def _document(**overrides):
    doc = {
        "soundVolume": 80,
        "musicVolume": 40,
        "winWidth": 1280,
        "winHeight": 720,
        "fullscreen": 1,
        "tips": 0,
        "keyControls": {"left": 4, "right": 7, "jump": 44, "restart": 21, "pause": 19},
        "joypadControls": {"left": 13, "right": 14, "jump": 0, "restart": 6, "pause": 4},
    }
    doc.update(overrides)
    return doc


def test_parse_reads_every_setting():
    config = parse_config(json.dumps(_document(deadzone=10)))
    assert config.sound_volume == 80
    assert config.music_volume == 40
    assert (config.win_width, config.win_height) == (1280, 720)
    assert config.fullscreen is True
    assert config.tips is False
    assert config.deadzone == 10 * DEADZONE_SCALE
    assert config.key_controls[Control.JUMP] == 44
    assert config.joypad_controls[Control.RIGHT] == 14


def test_unlisted_controls_stay_unbound():
    config = parse_config(json.dumps(_document()))
    assert config.key_controls[Control.UP] == 0
    assert config.joypad_controls[Control.DOWN] == 0


def test_deadzone_defaults():
    config = parse_config(json.dumps(_document()))
    assert config.deadzone == DEFAULT_DEADZONE * DEADZONE_SCALE


def test_member_names_ignore_case():
    doc = _document()
    doc["SOUNDVOLUME"] = doc.pop("soundVolume")
    assert parse_config(json.dumps(doc)).sound_volume == 80


def test_missing_setting_raises():
    doc = _document()
    del doc["musicVolume"]
    with pytest.raises(KeyError):
        parse_config(json.dumps(doc))


def test_missing_control_raises():
    doc = _document()
    del doc["keyControls"]["pause"]
    with pytest.raises(KeyError):
        parse_config(json.dumps(doc))


def test_invalid_json_raises():
    with pytest.raises(JsonParseError):
        parse_config("not json")


def test_load_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(_document()), encoding="utf-8")
    assert load_config(path) == parse_config(json.dumps(_document()))