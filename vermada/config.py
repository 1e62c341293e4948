"""Reading the game's settings file."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from vermada.cjson import JsonNode, parse
from vermada.defs import Control
from vermada.model import Config

DEFAULT_DEADZONE = 64
DEADZONE_SCALE = 256

_CONTROL_KEYS = {
    Control.LEFT: "left",
    Control.RIGHT: "right",
    Control.JUMP: "jump",
    Control.RESTART: "restart",
    Control.PAUSE: "pause",
}


def _int(node: JsonNode, name: str) -> int:
    return node[name].value_int


def _int_or(node: JsonNode, name: str, default: int) -> int:
    item = node.get_item(name)
    return default if item is None else item.value_int


def _read_controls(node: JsonNode, into: dict[Control, int]) -> None:
    for control, key in _CONTROL_KEYS.items():
        into[control] = _int(node, key)


def parse_config(text: str) -> Config:
    """Build a :class:`Config` from the JSON ``text``.

    Member names are matched without regard to case.  A missing setting
    raises KeyError, except ``deadzone``, which defaults to 64; the deadzone
    is stored scaled by 256.
    """
    root = parse(text)
    config = Config(
        sound_volume=_int(root, "soundVolume"),
        music_volume=_int(root, "musicVolume"),
        win_width=_int(root, "winWidth"),
        win_height=_int(root, "winHeight"),
        fullscreen=bool(_int(root, "fullscreen")),
        tips=bool(_int(root, "tips")),
        deadzone=_int_or(root, "deadzone", DEFAULT_DEADZONE) * DEADZONE_SCALE,
    )
    _read_controls(root["keyControls"], config.key_controls)
    _read_controls(root["joypadControls"], config.joypad_controls)
    return config


def load_config(path: str | PathLike[str]) -> Config:
    """Read and parse the settings file at ``path``."""
    return parse_config(Path(path).read_text(encoding="utf-8"))