"""Game-wide constants, entity flags and the enumerations shared by every module."""

from __future__ import annotations

import enum

PI = 3.14159265358979323846

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720

CONFIG_FILENAME = "config.json"
SAVE_FILENAME = "game.json"

FPS = 60

MAX_TILES = 255
TILE_SIZE = 48

MAP_WIDTH = 108
MAP_HEIGHT = 15

MAP_RENDER_WIDTH = 27
MAP_RENDER_HEIGHT = 15

PLAYER_MOVE_SPEED = 6

MAX_TIPS = 12
MAX_QT_CANDIDATES = 128

MAX_NAME_LENGTH = 32
MAX_DESCRIPTION_LENGTH = 256
MAX_LINE_LENGTH = 1024
MAX_FILENAME_LENGTH = 256
MAX_PATH_LENGTH = 4096

MAX_KEYBOARD_KEYS = 350
MAX_MOUSE_BUTTONS = 6

NUM_ATLAS_BUCKETS = 2

JOYPAD_AXIS_X = 0
JOYPAD_AXIS_Y = 1
JOYPAD_AXIS_MAX = 2


class EntityFlag(enum.IntFlag):
    """Behaviour switches carried by an entity."""

    NONE = 0
    WEIGHTLESS = 2 << 0
    SOLID = 2 << 1
    PUSH = 2 << 2
    NO_WORLD_CLIP = 2 << 3
    NO_MAP_BOUNDS = 2 << 4
    NO_ENT_CLIP = 2 << 5
    INVISIBLE = 2 << 6
    STATIC = 2 << 7


class EntityType(enum.IntEnum):
    """Broad category of an entity."""

    PLAYER = 0
    CHURCH = 1
    ITEM = 2
    STRUCTURE = 3
    TRAP = 4
    DECORATION = 5


class Wipe(enum.IntEnum):
    """Screen transition styles."""

    FADE = 0
    IN = 1
    OUT = 2


class WidgetType(enum.IntEnum):
    """Kinds of menu widget."""

    BUTTON = 0
    SELECT = 1
    INPUT = 2


class TextAlign(enum.IntEnum):
    """Horizontal text alignment."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class Facing(enum.IntEnum):
    """Direction an entity faces."""

    LEFT = 0
    RIGHT = 1


class Sound(enum.IntEnum):
    """Sound effects, in the order they are loaded."""

    JUMP = 0
    COIN = 1
    CLOCK = 2
    EXPIRED = 3
    NUDGE = 4
    FANFARE = 5
    FINISH = 6
    WIPE = 7
    NEGATIVE = 8
    ITEM = 9
    DEATH = 10
    TIP = 11


class Channel(enum.IntEnum):
    """Mixer channels reserved for groups of sounds."""

    PLAYER = 0
    COIN = 1
    ITEM = 2
    CLOCK = 3
    STRUCTURE = 4
    WIDGET = 5


class StageStatus(enum.IntEnum):
    """Progress of the stage being played."""

    INCOMPLETE = 0
    COMPLETE = 1
    FAILED = 2
    GAME_COMPLETE = 3


class Control(enum.IntEnum):
    """Player actions that keys and joypad buttons are bound to."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3
    JUMP = 4
    RESTART = 5
    PAUSE = 6