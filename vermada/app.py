"""Start-up, frame pacing and the small pieces of the title, options and ending screens."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Sequence

from vermada.defs import FPS
from vermada.model import Stage

VERSION = 1.0
REVISION = 1

FRAME_MILLISECONDS = 16
FRAME_REMAINDER = 0.667

VOLUME_SLIDER_STEP = 12.8
MIXER_SCALE = 1.28

ENDING_TICKS = FPS * 5
ENDING_CLOCK = FPS * 60 * 60
ENDING_MESSAGES = (
    "Enhorabona, ho has aconseguit!",
    "Visca Binissalem, i visca Sa Vermada!",
)

TITLE = "title"
STAGE = "stage"
ENDING = "ending"

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_WINDOW_SIZE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)[ \t\n\v\f\r]*x[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class FrameTimer:
    """Paces frames at 16 ms plus a carried fraction, about 60 a second."""

    then: int = 0
    remainder: float = 0.0

    def next_wait(self, now: int) -> int:
        """Return how many milliseconds to sleep before the next frame.

        ``now`` is the current tick count.  The timer assumes the sleep
        takes exactly the time returned.
        """
        wait = int(FRAME_MILLISECONDS + self.remainder)
        self.remainder -= int(self.remainder)
        wait -= now - self.then
        wait = max(wait, 1)
        self.remainder += FRAME_REMAINDER
        self.then = now + wait
        return wait


@dataclass
class LaunchOptions:
    """What the command line asked for."""

    stage_num: int = 0
    debug: bool = False
    requested: str = TITLE

    @property
    def start_scene(self) -> str:
        """The scene the game opens on: ``title``, ``stage`` or ``ending``."""
        return TITLE if self.stage_num == 0 else self.requested


def parse_command_line(argv: Sequence[str]) -> LaunchOptions:
    """Read ``-stage N``, ``-ending`` and ``-debug`` from the arguments.

    ``argv`` excludes the program name.  Later options override earlier
    ones; ``-stage`` without a number raises ValueError.
    """
    options = LaunchOptions()
    args = list(argv)
    for index, arg in enumerate(args):
        if arg == "-stage":
            if index + 1 >= len(args):
                raise ValueError("-stage needs a stage number")
            options.stage_num = _atoi(args[index + 1])
            options.requested = STAGE
        elif arg == "-ending":
            options.stage_num = -1
            options.requested = ENDING
        if arg == "-debug":
            options.debug = True
    return options


def window_size_index(options: Sequence[str], width: int, height: int) -> int | None:
    """Return the index of the ``"W x H"`` option matching the size, or None."""
    wanted = "%d x %d" % (width, height)
    for index, option in enumerate(options):
        if option == wanted:
            return index
    return None


def parse_window_size(text: str) -> tuple[int, int]:
    """Read a ``"W x H"`` option into a width and height."""
    match = _WINDOW_SIZE.match(text)
    if match is None:
        raise ValueError(f"not a window size: {text!r}")
    return int(match.group(1)), int(match.group(2))


def volume_to_slider(volume: int) -> int:
    """Return the slider position (0 to 10) for a volume of 0 to 128."""
    return int(volume / VOLUME_SLIDER_STEP)


def volume_to_mixer(volume: int) -> int:
    """Return the mixer volume (0 to 128) for a setting of 0 to 100."""
    return int(volume * MIXER_SCALE)


def version_label(version: float = VERSION, revision: int = REVISION) -> str:
    """Return the version text shown on the title screen."""
    return "v%.1f.%d" % (version, revision)


def _frozen(world: Any) -> None:
    """A tick that ignores the controls."""


@dataclass
class EndingScene:
    """The closing scene: the player stands still while the message shows."""

    stage: Stage
    timeout: int = field(default=ENDING_TICKS)

    def __post_init__(self) -> None:
        if self.stage.player is not None:
            self.stage.player.tick = _frozen

    @property
    def show_message(self) -> bool:
        """True while the congratulations are on screen."""
        return self.timeout > 0

    def tick(self) -> bool:
        """Advance one frame; return True once the credits should start."""
        self.stage.time = ENDING_CLOCK
        self.timeout -= 1
        return self.timeout <= 0