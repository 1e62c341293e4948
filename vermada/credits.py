"""The scrolling credits: reading the credits file and moving the lines."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Iterator

from vermada.defs import FPS, SCREEN_HEIGHT

LINE_HEIGHT = 32
BLANK_LINE_HEIGHT = 48
STOP_OFFSET = 100
HOLD_TICKS = FPS * 2
TOP_MARGIN = 48

_LINE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)[ \t\n\v\f\r]*(.*)", re.DOTALL)


@dataclass
class Credit:
    """One line of credits; ``size`` scales both the font and the spacing."""

    text: str
    size: int
    y: int


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def _parse_line(line: str) -> tuple[int, str]:
    match = _LINE.match(line)
    if match is None:
        return 0, ""
    return int(match.group(1)), match.group(2)


def parse_credits(text: str) -> list[Credit]:
    """Lay out credit lines of the form ``<size> <text>``.

    The first line starts just below the screen.  Each credit advances the
    next position by 32 times its size; a line shorter than two characters
    is a gap of 48.
    """
    credits: list[Credit] = []
    y = SCREEN_HEIGHT
    for line in _lines(text):
        if len(line) > 1:
            size, words = _parse_line(line)
            credits.append(Credit(words, size, y))
            y += LINE_HEIGHT * size
        else:
            y += BLANK_LINE_HEIGHT
    return credits


def load_credits(path: str | PathLike[str]) -> list[Credit]:
    """Read and lay out the credits file at ``path``."""
    return parse_credits(Path(path).read_text(encoding="utf-8"))


@dataclass
class CreditsRoll:
    """Scrolls credits up one pixel a frame until the last is near the bottom,
    then holds for two seconds."""

    credits: list[Credit]
    scrolling: bool = True
    timeout: int = field(default=HOLD_TICKS)

    def tick(self, skip_pressed: bool = False) -> bool:
        """Advance one frame; return True when the credits are over."""
        if self.scrolling:
            for credit in self.credits:
                credit.y -= 1
            if self.credits and self.credits[-1].y <= SCREEN_HEIGHT - STOP_OFFSET:
                self.scrolling = False
        if not self.scrolling:
            self.timeout -= 1
        return self.timeout <= 0 or skip_pressed

    def visible(self) -> Iterator[Credit]:
        """Yield the credits currently on screen."""
        for credit in self.credits:
            if -TOP_MARGIN < credit.y < SCREEN_HEIGHT:
                yield credit