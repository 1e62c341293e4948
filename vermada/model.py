"""Data held by a running game: entities, the stage, saved progress and settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from vermada.cjson import JsonNode
from vermada.defs import MAP_HEIGHT, MAP_WIDTH, Control, EntityFlag, EntityType, StageStatus


@dataclass
class Light:
    """Glow drawn around an entity."""

    x: int = 0
    y: int = 0
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0
    foreground: bool = False


@dataclass(eq=False)
class Entity:
    """Something placed on a stage.

    The hook methods do nothing here; kinds of entity override the ones they
    react to.  ``world`` is whatever object the hooks use to reach the stage,
    sounds and input.
    """

    type_name: str = ""
    type: EntityType | None = None
    name: str = ""
    id: int = 0
    x: float = 0.0
    y: float = 0.0
    w: int = 0
    h: int = 0
    facing: int = 0
    dx: float = 0.0
    dy: float = 0.0
    health: int = 1
    is_on_ground: bool = False
    background: bool = False
    image: str | None = None
    light: Light = field(default_factory=Light)
    flags: EntityFlag = EntityFlag.NONE

    def tick(self, world: Any) -> None:
        """Advance by one frame."""

    def touch(self, world: Any, other: Entity | None) -> None:
        """React to touching ``other`` (None for the map)."""

    def die(self, world: Any) -> None:
        """React to being removed after running out of health."""

    def activate(self, world: Any, active: bool) -> None:
        """React to a switch or trigger."""

    def load(self, world: Any, data: JsonNode) -> None:
        """Read extra settings from a stage file entry."""

    def save(self, data: JsonNode) -> None:
        """Write extra settings into a stage file entry."""

    def contains_point(self, x: float, y: float) -> bool:
        """Return True when a one-pixel box at ``(x, y)`` overlaps the entity."""
        return (
            max(x, self.x) < min(x + 1, self.x + self.w)
            and max(y, self.y) < min(y + 1, self.y + self.h)
        )


@dataclass
class Camera:
    """Top-left corner of the view and its horizontal limits."""

    x: int = 0
    y: int = 0
    min_x: int = 0
    max_x: int = 0


def _empty_map() -> list[list[int]]:
    return [[0] * MAP_HEIGHT for _ in range(MAP_WIDTH)]


@dataclass
class Stage:
    """One level: tile map, entities, counters and camera.

    ``map`` is indexed ``map[x][y]``.
    """

    num: int = 0
    map: list[list[int]] = field(default_factory=_empty_map)
    tiles: dict[int, str] = field(default_factory=dict)
    entities: list[Entity] = field(default_factory=list)
    player: Entity | None = None
    time: int = 0
    time_limit: int = 0
    coins: int = 0
    total_coins: int = 0
    items: int = 0
    total_items: int = 0
    frame: int = 0
    reset: bool = False
    status: StageStatus = StageStatus.INCOMPLETE
    next_stage_timer: int = 0
    tips: list[str] = field(default_factory=list)
    camera: Camera = field(default_factory=Camera)

    def add_entity(self, entity: Entity) -> Entity:
        """Append ``entity`` to the stage and return it."""
        self.entities.append(entity)
        return entity

    def remove_entity(self, entity: Entity) -> None:
        """Remove ``entity``; raises ValueError when it is not on the stage."""
        for index, candidate in enumerate(self.entities):
            if candidate is entity:
                del self.entities[index]
                return
        raise ValueError("entity is not on this stage")

    def entities_at(self, x: float, y: float) -> list[Entity]:
        """Return the entities covering the point ``(x, y)``, in stage order."""
        return [entity for entity in self.entities if entity.contains_point(x, y)]


@dataclass
class StageMeta:
    """What was collected on one stage."""

    stage_num: int = 0
    coins: int = 0
    coins_found: int = 0
    items: int = 0
    items_found: int = 0


@dataclass
class Game:
    """Progress across stages."""

    num_stages: int = 0
    stages_complete: int = 0
    stage_metas: list[StageMeta] = field(default_factory=list)


def _unbound_controls() -> dict[Control, int]:
    return {control: 0 for control in Control}


@dataclass
class Config:
    """Settings read from the configuration file."""

    win_width: int = 0
    win_height: int = 0
    sound_volume: int = 0
    music_volume: int = 0
    fullscreen: bool = False
    tips: bool = False
    key_controls: dict[Control, int] = field(default_factory=_unbound_controls)
    joypad_controls: dict[Control, int] = field(default_factory=_unbound_controls)
    deadzone: int = 0