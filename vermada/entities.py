"""The kinds of entity placed on a stage and what they do each frame."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Any, Callable

from vermada.cjson import JsonNode, create_number, create_string
from vermada.defs import (
    FPS,
    MAX_NAME_LENGTH,
    PLAYER_MOVE_SPEED,
    Channel,
    Control,
    EntityFlag,
    EntityType,
    Facing,
    Sound,
    StageStatus,
)
from vermada.model import Entity, Stage

SOUND = "sound"
POSITIONAL_SOUND = "positional_sound"
PARTICLES = "particles"

CHURCH_IMAGE = "gfx/entities/church.png"
COIN_IMAGE = "gfx/entities/coin.png"
ITEM_IMAGE = "gfx/entities/item01.png"
PLATFORM_IMAGE = "gfx/entities/platform.png"
PLAYER_IMAGE = "gfx/entities/girl.png"
SPIKES_IMAGE = "gfx/entities/spikes.png"

CHURCH_SPLASH_BURSTS = 10
JUMP_SPEED = -22
PLATFORM_RISE = 48


@dataclass(frozen=True)
class Event:
    """Something an entity asks the game to do: play a sound, spawn particles."""

    kind: str
    args: tuple[Any, ...] = ()


@dataclass
class World:
    """What entity hooks reach: the stage, held controls, image sizes and events."""

    stage: Stage = field(default_factory=Stage)
    controls: set[Control] = field(default_factory=set)
    image_sizes: dict[str, tuple[int, int]] = field(default_factory=dict)
    default_image_size: tuple[int, int] = (48, 48)
    rng: random.Random = field(default_factory=random.Random)
    events: list[Event] = field(default_factory=list)

    def emit(self, kind: str, *args: Any) -> Event:
        """Record an event and return it."""
        event = Event(kind, tuple(args))
        self.events.append(event)
        return event

    def image_size(self, filename: str) -> tuple[int, int]:
        """Return the width and height of the image ``filename``."""
        return self.image_sizes.get(filename, self.default_image_size)

    def is_control(self, control: Control) -> bool:
        """Return True while ``control`` is held."""
        return control in self.controls


def _set_image(entity: Entity, world: World, filename: str) -> None:
    entity.image = filename
    entity.w, entity.h = world.image_size(filename)


def _is_player(other: Entity | None) -> bool:
    return other is not None and other.type == EntityType.PLAYER


def _positional_sound(world: World, sound: Sound, channel: Channel, source: Entity, other: Entity) -> None:
    listener = world.stage.player or other
    world.emit(POSITIONAL_SOUND, sound, channel, source.x, source.y, listener.x, listener.y)


def _vanish(world: Any) -> None:
    """A death that leaves nothing behind."""


def _truncate_name(text: str) -> str:
    return text[:MAX_NAME_LENGTH - 1]


def _slope(x1: float, y1: float, x2: float, y2: float) -> tuple[float, float]:
    """Step from ``(x2, y2)`` toward ``(x1, y1)`` whose larger component is 1."""
    steps = max(abs(x1 - x2), abs(y1 - y2))
    if steps == 0:
        return 0.0, 0.0
    return (x1 - x2) / steps, (y1 - y2) / steps


def _glow(entity: Entity) -> None:
    entity.light.r = 255
    entity.light.b = 255
    entity.light.a = 64


@dataclass(eq=False)
class Church(Entity):
    """The goal of a stage: reaching it completes the stage."""

    type_name: str = "church"
    type: EntityType | None = EntityType.CHURCH
    flags: EntityFlag = EntityFlag.NO_ENT_CLIP | EntityFlag.STATIC
    anim_timer: int = 0
    requires_plunger: bool = False
    frame_num: int = 0

    def _init(self, world: World) -> None:
        _set_image(self, world, CHURCH_IMAGE)

    def touch(self, world: World, other: Entity | None) -> None:
        if not _is_player(other):
            return
        self.anim_timer = FPS
        other.health = 0
        other.die = _vanish
        stage = world.stage
        stage.status = StageStatus.COMPLETE
        stage.next_stage_timer = FPS * 3
        centre_x = self.x + self.w // 2
        centre_y = self.y + self.h // 2
        for _ in range(CHURCH_SPLASH_BURSTS):
            world.emit(PARTICLES, "church_splash", centre_x, centre_y)
        _positional_sound(world, Sound.FINISH, Channel.PLAYER, self, other)


@dataclass(eq=False)
class FinalChurch(Entity):
    """The last church: reaching it finishes the game."""

    type_name: str = "finalChurch"
    type: EntityType | None = EntityType.CHURCH
    flags: EntityFlag = EntityFlag.NO_ENT_CLIP | EntityFlag.STATIC
    anim_timer: int = 0
    requires_plunger: bool = False
    frame_num: int = 0

    def _init(self, world: World) -> None:
        self.facing = Facing.LEFT
        _set_image(self, world, CHURCH_IMAGE)

    def touch(self, world: World, other: Entity | None) -> None:
        if _is_player(other):
            world.stage.status = StageStatus.GAME_COMPLETE


def _collect(entity: Entity, world: World, other: Entity, sound: Sound, channel: Channel) -> bool:
    if entity.health <= 0 or not _is_player(other):
        return False
    entity.health = 0
    _positional_sound(world, sound, channel, entity, other)
    return True


def _all_collected(stage: Stage) -> bool:
    return stage.items == stage.total_items and stage.coins == stage.total_coins


@dataclass(eq=False)
class Coin(Entity):
    """A bobbing coin the player picks up."""

    type_name: str = "coin"
    type: EntityType | None = EntityType.ITEM
    flags: EntityFlag = EntityFlag.WEIGHTLESS | EntityFlag.NO_ENT_CLIP | EntityFlag.STATIC
    bob_value: float = 0.0

    def _init(self, world: World) -> None:
        self.bob_value = float(world.rng.randrange(10))
        _set_image(self, world, COIN_IMAGE)
        _glow(self)
        world.stage.total_coins += 1

    def tick(self, world: World) -> None:
        self.bob_value += 0.1
        self.y += math.sin(self.bob_value) * 0.25

    def touch(self, world: World, other: Entity | None) -> None:
        if not _collect(self, world, other, Sound.COIN, Channel.COIN):
            return
        world.stage.coins += 1
        if _all_collected(world.stage):
            _positional_sound(world, Sound.FANFARE, Channel.COIN, self, other)

    def die(self, world: World) -> None:
        world.emit(PARTICLES, "coin", self.x + self.w // 2, self.y + self.h // 2)


@dataclass(eq=False)
class Item(Entity):
    """A collectable item whose picture is chosen in the stage file."""

    type_name: str = "item"
    type: EntityType | None = EntityType.ITEM
    flags: EntityFlag = EntityFlag.WEIGHTLESS | EntityFlag.NO_ENT_CLIP | EntityFlag.STATIC
    bob_value: float = 0.0
    texture_filename: str = _truncate_name(ITEM_IMAGE)

    def _init(self, world: World) -> None:
        self.bob_value = float(world.rng.randrange(10))
        _set_image(self, world, self.texture_filename)
        _glow(self)
        world.stage.total_items += 1

    def tick(self, world: World) -> None:
        self.bob_value += 0.1
        self.y += math.sin(self.bob_value) * 0.5

    def touch(self, world: World, other: Entity | None) -> None:
        if not _collect(self, world, other, Sound.ITEM, Channel.ITEM):
            return
        world.stage.items += 1
        if _all_collected(world.stage):
            _positional_sound(world, Sound.FANFARE, Channel.ITEM, self, other)

    def die(self, world: World) -> None:
        world.emit(PARTICLES, "powerup", self.x + self.w // 2, self.y + self.h // 2)

    def load(self, world: World, data: JsonNode) -> None:
        self.texture_filename = _truncate_name(data["textureFilename"].value_string or "")
        _set_image(self, world, self.texture_filename)

    def save(self, data: JsonNode) -> None:
        data.set("textureFilename", create_string(self.texture_filename))


@dataclass(eq=False)
class Platform(Entity):
    """A lift that travels between a start and an end point, pausing at each."""

    type_name: str = "platform"
    type: EntityType | None = EntityType.STRUCTURE
    flags: EntityFlag = EntityFlag.SOLID | EntityFlag.WEIGHTLESS | EntityFlag.PUSH
    sx: float = 0.0
    sy: float = 0.0
    ex: float = 0.0
    ey: float = 0.0
    speed: int = 2
    pause: int = FPS
    pause_timer: int = 0
    enabled: bool = False
    travel_dx: float = 0.0
    travel_dy: float = 0.0

    def _init(self, world: World) -> None:
        self.sx = self.x
        self.sy = self.y
        self.ex = self.x
        self.ey = self.y - PLATFORM_RISE
        self.pause = FPS
        self.speed = 2
        _set_image(self, world, PLATFORM_IMAGE)

    def _near(self, x: float, y: float) -> bool:
        return abs(self.x - x) < self.speed and abs(self.y - y) < self.speed

    def _arrive(self, target_x: float, target_y: float) -> None:
        self.travel_dx = self.travel_dy = self.dx = self.dy = 0.0
        self.flags |= EntityFlag.STATIC
        self.pause_timer -= 1
        if self.pause_timer <= 0:
            step_x, step_y = _slope(target_x, target_y, self.x, self.y)
            self.dx = step_x * self.speed
            self.dy = step_y * self.speed
            self.travel_dx = self.dx
            self.travel_dy = self.dy
            self.pause_timer = self.pause
            self.flags &= ~EntityFlag.STATIC

    def tick(self, world: World) -> None:
        self.dx = self.travel_dx
        self.dy = self.travel_dy
        if not self.enabled:
            self.dx = self.dy = 0.0
            return
        if self._near(self.sx, self.sy):
            self._arrive(self.ex, self.ey)
        if self._near(self.ex, self.ey):
            self._arrive(self.sx, self.sy)

    def activate(self, world: World, active: bool) -> None:
        self.enabled = not self.enabled

    def load(self, world: World, data: JsonNode) -> None:
        self.sx = data["sx"].value_int
        self.sy = data["sy"].value_int
        self.ex = data["ex"].value_int
        self.ey = data["ey"].value_int
        self.pause = data["pause"].value_int
        self.speed = data["speed"].value_int
        self.enabled = bool(data["enabled"].value_int)
        self.x = self.sx
        self.y = self.sy
        self.pause_timer = self.pause

    def save(self, data: JsonNode) -> None:
        data.set("sx", create_number(self.sx))
        data.set("sy", create_number(self.sy))
        data.set("ex", create_number(self.ex))
        data.set("ey", create_number(self.ey))
        data.set("pause", create_number(self.pause))
        data.set("speed", create_number(self.speed))
        data.set("enabled", create_number(int(self.enabled)))


@dataclass(eq=False)
class Player(Entity):
    """The character steered by the controls."""

    type_name: str = "player"
    type: EntityType | None = EntityType.PLAYER
    action: int = 0
    advance_data: int = 0
    prev_x: float = 0.0
    prev_y: float = 0.0

    def _init(self, world: World) -> None:
        world.stage.player = self
        _set_image(self, world, PLAYER_IMAGE)
        self.prev_x = self.x
        self.prev_y = self.y

    def tick(self, world: World) -> None:
        self.prev_x = self.x
        self.prev_y = self.y
        self.dx = 0.0
        self.action = 0
        if self.image is not None:
            self.w, self.h = world.image_size(self.image)
        if self.health <= 0:
            return
        if world.is_control(Control.LEFT):
            self.dx = -PLAYER_MOVE_SPEED
            self.facing = Facing.LEFT
        if world.is_control(Control.RIGHT):
            self.dx = PLAYER_MOVE_SPEED
            self.facing = Facing.RIGHT
        if world.is_control(Control.JUMP) and self.is_on_ground:
            self.dy = JUMP_SPEED
            world.emit(SOUND, Sound.JUMP, Channel.PLAYER)

    def die(self, world: World) -> None:
        world.emit(PARTICLES, "death", self.x, self.y)
        world.emit(SOUND, Sound.DEATH, Channel.PLAYER)
        world.stage.status = StageStatus.FAILED

    def load(self, world: World, data: JsonNode) -> None:
        self.facing = Facing.LEFT if data["facing"].value_string == "left" else Facing.RIGHT

    def save(self, data: JsonNode) -> None:
        data.set("facing", create_string("left" if self.facing == Facing.LEFT else "right"))


@dataclass(eq=False)
class Spikes(Entity):
    """A trap that kills the player on reaching its base."""

    type_name: str = "spikes"
    type: EntityType | None = EntityType.TRAP
    flags: EntityFlag = EntityFlag.NO_ENT_CLIP | EntityFlag.STATIC

    def _init(self, world: World) -> None:
        _set_image(self, world, SPIKES_IMAGE)

    def touch(self, world: World, other: Entity | None) -> None:
        if _is_player(other) and other.y + other.h >= self.y + self.h:
            other.health = 0


_KINDS: dict[str, Callable[[], Entity]] = {
    "church": Church,
    "coin": Coin,
    "finalChurch": FinalChurch,
    "item": Item,
    "platform": Platform,
    "player": Player,
    "spikes": Spikes,
}


def create_entity(type_name: str, world: World, x: float, y: float) -> Entity:
    """Create and set up an entity of kind ``type_name`` at ``(x, y)``.

    Raises ValueError for an unknown kind.
    """
    try:
        kind = _KINDS[type_name]
    except KeyError:
        raise ValueError(f"unknown entity type {type_name!r}") from None
    entity = kind()
    entity.x = x
    entity.y = y
    entity._init(world)
    return entity