"""The stage editor: painting tiles, placing and moving entities, saving stages."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from vermada.cjson import JsonNode, create_array, create_number, create_object, create_string
from vermada.cjson_print import print_json
from vermada.defs import (
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_TILES,
    MAX_TIPS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TILE_SIZE,
    EntityFlag,
    EntityType,
)
from vermada.entities import Platform, World, create_entity
from vermada.model import Entity, Stage

log = logging.getLogger(__name__)

ENTITY_TYPES = ("player", "church", "finalChurch", "coin", "item", "platform", "spikes")
DEFAULT_TILE_IMAGE = "gfx/tilesets/brick.png"
DEFAULT_TIME_LIMIT = 3600
GRID = 8
CAMERA_DELAY = 3
CAMERA_MAX_X = MAP_WIDTH * TILE_SIZE - SCREEN_WIDTH + (TILE_SIZE - 64)
CAMERA_MAX_Y = MAP_HEIGHT * TILE_SIZE - SCREEN_HEIGHT


class EditorMode(enum.IntEnum):
    """What the mouse buttons act on."""

    TILE = 0
    ENT = 1
    PICK = 2


def stage_filename(num: int) -> str:
    """Return the relative path of the file that holds stage ``num``."""
    return "data/stages/%03d.json" % num


def map_string(stage: Stage) -> str:
    """Return the tile map as space-separated numbers, row by row."""
    return "".join(
        "%d " % stage.map[x][y] for y in range(MAP_HEIGHT) for x in range(MAP_WIDTH)
    )


def _snap(value: float) -> int:
    return (int(value) // GRID) * GRID


@dataclass
class MapEditor:
    """Editing state over the stage held by ``world``."""

    world: World
    tile: int = 1
    mode: EditorMode = EditorMode.TILE
    entity_types: list[str] = field(default_factory=lambda: list(ENTITY_TYPES))
    ent_index: int = 0
    selected: Entity | None = None
    camera_timer: int = 0

    def __post_init__(self) -> None:
        stage = self.world.stage
        if not stage.tiles:
            stage.tiles = {i: DEFAULT_TILE_IMAGE for i in range(1, MAX_TILES)}
        if stage.time_limit == 0:
            stage.time_limit = DEFAULT_TIME_LIMIT

    @property
    def stage(self) -> Stage:
        return self.world.stage

    @property
    def current_type(self) -> str:
        """The kind of entity that placing creates."""
        return self.entity_types[self.ent_index]

    def cycle_tile(self, direction: int) -> int:
        """Step to the next tile in ``direction`` that has an image; return it."""
        if not any(0 <= index < MAX_TILES for index in self.stage.tiles):
            raise ValueError("the stage has no tiles to choose from")
        while True:
            self.tile += direction
            if self.tile < 0:
                self.tile = MAX_TILES - 1
            elif self.tile >= MAX_TILES:
                self.tile = 0
            if self.tile in self.stage.tiles:
                return self.tile

    def cycle_entity(self, direction: int) -> str:
        """Step through the entity kinds, wrapping at both ends; return the kind."""
        count = len(self.entity_types)
        self.ent_index += direction
        if self.ent_index < 0:
            self.ent_index = count - 1
        elif self.ent_index >= count:
            self.ent_index = 0
        return self.current_type

    def _cell(self, mouse_x: int, mouse_y: int) -> tuple[int, int]:
        x = (int(mouse_x) + self.stage.camera.x) // TILE_SIZE
        y = (int(mouse_y) + self.stage.camera.y) // TILE_SIZE
        if not (0 <= x < MAP_WIDTH and 0 <= y < MAP_HEIGHT):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return x, y

    def paint_tile(self, mouse_x: int, mouse_y: int) -> None:
        """Put the current tile in the cell under the mouse."""
        x, y = self._cell(mouse_x, mouse_y)
        self.stage.map[x][y] = self.tile

    def erase_tile(self, mouse_x: int, mouse_y: int) -> None:
        """Clear the cell under the mouse."""
        x, y = self._cell(mouse_x, mouse_y)
        self.stage.map[x][y] = 0

    def _world_point(self, mouse_x: float, mouse_y: float) -> tuple[float, float]:
        return mouse_x + self.stage.camera.x, mouse_y + self.stage.camera.y

    def _snapped(self, mouse_x: float, mouse_y: float) -> tuple[int, int]:
        return _snap(mouse_x) + self.stage.camera.x, _snap(mouse_y) + self.stage.camera.y

    def place_entity(self, mouse_x: int, mouse_y: int) -> Entity:
        """Create the current kind of entity on the 8-pixel grid under the mouse."""
        x, y = self._snapped(mouse_x, mouse_y)
        entity = create_entity(self.current_type, self.world, x, y)
        return self.stage.add_entity(entity)

    def delete_entities_at(self, mouse_x: int, mouse_y: int) -> list[Entity]:
        """Remove every entity under the mouse and return them."""
        doomed = self.stage.entities_at(*self._world_point(mouse_x, mouse_y))
        for entity in doomed:
            self.stage.remove_entity(entity)
            if entity is self.selected:
                self.selected = None
        return doomed

    def toggle_select(self, mouse_x: int, mouse_y: int) -> Entity | None:
        """Pick up the entity under the mouse, or drop the one held onto the grid.

        Returns the entity now held, or None after dropping or when nothing
        was under the mouse.
        """
        if self.selected is None:
            found = self.stage.entities_at(*self._world_point(mouse_x, mouse_y))
            self.selected = found[0] if found else None
            return self.selected
        entity = self.selected
        entity.x, entity.y = self._snapped(mouse_x, mouse_y)
        if isinstance(entity, Platform):
            entity.sx = entity.x
            entity.sy = entity.y
        self.selected = None
        return None

    def flip_at(self, mouse_x: int, mouse_y: int) -> Entity | None:
        """Turn round the held entity, or else the first one under the mouse."""
        target = self.selected
        if target is None:
            found = self.stage.entities_at(*self._world_point(mouse_x, mouse_y))
            target = found[0] if found else None
        if target is not None:
            target.facing = int(not target.facing)
        return target

    def move_camera(self, up: bool, down: bool, left: bool, right: bool) -> bool:
        """Scroll by a tile every third call; return True when a step was taken."""
        self.camera_timer -= 1
        if self.camera_timer > 0:
            return False
        self.camera_timer = CAMERA_DELAY
        camera = self.stage.camera
        if up:
            camera.y -= TILE_SIZE
        if down:
            camera.y += TILE_SIZE
        if left:
            camera.x -= TILE_SIZE
        if right:
            camera.x += TILE_SIZE
        camera.x = min(max(camera.x, 0), CAMERA_MAX_X)
        camera.y = min(max(camera.y, 0), CAMERA_MAX_Y)
        return True

    def centre_on_player(self) -> None:
        """Centre the view on the player and make every entity visible."""
        camera = self.stage.camera
        for entity in self.stage.entities:
            if entity.type == EntityType.PLAYER:
                camera.x = int(entity.x) - SCREEN_WIDTH // 2
                camera.y = int(entity.y) - SCREEN_HEIGHT // 2
            entity.flags &= ~EntityFlag.INVISIBLE

    def stage_document(self) -> JsonNode:
        """Build the JSON document that a stage file holds."""
        stage = self.stage
        root = create_object()
        root.set("timeLimit", create_number(stage.time_limit))
        entities = create_array()
        for entity in stage.entities:
            node = create_object()
            node.set("type", create_string(entity.type_name))
            node.set("x", create_number(entity.x))
            node.set("y", create_number(entity.y))
            if entity.name:
                node.set("name", create_string(entity.name))
            entity.save(node)
            entities.append(node)
        root.set("entities", entities)
        tips = create_array()
        for tip in stage.tips[:MAX_TIPS]:
            if tip:
                tips.append(create_string(tip))
        root.set("tips", tips)
        root.set("map", create_string(map_string(stage)))
        return root

    def save_stage(self, directory: str | PathLike[str] = ".") -> Path:
        """Write the stage file under ``directory`` and return its path."""
        path = Path(directory) / stage_filename(self.stage.num)
        log.info("Saving %s ...", path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(print_json(self.stage_document()), encoding="utf-8")
        log.info("Saved %s", path)
        return path