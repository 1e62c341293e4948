# vermada

The game logic of a small side-scrolling platformer, with no graphics, sound
or input layer of its own. It is a library: it has no command to run.

| Module | What it holds |
| --- | --- |
| `vermada.cjson` | JSON document tree (`JsonNode`, `JsonType`) and a lenient parser |
| `vermada.cjson_print` | Rendering documents back to text, and `minify` |
| `vermada.defs` | Screen, map and tile sizes, `EntityFlag` and the game's enumerations |
| `vermada.model` | `Entity`, `Stage`, `Camera`, `Light`, `Game`, `StageMeta`, `Config` |
| `vermada.entities` | The entity kinds, the `World` they act through, and `create_entity` |
| `vermada.config` | Reading the settings file |
| `vermada.credits` | Laying out and scrolling the credits |
| `vermada.editor` | The stage editor's logic and stage saving |
| `vermada.app` | Command-line options, frame pacing, options-screen conversions, the ending scene |

## JSON documents

```python
from vermada.cjson import parse, create_object, create_number, create_string
from vermada.cjson_print import print_json, print_unformatted

doc = parse('{"timeLimit": 3600, "tips": ["Jump!"]}')
print(doc.get_item("TIMELIMIT").value_int)  # 3600: names match ignoring ASCII case
print(doc["tips"][0].value_string)          # Jump!

root = create_object()
root.set("timeLimit", create_number(3600))
root.set("name", create_string("stage one"))
print(print_json(root))         # one member per line, tab-indented
print(print_unformatted(root))  # {"timeLimit":3600,"name":"stage one"}
```

`parse` ignores anything after the first value; `parse_with_opts(text, True)`
rejects trailing text and also returns where parsing stopped. Unreadable input
raises `JsonParseError`, whose `position` marks the failure. Nodes support
`len`, iteration and indexing, and can be edited with `append`, `set`,
`insert`, `replace`, `replace_by_name`, `detach`, `detach_by_name` and copied
with `duplicate`.

## Entities and the world

```python
from vermada.defs import Control
from vermada.entities import World, create_entity

world = World(image_sizes={"gfx/entities/girl.png": (32, 64)})
player = world.stage.add_entity(create_entity("player", world, 100, 200))
coin = world.stage.add_entity(create_entity("coin", world, 140, 200))

world.controls.add(Control.RIGHT)
player.tick(world)      # player.dx == 6, facing right
coin.touch(world, player)
print(world.stage.coins, world.events)
```

The kinds are `player`, `coin`, `item`, `platform`, `spikes`, `church` and
`finalChurch`; any other name raises `ValueError`. Entities never draw or play
anything: they record `Event`s on `world.events` (kinds `"sound"`,
`"positional_sound"` and `"particles"`) for the host program to act on, ask
`World.image_size` for their dimensions and `World.is_control` for input.
Touching a church completes the stage; touching the final church completes
the game; spikes kill the player when reached at their base; platforms shuttle
between their start and end points once activated. Items, platforms and the
player read and write their extra stage-file fields through `load` and `save`.

## Configuration

```python
from vermada.config import load_config

config = load_config("config.json")
```

The file must hold `soundVolume`, `musicVolume`, `winWidth`, `winHeight`,
`fullscreen`, `tips`, and `keyControls` and `joypadControls` objects with
`left`, `right`, `jump`, `restart` and `pause`; a missing one raises
`KeyError`. `deadzone` defaults to 64 and is stored multiplied by 256.
`parse_config` does the same from a string.

## Credits

```python
from vermada.credits import CreditsRoll, parse_credits

roll = CreditsRoll(parse_credits("2 Thanks for playing\n\n1 Made with care\n"))
while not roll.tick():
    on_screen = list(roll.visible())
```

Each line is a size followed by its text; lines shorter than two characters
add a gap. The roll moves up a pixel per tick until the last line is 100
pixels above the bottom of the screen, then holds for two seconds.
`tick(skip_pressed=True)` ends it at once.

## The stage editor

`vermada.editor.MapEditor` works on `world.stage`. It paints and erases tiles
(`paint_tile`, `erase_tile`), cycles tiles and entity kinds, places entities on
an eight-pixel grid, deletes them, picks them up and drops them
(`toggle_select`), flips their facing, scrolls the camera a tile every third
call within the map's bounds, and centres on the player. `stage_document`
builds the stage's JSON and `save_stage(directory)` writes it to
`data/stages/NNN.json` under that directory (see `stage_filename`).

## Front-end helpers

`vermada.app` provides `parse_command_line` (`-stage N`, `-ending`, `-debug`),
`FrameTimer` for pacing frames at about 60 per second, `window_size_index` and
`parse_window_size` for `"W x H"` options, `volume_to_slider`,
`volume_to_mixer`, `version_label`, and `EndingScene`, which freezes the
player and counts down five seconds before the credits.

## What it does not do

There is no game loop, window, renderer, audio mixer or input handling, and
no title or options screen beyond the helpers above. Stage files can be
written but are not read back into a `Stage`: there is no stage loader,
collision or physics step, quadtree, particle system or save-game storage.
These are left to the program that uses the package.