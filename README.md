# parkrush

Game logic for a top-down parking game. It covers what happens when objects
collide, how those outcomes change the score and the flow of the game, and
how levels are read from their files.

## Modules

- `parkrush.collision_result`: the `CollisionType` and `EffectType` enums
  and the frozen `CollisionResult` dataclass. `CollisionResult` has the fields
  `collision_type`, `score_change`, `damage`, `should_restart`, `effect_type`
  and `message`. It also has a set of ready-made results:
  - `no_collision()`
  - `from_type(collision_type, score_change, damage)`, which picks the effect
    and the message from the type and sets `should_restart` only for
    `FATAL_CRASH`
  - `car_vs_parked_car()`, `motorcycle_vs_parked_car()` and
    `truck_vs_parked_car()`
  - `vehicle_vs_sidewalk(is_heavy_vehicle)`
  - `vehicle_vs_traffic_cone(is_motorcycle_evasion)` and
    `motorcycle_evades_cone()`
  - `fatal_collision()`
  - `power_up_collection(bonus_type)`

  A result also provides `has_collision()`, `type_string()` and
  `debug_info()`.
- `parkrush.game_object`: `Rect` has `intersects`, `contains` and `expanded`.
  `GameObject` has a size, a centre `position`, a `rotation` in degrees, a
  `scale` and a unique `id`. Its `bounds()` is the axis-aligned box of the
  scaled, rotated object. Collisions use double dispatch:
  `accept_collision(other)` calls `other.collide_with(self)`. Subclasses
  override `collide_with` and set the class flags `is_vehicle`,
  `is_parking_spot` and `is_player_vehicle`.
- `parkrush.level`: `PlayerSpawn` holds a position and an angle; the angle
  defaults to 90. `Level` holds objects and road boundaries. Its methods are
  `add_object`, `all_objects`, `clear_objects` and `add_boundary`, and it has
  a `boundaries` property.
- `parkrush.collision_detector`: `CollisionDetector`.
  - `detect_collisions(objects)` checks every pair of objects. For each pair
    that overlaps it asks both objects for a result and keeps the real
    collisions.
  - `are_objects_colliding(obj1, obj2)` adds an 8-unit margin when a vehicle
    is involved.
  - `check_player_boundary_collision(player, boundaries)` returns a
    restarting `TRAFFIC_VIOLATION` (−50) when the player touches a boundary.
- `parkrush.effect_manager`: `EffectManager` turns results into actions.
  - It adds score changes to a score keeper, which is any object with
    `add_score`.
  - On a crash it stops the background sounds and plays `"crash"` through a
    sound player, which is any object with `stop_all_background_sounds` and
    `play_sound`.
  - It flags a player reset or a move to the next level.
  - `process_delayed_actions()` then calls `reset_level()` and
    `load_next_level()` on the level manager you give it.
- `parkrush.game_state_manager`: `GameStateManager` keeps a `game_won` flag.
  `check_game_won_condition()` raises `GameStateError("GameWon", ...)` once
  the game is won.
- `parkrush.level_loader`: reads the line-oriented level file format. Each
  object starts on a line holding only `{` and ends on a line holding only
  `}`, with one `"key": value` pair per line in between. The functions are:
  - `load_from_file`, `read_json_file`, `parse_simple_json` and
    `create_level_from_json`
  - `create_player_spawn` (x defaults to 670, y to 210, angle to 90)
  - `create_boundary` (x and y default to 0, width and height to 1)
  - `get_float`, `extract_quoted_string` and `extract_value`

  Bad or missing data raises `InvalidLevelError`.
- `parkrush.button`: `ButtonState` and `Button`. A button tracks its hover
  state, fill colour, outline colour and outline thickness. It has
  `is_hovered`, `is_clicked`, `update`, `move_to` and `set_colors`.
- `parkrush.exceptions`: `GameError` and its subclasses:
  `ResourceNotFoundError`, `InvalidLevelError`, `CollisionDetectionError`,
  `GameStateError`, `EffectProcessingError`, `ManagerInitializationError`,
  `LevelOperationError` and `ObjectCreationError`. Each one has
  `full_message()`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from parkrush.collision_result import CollisionResult, CollisionType
from parkrush.level_loader import create_level_from_json, parse_simple_json

result = CollisionResult.from_type(CollisionType.HEAVY_DAMAGE, -100, 50)
print(result.debug_info())

text = '[\n{\n"type": "player_spawn",\n"x": 100,\n"y": 200\n}\n,\n{\n"type": "border",\n"x": 0,\n"y": 0,\n"width": 800,\n"height": 10\n}\n]\n'
level = create_level_from_json(parse_simple_json(text), 1)
print(level.name, level.player_spawn, level.boundaries)
```

## What it does not do

The package has no game loop, window, drawing, sound playback, keyboard or
mouse input, and no physics. There are no concrete vehicles, obstacles,
parking spots or power-ups. `GameObject` is only a base class that you
subclass yourself.

The level loader handles player spawns and borders on its own. For every
other kind of entry it calls the `object_factory` callable you pass in, and
without one it skips those entries. `EffectManager` plays no sound unless it
is given a sound player, and it does not manage levels itself: it calls the
level manager you give it. No command-line program is installed.