# quadplay

Game logic that has no window, renderer or input layer. Nothing advances until
you call it, so you can drive it from any frame loop, run it inside a test, or
replay it one step at a time. Where randomness is involved, the classes take an
optional `random.Random`. Pass a seeded one and every run is the same.

## Modules

- `quadplay.geometry`: the immutable `Vec2` with arithmetic operators,
  `length`, `normalize` and `rotated`. The axis-aligned `Rect` with `overlaps`
  and `contains`. The function `polar_to_cartesian`.
- `quadplay.platformer`: a collision `World` that moves things one pixel at a
  time.
  - Static tiled layers built from `Tile` values: `EMPTY`, `SOLID`,
    `JUMP_THROUGH` and `COLLIDER`.
  - Actors, created with `add_actor` and moved with `move_h` and `move_v`.
    Both moves return `False` when the actor is blocked.
  - Solids, created with `add_solid`. When `solid_move` moves a solid, it
    carries the actors riding on it and pushes the actors in its way. An actor
    that cannot be pushed is marked as squished, which `squished` reports.
  - Queries: `collide_check`, `collide_solids`, `collide_tag`, `solid_at` and
    `tag_at`.
- `quadplay.particle_config`: the pieces of an emitter's configuration.
  - `Curve`, sampled into a `BatchedCurve` by `batch`. Only `LINEAR`
    interpolation is supported; `BEZIER` raises `ValueError`.
  - `Color` and `ColorCurve`.
  - The emission shapes `PointEmission`, `RectEmission` and `SphereEmission`.
  - `BlendMode`.
  - `AtlasConfig`, for sprite sheets.
  - `EmitterConfig`, which holds all the settings.
- `quadplay.emitter`: `Emitter` spawns and ages `Particle` objects. Each
  particle's position, rotation, size, colour and atlas UV are updated on every
  call to `update(dt)` or `step(pos, dt)`. `emit(pos, n)` emits at once. The
  `EmittersCache` class runs many short-lived emitters. It returns an emitter to
  its idle pool once that emitter stops emitting.
- `quadplay.life`: Conway's Game of Life on a `LifeGrid`. Cells beyond the
  edges count as dead. Build a grid with `LifeGrid.random` or
  `LifeGrid.from_rows`, in which `#` marks a live cell. Advance it with `step`.
  `next_state` applies the rules to a single cell.
- `quadplay.snake`: `SnakeGame` on a 16x16 board.
  - `turn(Direction.UP)` and the other directions change course. A turn that
    would reverse the snake is ignored.
  - `tick()` moves the snake one square and returns `False` once the game is
    over.
  - Each fruit eaten scores 100 and multiplies `speed` by 0.9.
- `quadplay.arkanoid`: `Arkanoid`, a brick breaker with a 10x10 wall of blocks.
  - `update(dt, left, right, launch)` takes the state of the keys for that
    frame.
  - `blocks_left()` counts the blocks that are still standing.
- `quadplay.asteroids`: `AsteroidsGame`, plus the `Ship`, `Bullet` and
  `Asteroid` types and `wrap_around`.
  - Call `update(now, thrust, fire, steer)` once per frame. `steer` is -1, 0
    or 1.
  - An asteroid with more than three sides splits in two when it is hit.
  - `update` returns `False` once the game is over. `won` tells whether the
    player cleared every asteroid.
- `quadplay.angles`: `short_angle_dist`, `angle_lerp` and `wheel_rotation`,
  all in degrees. They are for smoothing a camera's rotation.
- `quadplay.audio`: an `AudioContext` that keeps a registry of `Sound`
  handles.
  - `load_sound` reads a file and raises `FileError` if it cannot.
  - `load_sound_from_bytes` takes raw data.
  - `play_sound`, `play_sound_once`, `stop_sound` and `set_sound_volume`
    update each sound's `SoundState`.
- `quadplay.inventory`: an `Inventory` of bought items (`buy`) and seven
  labelled `Slot`s. `apply` carries out the commands `Fit`, `Unfit` and
  `Refit`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example: platformer physics

```python
from quadplay.geometry import Vec2
from quadplay.platformer import Tile, World

world = World()
# A 4x4 grid of 8x8 tiles with tag 1; row 3, the bottom row, is solid floor.
tiles = [Tile.EMPTY] * 12 + [Tile.SOLID] * 4
world.add_static_tiled_layer(tiles, 8.0, 8.0, 4, 1)

player = world.add_actor(Vec2(8.0, 0.0), 8, 8)
world.move_v(player, 30.0)      # returns False: the floor stops the fall
print(world.actor_pos(player))  # Vec2(x=8.0, y=16.0)
```

## Example: particles

```python
import random

from quadplay.emitter import Emitter
from quadplay.geometry import Vec2
from quadplay.particle_config import EmitterConfig

emitter = Emitter(EmitterConfig(amount=20, lifetime=0.5), random.Random(1))
for _ in range(60):
    emitter.step(Vec2(100.0, 100.0), 1 / 60)
print(len(emitter.particles))
```

## What it does not do

The package draws nothing, opens no window and reads no keyboard, mouse or
touch input. The caller passes input in as arguments, such as `left`,
`thrust` or `steer`, and reads the state back from the objects in order to
render it. The `AudioContext` produces no sound. It stores the audio data and
records whether each sound is playing, looped and at what volume. It does not
check that the data is audio. There are no command-line programs.