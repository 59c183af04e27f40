# quadkit

A small, dependency-free toolkit for the logic side of 2D games: collision
and movement for tile-based platformers, CPU-side particle emitters, and a
handful of complete game simulations (Game of Life, Snake, Arkanoid,
Asteroids) that can be driven from any rendering front end or from tests.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `quadkit.geometry`: `Vec2` (immutable, with `+`, `-`, `*`, `/`,
  `length()` and `normalize()`, which raises `ValueError` for a zero vector),
  `Rect` (`overlaps()`, where touching edges count, and `contains()`),
  `Color` with `to_tuple()`, `color_from_rgba()` for 8-bit channels, and
  `polar_to_cartesian()`.
- `quadkit.platformer`: a pixel-precise `World` of `Actor`s, `Solid`s and
  static tile layers made of `Tile` values (`EMPTY`, `SOLID`,
  `JUMP_THROUGH`, `COLLIDER`). Actors move with `move_h()` / `move_v()`,
  which return `False` when blocked. Jump-through tiles can be passed from
  below or after `descent()`. Solids move with `solid_move()`, carrying
  actors that ride on them and pushing actors in their way; an actor pushed
  into a wall is reported by `squished()`.
- `quadkit.particle_config`: emitter settings. This covers `EmitterConfig`,
  `Curve` (linear only; `batch()` raises `ValueError` for Bézier),
  `BatchedCurve` and `ColorCurve`. It also holds `AtlasConfig` for sprite-sheet
  animation, `BlendMode`, `ParticleMaterial`, the emission shapes
  `PointShape`, `RectShape` and `SphereShape`, and the particle meshes
  `RectangleParticle`, `CircleParticle` and `CustomMeshParticle`.
- `quadkit.emitter`: `Emitter` spawns, ages and retires `Particle`s and
  holds at most 10000 of them. `EmittersCache` is a pool of recycled
  emitters for short one-shot effects.
- `quadkit.life`: Conway's Game of Life on a bounded `Grid`, with
  `next_state()` giving the rule for a single cell.
- `quadkit.snake`: `SnakeGame` on a 16×16 board, steered with `Direction`.
- `quadkit.arkanoid`: `Arkanoid`, a paddle-and-blocks game in a 20×20
  playfield.
- `quadkit.camera_math`: `short_angle_dist()`, `angle_lerp()` and
  `apply_wheel()` for smooth camera rotation (degrees) and zoom.
- `quadkit.asteroids`: `AsteroidsGame` with `Ship`, `Bullet`, `Asteroid`
  and `wrap_around()`.
- `quadkit.audio`: `AudioContext` loads sounds from files or bytes. It
  detects WAV, Ogg and MP3 headers and records each sound's playing, looping
  and volume state. An unreadable file raises `FileError`.

Randomness is passed in as a `random.Random`, so seeded runs are
reproducible.

## Example: platformer physics

```python
from quadkit.geometry import Vec2
from quadkit.platformer import Tile, World

world = World()
row = [Tile.EMPTY] * 10
floor = [Tile.SOLID] * 10
world.add_static_tiled_layer(row * 9 + floor, 8.0, 8.0, 10, 1)

player = world.add_actor(Vec2(8.0, 8.0), 8, 8)
while world.move_v(player, 1.0):
    pass                      # fall until we land on the floor

print(world.actor_pos(player))
print(world.collide_check(player, world.actor_pos(player) + Vec2(0.0, 1.0)))
```

## Example: particles

```python
from quadkit.emitter import Emitter
from quadkit.geometry import Vec2
from quadkit.particle_config import EmitterConfig

emitter = Emitter(EmitterConfig(amount=20, lifetime=0.8))
for _ in range(60):
    particles = emitter.draw(Vec2(100.0, 100.0), 1 / 60)
print(len(particles))
```

## Example: games

```python
import random
from quadkit.life import Grid
from quadkit.snake import Direction, SnakeGame

grid = Grid(64, 48)
grid.randomize(random.Random(1))
for _ in range(10):
    grid.step()
print(grid.population)

game = SnakeGame(random.Random(1), now=0.0)
game.steer(Direction.DOWN)
game.update(now=0.5)          # moves once more than `speed` seconds have passed
print(game.head, game.score, game.game_over)
```

## What it does not do

Nothing in the package draws to a screen, opens a window, reads the keyboard
or plays sound. The games take key states and times as arguments. Emitters
return their particles, and the audio context only keeps track of what each
sound was asked to do. A front end has to render that state and play the
audio. There are no command-line programs.