# shrinkarena

An arcade shooter that is played inside its own window. The window slowly
shrinks towards its centre. Every shot that reaches an edge pushes that edge
back out, so you have to keep firing to keep room to move.

## Installing

```
pip install .
```

The game uses pygame for its window, drawing and input.

## Playing

```
shrinkarena
shrinkarena --assets path/to/textures
```

`--assets` names a directory holding `player.png`, `triangle.png`,
`projectile.png` and `pentagon.png` (default: `assets` in the current
directory). Any image that is missing is replaced by a plain filled shape,
so the game runs without textures.

Controls:

| Key / button            | Action                     |
|-------------------------|----------------------------|
| W A S D or arrow keys   | move                       |
| Left mouse button       | fire towards the pointer   |
| Esc                     | pause / resume             |
| R (paused or game over) | restart                    |
| P                       | quit at once               |

## Rules

- The window loses a little of each edge every frame until it is 150 pixels
  wide or high. A shot that reaches an edge queues an eased expansion of
  that edge by 100 pixels, limited by the edges of the screen.
- **Triangles** come in from just outside the window edges in groups of one
  to four. They home in on you with a slight wobble. Each hit costs one
  point of health and knocks you back. Shooting one down (five shots) scores
  10 points.
- **Pentagons** appear anywhere on screen in groups of one to three, at least
  500 pixels away from you. They turn slowly in place, take 50 shots to
  destroy and score 50 points. Touching one costs health and knocks you back.
- **Beams** show a yellow warning strip at one edge of the window, lined up
  with your position. After 1.5 seconds they sweep across the screen and
  take two points of health while expanding or active, then fade out.

Each kind of enemy is spawned every 5 seconds. You start with 20 health; a
0.2 second grace period after each hit stops damage from stacking. When
your health reaches zero a one-second death animation plays and the game is
over. Press R to start again.

## Using the pieces

The game logic needs no display and can be driven from code:

```python
from shrinkarena.game_manager import GameManager, GameState
from shrinkarena.window import GameWindow

window = GameWindow(560, 115, 800, 800, 0.25, "arena", 1920, 1030)
manager = GameManager(window)
manager.restart_game()              # places a fresh player in the centre
player = manager.find_player()

manager.update(1 / 60)              # spawn timers, movement, collisions
window.update(1 / 60)               # natural shrinking and resize requests
manager.handle_click(1200, 500, player)   # fire towards a screen point

manager.pause_game()
assert manager.game_state is GameState.PAUSED and manager.is_paused()
```

`GameManager` and the enemy classes accept an `rng` (a `random.Random`) and
a `clock` (a function returning seconds) so that games can be replayed
exactly. Collision tests use the separating axis theorem on convex
outlines; see `shrinkarena.game_object.check_sat_collision`. The easing
curves used for resizing are in `shrinkarena.window`
(`ease_out_quad`, `ease_out_cubic`, `ease_out_quart`, `ease_out_expo`).

## What it does not do

- There is no sound, no start menu and no saved high scores; the score is
  shown only while playing.
- The game window follows its shrinking and growing size everywhere, but it
  moves on screen only where pygame can reposition its display window.
- Text is drawn with pygame's built-in default font.

## Running the tests

```
pip install .[test]
pytest
```