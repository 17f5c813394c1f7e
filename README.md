# retroarcade

A handful of small classic arcade games built on pygame, each playable in its own window.

## Installing

```
pip install .
```

To also install the test requirements:

```
pip install ".[test]"
```

## Playing

Each game has its own command:

| Command                       | Game                                           |
|-------------------------------|------------------------------------------------|
| `retroarcade-breakout`        | Breakout: clear every brick with the ball      |
| `retroarcade-galaxian`        | Galaxian: shoot the formation of enemies       |
| `retroarcade-sandbox`         | One enemy flying a curved path after a delay   |
| `retroarcade-tank`            | Two-player tank game around fixed obstacles    |
| `retroarcade-space-invaders`  | Space Invaders: shoot the advancing grid       |
| `retroarcade-asteroids`       | Asteroids: break up drifting rocks             |
| `retroarcade-pacman`          | Pacman: eat the pellets of the maze            |

The games run at 60 frames per second. Close the window or press Escape to quit.

### Controls

- **Breakout**: Left/Right move the paddle, Space launches the ball, Enter restarts after a win or a loss.
- **Galaxian** and **Sandbox**: Left/Right move, Space fires (one shot on screen at a time).
- **Tank**: player one turns with A/D, drives with W/S and fires with Space; player two turns with Left/Right, drives with Up/Down and fires with Enter. Each tank has at most three shells in flight.
- **Space Invaders**: arrow keys move, hold Space to fire, P pauses, Enter restarts after game over.
- **Asteroids**: Left/Right turn, Up thrusts, Space fires (one shot per press).
- **Pacman**: arrow keys steer.

### Sounds and images

Sounds, music and images are looked up in a `resources/` directory under the
current working directory: `background_music.ogg`, `laser.wav`,
`sfx_asteroid_explode.ogg`, `coin.wav`, `player-ship.png` and `pacman.png`.
None of them are shipped with the package. A missing or unreadable file is
skipped: the game stays silent, Space Invaders draws the ship as a white
square and Pacman as a yellow circle.

## Using the games from code

Every game is a plain object whose state advances one frame at a time, so it
can be driven without a window. `update` takes a `retroarcade.core.Controls`
holding the keys held and the keys newly pressed in that frame:

```python
from retroarcade.breakout import BreakoutGame
from retroarcade.core import Controls, Key

game = BreakoutGame()
game.update(Controls(pressed=frozenset({Key.SPACE})))   # launch the ball
for _ in range(10):
    game.update(Controls())
print(game.score, game.lives)
```

`SandboxGame.update` also takes the length of the frame in seconds, and
`SandboxGame` accepts a `clock` function for its delay timer. `AsteroidsGame`
and `PacmanGame` accept an `rng` (a `random.Random`) so their randomness can
be made repeatable. Each game has `reset()` to start over and `draw(surface)`
to render onto a pygame surface.

Other pieces:

- `retroarcade.core`: `Vec2`, `Rect`, `Key`, `Controls`, `check_collision_recs` and `check_collision_circle_rec`.
- `retroarcade.timer.Timer`: a countdown timer with `start(lifetime)`, `done()` and `elapsed()`.
- `retroarcade.display`: `run_game(game, title, fps)` opens a window and runs a game; `controls_from_keys(held, previous)` builds a frame's `Controls`; `load_sound(path)` loads a sound or returns `None`.
- `retroarcade.pacman`: `new_maze()` returns a fresh maze of `Tile` values and `next_step_towards(maze, start, goal)` gives the first step of a shortest path between two cells.

## What the games do not do

These are small games and several are unfinished as games:

- No scores are saved, and the Space Invaders high score stays at zero; its "YOU WIN" message is never shown.
- The Galaxian formation does not move, so the only way to end a round is to shoot every enemy, which starts a fresh game.
- Tank shells do not hit the other tank and there is no score or winner.
- Pacman's ghosts do not catch Pacman, eating pellets scores nothing and the game has no end.
- The sandbox is a test bed for one enemy's flight path, not a game.

## Running the tests

```
pytest
```