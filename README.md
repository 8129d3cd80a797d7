# flappyduck

A small side-scrolling arcade game. You fly a duck through an endless row of
coloured pipes, and you score a point for each pipe you pass. Mystery boxes
drift across the screen from time to time. If you collect one, you get a short
boost:

- **Speed-up**: the pipes scroll twice as fast for 180 frames, which is three
  seconds at 60 frames per second.
- **Ghost**: for the same length of time, the duck flies through pipes without
  harm.

An icon and the seconds left are shown for each boost that is running. The best
score is saved to `anh_amthanh/bestScore.txt` and kept between sessions.

## Installing

```
pip install .
```

The game uses `pygame` for graphics, sound and input.

## Playing

```
flappyduck
```

The command opens an 800×600 window and runs at 60 frames per second. It takes
no options.

| Action                  | Control                                       |
|-------------------------|-----------------------------------------------|
| Start a round / flap    | Space, Up arrow or a mouse click              |
| Pause / resume          | Escape                                        |
| Resume from pause menu  | Click the replay button                       |
| Back to the ready screen after game over | Click the replay button      |
| Sound on / off          | Click the speaker in the pause menu           |
| Day / night theme       | Click either arrow in the pause menu          |

The round ends when the duck hits a pipe, the ground or the top of the screen.
The game-over screen shows a medal for the score:

- bronze for 20 or less
- silver for 21 to 50
- gold for more than 50

## Assets

The package does not ship any images or sounds. It loads them from an
`anh_amthanh/` folder, which `flappyduck` looks for in the current directory.
These are the files it uses:

- backgrounds: `bg.png`, `background-night.png`
- game pieces: `pipe.png`, `land.png`, `duck-01.png`, `Duck-02.png`
- power-ups: `boxmys.png`, `blackbox.png`
- large score digits: `0.png` to `9.png`
- small score digits: `number.png`, `11.png` to `99.png`
- screens: `duck-ready.png`, `gameOver.png`, `replay.png`, `pause.png`,
  `resume.png`, `pauseTab.png`, `nextLeft.png`, `nextRight.png`,
  `speedrun.png`, `ghostbaby.png`, `sound.png`
- medals: `bronze-medal-demo.png`, `silver-medal-demo.png`,
  `gold-medal-demo.png`
- sounds: `sfx_breath.wav`, `duck-sound.wav`, `sound-effect.wav`

Pixels in pure cyan (0, 255, 255) are drawn as transparent. `sound.png` holds
the "on" picture in its top half and the "muted" picture in its bottom half.

A missing image or sound does not stop the game. That item is simply not drawn
or played, and the message is added to `Game.errors`.

## Using it as a library

The game rules live in small classes that do not need a window:

- `flappyduck.pipes.PipeField` places, scrolls and recycles the pipes.
  - `reset()` lays out a fresh set of pipes.
  - `update(speed_up)` moves them one frame.
- `flappyduck.duck.Duck` handles the duck.
  - `update(pipes, pipe_width, pipe_height, ghost_active)` moves it along its
    flap curve, checks for collisions and counts the score in a shared
    `flappyduck.core.WorldState`.
  - `reset_time()` starts a new flap.
  - `fall()` drops a dead duck to the ground.
- `flappyduck.land.Land` scrolls the ground. `tile_positions()` gives where the
  ground tiles are drawn.
- `flappyduck.powerups.PowerUpManager` handles the power-up boxes.
  - `update()` spawns and scrolls them and counts down their effects.
  - `check_collision(x, y, width, height)` collects a box that the given
    rectangle touches.
  - `speed_up_active` and `ghost_active` tell whether each effect is running.
- `flappyduck.game` provides helper functions:
  - `digit_image_paths(score, small)` returns the image paths for the digits of
    a score.
  - `medal_for_score(score)` returns the image path of the medal for a score.
  - `replay_button_hit(x, y)` and `theme_button_hit(x, y)` tell whether a point
    is on those buttons.
  - `BestScoreStore` reads and updates the best-score file.

```python
import random

from flappyduck.core import WorldState
from flappyduck.duck import Duck
from flappyduck.pipes import PipeField

world = WorldState(die=False)
pipes = PipeField(world, random.Random(1))
duck = Duck(world)
while not world.die:
    duck.update(pipes.pipes, pipes.width, pipes.height)
    pipes.update()
print(world.score)
```

`flappyduck.game.Game` brings the pieces together with their images and sounds.
It can draw onto any `pygame.Surface` you pass as `screen`, and it can read
events from an `event_source` callable instead of the pygame event queue.
`flappyduck.app.Session(game).step()` runs one frame of the ready screen, play,
the pause menu or the game-over screen, and returns `False` once the player has
quit. `flappyduck.app.main()` runs the whole loop in its own window.

## What it does not include

- No images or sounds are bundled. Without the `anh_amthanh/` folder, the
  window opens but stays blank and silent.
- There are no command-line options and no settings file. The window size,
  frame rate, speeds and asset folder are fixed.
- Only a single best score is kept. There is no table of high scores.

## Running the tests

```
pip install ".[test]"
pytest
```