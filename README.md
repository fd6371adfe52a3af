# lanerunner

A small side-scrolling arcade game built on pygame. A ball rolls along three
lanes while stones scroll in from the right. Switch lanes or jump to dodge
them. The score goes up by one every frame you survive.

## Installing

```
pip install .
```

This installs `pygame`, which provides the window, the graphics and the sound.

## Playing

Start the game with:

```
lanerunner
```

`lanerunner --help` prints a short description. The command takes no other
options.

The main menu has three buttons:

- **Play** starts a run.
- **HighScore** shows the stored high score. The screen has a **Quit** button
  that goes back to the menu. It also has a **Delete** button that resets the
  high score to 0. That button is only drawn while the high score is not 0.
- **Exit** closes the game.

Closing the window quits from any screen.

### Controls during a run

| Key   | Action                                                   |
|-------|----------------------------------------------------------|
| Up    | move one lane up (not while jumping)                     |
| Down  | move one lane down (not while jumping)                   |
| Space | jump; a stone cannot hit the ball while it is in the air |
| E     | when the energy bar is full, spend it to run faster      |

The energy bar in the top-left corner fills by one step per frame, from 70 up
to 100. Pressing **E** does nothing until the bar is full. Once you spend it,
the bar drains one step per frame. While it drains, the pause between frames
drops from 100 ms to 50 ms.

Stones appear every seventh frame. Each time, there is a stone in every lane,
in two of the lanes, or in a single lane.

A run ends when the ball touches a stone while it is on the ground. The
game-over screen then shows your score. It has a **Menu** button to go back
to the menu and an **Exit** button to quit.

### High score

The high score is kept in `highscore.txt` in the directory where the game is
started. If the file does not exist yet, it is created with a score of 0.
During a run, the file is rewritten as soon as the current score beats the
stored one.

### Assets

The game loads its images, font and sounds from these paths:

- `image/ball.png`, `image/stone.png`, `image/button.png`, `image/bikiniBottom.jpg`
- `font/Purisa-BoldOblique.ttf`
- `sound/RunningAway.mp3`, `sound/jump.wav`

The paths are taken relative to the directory named by the `LANERUNNER_ASSETS`
environment variable. If that variable is not set, they are taken relative to
the current working directory.

If an image is missing, the game stops with `FileNotFoundError`. If the font
cannot be opened, a warning is logged and pygame's default font is used
instead. If the music or the jump sound cannot be loaded, the error is logged
and the game plays without it.

## What this package does not include

The package contains only code. It does not ship the images, font or sounds
listed above. You must provide them yourself before the game can start.

## Running the tests

```
pip install .[test]
pytest
```