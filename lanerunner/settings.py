"""Game-wide constants, asset locations and the screen state enumeration."""

from __future__ import annotations

import enum
import os
from pathlib import Path

WINDOW_TITLE = "Game"
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

BALL_IMAGE = "image/ball.png"
STONE_IMAGE = "image/stone.png"
BUTTON_IMAGE = "image/button.png"
BACKGROUND = "image/bikiniBottom.jpg"
FONT = "font/Purisa-BoldOblique.ttf"
HIGHSCORE = "highscore.txt"
MUSIC = "sound/RunningAway.mp3"
JUMPSOUND = "sound/jump.wav"

ASSETS_ENV = "LANERUNNER_ASSETS"


class GameState(enum.Enum):
    """Which screen the game is currently showing."""

    MENU = enum.auto()
    LEVEL = enum.auto()
    LOST = enum.auto()
    HIGH_SCORE = enum.auto()
    END_GAME = enum.auto()


def asset_path(name: str) -> Path:
    """Return the path of an asset, relative to $LANERUNNER_ASSETS or the working directory."""
    root = os.environ.get(ASSETS_ENV) or Path.cwd()
    return Path(root) / name