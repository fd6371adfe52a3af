"""Scrolling background, the player's ball, stone blocks, the energy bar and buttons."""

from __future__ import annotations

import math
from typing import Protocol

import pygame

from lanerunner.assets import Sound, TextLabel, Texture
from lanerunner.settings import BUTTON_IMAGE, JUMPSOUND, asset_path

LANE_SPACING = 100
JUMP_HEIGHT = 200
JUMP_STEP = 30
ROLL_STEP = 60

ENERGY_MAX = 100
ENERGY_START = 70
ENERGY_BAR = pygame.Rect(100, 10, 100, 30)
ENERGY_FILL_COLOR = (0, 255, 0)
ENERGY_FRAME_COLOR = (0, 0, 0)


class _Playable(Protocol):
    def play(self) -> object: ...


class Background:
    """A background image that scrolls left and wraps around seamlessly."""

    def __init__(self, texture: Texture) -> None:
        self.texture = texture
        self.scrolling_offset = 0

    def scroll(self, distance: int) -> None:
        self.scrolling_offset -= distance
        if self.scrolling_offset < 0:
            self.scrolling_offset = self.texture.w

    def render(self, target: pygame.Surface) -> None:
        self.texture.render(target, self.scrolling_offset, 0)
        self.texture.render(target, self.scrolling_offset - self.texture.w, 0)


class Ball:
    """The player: switches between three lanes, jumps and rolls."""

    def __init__(self, texture: Texture, jump_sound: _Playable | None = None) -> None:
        self.texture = texture
        self.jump_sound = jump_sound if jump_sound is not None else Sound(asset_path(JUMPSOUND))
        self.x = 100
        self.y0 = 300
        self.y = self.y0
        self.y1 = 0
        self.angle = 0
        self.lane = 0
        self.rotation = 0
        self.jumping = False
        self.place()

    @property
    def w(self) -> int:
        return self.texture.w

    @property
    def h(self) -> int:
        return self.texture.h

    def up(self) -> None:
        if not self.jumping and self.lane != -1:
            self.lane -= 1

    def down(self) -> None:
        if not self.jumping and self.lane != 1:
            self.lane += 1

    def jump(self) -> None:
        self.jumping = True
        self.jump_sound.play()

    def step_jump(self) -> None:
        """Advance the jump arc by one frame; the jump ends when the angle reaches 180."""
        if not self.jumping:
            return
        self.angle += JUMP_STEP
        self.y1 = int(JUMP_HEIGHT * math.sin(math.radians(self.angle)))
        if self.angle == 180:
            self.angle = 0
            self.jumping = False

    def roll(self) -> None:
        if self.rotation < 360:
            self.rotation += ROLL_STEP
        else:
            self.rotation = ROLL_STEP

    def place(self) -> None:
        """Recompute the on-screen height from the lane and the jump offset."""
        self.y = self.y0 - self.y1 + LANE_SPACING * self.lane

    def render(self, target: pygame.Surface) -> None:
        self.place()
        self.texture.render(target, self.x, self.y, self.rotation)
        self.roll()


class Block:
    """A stone obstacle sitting in one lane, scrolling towards the ball."""

    def __init__(self, texture: Texture, lane: int) -> None:
        self.texture = texture
        self.lane = lane
        self.x = 800
        self.y0 = 300
        self.y = self.y0
        self.place()

    @property
    def w(self) -> int:
        return self.texture.w

    @property
    def h(self) -> int:
        return self.texture.h

    def scroll(self, distance: int) -> None:
        self.x -= distance

    def place(self) -> None:
        self.y = self.y0 + LANE_SPACING * self.lane

    def collides(self, ball: Ball) -> bool:
        """Whether the ball's bottom-right corner lies within this block while on the ground."""
        right = ball.x + ball.w
        bottom = ball.y + ball.h
        return (
            not ball.jumping
            and self.x <= right <= self.x + self.w
            and self.y <= bottom <= self.y + self.h
        )

    def render(self, target: pygame.Surface) -> None:
        self.place()
        self.texture.render(target, self.x, self.y)


class EnergyBar:
    """Energy that refills over time; when full it can be spent to speed the game up."""

    def __init__(self) -> None:
        self.energy = ENERGY_START
        self.in_use = False

    @property
    def filled(self) -> pygame.Rect:
        return pygame.Rect(ENERGY_BAR.x, ENERGY_BAR.y, self.energy, ENERGY_BAR.h)

    def use(self) -> None:
        if self.energy == ENERGY_MAX:
            self.in_use = True

    def update(self) -> None:
        if not self.in_use and self.energy < ENERGY_MAX:
            self.energy += 1
        if self.in_use and self.energy > 0:
            self.energy -= 1
        if self.in_use and self.energy == 0:
            self.in_use = False

    def render(self, target: pygame.Surface) -> None:
        pygame.draw.rect(target, ENERGY_FILL_COLOR, self.filled)
        pygame.draw.rect(target, ENERGY_FRAME_COLOR, ENERGY_BAR, 1)


class Button:
    """A clickable image with a text caption."""

    def __init__(
        self,
        x: int,
        y: int,
        text: str,
        size: int,
        texture: Texture | None = None,
        font_path: str | None = None,
    ) -> None:
        self.texture = texture if texture is not None else Texture(asset_path(BUTTON_IMAGE))
        self.label = TextLabel(text, size, font_path)
        self.x = x
        self.y = y

    @property
    def w(self) -> int:
        return self.texture.w

    @property
    def h(self) -> int:
        return self.texture.h

    def click(self, x: int, y: int) -> bool:
        """Whether the point lies strictly inside the button."""
        return self.x < x < self.x + self.w and self.y < y < self.y + self.h

    def render(self, target: pygame.Surface) -> None:
        self.texture.render(target, self.x, self.y)
        self.label.render(target, self.x + 20, self.y)