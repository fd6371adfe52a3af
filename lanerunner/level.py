"""The running level: the ball dodges stone blocks while the score climbs."""

from __future__ import annotations

import random

import pygame

from lanerunner.assets import TextLabel, Texture
from lanerunner.score import Score
from lanerunner.settings import BACKGROUND, BALL_IMAGE, STONE_IMAGE, asset_path
from lanerunner.sprites import Background, Ball, Block, EnergyBar

NORMAL_DELAY = 100
FAST_DELAY = 50
SCROLL_SPEED = 50
SPAWN_INTERVAL = 7
SCORE_POSITION = (600, 50)

_PAIRS = {0: (-1, 0), 1: (-1, 1), 2: (1, 0)}


class Level:
    """One play-through: handles input, advances the world and draws it."""

    def __init__(
        self,
        window,
        *,
        background: Background | None = None,
        ball: Ball | None = None,
        stone: Texture | None = None,
        score: Score | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.window = window
        self.background = background or Background(Texture(asset_path(BACKGROUND)))
        self.ball = ball or Ball(Texture(asset_path(BALL_IMAGE)))
        self.stone = stone or Texture(asset_path(STONE_IMAGE))
        self.score = score or Score()
        self.rng = rng or random.Random()
        self.energy = EnergyBar()
        self.score_label = TextLabel(self.score.score_text(), 20)
        self.blocks: list[Block] = []
        self.delay = NORMAL_DELAY
        self.scroll = SCROLL_SPEED
        self.timer = SPAWN_INTERVAL
        self.ended = False

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.ended = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_UP:
                self.ball.up()
            elif event.key == pygame.K_DOWN:
                self.ball.down()
            elif event.key == pygame.K_SPACE:
                self.ball.jump()
            elif event.key == pygame.K_e:
                self.energy.use()

    def process_events(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)

    def spawn_blocks(self) -> list[Block]:
        """Add a random pattern of blocks: all lanes, a pair of lanes or one lane."""
        pattern = self.rng.randrange(6)
        if pattern == 5:
            lanes: tuple[int, ...] = (-1, 0, 1)
        elif pattern in (1, 3):
            lanes = _PAIRS[self.rng.randrange(3)]
        else:
            lanes = (self.rng.randrange(3) - 1,)
        new = [Block(self.stone, lane) for lane in lanes]
        self.blocks.extend(new)
        return new

    def step(self) -> None:
        """Advance the world by one frame and check for collisions."""
        self.background.scroll(self.scroll)
        self.score.increment()
        self.score.update_high_score()
        self.ball.step_jump()
        self.energy.update()
        if self.timer == SPAWN_INTERVAL:
            self.spawn_blocks()
        self.timer -= 1
        if self.timer == 0:
            self.timer = SPAWN_INTERVAL
        for block in self.blocks:
            block.scroll(self.scroll)
            self.ended = self.ended or block.collides(self.ball)

    def render(self) -> None:
        target = self.window.surface
        self.background.render(target)
        self.energy.render(target)
        self.score_label.set_text(self.score.score_text())
        self.score_label.render(target, *SCORE_POSITION)
        for block in self.blocks:
            block.render(target)
        self.ball.render(target)
        self.window.update()

    def remove_passed_blocks(self) -> int:
        """Drop blocks that have left the screen on the left; return how many were removed."""
        removed = 0
        while self.blocks and self.blocks[0].x < 0:
            self.blocks.pop(0)
            removed += 1
        return removed

    def update_speed(self) -> None:
        self.delay = FAST_DELAY if self.energy.in_use else NORMAL_DELAY