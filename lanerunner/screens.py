"""Menu, game-over and high-score screens driven by mouse clicks."""

from __future__ import annotations

import pygame

from lanerunner.assets import TextLabel, Texture
from lanerunner.score import Score
from lanerunner.settings import BACKGROUND, BUTTON_IMAGE, GameState, asset_path
from lanerunner.sprites import Background, Button

LEFT_MOUSE_BUTTON = 1


def _left_click(event: pygame.event.Event) -> tuple[int, int] | None:
    """Return the position of a left mouse click, or None for any other event."""
    if event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", None) == LEFT_MOUSE_BUTTON:
        return event.pos
    return None


class _Screen:
    """Shared plumbing: a window, a scrolling-free background and a state to report."""

    initial_state: GameState

    def __init__(
        self,
        window,
        background: Background | None,
        button_texture: Texture | None,
        font_path: str | None,
    ) -> None:
        self.window = window
        self.background = background or Background(Texture(asset_path(BACKGROUND)))
        self._button_texture = button_texture or Texture(asset_path(BUTTON_IMAGE))
        self._font_path = font_path
        self.state = self.initial_state

    def _button(self, x: int, y: int, text: str, size: int) -> Button:
        return Button(x, y, text, size, texture=self._button_texture, font_path=self._font_path)


class MenuScreen(_Screen):
    """The title screen with Play, HighScore and Exit buttons."""

    initial_state = GameState.MENU

    def __init__(
        self,
        window,
        *,
        background: Background | None = None,
        button_texture: Texture | None = None,
        font_path: str | None = None,
    ) -> None:
        super().__init__(window, background, button_texture, font_path)
        self.play_button = self._button(300, 200, "Play", 40)
        self.high_score_button = self._button(300, 300, "HighScore", 20)
        self.exit_button = self._button(300, 400, "Exit", 40)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.state = GameState.END_GAME
            return
        pos = _left_click(event)
        if pos is None:
            return
        if self.play_button.click(*pos):
            self.state = GameState.LEVEL
        if self.high_score_button.click(*pos):
            self.state = GameState.HIGH_SCORE
        if self.exit_button.click(*pos):
            self.state = GameState.END_GAME

    def process_events(self) -> None:
        """Handle every pending event from the pygame queue."""
        for event in pygame.event.get():
            self.handle_event(event)

    def render(self) -> None:
        target = self.window.surface
        self.background.render(target)
        self.play_button.render(target)
        self.high_score_button.render(target)
        self.exit_button.render(target)
        self.window.update()


class LostScreen(_Screen):
    """Shown after a collision: the final score with Menu and Exit buttons."""

    initial_state = GameState.LOST
    label_position = (200, 100)

    def __init__(
        self,
        window,
        score: int = 0,
        *,
        tracker: Score | None = None,
        background: Background | None = None,
        button_texture: Texture | None = None,
        font_path: str | None = None,
    ) -> None:
        super().__init__(window, background, button_texture, font_path)
        self.tracker = tracker or Score()
        self.tracker.score = score
        self.label = TextLabel(self.tracker.score_text(), 60, font_path)
        self.menu_button = self._button(300, 300, "Menu", 40)
        self.exit_button = self._button(300, 400, "Exit", 40)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.state = GameState.END_GAME
            return
        pos = _left_click(event)
        if pos is None:
            return
        if self.menu_button.click(*pos):
            self.state = GameState.MENU
        if self.exit_button.click(*pos):
            self.state = GameState.END_GAME

    def process_events(self) -> None:
        """Handle every pending event from the pygame queue."""
        for event in pygame.event.get():
            self.handle_event(event)

    def render(self) -> None:
        target = self.window.surface
        self.background.render(target)
        self.label.set_text(self.tracker.score_text())
        self.label.render(target, *self.label_position)
        self.menu_button.render(target)
        self.exit_button.render(target)
        self.window.update()


class HighScoreScreen(_Screen):
    """Shows the stored high score, with buttons to delete it and to go back."""

    initial_state = GameState.HIGH_SCORE
    label_position = (150, 200)

    def __init__(
        self,
        window,
        *,
        tracker: Score | None = None,
        background: Background | None = None,
        button_texture: Texture | None = None,
        font_path: str | None = None,
    ) -> None:
        super().__init__(window, background, button_texture, font_path)
        self.tracker = tracker or Score()
        self.label = TextLabel(self.tracker.high_score_text(), 60, font_path)
        self.delete_button = self._button(300, 400, "Delete", 35)
        self.quit_button = self._button(300, 500, "Quit", 40)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.state = GameState.END_GAME
            return
        pos = _left_click(event)
        if pos is None:
            return
        if self.quit_button.click(*pos):
            self.state = GameState.MENU
        if self.delete_button.click(*pos):
            self.tracker.reset_high_score()

    def process_events(self) -> None:
        """Handle every pending event from the pygame queue."""
        for event in pygame.event.get():
            self.handle_event(event)

    def render(self) -> None:
        target = self.window.surface
        self.background.render(target)
        self.label.set_text(self.tracker.high_score_text())
        self.label.render(target, *self.label_position)
        self.quit_button.render(target)
        if self.tracker.high_score != 0:
            self.delete_button.render(target)
        self.window.update()