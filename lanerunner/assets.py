"""Pygame-backed resources: images, text, sounds and the game window."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from lanerunner.settings import (
    FONT,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WINDOW_TITLE,
    asset_path,
)

log = logging.getLogger(__name__)

BLACK = (0, 0, 0)


class Texture:
    """An image loaded from disk that can be drawn, optionally rotated."""

    def __init__(self, path: str | Path) -> None:
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"image not found: {path}")
        image = pygame.image.load(str(path))
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        self.image = image

    @property
    def w(self) -> int:
        return self.image.get_width()

    @property
    def h(self) -> int:
        return self.image.get_height()

    def render(self, target: pygame.Surface, x: int, y: int, angle: int = 0) -> None:
        """Draw at (x, y), rotated clockwise by ``angle`` degrees about the image centre."""
        if angle % 360 == 0:
            target.blit(self.image, (x, y))
            return
        rotated = pygame.transform.rotate(self.image, -angle)
        rect = rotated.get_rect(center=(x + self.w // 2, y + self.h // 2))
        target.blit(rotated, rect)


class TextLabel:
    """A line of text rendered with the game font."""

    def __init__(
        self,
        text: str,
        size: int,
        font_path: str | Path | None = None,
        color: tuple[int, int, int] = BLACK,
    ) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        path = Path(font_path) if font_path is not None else asset_path(FONT)
        try:
            self.font = pygame.font.Font(str(path), size)
        except (OSError, pygame.error) as err:
            log.warning("Failed to open font %s: %s; using the default font", path, err)
            self.font = pygame.font.Font(None, size)
        self.color = color
        self.text = ""
        self.surface = pygame.Surface((0, 0))
        self.set_text(text)

    def set_text(self, text: str) -> None:
        """Re-render the label with new text."""
        self.text = text
        self.surface = self.font.render(text, False, self.color)

    def render(self, target: pygame.Surface, x: int, y: int) -> None:
        target.blit(self.surface, (x, y))


class Music:
    """Background music streamed by the mixer, looping forever once started."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        try:
            pygame.mixer.music.load(str(self.path))
        except (pygame.error, OSError) as err:
            log.error("Could not load music! Mixer error: %s", err)
            self.loaded = False
        else:
            self.loaded = True

    def play(self) -> bool:
        """Start the music if it is not already playing; return whether it is playing."""
        if not self.loaded:
            return False
        if not pygame.mixer.music.get_busy():
            pygame.mixer.music.play(loops=-1)
        return True

    def stop(self) -> None:
        if self.loaded:
            pygame.mixer.music.stop()
            pygame.mixer.music.unload()
            self.loaded = False


class Sound:
    """A short sound effect."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        try:
            self.chunk: pygame.mixer.Sound | None = pygame.mixer.Sound(str(self.path))
        except (pygame.error, OSError) as err:
            log.error("Could not load sound! Mixer error: %s", err)
            self.chunk = None

    @property
    def loaded(self) -> bool:
        return self.chunk is not None

    def play(self) -> bool:
        """Play the effect once on a free channel; return whether it was started."""
        if self.chunk is None:
            return False
        self.chunk.play()
        return True


class Window:
    """The game window together with the font and audio subsystems."""

    def __init__(
        self,
        title: str = WINDOW_TITLE,
        size: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT),
    ) -> None:
        self.title = title
        self.size = size
        self.surface: pygame.Surface | None = None

    def open(self) -> pygame.Surface:
        """Create the window and initialise fonts and audio."""
        try:
            pygame.display.init()
            self.surface = pygame.display.set_mode(self.size)
            pygame.display.set_caption(self.title)
        except pygame.error as err:
            self.close()
            raise RuntimeError(f"CreateWindow: {err}") from err

        try:
            pygame.font.init()
        except pygame.error as err:
            log.error("Font init failed: %s", err)

        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as err:
            self.close()
            raise RuntimeError(f"Mixer could not initialize: {err}") from err
        return self.surface

    def close(self) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        pygame.font.quit()
        pygame.display.quit()
        self.surface = None

    def update(self) -> None:
        """Present what has been drawn this frame."""
        pygame.display.flip()

    def __enter__(self) -> Window:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()