"""Entry point: runs the screens one after another until the player quits."""

from __future__ import annotations

import argparse

import pygame

from lanerunner.assets import Music, Window
from lanerunner.level import Level
from lanerunner.screens import HighScoreScreen, LostScreen, MenuScreen
from lanerunner.settings import MUSIC, GameState, asset_path


def run_menu(window) -> GameState:
    """Show the menu until a choice is made; return the next state."""
    menu = MenuScreen(window)
    while menu.state is GameState.MENU:
        menu.render()
        menu.process_events()
    return menu.state


def run_level(window) -> tuple[GameState, int]:
    """Play one level until it ends; return the next state and the score reached."""
    level = Level(window)
    while not level.ended:
        level.process_events()
        level.step()
        level.render()
        level.remove_passed_blocks()
        level.update_speed()
        pygame.time.delay(level.delay)
    return GameState.LOST, level.score.score


def run_lost(window, score: int) -> GameState:
    """Show the game-over screen for ``score``; return the next state."""
    lost = LostScreen(window, score)
    while lost.state is GameState.LOST:
        lost.render()
        lost.process_events()
    return lost.state


def run_high_score(window) -> GameState:
    """Show the high-score screen until the player leaves it; return the next state."""
    screen = HighScoreScreen(window)
    while screen.state is GameState.HIGH_SCORE:
        screen.render()
        screen.process_events()
    return screen.state


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lanerunner",
        description="Roll along three lanes and jump over the stones.",
    )
    parser.parse_args(argv)

    with Window() as window:
        music = Music(asset_path(MUSIC))
        music.play()
        try:
            state = GameState.MENU
            score = 0
            while state is not GameState.END_GAME:
                if state is GameState.MENU:
                    state = run_menu(window)
                elif state is GameState.HIGH_SCORE:
                    state = run_high_score(window)
                elif state is GameState.LEVEL:
                    state, score = run_level(window)
                elif state is GameState.LOST:
                    state = run_lost(window, score)
        finally:
            music.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())