"""Current score and the persisted high score."""

from __future__ import annotations

from pathlib import Path

from lanerunner.settings import HIGHSCORE


class Score:
    """Tracks the running score and keeps the best one in a text file."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else Path(HIGHSCORE)
        self.score = 0
        self.high_score = 0
        if not self.path.exists():
            self.path.write_text("0")
        self.load_high_score()

    def load_high_score(self) -> int:
        """Read the high score from the file, keeping the current value if it is unreadable."""
        try:
            text = self.path.read_text().split()
        except OSError:
            return self.high_score
        if text:
            try:
                self.high_score = int(text[0])
            except ValueError:
                pass
        return self.high_score

    def increment(self) -> None:
        self.score += 1

    def update_high_score(self) -> None:
        """Store the current score as the high score if it beats it."""
        if self.score > self.high_score:
            self.path.write_text(str(self.score))
            self.high_score = self.score

    def reset_high_score(self) -> None:
        self.path.write_text("0\n")
        self.high_score = 0

    def score_text(self) -> str:
        return f"Score: {self.score}"

    def high_score_text(self) -> str:
        return f"High Score: {self.high_score}"