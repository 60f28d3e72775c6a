"""Paddle logic for Paddle Duel."""

from dataclasses import dataclass
from typing import Tuple

from config import Config


@dataclass
class Paddle:
    """A horizontal paddle. ``x`` is the left edge; ``y`` never changes."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width

    def spans(self, px: float) -> bool:
        """Check if a horizontal position lies over the paddle (edges included)."""
        return self.x <= px <= self.right

    def move_by(self, dx: float) -> None:
        self.x += dx

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


def create_paddles(config: Config) -> Tuple[Paddle, Paddle]:
    """
    Create both paddles at their starting positions.

    Returns:
        Tuple of (bottom_paddle, top_paddle)
    """
    bottom = Paddle(
        x=config.paddle_start_x,
        y=config.paddle_bottom_y,
        width=config.paddle_width,
        height=config.paddle_height,
    )
    top = Paddle(
        x=config.paddle_start_x,
        y=config.paddle_top_y,
        width=config.paddle_width,
        height=config.paddle_height,
    )
    return (bottom, top)
