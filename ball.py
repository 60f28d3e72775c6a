"""Ball logic for Paddle Duel."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Ball:
    """
    The ball with position, velocity and paddle-contact flag.

    ``vy`` uses an inverted sign: each frame the ball moves by ``-vy``
    on the y axis, so a negative ``vy`` travels down toward the human
    paddle. ``touched_paddle`` stays False until the ball first meets
    the human paddle after a reset; until then the ball does not drift
    sideways.
    """

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    touched_paddle: bool = False
    radius: float = 5.0

    def advance(self, horizontal: bool = True) -> None:
        """
        Move the ball by one frame.

        Args:
            horizontal: Whether to apply the horizontal velocity this frame
        """
        self.y += -self.vy
        if horizontal:
            self.x += self.vx

    def reflect_x(self) -> None:
        """Bounce off a side wall."""
        self.vx = -self.vx

    def reflect_y(self) -> None:
        """Bounce off a paddle."""
        self.vy = -self.vy

    @property
    def position(self) -> Tuple[float, float]:
        """Get ball position as tuple."""
        return (self.x, self.y)

    def reset(self, x: float, y: float, vy: float) -> None:
        """Re-center the ball for a new rally. vx is left as is."""
        self.x = x
        self.y = y
        self.vy = vy
        self.touched_paddle = False
