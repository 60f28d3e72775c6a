"""Board geometry for Paddle Duel."""

from dataclasses import dataclass
from typing import Tuple, Optional

from config import Config


@dataclass
class Rectangle:
    """A rectangle defined by top-left corner and dimensions."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Tuple[float, float]:
        """Get the center of the rectangle."""
        return (self.x + self.width / 2, self.y + self.height / 2)


class Board:
    """
    The play area with side walls and two goal lines.

    The human defends the bottom edge, the opponent the top edge.
    Each edge has a contact band of ``contact_margin`` units where
    paddle hits are checked before the goal line is.
    """

    def __init__(self, config: Config):
        self.config = config
        self.bounds = Rectangle(0, 0, config.board_width, config.board_height)

    @property
    def width(self) -> float:
        return self.config.board_width

    @property
    def height(self) -> float:
        return self.config.board_height

    @property
    def center(self) -> Tuple[float, float]:
        """Get the center of the board."""
        return self.bounds.center

    def in_bottom_zone(self, y: float) -> bool:
        """Check if y lies in the human paddle's contact band."""
        return y > self.height - self.config.contact_margin

    def past_bottom(self, y: float) -> bool:
        return y > self.height

    def in_top_zone(self, y: float) -> bool:
        """Check if y lies in the opponent paddle's contact band."""
        return y < self.config.contact_margin

    def past_top(self, y: float) -> bool:
        return y < 0

    def check_wall_collision(self, x: float, vx: float) -> Optional[str]:
        """
        Check if the ball has crossed a side wall while moving into it.

        Returns:
            None if no collision, or 'left' / 'right'
        """
        if x < 0 and vx < 0:
            return "left"
        if x > self.width and vx > 0:
            return "right"
        return None

    def clamp_paddle_x(self, x: float) -> float:
        """Clamp a paddle's left edge so the paddle stays on the board."""
        return max(0.0, min(x, float(self.width - self.config.paddle_width)))
