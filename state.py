"""Mutable match state for Paddle Duel."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ball import Ball
from board import Board
from config import Config, DevicePreset, STANDARD_PRESET
from paddle import Paddle, create_paddles


class Side(Enum):
    """Who a point, a hit or a match belongs to."""

    PLAYER = "player"  # Human, bottom paddle
    OPPONENT = "opponent"  # Computer, top paddle

    @property
    def label(self) -> str:
        return "Human" if self is Side.PLAYER else "Computer"


@dataclass
class MatchState:
    """Everything that changes during one match."""

    ball: Ball
    paddle_bottom: Paddle
    paddle_top: Paddle
    opponent_speed: float
    player_has_moved: bool = False
    player_score: int = 0
    opponent_score: int = 0

    def award_point(self, side: Side) -> None:
        if side is Side.PLAYER:
            self.player_score += 1
        else:
            self.opponent_score += 1

    def reset_scores(self) -> None:
        self.player_score = 0
        self.opponent_score = 0


def create_match_state(
    board: Board, config: Config, preset: Optional[DevicePreset] = None
) -> MatchState:
    """
    Create the state for a fresh match.

    Args:
        board: The board (for the ball's starting position)
        config: Game configuration
        preset: Device preset with the initial speeds

    Returns:
        MatchState with the ball centered and both paddles at their start
    """
    preset = preset or STANDARD_PRESET
    center_x, center_y = board.center
    ball = Ball(
        x=center_x,
        y=center_y,
        vx=preset.speed_x,
        vy=preset.speed_y,
        radius=config.ball_radius,
    )
    paddle_bottom, paddle_top = create_paddles(config)
    return MatchState(
        ball=ball,
        paddle_bottom=paddle_bottom,
        paddle_top=paddle_top,
        opponent_speed=preset.opponent_speed,
    )
