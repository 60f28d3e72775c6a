"""Ball movement and collision resolution for Paddle Duel."""

from dataclasses import dataclass
from typing import Optional

from board import Board
from config import Config
from state import MatchState, Side


@dataclass
class CollisionResult:
    """What the ball ran into during one frame."""

    scored: Optional[Side] = None  # Side credited with a point
    paddle_hit: Optional[Side] = None  # Whose paddle the ball bounced off
    wall: Optional[str] = None  # 'left' / 'right'


def advance_ball(state: MatchState) -> None:
    """
    Move the ball by one frame.

    The ball only drifts sideways once the human has moved and the ball
    has touched the human paddle since the last reset.
    """
    state.ball.advance(horizontal=state.player_has_moved and state.ball.touched_paddle)


def reset_ball(state: MatchState, board: Board, config: Config) -> None:
    """Center the ball and restart it toward the human paddle."""
    center_x, center_y = board.center
    state.ball.reset(center_x, center_y, config.restart_speed_y)


def resolve_collisions(state: MatchState, board: Board, config: Config) -> CollisionResult:
    """
    Bounce the ball off walls and paddles, or award a point.

    Args:
        state: Match state, mutated in place
        board: The board
        config: Game configuration

    Returns:
        CollisionResult describing the frame
    """
    ball = state.ball
    result = CollisionResult()

    wall = board.check_wall_collision(ball.x, ball.vx)
    if wall is not None:
        ball.reflect_x()
        result.wall = wall

    # Human paddle (bottom)
    if board.in_bottom_zone(ball.y):
        paddle = state.paddle_bottom
        if paddle.spans(ball.x):
            ball.touched_paddle = True
            if state.player_has_moved:
                ball.vy -= config.speed_step
                if ball.vy <= -config.max_speed_y:
                    ball.vy = -config.max_speed_y
                    state.opponent_speed = config.ratchet_opponent_speed
            ball.reflect_y()
            # Deflection grows with the distance from the paddle center
            trajectory_x = ball.x - paddle.center_x
            ball.vx = trajectory_x * config.deflection_factor
            result.paddle_hit = Side.PLAYER
        elif board.past_bottom(ball.y):
            reset_ball(state, board, config)
            state.award_point(Side.OPPONENT)
            result.scored = Side.OPPONENT

    # Opponent paddle (top): no deflection, no ratchet
    if board.in_top_zone(ball.y):
        paddle = state.paddle_top
        if paddle.spans(ball.x):
            if state.player_has_moved:
                ball.vy += config.speed_step
                if ball.vy > config.max_speed_y:
                    ball.vy = config.max_speed_y
            ball.reflect_y()
            result.paddle_hit = Side.OPPONENT
        elif board.past_top(ball.y):
            reset_ball(state, board, config)
            state.award_point(Side.PLAYER)
            result.scored = Side.PLAYER

    return result
