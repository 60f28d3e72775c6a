"""Computer-controlled top paddle for Paddle Duel."""

from state import MatchState


class OpponentController:
    """
    Reactive opponent that steps toward the ball.

    Strategy:
    - Stay still until the human has moved
    - Move a full ``opponent_speed`` step toward the ball every frame

    The step is constant, so the paddle overshoots and oscillates around
    the ball's x position instead of settling on it.
    """

    def move(self, state: MatchState) -> None:
        if not state.player_has_moved:
            return

        paddle = state.paddle_top
        if paddle.center_x < state.ball.x:
            paddle.move_by(state.opponent_speed)
        else:
            paddle.move_by(-state.opponent_speed)
