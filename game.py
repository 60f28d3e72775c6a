"""Game loop for Paddle Duel."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from board import Board
from config import Config, DevicePreset, STANDARD_PRESET
from opponent import OpponentController
from physics import advance_ball, reset_ball, resolve_collisions
from scoring import ScoreKeeper
from state import MatchState, Side, create_match_state


class MatchPhase(Enum):
    """Lifecycle of the game loop."""

    NOT_STARTED = "not_started"  # Fresh session, no match played yet
    RUNNING = "running"  # Frames are being scheduled
    OVER = "over"  # A side reached the winning score


@dataclass
class StepResult:
    """Result of a single simulation frame."""

    scored: Optional[Side] = None  # Side credited with a point this frame
    paddle_hit: Optional[Side] = None  # Whose paddle the ball bounced off
    winner: Optional[Side] = None  # Set on the frame that ends the match
    done: bool = False  # Whether the match is over


def _ignore(*args: Any) -> None:
    pass


class Game:
    """
    Main game class that runs one match at a time.

    Handles:
    - Match lifecycle (NOT_STARTED -> RUNNING -> OVER -> RUNNING)
    - Per-frame ordering: render, ball physics, opponent, match end
    - Frame scheduling through the host's refresh hook

    The host supplies three collaborators:
    - on_render(state): draws the board once per frame
    - on_overlay(message): shows the game-over overlay, or hides it for None
    - request_frame(callback): runs callback on the next display refresh
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        preset: Optional[DevicePreset] = None,
        on_render: Optional[Callable[[MatchState], None]] = None,
        on_overlay: Optional[Callable[[Optional[str]], None]] = None,
        request_frame: Optional[Callable[[Callable[[], None]], None]] = None,
    ):
        self.config = config or Config()
        self.preset = preset or STANDARD_PRESET
        self.board = Board(self.config)
        self.on_render = on_render or _ignore
        self.on_overlay = on_overlay or _ignore
        self.request_frame = request_frame or _ignore

        self.opponent = OpponentController()
        self.score_keeper = ScoreKeeper(self.config)

        self.phase = MatchPhase.NOT_STARTED
        self.state: MatchState = create_match_state(self.board, self.config, self.preset)
        self.frame_count = 0
        self.last_result: Optional[StepResult] = None

    def start(self) -> None:
        """Start a match, or a new one after the previous match ended."""
        if self.phase is MatchPhase.RUNNING:
            raise RuntimeError("A match is already running")

        if self.phase is MatchPhase.OVER:
            self.on_overlay(None)
            self.state = create_match_state(self.board, self.config, self.preset)

        self.phase = MatchPhase.RUNNING
        self.frame_count = 0
        self.last_result = None
        self.state.reset_scores()
        reset_ball(self.state, self.board, self.config)

        self.on_render(self.state)
        self.request_frame(self.frame)

    def frame(self) -> None:
        """Run one scheduled frame and schedule the next while the match runs."""
        if self.phase is not MatchPhase.RUNNING:
            return

        self.on_render(self.state)
        result = self.step()

        if result.winner is not None:
            self.on_overlay(ScoreKeeper.winner_message(result.winner))
        else:
            self.request_frame(self.frame)

    def step(self) -> StepResult:
        """
        Advance the simulation by one frame without rendering or scheduling.

        Returns:
            StepResult for the frame
        """
        if self.phase is not MatchPhase.RUNNING:
            return StepResult(done=self.phase is MatchPhase.OVER)

        self.frame_count += 1

        advance_ball(self.state)
        collision = resolve_collisions(self.state, self.board, self.config)
        self.opponent.move(self.state)

        winner = self.score_keeper.check_match_end(self.state)
        if winner is not None:
            self.phase = MatchPhase.OVER

        self.last_result = StepResult(
            scored=collision.scored,
            paddle_hit=collision.paddle_hit,
            winner=winner,
            done=winner is not None,
        )
        return self.last_result

    def get_observation(self) -> Dict[str, Any]:
        """
        Get the current match observation for autopilot agents.

        Returns:
            Dictionary containing match state information
        """
        ball = self.state.ball
        return {
            # Ball state
            "ball_x": ball.x,
            "ball_y": ball.y,
            "ball_vx": ball.vx,
            "ball_vy": ball.vy,
            "ball_touched_paddle": ball.touched_paddle,
            # Paddles (left edges)
            "paddle_bottom_x": self.state.paddle_bottom.x,
            "paddle_top_x": self.state.paddle_top.x,
            "player_has_moved": self.state.player_has_moved,
            # Scores
            "player_score": self.state.player_score,
            "opponent_score": self.state.opponent_score,
            # Board info (static but useful for normalization)
            "board_width": self.config.board_width,
            "board_height": self.config.board_height,
            "paddle_width": self.config.paddle_width,
        }

    @property
    def is_running(self) -> bool:
        return self.phase is MatchPhase.RUNNING

    @property
    def is_game_over(self) -> bool:
        """Check if the match is over."""
        return self.phase is MatchPhase.OVER

    @property
    def winner(self) -> Optional[Side]:
        """Get the winner if the match is over, None otherwise."""
        if not self.is_game_over:
            return None
        return self.score_keeper.check_match_end(self.state)
