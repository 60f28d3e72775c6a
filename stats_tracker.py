"""Statistics tracking for Paddle Duel."""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, List, Optional

from game import StepResult
from state import Side


@dataclass
class MatchStats:
    """Statistics for a single match."""

    match_num: int
    winner: Optional[Side]  # None when the match hit the frame limit
    player_score: int
    opponent_score: int
    frames: int
    longest_rally: int


class StatsTracker:
    """Tracks match statistics across matches.

    A rally is the number of paddle hits between two points.
    """

    def __init__(self, max_history: int = 200):
        self.max_history = max_history

        self.total_wins: Dict[Side, int] = {Side.PLAYER: 0, Side.OPPONENT: 0}
        self.timeouts = 0
        self.match_count = 0
        self.matches: List[MatchStats] = []

        # Current match tracking
        self.current_rally = 0
        self.longest_rally = 0
        self.rally_lengths: List[int] = []
        self.points = {Side.PLAYER: 0, Side.OPPONENT: 0}

        # Event log
        self.event_log: Deque[str] = deque(maxlen=8)
        self.frame_count = 0

    def log_event(self, message: str) -> None:
        """Add event to log."""
        self.event_log.appendleft(f"F{self.frame_count}: {message}")

    def record_step(self, result: StepResult) -> None:
        """Record the outcome of one frame."""
        self.frame_count += 1
        if result.paddle_hit is not None:
            self.current_rally += 1
            self.longest_rally = max(self.longest_rally, self.current_rally)
        if result.scored is not None:
            self.points[result.scored] += 1
            self.rally_lengths.append(self.current_rally)
            self.log_event(f"Point to {result.scored.label} after {self.current_rally} hits")
            self.current_rally = 0
        if result.winner is not None:
            self.log_event(f"{result.winner.label} wins")

    def end_match(self, winner: Optional[Side], frames: int) -> MatchStats:
        """Finalize match statistics."""
        self.match_count += 1
        if winner is None:
            self.timeouts += 1
        else:
            self.total_wins[winner] += 1

        stats = MatchStats(
            match_num=self.match_count,
            winner=winner,
            player_score=self.points[Side.PLAYER],
            opponent_score=self.points[Side.OPPONENT],
            frames=frames,
            longest_rally=self.longest_rally,
        )
        self.matches.append(stats)

        # Trim history
        if len(self.matches) > self.max_history:
            self.matches = self.matches[-self.max_history :]

        # Reset for next match
        self.current_rally = 0
        self.longest_rally = 0
        self.points = {Side.PLAYER: 0, Side.OPPONENT: 0}
        return stats

    @property
    def average_rally(self) -> float:
        """Mean number of paddle hits per point."""
        if not self.rally_lengths:
            return 0.0
        return sum(self.rally_lengths) / len(self.rally_lengths)

    @property
    def win_rate_player(self) -> float:
        """Win rate for the human side over decided matches."""
        total = sum(self.total_wins.values())
        return self.total_wins[Side.PLAYER] / total if total > 0 else 0.5

    @property
    def win_rate_opponent(self) -> float:
        """Win rate for the computer side."""
        return 1.0 - self.win_rate_player
