"""Match-end detection for Paddle Duel."""

from typing import Optional

from config import Config
from state import MatchState, Side


class ScoreKeeper:
    """Decides when a match is over and who won it."""

    def __init__(self, config: Config):
        self.winning_score = config.winning_score

    def check_match_end(self, state: MatchState) -> Optional[Side]:
        """
        Check whether either side has reached the winning score.

        Scores only ever grow by one, so the first side to reach
        ``winning_score`` is the winner.

        Returns:
            The winning Side, or None while the match continues
        """
        if state.player_score == self.winning_score:
            return Side.PLAYER
        if state.opponent_score == self.winning_score:
            return Side.OPPONENT
        return None

    @staticmethod
    def winner_message(side: Side) -> str:
        return f"{side.label} wins!"
