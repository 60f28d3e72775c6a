"""Pointer-to-paddle input adapter for Paddle Duel."""

from typing import TYPE_CHECKING

from board import Board

if TYPE_CHECKING:
    from game import Game


def pointer_to_paddle_x(pointer_x: float, surface_offset: float, board: Board) -> float:
    """
    Convert a pointer x coordinate into the human paddle's left edge.

    Args:
        pointer_x: Pointer x in window coordinates
        surface_offset: Left offset of the board inside the window
        board: The board the paddle must stay on

    Returns:
        Left edge x, clamped to [0, board_width - paddle_width]
    """
    return board.clamp_paddle_x(pointer_x - surface_offset - board.config.paddle_half_width)


class PointerInput:
    """Moves the human paddle from pointer coordinates.

    Bound to the game once, at construction. It reads ``game.state`` on
    every event, so a replay that swaps in a fresh match state needs no
    re-attachment.
    """

    def __init__(self, game: "Game", surface_offset: float = 0.0):
        self.game = game
        self.surface_offset = surface_offset

    def on_pointer_move(self, pointer_x: float) -> None:
        state = self.game.state
        state.player_has_moved = True
        state.paddle_bottom.x = pointer_to_paddle_x(
            pointer_x, self.surface_offset, self.game.board
        )
