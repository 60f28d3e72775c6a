"""Pygame renderer for Paddle Duel."""

from typing import Optional, Tuple

import pygame

from config import Config
from state import MatchState

# Colors
WHITE, BLACK = (255, 255, 255), (0, 0, 0)
GRAY, DARK_GRAY = (128, 128, 128), (40, 40, 40)

DASH_LENGTH, DASH_GAP = 20, 5


def detect_screen_width() -> int:
    """Query the width of the host display, for picking the device preset."""
    pygame.display.init()
    return pygame.display.Info().current_w


class Renderer:
    """Draws the board, and the game-over overlay that replaces it."""

    def __init__(self, config: Optional[Config] = None, padding: int = 50):
        self.config = config or Config()
        self.padding = padding
        self.window_width = self.config.board_width + 2 * self.padding
        self.window_height = self.config.board_height + 2 * self.padding

        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Paddle Duel")
        self.clock = pygame.time.Clock()
        self.score_font = pygame.font.SysFont("Courier New", 32)
        self.title_font = pygame.font.SysFont("Courier New", 48, bold=True)
        self.button_font = pygame.font.SysFont("Courier New", 24)

        self.overlay_message: Optional[str] = None
        self.play_again_rect = pygame.Rect(0, 0, 200, 50)
        self.play_again_rect.center = (self.window_width // 2, self.window_height // 2 + 40)

    @property
    def board_offset(self) -> Tuple[int, int]:
        """Top-left corner of the board inside the window."""
        return (self.padding, self.padding)

    @property
    def visible(self) -> bool:
        """True while the game-over overlay is shown."""
        return self.overlay_message is not None

    def _to_screen(self, x: float, y: float) -> Tuple[int, int]:
        return (int(x + self.padding), int(y + self.padding))

    def _draw_center_line(self) -> None:
        y = self.config.board_height / 2
        x = 0
        while x < self.config.board_width:
            end = min(x + DASH_LENGTH, self.config.board_width)
            pygame.draw.line(self.screen, WHITE, self._to_screen(x, y), self._to_screen(end, y), 1)
            x += DASH_LENGTH + DASH_GAP

    def draw(self, state: MatchState) -> None:
        """Paint one frame of the board."""
        if self.visible:
            return
        self.screen.fill(DARK_GRAY)
        board_rect = pygame.Rect(*self._to_screen(0, 0),
                                 self.config.board_width, self.config.board_height)
        pygame.draw.rect(self.screen, BLACK, board_rect)

        for paddle in (state.paddle_top, state.paddle_bottom):
            rect = pygame.Rect(*self._to_screen(*paddle.position),
                               int(paddle.width), int(paddle.height))
            pygame.draw.rect(self.screen, WHITE, rect)

        self._draw_center_line()

        ball = state.ball
        pygame.draw.circle(self.screen, WHITE, self._to_screen(*ball.position), int(ball.radius))

        # Text is drawn from its baseline, like a canvas fillText
        half = self.config.board_height / 2
        for score, baseline in ((state.player_score, half + 50), (state.opponent_score, half - 30)):
            text = self.score_font.render(str(score), True, WHITE)
            pos = self._to_screen(20, baseline - self.score_font.get_ascent())
            self.screen.blit(text, pos)

    def set_overlay(self, message: Optional[str]) -> None:
        """Show the game-over overlay with message, or hide it when message is None."""
        self.overlay_message = message
        if message is None:
            return
        pygame.mouse.set_visible(True)
        self.screen.fill(DARK_GRAY)

        title = self.title_font.render(message, True, WHITE)
        self.screen.blit(title, title.get_rect(center=(self.window_width // 2,
                                                       self.window_height // 2 - 40)))
        pygame.draw.rect(self.screen, BLACK, self.play_again_rect)
        pygame.draw.rect(self.screen, WHITE, self.play_again_rect, 2)
        label = self.button_font.render("Play again", True, WHITE)
        self.screen.blit(label, label.get_rect(center=self.play_again_rect.center))

    def play_again_hit(self, pos: Tuple[int, int]) -> bool:
        return self.visible and self.play_again_rect.collidepoint(pos)

    def hide_cursor(self) -> None:
        pygame.mouse.set_visible(False)

    def present(self) -> None:
        pygame.display.flip()

    def tick(self, fps: Optional[int] = None) -> None:
        self.clock.tick(fps if fps is not None else self.config.fps)

    def close(self) -> None:
        pygame.quit()
