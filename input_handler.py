"""Input handling and UI state management for Paddle Duel."""

from dataclasses import dataclass
from typing import Callable, Dict

import pygame

from pointer import PointerInput


@dataclass
class InputState:
    """Current state of input/UI controls."""

    quit_requested: bool = False
    replay_requested: bool = False


class InputHandler:
    """Handles pygame events and manages UI state.

    Separates input processing from rendering. The host loop queries
    this handler for quit/replay requests, while pointer motion goes
    straight to the paddle.
    """

    def __init__(self, pointer: PointerInput, overlay=None):
        self.pointer = pointer
        self.overlay = overlay
        self.state = InputState()
        self._key_bindings: Dict[int, Callable[[], None]] = {
            pygame.K_ESCAPE: lambda: setattr(self.state, "quit_requested", True),
            pygame.K_r: self.request_replay,
            pygame.K_RETURN: self.request_replay,
        }

    def request_replay(self) -> None:
        self.state.replay_requested = True

    def _overlay_visible(self) -> bool:
        return self.overlay is not None and self.overlay.visible

    def process_events(self) -> None:
        """Process all pending pygame events and update state."""
        for event in pygame.event.get():
            self.handle_event(event)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.state.quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key in self._key_bindings:
                self._key_bindings[event.key]()
        elif event.type == pygame.MOUSEMOTION:
            # The board is hidden behind the overlay
            if self._overlay_visible():
                return
            self.pointer.on_pointer_move(event.pos[0])
            if self.overlay is not None:
                self.overlay.hide_cursor()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if self._overlay_visible() and self.overlay.play_again_hit(event.pos):
                self.request_replay()

    def consume_replay_request(self) -> bool:
        """Check and consume replay request flag."""
        if self.state.replay_requested:
            self.state.replay_requested = False
            return True
        return False

    @property
    def running(self) -> bool:
        """True if the host loop should continue running."""
        return not self.state.quit_requested
