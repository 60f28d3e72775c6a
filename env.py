"""Gymnasium environment for Paddle Duel."""

from typing import Optional, Dict

import numpy as np
from gymnasium import spaces

from config import Config, DevicePreset
from game import Game
from pointer import PointerInput
from state import Side

# Discrete pointer actions
ACTION_LEFT, ACTION_STAY, ACTION_RIGHT = 0, 1, 2


class PaddleEnv:
    """Gymnasium-compatible environment: an agent plays the human paddle
    against the built-in opponent."""

    metadata = {"render_modes": ["human"]}

    def __init__(self, config: Optional[Config] = None, preset: Optional[DevicePreset] = None,
                 render_mode: Optional[str] = None):
        self.config = config or Config()
        self.preset = preset
        self.render_mode = render_mode
        self.renderer = None

        self.game = Game(self.config, preset=self.preset)
        self.pointer = PointerInput(self.game)
        self.pointer_x = self.game.state.paddle_bottom.center_x
        self.steps = 0
        self.np_random = np.random.default_rng()

        self.observation_space = spaces.Box(-1.0, 1.0, (6,), np.float32)
        self.action_space = spaces.Discrete(3)

    def _get_observation(self) -> np.ndarray:
        """Normalized [ball_x, ball_y, ball_vx, ball_vy, bottom_x, top_x]."""
        state = self.game.state
        width, height = self.config.board_width, self.config.board_height
        max_vx = self.config.paddle_half_width * self.config.deflection_factor
        obs = np.array([
            state.ball.x / width, state.ball.y / height,
            state.ball.vx / max_vx, state.ball.vy / self.config.max_speed_y,
            state.paddle_bottom.x / width, state.paddle_top.x / width,
        ], dtype=np.float32)
        return np.clip(obs, -1.0, 1.0)

    def reset(self, seed: Optional[int] = None, options: Optional[Dict] = None):
        if seed is not None:
            self.np_random = np.random.default_rng(seed)

        self.game = Game(self.config, preset=self.preset)
        self.pointer = PointerInput(self.game)
        self.game.start()
        self.steps = 0

        half = self.config.paddle_half_width
        self.pointer_x = float(self.np_random.uniform(half, self.config.board_width - half))
        self.pointer.on_pointer_move(self.pointer_x)
        return self._get_observation(), {"raw_observation": self.game.get_observation()}

    def step(self, action: int):
        """Step environment. Returns (obs, reward, terminated, truncated, info)."""
        action = int(action)
        if action != ACTION_STAY:
            direction = -1 if action == ACTION_LEFT else 1
            self.pointer_x = min(max(self.pointer_x + direction * self.config.pointer_step, 0.0),
                                 float(self.config.board_width))
            self.pointer.on_pointer_move(self.pointer_x)

        result = self.game.step()
        self.steps += 1

        reward = 0.0
        if result.paddle_hit is Side.PLAYER:
            reward += self.config.reward_rally
        if result.scored is Side.PLAYER:
            reward += self.config.reward_point_win
        elif result.scored is Side.OPPONENT:
            reward += self.config.reward_point_lose

        terminated = result.done
        truncated = not terminated and self.steps >= self.config.max_frames_per_match
        info = {
            "raw_observation": self.game.get_observation(),
            "scored": result.scored,
            "paddle_hit": result.paddle_hit,
            "winner": result.winner,
        }
        return self._get_observation(), reward, terminated, truncated, info

    def render(self) -> None:
        if self.render_mode is None:
            return
        if self.renderer is None:
            from renderer import Renderer
            self.renderer = Renderer(self.config)
        self.renderer.draw(self.game.state)
        self.renderer.present()
        self.renderer.tick()

    def close(self) -> None:
        if self.renderer:
            self.renderer.close()
            self.renderer = None
