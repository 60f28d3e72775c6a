"""Configuration for Paddle Duel."""

from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional


@dataclass
class Config:
    """Fixed constants for a match. Nothing here changes while a match runs."""

    # Board dimensions
    board_width: int = 500
    board_height: int = 700

    # Paddle properties
    paddle_width: int = 50
    paddle_height: int = 10
    paddle_start_x: float = 225.0
    paddle_top_y: int = 10
    paddle_bottom_offset: int = 20  # Human paddle sits at board_height - offset
    contact_margin: int = 25  # Band near each edge where paddle hits are checked

    # Ball properties
    ball_radius: int = 5
    restart_speed_y: float = -3.0
    speed_step: float = 1.0
    max_speed_y: float = 5.0
    deflection_factor: float = 0.3

    # Opponent
    ratchet_opponent_speed: float = 6.0

    # Match rules
    winning_score: int = 3

    # Device class: screens at most this wide get the compact preset
    compact_screen_width: int = 600

    # Headless / env settings
    max_frames_per_match: int = 20000  # Prevent endless rallies
    reward_point_win: float = 1.0
    reward_point_lose: float = -1.0
    reward_rally: float = 0.1
    pointer_step: float = 10.0

    # Display settings
    fps: int = 60

    def __post_init__(self):
        if self.board_width <= 0 or self.board_height <= 0:
            raise ValueError(
                f"Board dimensions must be positive, got {self.board_width}x{self.board_height}"
            )
        if not 0 < self.paddle_width <= self.board_width:
            raise ValueError(
                f"paddle_width must be in (0, {self.board_width}], got {self.paddle_width}"
            )
        if self.winning_score < 1:
            raise ValueError(f"winning_score must be at least 1, got {self.winning_score}")
        if self.contact_margin <= 0:
            raise ValueError(f"contact_margin must be positive, got {self.contact_margin}")
        if self.max_speed_y <= 0:
            raise ValueError(f"max_speed_y must be positive, got {self.max_speed_y}")

    @property
    def paddle_half_width(self) -> float:
        return self.paddle_width / 2

    @property
    def paddle_bottom_y(self) -> int:
        return self.board_height - self.paddle_bottom_offset

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create config from dictionary, ignoring unknown keys."""
        return cls(**{k: v for k, v in data.items() if hasattr(cls, k)})


@dataclass(frozen=True)
class DevicePreset:
    """Initial ball speeds and opponent speed picked once per device class."""

    name: str
    speed_y: float
    speed_x: float
    opponent_speed: float


COMPACT_PRESET = DevicePreset(name="compact", speed_y=-2.0, speed_x=-2.0, opponent_speed=4.0)
STANDARD_PRESET = DevicePreset(name="standard", speed_y=-1.0, speed_x=-1.0, opponent_speed=3.0)

PRESETS = {
    COMPACT_PRESET.name: COMPACT_PRESET,
    STANDARD_PRESET.name: STANDARD_PRESET,
}


def select_preset(screen_width: int, config: Optional[Config] = None) -> DevicePreset:
    """
    Pick the device preset for a screen width.

    Args:
        screen_width: Width of the host screen in pixels
        config: Game configuration (for the compact threshold)

    Returns:
        COMPACT_PRESET for narrow screens, STANDARD_PRESET otherwise
    """
    config = config or DEFAULT_CONFIG
    if screen_width <= config.compact_screen_width:
        return COMPACT_PRESET
    return STANDARD_PRESET


# Default configuration instance
DEFAULT_CONFIG = Config()
