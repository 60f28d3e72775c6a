"""Tracking Agent - follows the ball with a limited pointer speed."""

from typing import Dict, Any, Optional

from agents.base import Agent, AgentConfig


class TrackingAgent(Agent):
    """
    Rule-based autopilot that keeps the paddle under the ball.

    Strategy:
    - Aim the paddle center at ball_x - aim_offset, so the ball lands right of center
    - Move the pointer at most max_step units per frame

    A nonzero aim offset hits the ball off-center, which gives it
    sideways speed.
    """

    def __init__(self, config: Optional[AgentConfig] = None):
        if config is None:
            config = AgentConfig(
                name="TrackBot",
                agent_type="tracking",
                description="Follows the ball with a capped pointer speed",
                parameters={
                    "max_step": 8.0,  # Pointer units per frame
                    "aim_offset": 6.0,  # Hit this far right of paddle center
                },
            )
        super().__init__(config)
        self.pointer_x: Optional[float] = None

    def reset(self) -> None:
        self.pointer_x = None

    def act(self, observation: Dict[str, Any]) -> Optional[float]:
        """Step the pointer toward the ball."""
        max_step = self.config.parameters.get("max_step", 8.0)
        aim_offset = self.config.parameters.get("aim_offset", 0.0)

        if self.pointer_x is None:
            self.pointer_x = observation["paddle_bottom_x"] + observation["paddle_width"] / 2

        # The paddle center follows the pointer, so aim it left of the hit point
        target = observation["ball_x"] - aim_offset
        delta = max(-max_step, min(max_step, target - self.pointer_x))
        self.pointer_x += delta
        return self.pointer_x

    def get_info(self) -> Dict[str, Any]:
        """Get agent info with additional details."""
        info = super().get_info()
        info["strategy"] = "Track the ball x with capped pointer speed"
        return info
