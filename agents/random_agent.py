"""Random Agent - Baseline random pointer."""

import random
from typing import Any, Dict, Optional

from agents.base import Agent, AgentConfig


class RandomAgent(Agent):
    """
    Random agent that jumps the pointer around the board.

    Useful as a baseline for comparison.
    """

    def __init__(self, config: Optional[AgentConfig] = None, seed: Optional[int] = None):
        if config is None:
            config = AgentConfig(
                name="RandomBot",
                agent_type="random",
                description="Random pointer jumps for baseline comparison",
                parameters={
                    "move_probability": 0.05,  # Chance per frame to jump
                },
            )
        super().__init__(config)
        self.rng = random.Random(seed)

    def act(self, observation: Dict[str, Any]) -> Optional[float]:
        """Occasionally jump to a random x, otherwise stay put."""
        probability = self.config.parameters.get("move_probability", 0.05)
        if self.rng.random() >= probability:
            return None
        return self.rng.uniform(0, observation["board_width"])

    def get_info(self) -> Dict[str, Any]:
        """Get agent info."""
        info = super().get_info()
        info["strategy"] = "Random pointer jumps"
        return info
