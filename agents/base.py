"""Base Agent class for Paddle Duel autopilots."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any, Optional


@dataclass
class AgentConfig:
    """Configuration for an agent."""

    name: str = "unnamed"
    agent_type: str = "base"
    description: str = ""
    parameters: Dict[str, Any] = field(default_factory=dict)


class Agent(ABC):
    """
    Abstract base class for autopilots that stand in for the human pointer.

    An agent receives observations and returns a pointer x coordinate,
    which goes through the same input adapter as real pointer motion.
    """

    def __init__(self, config: Optional[AgentConfig] = None):
        self.config = config or AgentConfig()

    @abstractmethod
    def act(self, observation: Dict[str, Any]) -> Optional[float]:
        """
        Choose where the pointer goes this frame.

        Args:
            observation: Match state from game.get_observation()

        Returns:
            Pointer x in board coordinates, or None to leave the pointer still
        """
        pass

    def reset(self) -> None:
        """Reset agent state for a new match."""
        pass

    def get_info(self) -> Dict[str, Any]:
        """Get agent information for display."""
        return {
            "name": self.config.name,
            "type": self.config.agent_type,
            "description": self.config.description,
        }


def get_agent_class(agent_type: str) -> type:
    """Get agent class by type name."""
    from agents.random_agent import RandomAgent
    from agents.tracking import TrackingAgent

    agent_classes = {
        "tracking": TrackingAgent,
        "random": RandomAgent,
    }

    if agent_type not in agent_classes:
        raise ValueError(f"Unknown agent type: {agent_type}. "
                        f"Available: {list(agent_classes.keys())}")

    return agent_classes[agent_type]
