"""
Autopilot agents for Paddle Duel.

Scripted stand-ins for the human pointer, used by headless matches
and the environment.
"""

from agents.base import Agent, AgentConfig, get_agent_class
from agents.random_agent import RandomAgent
from agents.tracking import TrackingAgent

__all__ = [
    "Agent",
    "AgentConfig",
    "get_agent_class",
    "TrackingAgent",
    "RandomAgent",
]
