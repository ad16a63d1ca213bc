"""
Bilogic - AI Debate System

Two LLM agents argue FOR and AGAINST a topic in alternating rounds,
orchestrated with LangGraph, and a judge delivers a structured verdict.
"""

from .config import DebateConfig
from .errors import (
    ConfigurationError,
    DebateError,
    JudgingFailure,
    OracleFailure,
    StateUpdateError,
)
from .models import AgentProfile, JudgeVerdict, Message, Role, Side
from .oracle import Oracle
from .state import DebateState
from .graph import create_debate_graph, run_debate, stream_debate

__all__ = [
    "AgentProfile",
    "ConfigurationError",
    "DebateConfig",
    "DebateError",
    "DebateState",
    "JudgeVerdict",
    "JudgingFailure",
    "Message",
    "Oracle",
    "OracleFailure",
    "Role",
    "Side",
    "StateUpdateError",
    "create_debate_graph",
    "run_debate",
    "stream_debate",
]
