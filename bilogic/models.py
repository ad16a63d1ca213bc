"""
Pydantic models for the debate system.

Defines the typed building blocks shared by the state store, the nodes
and the console output:
- Closed enums for speaker roles and debate sides
- Immutable transcript messages
- The judge's structured verdict schema
- Agent profiles that parameterize the generic debater node
"""

from enum import Enum
from typing import Dict
from pydantic import BaseModel, Field


# ============================================================================
# Roles and Sides
# ============================================================================

class Role(str, Enum):
    """Who produced a transcript message."""
    AGENT_FOR = "agent_for"
    AGENT_AGAINST = "agent_against"
    JUDGE = "judge"

    @property
    def label(self) -> str:
        return SPEAKER_LABELS[self]

    @property
    def emoji(self) -> str:
        return SPEAKER_EMOJIS[self]


SPEAKER_LABELS: Dict[Role, str] = {
    Role.AGENT_FOR: "FOR",
    Role.AGENT_AGAINST: "AGAINST",
    Role.JUDGE: "JUDGE",
}

SPEAKER_EMOJIS: Dict[Role, str] = {
    Role.AGENT_FOR: "🙋",
    Role.AGENT_AGAINST: "🙅",
    Role.JUDGE: "⚖️",
}


class Side(str, Enum):
    """A debating side; also the value space of the verdict."""
    FOR = "FOR"
    AGAINST = "AGAINST"

    @property
    def role(self) -> Role:
        return Role.AGENT_FOR if self is Side.FOR else Role.AGENT_AGAINST


# ============================================================================
# Transcript Message
# ============================================================================

class Message(BaseModel):
    """
    One utterance in the debate transcript.

    Created once by a participant node and never mutated afterwards.
    """
    role: Role = Field(
        description="The participant that produced this message"
    )
    content: str = Field(
        min_length=1,
        description="Generated text"
    )
    turn: int = Field(
        ge=0,
        description="The debate round this message belongs to"
    )

    class Config:
        """Pydantic model configuration."""
        frozen = True


# ============================================================================
# Judge Verdict Model
# ============================================================================

class JudgeVerdict(BaseModel):
    """Structured verdict requested from the oracle by the judge node."""
    reasoning: str = Field(
        description=(
            "Explanation of the verdict in roughly 300-500 characters, "
            "weighing the strengths and weaknesses of both sides"
        )
    )
    winner: Side = Field(
        description="The winning side: FOR or AGAINST (exactly one)"
    )


# ============================================================================
# Agent Profiles
# ============================================================================

class AgentProfile(BaseModel):
    """
    Everything that distinguishes one debater from the other.

    A single node implementation is parameterized by this value object.
    Exactly one profile in a debate carries ``increments_turn``.
    """
    role: Role
    side: Side
    label: str
    emoji: str
    stance: str = Field(description="How the position is phrased in prompts")
    rhetorical_mode: str = Field(description="What kind of statement the agent makes")
    increments_turn: bool = False

    class Config:
        """Pydantic model configuration."""
        frozen = True


FOR_PROFILE = AgentProfile(
    role=Role.AGENT_FOR,
    side=Side.FOR,
    label=Role.AGENT_FOR.label,
    emoji=Role.AGENT_FOR.emoji,
    stance="in favor of",
    rhetorical_mode="argue",
    increments_turn=True,
)

AGAINST_PROFILE = AgentProfile(
    role=Role.AGENT_AGAINST,
    side=Side.AGAINST,
    label=Role.AGENT_AGAINST.label,
    emoji=Role.AGENT_AGAINST.emoji,
    stance="against",
    rhetorical_mode="rebut",
    increments_turn=False,
)
