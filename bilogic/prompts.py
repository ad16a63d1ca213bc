"""
Agent prompt definitions for the debate system.

Debaters are kept short and conversational: one point per turn, a direct
reply to the opponent's latest statement, 2-4 sentences. The judge gets the
whole transcript and answers through a structured schema.
"""

from typing import List, Optional

from .models import AgentProfile, Message


# ============================================================================
# Prompt Templates
# ============================================================================

AGENT_SYSTEM_PROMPT = """## ROLE
You are a logical debater. Argue {stance} the following proposition.

## TOPIC
{topic}

## INSTRUCTIONS
- Focus on a single point and {rhetorical_mode} concisely (2-4 sentences)
- Respond directly to your opponent's most recent statement
- Avoid long monologues; keep the exchange moving
- Use at most one concrete example

Deliver a short, sharp statement {stance} the proposition."""

OPENING_USER_PROMPT = (
    "This is the first statement of the debate. "
    "As the {label} side, {rhetorical_mode} concisely (2-4 sentences)."
)

RESPONSE_USER_PROMPT = (
    "Your opponent said:\n{last_message}\n\n"
    "Respond to this statement directly and concisely (2-4 sentences)."
)

JUDGE_SYSTEM_PROMPT = """## ROLE
You are a fair and objective JUDGE evaluating a debate on the topic below.

## TOPIC
{topic}

## INSTRUCTIONS
- Evaluate both sides impartially
- Weigh logical consistency most heavily
- Assess the quality of evidence and examples
- Consider how well each side answered the other's rebuttals
- Judge overall persuasiveness

## OUTPUT
1. reasoning: explain the decision in roughly 300-500 characters,
   covering the strengths and weaknesses of both sides and stating clearly
   which side was stronger
2. winner: "FOR" or "AGAINST"

You MUST pick exactly one of "FOR" or "AGAINST"."""

JUDGE_USER_PROMPT = (
    "Evaluate the following debate and decide the winner.\n\n"
    "{transcript}\n\n"
    "Give your verdict."
)

EMPTY_TRANSCRIPT = "No statements yet."


# ============================================================================
# Transcript Rendering
# ============================================================================

def format_debate_history(history: List[Message]) -> str:
    """Render the whole transcript as ``LABEL: content`` blocks in order."""
    if not history:
        return EMPTY_TRANSCRIPT

    return "\n\n".join(f"{msg.role.label}: {msg.content}" for msg in history)


def format_last_message(history: List[Message]) -> Optional[str]:
    """Quote the most recent statement, or None when nobody has spoken."""
    if not history:
        return None
    last = history[-1]
    return f'{last.role.label}: "{last.content}"'


# ============================================================================
# Prompt Construction Functions
# ============================================================================

def build_agent_prompts(profile: AgentProfile, topic: str, history: List[Message]) -> tuple[str, str]:
    """
    Construct the system and user instructions for a debater turn.

    Args:
        profile: Which side is speaking and how it phrases its position
        topic: The debate proposition
        history: Transcript so far

    Returns:
        Tuple of (system instruction, user instruction)
    """
    system = AGENT_SYSTEM_PROMPT.format(
        stance=profile.stance,
        topic=topic,
        rhetorical_mode=profile.rhetorical_mode,
    )

    last_message = format_last_message(history)
    if last_message is None:
        user = OPENING_USER_PROMPT.format(
            label=profile.label,
            rhetorical_mode=profile.rhetorical_mode,
        )
    else:
        user = RESPONSE_USER_PROMPT.format(last_message=last_message)

    return system, user


def build_judge_prompts(topic: str, history: List[Message]) -> tuple[str, str]:
    """
    Construct the system and user instructions for the verdict.

    Args:
        topic: The debate proposition
        history: Complete debate transcript

    Returns:
        Tuple of (system instruction, user instruction)
    """
    system = JUDGE_SYSTEM_PROMPT.format(topic=topic)
    user = JUDGE_USER_PROMPT.format(transcript=format_debate_history(history))
    return system, user
