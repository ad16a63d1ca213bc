"""
Console helpers for the debate system.

Provides:
- Logging setup for the command-line entry point
- Turn and verdict formatting for display
"""

import logging
from typing import Any, Mapping

from .models import Message


# ============================================================================
# Logging Configuration
# ============================================================================

def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    # Reduce noise from HTTP libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


# ============================================================================
# Output Formatting
# ============================================================================

def format_message(message: Message) -> str:
    """Format a single transcript message for display."""
    role = message.role
    return (
        f"\n{'─' * 60}\n"
        f"{role.emoji} {role.label} - Turn {message.turn}\n"
        f"{'─' * 60}\n"
        f"{message.content}"
    )


def format_verdict(state: Mapping[str, Any]) -> str:
    """Format the judge's verdict from a final state."""
    winner = state.get("winner")
    if winner is None:
        return "\n⚠️  No verdict was produced."

    role = winner.role
    parts = [
        "\n" + "=" * 60,
        "⚖️  FINAL VERDICT",
        "=" * 60,
        f"\n🏆 WINNER: {role.emoji} {role.label}",
        f"\n{state.get('judge_reasoning') or ''}",
    ]
    return "\n".join(parts)


def format_debate_summary(state: Mapping[str, Any]) -> str:
    """Summarize topic, rounds and statement counts."""
    history = state.get("debate_history", [])
    return "\n".join([
        "\n" + "=" * 60,
        "📊 DEBATE SUMMARY",
        "=" * 60,
        f"\n📋 Topic: {state['topic']}",
        f"🔄 Rounds: {state['current_turn']}/{state['max_turns']}",
        f"📝 Statements: {len(history)}",
    ])
