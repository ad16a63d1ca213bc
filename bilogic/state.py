"""
Shared state store for the debate graph.

Defines the LangGraph state schema and the per-field reducers that merge
a node's partial update into the running state:
- debate_history: concatenation, never replaced or reordered
- current_turn / winner / judge_reasoning: replacement (last write wins)
- topic / max_turns: fixed at initialization
"""

from typing import Annotated, Any, Callable, Dict, List, Mapping, Optional
from typing_extensions import TypedDict

from .errors import StateUpdateError
from .models import Message, Side


# ============================================================================
# Reducers
# ============================================================================

def append_messages(existing: Optional[List[Message]], new: Optional[List[Message]]) -> List[Message]:
    """
    Reducer function for additive history updates.

    Ensures history is never overwritten, only appended.
    """
    return list(existing or []) + list(new or [])


def replace_value(existing: Any, new: Any) -> Any:
    """Reducer for scalar fields: the update wins."""
    return new


# ============================================================================
# Graph State Definition
# ============================================================================

class DebateState(TypedDict):
    """
    LangGraph state schema for the debate.

    Only debate_history carries an explicit reducer; LangGraph's default
    channel already replaces the value on every write, which is what the
    scalar fields need.
    """
    # Configuration (set once at start)
    topic: str
    max_turns: int

    # Debate history - append-only
    debate_history: Annotated[List[Message], append_messages]

    # Round counter, advanced by the round-incrementing debater
    current_turn: int

    # Verdict (set together by the judge)
    winner: Optional[Side]
    judge_reasoning: Optional[str]


REDUCERS: Dict[str, Callable[[Any, Any], Any]] = {
    "debate_history": append_messages,
    "current_turn": replace_value,
    "winner": replace_value,
    "judge_reasoning": replace_value,
}

FIXED_FIELDS = frozenset({"topic", "max_turns"})


# ============================================================================
# Store Operations
# ============================================================================

def initial_state(topic: str, max_turns: int) -> DebateState:
    """Build the state a run starts from; everything but topic and max_turns defaults."""
    return {
        "topic": topic,
        "max_turns": max_turns,
        "debate_history": [],
        "current_turn": 0,
        "winner": None,
        "judge_reasoning": None,
    }


def merge_update(state: Mapping[str, Any], update: Mapping[str, Any]) -> DebateState:
    """
    Apply a node's partial update to a state snapshot.

    Returns a new state; the snapshot passed in is left untouched.

    Raises:
        StateUpdateError: If the update names a fixed or unknown field
    """
    fixed = FIXED_FIELDS.intersection(update)
    if fixed:
        raise StateUpdateError(f"Fields fixed at initialization cannot be updated: {sorted(fixed)}")

    unknown = set(update) - set(REDUCERS)
    if unknown:
        raise StateUpdateError(f"Unknown state fields in update: {sorted(unknown)}")

    merged: Dict[str, Any] = dict(state)
    for key, value in update.items():
        merged[key] = REDUCERS[key](merged.get(key), value)
    return merged  # type: ignore[return-value]
