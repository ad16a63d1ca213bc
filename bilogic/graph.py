"""
LangGraph orchestration for the debate system.

Defines the debate graph with:
- State schema with reducers (append-only history)
- Node registration for both debaters and the judge
- A single typed conditional edge deciding between another round and the verdict
- Sequential execution: every node sees the fully merged output of the previous one
"""

import asyncio
import logging
from enum import Enum
from typing import Any, AsyncIterator, Dict, NamedTuple, Optional, Tuple

from langgraph.graph import StateGraph, START, END

from .agents import create_agent_node, create_judge_node
from .config import DebateConfig, validate_run_inputs
from .errors import ConfigurationError
from .models import AGAINST_PROFILE, FOR_PROFILE, AgentProfile
from .oracle import Oracle
from .state import DebateState, initial_state, merge_update

logger = logging.getLogger(__name__)


# ============================================================================
# Node Names and Decisions
# ============================================================================

class NodeName(str, Enum):
    """Identifiers of the nodes registered in the graph."""
    AGENT_FOR = "agent_for"
    AGENT_AGAINST = "agent_against"
    JUDGE = "judge"


class Decision(str, Enum):
    """Outcome of the check made after every full round."""
    CONTINUE = "continue"
    JUDGE = "judge"


def node_for(profile: AgentProfile) -> NodeName:
    """Nodes are named after the role of the debater that speaks in them."""
    return NodeName(profile.role.value)


def decision_targets(opening: NodeName) -> Dict[Decision, NodeName]:
    """
    Map every decision to the node it leads to.

    Raises:
        RuntimeError: If a Decision member has no target
    """
    targets = {
        Decision.CONTINUE: opening,
        Decision.JUDGE: NodeName.JUDGE,
    }
    unrouted = set(Decision) - set(targets)
    if unrouted:
        raise RuntimeError(f"Decisions without a target node: {sorted(d.value for d in unrouted)}")
    return targets


# ============================================================================
# Router Functions
# ============================================================================

def should_continue(state: DebateState) -> Decision:
    """
    Route after the answering side speaks.

    Another round while current_turn < max_turns, otherwise the judge.
    """
    if state["current_turn"] < state["max_turns"]:
        return Decision.CONTINUE
    return Decision.JUDGE


def _recursion_limit(max_turns: int) -> int:
    # two debater steps per round plus the judge, with one step of headroom
    return 2 * max_turns + 2


def _check_profiles(profiles: Tuple[AgentProfile, AgentProfile]) -> None:
    first, second = profiles
    if first.side == second.side:
        raise ConfigurationError("Both debaters argue the same side")
    incrementing = [p for p in profiles if p.increments_turn]
    if len(incrementing) != 1:
        raise ConfigurationError(
            f"Exactly one debater must advance the round, got {len(incrementing)}"
        )


# ============================================================================
# Graph Construction
# ============================================================================

def create_debate_graph(
    oracle: Oracle,
    config: DebateConfig | None = None,
    profiles: Tuple[AgentProfile, AgentProfile] | None = None,
):
    """
    Create and compile the debate graph.

    Args:
        oracle: Text-generation oracle injected into every node
        config: Optional debate configuration (defaults from environment)
        profiles: (opening side, answering side); defaults to FOR then AGAINST

    Returns:
        Compiled LangGraph StateGraph ready for execution

    Graph Structure:
        START
          │
          ▼
        agent_for ◄───────┐
          │               │
          ▼               │
        agent_against     │
          │               │
          ├─(turn < max)──┘
          │
          ▼
        judge
          │
          ▼
        END
    """
    if config is None:
        config = DebateConfig()
    if profiles is None:
        profiles = (FOR_PROFILE, AGAINST_PROFILE)
    _check_profiles(profiles)

    opening_profile, answering_profile = profiles
    opening, answering = node_for(opening_profile), node_for(answering_profile)

    graph = StateGraph(DebateState)

    # =========================================
    # Register Nodes
    # =========================================

    graph.add_node(opening.value, create_agent_node(opening_profile, oracle, config))
    graph.add_node(answering.value, create_agent_node(answering_profile, oracle, config))
    graph.add_node(NodeName.JUDGE.value, create_judge_node(oracle, config))

    # =========================================
    # Define Edges
    # =========================================

    graph.add_edge(START, opening.value)
    graph.add_edge(opening.value, answering.value)
    graph.add_conditional_edges(
        answering.value,
        should_continue,
        {decision: target.value for decision, target in decision_targets(opening).items()},
    )
    graph.add_edge(NodeName.JUDGE.value, END)

    return graph.compile()


# ============================================================================
# Convenience Functions
# ============================================================================

class DebateStep(NamedTuple):
    """One node's contribution while streaming a debate."""
    node: NodeName
    update: Dict[str, Any]
    state: DebateState


async def run_debate(
    topic: str,
    max_turns: int,
    oracle: Oracle,
    config: DebateConfig | None = None,
    timeout: Optional[float] = None,
    profiles: Tuple[AgentProfile, AgentProfile] | None = None,
) -> DebateState:
    """
    Run a complete debate on the given topic.

    Args:
        topic: The debate proposition
        max_turns: Number of rounds (one FOR and one AGAINST statement each)
        oracle: Text-generation oracle
        config: Optional configuration override
        timeout: Optional limit for the whole run in seconds
        profiles: Optional (opening side, answering side) override

    Returns:
        Final state with the complete transcript and the verdict

    Raises:
        ConfigurationError: Invalid topic or turn count; no node is invoked
        OracleFailure: A debater turn failed
        JudgingFailure: The verdict could not be produced
        asyncio.TimeoutError: The run exceeded ``timeout``
    """
    topic = validate_run_inputs(topic, max_turns)
    graph = create_debate_graph(oracle, config, profiles)

    logger.info(f"Starting debate: '{topic}' ({max_turns} turns)")

    run = graph.ainvoke(
        initial_state(topic, max_turns),
        config={"recursion_limit": _recursion_limit(max_turns)},
    )
    if timeout is not None:
        final_state = await asyncio.wait_for(run, timeout=timeout)
    else:
        final_state = await run

    logger.info("Debate complete")

    return final_state


async def stream_debate(
    topic: str,
    max_turns: int,
    oracle: Oracle,
    config: DebateConfig | None = None,
    profiles: Tuple[AgentProfile, AgentProfile] | None = None,
) -> AsyncIterator[DebateStep]:
    """
    Stream debate execution, yielding each node's update as it completes.

    Args:
        topic: The debate proposition
        max_turns: Number of rounds
        oracle: Text-generation oracle
        config: Optional configuration override
        profiles: Optional (opening side, answering side) override

    Yields:
        DebateStep with the node name, its partial update and the accumulated state
    """
    topic = validate_run_inputs(topic, max_turns)
    graph = create_debate_graph(oracle, config, profiles)
    state = initial_state(topic, max_turns)

    logger.info(f"Starting streaming debate: '{topic}' ({max_turns} turns)")

    async for event in graph.astream(
        state,
        config={"recursion_limit": _recursion_limit(max_turns)},
        stream_mode="updates",
    ):
        for node_name, update in event.items():
            state = merge_update(state, update)
            yield DebateStep(node=NodeName(node_name), update=update, state=state)

    logger.info("Debate complete")
