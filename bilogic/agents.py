"""
Agent node implementations for the debate system.

Each node:
1. Reads a snapshot of the graph state
2. Constructs the system and user instructions
3. Makes exactly one oracle call
4. Returns a partial state update for the engine to merge

Nodes follow LangGraph conventions: (state) -> partial state dict.
Oracle failures are fatal and propagate unchanged; nothing here retries.
"""

import logging
from typing import Any, Awaitable, Callable, Dict

from .config import DebateConfig
from .errors import JudgingFailure
from .models import AgentProfile, JudgeVerdict, Message, Role
from .oracle import Oracle
from .prompts import build_agent_prompts, build_judge_prompts

logger = logging.getLogger(__name__)

NodeFn = Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]


# ============================================================================
# Debater Node
# ============================================================================

def create_agent_node(profile: AgentProfile, oracle: Oracle, config: DebateConfig) -> NodeFn:
    """
    Factory function to create a debater node for one side.

    Args:
        profile: Side, stance wording and whether this side advances the round
        oracle: Text-generation oracle shared by all nodes of the run
        config: Debate configuration (model and token budget)

    Returns:
        Async node function for LangGraph
    """

    async def agent_node(state: Dict[str, Any]) -> Dict[str, Any]:
        history = state["debate_history"]
        system, user = build_agent_prompts(profile, state["topic"], history)

        logger.debug(f"{profile.label} agent executing - {len(history)} messages so far")

        response = await oracle.generate_text(
            system,
            user,
            model=config.model_name,
            max_tokens=config.agent_max_tokens,
        )

        turn = state["current_turn"] + 1 if profile.increments_turn else state["current_turn"]
        message = Message(role=profile.role, content=response, turn=turn)

        logger.info(f"{profile.emoji} [{profile.label} - Turn {turn}] {response}")

        if profile.increments_turn:
            return {"debate_history": [message], "current_turn": turn}
        return {"debate_history": [message]}

    agent_node.__name__ = f"{profile.role.value}_node"
    return agent_node


# ============================================================================
# Judge Node
# ============================================================================

def create_judge_node(oracle: Oracle, config: DebateConfig) -> NodeFn:
    """
    Factory function to create the judge node.

    Args:
        oracle: Text-generation oracle shared by all nodes of the run
        config: Debate configuration (model and token budget)

    Returns:
        Async node function for LangGraph
    """

    async def judge_node(state: Dict[str, Any]) -> Dict[str, Any]:
        """
        Render the complete transcript and ask for a structured verdict.

        A verdict that does not fit JudgeVerdict surfaces as JudgingFailure.
        """
        logger.info(f"{Role.JUDGE.emoji} [{Role.JUDGE.label}] Evaluating the debate...")

        system, user = build_judge_prompts(state["topic"], state["debate_history"])
        verdict = await oracle.generate_structured(
            system,
            user,
            JudgeVerdict,
            model=config.model_name,
            max_tokens=config.judge_max_tokens,
        )

        if not verdict.reasoning.strip():
            raise JudgingFailure("Judge returned an empty reasoning")

        winner_role = verdict.winner.role
        logger.info(f"Winner: {winner_role.emoji} {winner_role.label}")
        logger.info(f"Judge reasoning: {verdict.reasoning}")

        return {
            "winner": verdict.winner,
            "judge_reasoning": verdict.reasoning,
        }

    return judge_node
