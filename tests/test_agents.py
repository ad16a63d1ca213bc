"""Tests for the debater and judge nodes."""

import pytest

from bilogic.agents import create_agent_node, create_judge_node
from bilogic.errors import JudgingFailure, OracleFailure
from bilogic.models import AGAINST_PROFILE, FOR_PROFILE, JudgeVerdict, Message, Role, Side
from bilogic.prompts import format_debate_history
from bilogic.state import initial_state, merge_update

from conftest import ScriptedOracle


@pytest.mark.asyncio
async def test_for_node_opens_and_advances_the_round(oracle, config):
    node = create_agent_node(FOR_PROFILE, oracle, config)

    update = await node(initial_state("Remote work improves productivity", 3))

    assert set(update) == {"debate_history", "current_turn"}
    assert update["current_turn"] == 1
    [message] = update["debate_history"]
    assert message == Message(role=Role.AGENT_FOR, content="Statement number 1.", turn=1)

    call = oracle.text_calls[0]
    assert "Remote work improves productivity" in call["system"]
    assert "in favor of" in call["system"]
    assert "first statement" in call["user"]
    assert call["model"] == "test/model"
    assert call["max_tokens"] == 300


@pytest.mark.asyncio
async def test_against_node_answers_the_last_message_without_advancing(oracle, config):
    state = merge_update(
        initial_state("X", 3),
        {
            "debate_history": [Message(role=Role.AGENT_FOR, content="Offices waste commute time.", turn=1)],
            "current_turn": 1,
        },
    )
    node = create_agent_node(AGAINST_PROFILE, oracle, config)

    update = await node(state)

    assert set(update) == {"debate_history"}
    assert update["debate_history"][0].role is Role.AGENT_AGAINST
    assert update["debate_history"][0].turn == 1

    call = oracle.text_calls[0]
    assert "against" in call["system"]
    assert 'FOR: "Offices waste commute time."' in call["user"]


@pytest.mark.asyncio
async def test_agent_responds_only_to_the_most_recent_message(oracle, config):
    history = [
        Message(role=Role.AGENT_FOR, content="Opening claim.", turn=1),
        Message(role=Role.AGENT_AGAINST, content="Counter claim.", turn=1),
    ]
    state = merge_update(initial_state("X", 3), {"debate_history": history, "current_turn": 1})

    update = await create_agent_node(FOR_PROFILE, oracle, config)(state)

    user = oracle.text_calls[0]["user"]
    assert "Counter claim." in user
    assert "Opening claim." not in user
    assert update["current_turn"] == 2
    assert update["debate_history"][0].turn == 2


@pytest.mark.asyncio
async def test_agent_node_propagates_oracle_failure(config):
    oracle = ScriptedOracle(fail_on_text_call=1)
    node = create_agent_node(FOR_PROFILE, oracle, config)

    with pytest.raises(OracleFailure):
        await node(initial_state("X", 1))


@pytest.mark.asyncio
async def test_judge_node_returns_winner_and_reasoning_together(config):
    verdict = JudgeVerdict(reasoning="AGAINST exposed the missing data twice.", winner=Side.AGAINST)
    oracle = ScriptedOracle(verdict=verdict)
    history = [
        Message(role=Role.AGENT_FOR, content="Point one.", turn=1),
        Message(role=Role.AGENT_AGAINST, content="Rebuttal one.", turn=1),
    ]
    state = merge_update(initial_state("X", 1), {"debate_history": history, "current_turn": 1})

    update = await create_judge_node(oracle, config)(state)

    assert update == {"winner": Side.AGAINST, "judge_reasoning": "AGAINST exposed the missing data twice."}

    call = oracle.structured_calls[0]
    assert call["schema"] is JudgeVerdict
    assert call["max_tokens"] == 2048
    assert "FOR: Point one.\n\nAGAINST: Rebuttal one." in call["user"]


@pytest.mark.asyncio
async def test_judge_node_propagates_judging_failure(config):
    oracle = ScriptedOracle(fail_structured=True)

    with pytest.raises(JudgingFailure):
        await create_judge_node(oracle, config)(initial_state("X", 1))


@pytest.mark.asyncio
async def test_judge_node_rejects_blank_reasoning(config):
    oracle = ScriptedOracle(verdict=JudgeVerdict(reasoning="   ", winner=Side.FOR))

    with pytest.raises(JudgingFailure):
        await create_judge_node(oracle, config)(initial_state("X", 1))


def test_empty_transcript_renders_placeholder():
    assert format_debate_history([]) == "No statements yet."
