"""Tests for the LangChain-backed oracle."""

import pytest
from langchain_core.exceptions import OutputParserException
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage
from openai import OpenAIError

from bilogic.errors import JudgingFailure, OracleFailure
from bilogic.models import JudgeVerdict, Side
from bilogic.oracle import Oracle, create_llm_client


class _StubChat:
    """Chat model stand-in whose calls return or raise a fixed value."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.structured_schema = None

    async def ainvoke(self, messages):
        if self.error is not None:
            raise self.error
        return self.result

    def with_structured_output(self, schema, method=None):
        self.structured_schema = schema
        return self


def _oracle_with(chat, config):
    return Oracle(config, chat_factory=lambda model, max_tokens: chat)


@pytest.mark.asyncio
async def test_generate_text_returns_stripped_content(config):
    oracle = _oracle_with(FakeListChatModel(responses=["  Remote work saves hours.  "]), config)

    text = await oracle.generate_text("system", "user", model="m", max_tokens=300)

    assert text == "Remote work saves hours."


@pytest.mark.asyncio
async def test_generate_text_joins_text_blocks(config):
    message = AIMessage(content=[{"type": "text", "text": "Part one. "}, {"type": "text", "text": "Part two."}])
    oracle = _oracle_with(_StubChat(result=message), config)

    assert await oracle.generate_text("s", "u", model="m", max_tokens=300) == "Part one. Part two."


@pytest.mark.asyncio
async def test_generate_text_without_usable_text_fails(config):
    oracle = _oracle_with(FakeListChatModel(responses=["   "]), config)

    with pytest.raises(OracleFailure):
        await oracle.generate_text("s", "u", model="m", max_tokens=300)


@pytest.mark.asyncio
async def test_generate_text_transport_error_fails(config):
    oracle = _oracle_with(_StubChat(error=OpenAIError("connection reset")), config)

    with pytest.raises(OracleFailure):
        await oracle.generate_text("s", "u", model="m", max_tokens=300)


@pytest.mark.asyncio
async def test_generate_structured_returns_schema_instance(config):
    verdict = JudgeVerdict(reasoning="FOR was clearer.", winner=Side.FOR)
    chat = _StubChat(result=verdict)
    oracle = _oracle_with(chat, config)

    result = await oracle.generate_structured("s", "u", JudgeVerdict, model="m", max_tokens=2048)

    assert result == verdict
    assert chat.structured_schema is JudgeVerdict


@pytest.mark.asyncio
async def test_generate_structured_validates_plain_dicts(config):
    oracle = _oracle_with(_StubChat(result={"reasoning": "AGAINST held firm.", "winner": "AGAINST"}), config)

    result = await oracle.generate_structured("s", "u", JudgeVerdict, model="m", max_tokens=2048)

    assert result.winner is Side.AGAINST


@pytest.mark.asyncio
@pytest.mark.parametrize("chat", [
    _StubChat(result=None),
    _StubChat(result={"reasoning": "Tie.", "winner": "BOTH"}),
    _StubChat(result={"winner": "FOR"}),
    _StubChat(error=OutputParserException("not JSON")),
    _StubChat(error=OpenAIError("rate limited")),
])
async def test_generate_structured_failures_become_judging_failures(config, chat):
    oracle = _oracle_with(chat, config)

    with pytest.raises(JudgingFailure):
        await oracle.generate_structured("s", "u", JudgeVerdict, model="m", max_tokens=2048)


@pytest.mark.asyncio
async def test_one_client_per_model_and_budget(config):
    created = []

    def factory(model, max_tokens):
        created.append((model, max_tokens))
        return FakeListChatModel(responses=["ok"])

    oracle = Oracle(config, chat_factory=factory)
    await oracle.generate_text("s", "u", model="m", max_tokens=300)
    await oracle.generate_text("s", "u", model="m", max_tokens=300)
    await oracle.generate_text("s", "u", model="m", max_tokens=2048)

    assert created == [("m", 300), ("m", 2048)]


def test_create_llm_client_uses_config(config):
    llm = create_llm_client(config, "test/model", 300)

    assert llm.model_name == "test/model"
    assert llm.temperature == config.temperature
    assert llm.max_retries == 0
