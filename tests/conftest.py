"""Shared fixtures for the debate test suite."""

from typing import Any, Dict, List, Optional

import pytest

from bilogic.config import DebateConfig
from bilogic.errors import JudgingFailure, OracleFailure
from bilogic.models import JudgeVerdict, Side


DEFAULT_REASONING = (
    "The FOR side anchored every reply in a concrete example and answered the "
    "AGAINST side's cost objection directly, while AGAINST repeated its opening "
    "claim without new support. FOR was more persuasive overall."
)


class ScriptedOracle:
    """Fake oracle that records every call and returns canned output."""

    def __init__(
        self,
        verdict: Optional[JudgeVerdict] = None,
        fail_on_text_call: Optional[int] = None,
        fail_structured: bool = False,
    ) -> None:
        self.verdict = verdict or JudgeVerdict(reasoning=DEFAULT_REASONING, winner=Side.FOR)
        self.fail_on_text_call = fail_on_text_call
        self.fail_structured = fail_structured
        self.text_calls: List[Dict[str, Any]] = []
        self.structured_calls: List[Dict[str, Any]] = []

    async def generate_text(self, system_instruction, user_instruction, model, max_tokens):
        self.text_calls.append({
            "system": system_instruction,
            "user": user_instruction,
            "model": model,
            "max_tokens": max_tokens,
        })
        number = len(self.text_calls)
        if number == self.fail_on_text_call:
            raise OracleFailure(f"scripted failure on call {number}")
        return f"Statement number {number}."

    async def generate_structured(self, system_instruction, user_instruction, schema, model, max_tokens):
        self.structured_calls.append({
            "system": system_instruction,
            "user": user_instruction,
            "schema": schema,
            "model": model,
            "max_tokens": max_tokens,
        })
        if self.fail_structured:
            raise JudgingFailure("Structured output does not match JudgeVerdict")
        return self.verdict


@pytest.fixture
def config() -> DebateConfig:
    return DebateConfig(openrouter_api_key="test-key", model_name="test/model")


@pytest.fixture
def oracle() -> ScriptedOracle:
    return ScriptedOracle()
