"""
Text-generation oracle used by the participant nodes.

Wraps LangChain's ChatOpenAI (pointed at OpenRouter by default) behind two
calls: plain completion for debater statements and schema-validated
structured completion for the judge's verdict.

The oracle is constructed explicitly by the entry point and injected into
the graph; nothing in this module holds process-wide client state.
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar

from langchain_core.exceptions import OutputParserException
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from openai import OpenAIError
from pydantic import BaseModel, ValidationError

from .config import DebateConfig
from .errors import JudgingFailure, OracleFailure

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)
ChatFactory = Callable[[str, int], BaseChatModel]


# ============================================================================
# LLM Client Factory
# ============================================================================

def create_llm_client(config: DebateConfig, model: str, max_tokens: int) -> ChatOpenAI:
    """
    Create a configured LLM client for OpenRouter.

    Args:
        config: Debate configuration with API settings
        model: Model identifier to request
        max_tokens: Completion budget for every call made with this client

    Returns:
        Configured ChatOpenAI instance
    """
    return ChatOpenAI(
        model=model,
        openai_api_key=config.openrouter_api_key,
        openai_api_base=config.openrouter_base_url,
        temperature=config.temperature,
        max_tokens=max_tokens,
        timeout=config.request_timeout,
        max_retries=config.max_retries,
        default_headers={
            "HTTP-Referer": "https://bilogic.local",
            "X-Title": "Bilogic Debate",
        }
    )


def _extract_text(content: Any) -> str:
    """Pull plain text out of a chat message's content (string or content blocks)."""
    if isinstance(content, str):
        return content.strip()

    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts).strip()


# ============================================================================
# Oracle
# ============================================================================

class Oracle:
    """
    Stateless request/response access to the text-generation model.

    One chat client is kept per (model, max_tokens) pair so repeated turns
    reuse the same HTTP client.
    """

    def __init__(
        self,
        config: DebateConfig,
        chat_factory: Optional[ChatFactory] = None,
    ):
        self.config = config
        self._chat_factory = chat_factory or (
            lambda model, max_tokens: create_llm_client(config, model, max_tokens)
        )
        self._clients: Dict[Tuple[str, int], BaseChatModel] = {}

    def _client(self, model: str, max_tokens: int) -> BaseChatModel:
        key = (model, max_tokens)
        if key not in self._clients:
            logger.debug(f"Creating chat client for {model} (max_tokens={max_tokens})")
            self._clients[key] = self._chat_factory(model, max_tokens)
        return self._clients[key]

    async def generate_text(
        self,
        system_instruction: str,
        user_instruction: str,
        model: str,
        max_tokens: int,
    ) -> str:
        """
        Plain completion.

        Raises:
            OracleFailure: If the call fails or the response has no usable text
        """
        llm = self._client(model, max_tokens)
        messages = [
            SystemMessage(content=system_instruction),
            HumanMessage(content=user_instruction),
        ]

        try:
            response = await llm.ainvoke(messages)
        except OpenAIError as e:
            raise OracleFailure(f"Text completion failed: {e}") from e

        text = _extract_text(response.content)
        if not text:
            raise OracleFailure("Oracle returned no usable text content")
        return text

    async def generate_structured(
        self,
        system_instruction: str,
        user_instruction: str,
        schema: Type[SchemaT],
        model: str,
        max_tokens: int,
    ) -> SchemaT:
        """
        Structured completion validated against a Pydantic schema.

        Raises:
            JudgingFailure: If the call fails or the output does not match the schema
        """
        llm = self._client(model, max_tokens)
        structured_llm = llm.with_structured_output(schema, method="function_calling")
        messages = [
            SystemMessage(content=system_instruction),
            HumanMessage(content=user_instruction),
        ]

        try:
            result = await structured_llm.ainvoke(messages)
        except (OpenAIError, OutputParserException, ValidationError) as e:
            raise JudgingFailure(f"Structured completion failed: {e}") from e

        if result is None:
            raise JudgingFailure("Oracle returned no structured output")

        if isinstance(result, schema):
            return result

        try:
            return schema.model_validate(result)
        except ValidationError as e:
            raise JudgingFailure(f"Structured output does not match {schema.__name__}: {e}") from e
