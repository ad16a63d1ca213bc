"""
Configuration management for the debate system.

Handles environment variables, API credentials, oracle call budgets and
validation of the run inputs (topic and turn count).
Uses Pydantic for validation and type safety.
"""

import os
from typing import Any
from pydantic import BaseModel, Field, ValidationError
from dotenv import load_dotenv

from .errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()


DEFAULT_MODEL = "anthropic/claude-haiku-4.5"
DEFAULT_TURNS = 10


class DebateConfig(BaseModel):
    """
    Configuration for the debate system.

    All settings can be overridden via environment variables or direct instantiation.
    """

    # OpenRouter API Configuration
    openrouter_api_key: str = Field(
        default_factory=lambda: os.getenv("OPENROUTER_API_KEY", ""),
        description="OpenRouter API key for LLM access"
    )
    openrouter_base_url: str = Field(
        default_factory=lambda: os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1"),
        description="OpenAI-compatible API base URL"
    )

    # Model Configuration
    model_name: str = Field(
        default_factory=lambda: os.getenv("DEFAULT_MODEL", DEFAULT_MODEL),
        description="Model identifier used by both debaters and the judge"
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Model temperature for response generation"
    )

    # Oracle budgets
    agent_max_tokens: int = Field(
        default=300,
        ge=16,
        description="Token budget for a single debater statement"
    )
    judge_max_tokens: int = Field(
        default=2048,
        ge=64,
        description="Token budget for the judge's structured verdict"
    )
    request_timeout: float = Field(
        default=60.0,
        gt=0.0,
        description="Timeout for a single oracle call (seconds)"
    )
    max_retries: int = Field(
        default=0,
        ge=0,
        le=5,
        description="Transport-level retries inside the chat client (the engine never retries)"
    )

    # Debate Parameters
    default_turns: int = Field(
        default_factory=lambda: os.getenv("DEFAULT_TURNS", str(DEFAULT_TURNS)),
        ge=1,
        description="Number of rounds used when none is given"
    )

    def validate_api_key(self) -> bool:
        """Check if API key is configured."""
        return bool(self.openrouter_api_key and self.openrouter_api_key != "your_openrouter_api_key_here")

    class Config:
        """Pydantic model configuration."""
        validate_assignment = True
        validate_default = True
        extra = "forbid"


def get_default_config() -> DebateConfig:
    """
    Factory function to create a DebateConfig with environment defaults.

    Returns:
        DebateConfig: Configured instance ready for use

    Raises:
        ConfigurationError: If required API key is not set or a setting is invalid
    """
    try:
        config = DebateConfig()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    if not config.validate_api_key():
        raise ConfigurationError(
            "OPENROUTER_API_KEY not configured. "
            "Set it in .env file or as environment variable."
        )

    return config


def validate_run_inputs(topic: Any, max_turns: Any) -> str:
    """
    Check the caller-supplied run inputs before the engine starts.

    Returns:
        The topic with surrounding whitespace removed

    Raises:
        ConfigurationError: If the topic is empty or the turn count is not a positive integer
    """
    if not isinstance(topic, str) or not topic.strip():
        raise ConfigurationError("Debate topic must be a non-empty string")

    # bool is an int subclass; True is not a turn count
    if isinstance(max_turns, bool) or not isinstance(max_turns, int):
        raise ConfigurationError(f"Turn count must be an integer, got {max_turns!r}")
    if max_turns <= 0:
        raise ConfigurationError(f"Turn count must be a positive integer, got {max_turns}")

    return topic.strip()
