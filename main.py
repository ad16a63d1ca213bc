#!/usr/bin/env python3
"""
Bilogic - AI Debate System - Main Entry Point

Two LLM agents debate a topic FOR and AGAINST in alternating rounds,
orchestrated with LangGraph, and a judge delivers the verdict.

Usage:
    python main.py                                   prompt for topic and turns
    python main.py --topic "Your debate topic here"  prompt for turns only
    python main.py --topic "Your topic" --turns 5

Requirements:
    - Set OPENROUTER_API_KEY in .env file
    - Install dependencies: pip install -e .
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from bilogic.config import DebateConfig, get_default_config, validate_run_inputs
from bilogic.errors import ConfigurationError, DebateError
from bilogic.graph import NodeName, stream_debate
from bilogic.oracle import Oracle
from bilogic.state import DebateState
from bilogic.utils import format_debate_summary, format_message, format_verdict, setup_logging


# ============================================================================
# Input Handling
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="bilogic",
        description="Bilogic - AI debate system using LangChain and LangGraph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --topic "Remote work improves productivity"
  python main.py --topic "Economic growth and environmental protection can coexist" --turns 5
        """,
    )

    parser.add_argument(
        "--topic", "-t",
        type=str,
        default=None,
        help="The debate topic (prompted for when omitted)",
    )

    # Parsed by hand so an invalid value exits with 1 instead of argparse's 2
    parser.add_argument(
        "--turns", "-n",
        type=str,
        default=None,
        help="Number of debate rounds (prompted for when omitted, default: 10)",
    )

    parser.add_argument(
        "--model", "-m",
        type=str,
        default=None,
        help="Override the default model (e.g., 'anthropic/claude-3.5-sonnet')",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser


def prompt_input(question: str) -> str:
    """Ask the user for a value on stdin."""
    try:
        return input(question).strip()
    except EOFError:
        return ""


def parse_turns(value: str) -> int:
    """
    Parse a turn count given on the command line.

    Raises:
        ConfigurationError: If the value is not a positive integer
    """
    try:
        turns = int(value, 10)
    except (TypeError, ValueError):
        raise ConfigurationError("Turn count must be a positive integer") from None
    if turns <= 0:
        raise ConfigurationError("Turn count must be a positive integer")
    return turns


def resolve_topic(value: Optional[str]) -> str:
    """Use the flag when given; otherwise prompt. An empty topic is an input error."""
    topic = value or prompt_input("Enter the debate topic: ")
    if not topic:
        raise ConfigurationError("No topic was entered")
    return topic


def resolve_turns(value: Optional[str], default: int) -> int:
    """Use the flag when given; otherwise prompt, falling back to the default."""
    if value is not None:
        return parse_turns(value)

    answer = prompt_input(f"Enter the number of turns (default: {default}): ")
    if not answer:
        return default
    try:
        return parse_turns(answer)
    except ConfigurationError:
        return default


# ============================================================================
# Main Execution
# ============================================================================

async def run_streaming(topic: str, turns: int, oracle: Oracle, config: DebateConfig) -> DebateState:
    """
    Run the debate, printing each statement as it completes.

    Returns the final state once the judge has spoken.
    """
    print(f"\n🎯 Topic: {topic}")
    print(f"   Max turns: {turns}")
    print(f"   Model: {config.model_name}")
    print("\n⏳ Debate in progress...\n")

    final_state = None

    async for step in stream_debate(topic, turns, oracle, config):
        for message in step.update.get("debate_history", []):
            print(format_message(message))
        if step.node is NodeName.JUDGE:
            print("\n⚖️  The judge is done deliberating.")
        final_state = step.state

    return final_state


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)

    print("=== Bilogic - AI Debate System ===\n")

    # Load configuration
    try:
        config = get_default_config()
    except ConfigurationError as e:
        print(f"\n❌ Configuration Error: {e}")
        print("\n💡 Tip: Copy .env.example to .env and set your OPENROUTER_API_KEY")
        return 1

    # Override model if specified
    if args.model:
        config = DebateConfig(**{**config.model_dump(), "model_name": args.model})

    try:
        topic = resolve_topic(args.topic)
        turns = resolve_turns(args.turns, config.default_turns)
        topic = validate_run_inputs(topic, turns)
    except ConfigurationError as e:
        print(f"\n❌ Error: {e}")
        return 1

    oracle = Oracle(config)

    try:
        final_state = asyncio.run(run_streaming(topic, turns, oracle, config))

        print("\n=== Debate finished ===")
        print(format_verdict(final_state))
        print(format_debate_summary(final_state))
        return 0

    except KeyboardInterrupt:
        print("\n\n⚠️  Debate interrupted by user.")
        return 130

    except DebateError as e:
        print(f"\n❌ Error: {e}")
        return 1

    except Exception as e:
        logging.exception("Debate failed with error")
        print(f"\n❌ Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
