"""
Error taxonomy for the debate system.

Every failure is fatal for the run: the engine performs no retry and
propagates these unchanged to the caller.
"""


class DebateError(Exception):
    """Base class for all debate errors."""


class ConfigurationError(DebateError):
    """Missing or invalid run inputs or settings, raised before the engine starts."""


class OracleFailure(DebateError):
    """The oracle could not produce usable text for an agent turn."""


class JudgingFailure(DebateError):
    """The oracle could not produce a schema-valid verdict."""


class StateUpdateError(ValueError):
    """A partial update touched a field that cannot be updated."""
