"""Exceptions raised by the draughts engine."""


class DamasError(Exception):
    """Base class for engine errors."""


class InvariantError(DamasError, AssertionError):
    """
    An engine invariant was violated.

    Raised when a move does not fit the board it is applied to, which means
    the generator and the applier disagree. Never caught by the engine.
    """


class ConfigError(DamasError, ValueError):
    """Invalid configuration value."""
