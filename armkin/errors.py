"""Exceptions raised by the kinematics engine."""


class StructuralError(ValueError):
    """Input shape does not match the configured robot (a caller programming error)."""


class ConfigError(ValueError):
    """A robot description could not be parsed or found."""
