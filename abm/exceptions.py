"""Exceptions raised by the ABM simulator."""


class ConfigurationError(ValueError):
    """Raised when simulator parameters make the discretization undefined."""
