class Rl7dError(Exception):
    """Base class for rl7d errors."""


class ConfigurationError(Rl7dError, ValueError):
    """Raised when generation or window settings are ill-formed."""
