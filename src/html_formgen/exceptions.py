"""Form builder exceptions."""


class ConfigurationError(Exception):
    """Raised when a decorator is constructed with an unsupported configuration."""


class ComponentConflictError(Exception):
    """Raised when a component key is registered twice with different fixed attributes."""
