"""
Decorator registry keyed by string identifiers.

Framework decorators register themselves (e.g. Bootstrap.register()) so that
the factory can create them by name.
"""

from typing import Dict, Type
import logging

logger = logging.getLogger(__name__)

# Maps decorator_id -> decorator class
DECORATOR_IMPLEMENTATIONS: Dict[str, Type] = {}


def register_decorator(decorator_id: str, decorator_class: Type) -> None:
    """
    Register a decorator class under an id.

    Args:
        decorator_id: The decorator identifier (e.g. "bootstrap")
        decorator_class: The decorator class
    """
    existing = DECORATOR_IMPLEMENTATIONS.get(decorator_id)
    if existing is not None and existing is not decorator_class:
        logger.warning(
            f"Decorator ID '{decorator_id}' already registered to {existing.__name__}. "
            f"Overwriting with {decorator_class.__name__}."
        )

    DECORATOR_IMPLEMENTATIONS[decorator_id] = decorator_class
    logger.debug(f"Registered decorator '{decorator_id}' -> {decorator_class.__name__}")


def get_decorator_class(decorator_id: str) -> Type:
    """
    Get decorator class by ID.

    Raises:
        KeyError: If decorator_id not registered
    """
    if decorator_id not in DECORATOR_IMPLEMENTATIONS:
        raise KeyError(
            f"No decorator registered with ID '{decorator_id}'. "
            f"Available decorators: {list(DECORATOR_IMPLEMENTATIONS.keys())}"
        )
    return DECORATOR_IMPLEMENTATIONS[decorator_id]
