"""
Element decorators.

Decorators attach framework specific presentation to elements and rewrite
their markup when rendering.
"""

from .base import Decorator
from .decorator_registry import DECORATOR_IMPLEMENTATIONS, register_decorator, get_decorator_class

__all__ = [
    "Decorator",
    "DECORATOR_IMPLEMENTATIONS",
    "register_decorator",
    "get_decorator_class",
]
