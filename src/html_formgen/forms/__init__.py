"""
Form construction.

Factory functions that create elements and decorators by registered id.
"""

from .form_factory import build_element, build_decorator

__all__ = [
    "build_element",
    "build_decorator",
]
