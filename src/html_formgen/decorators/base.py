"""
Abstract base class for element decorators.

A decorator attaches presentation rules to elements without the element
classes knowing about any particular visual framework:

1. apply() runs once per element during decoration. It may add classes
   (literal or lazy) and register components.
2. render_content() and render() run on every render. Each receives the
   markup produced so far and returns new markup.

Hooks called for an element that lacks a capability they need must return
the markup unchanged.
"""

from abc import ABC, abstractmethod
from typing import Any


class Decorator(ABC):
    """
    Base class for element decorators.

    Subclasses must implement apply(). The render hooks default to passing
    the markup through.
    """

    def is_deep(self) -> bool:
        """
        Whether the decorator is applied to all descendants of a group.

        Returns:
            False for one-off decorators
        """
        return False

    @abstractmethod
    def apply(self, element: Any) -> None:
        """
        Apply static modifications (classes, components) to an element.

        Args:
            element: The element being decorated
        """
        pass

    def render_content(self, element: Any, html: str) -> str:
        """Rewrite the inner content of the element."""
        return html

    def render(self, element: Any, html: str) -> str:
        """Rewrite the rendered element."""
        return html
