"""
Element capability ABC contracts.

Defines explicit contracts for the optional capabilities of form elements,
eliminating method-existence probing in favor of isinstance checks.

Design Philosophy:
- Explicit inheritance over duck typing
- Capabilities are composable through multiple inheritance
- Decorators ask "does this element have a label?" with isinstance, never hasattr

An element that lacks a capability is simply skipped by the decorator
hooks that need it.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Mapping, Optional


class HasComponents(ABC):
    """
    ABC for elements that own named sub-elements (components).

    Components are created on first request and cached per key, so that
    classes and content added by different decorators merge onto one node.
    """

    @abstractmethod
    def get_component(self, key: str) -> Any:
        """
        Get the component registered under key, creating it if needed.

        Args:
            key: Component name (e.g. "label", "container", "help")

        Returns:
            The component owned by this element
        """
        pass

    @abstractmethod
    def new_component(self, key: Optional[str], tag: str = "div",
                      attrs: Optional[Mapping[str, Any]] = None,
                      classes: Iterable[Any] = ()) -> Any:
        """
        Register a component with fixed tag, attributes and initial classes.

        Args:
            key: Component name, or None for an anonymous structural node
            tag: HTML tag name
            attrs: Fixed attributes
            classes: Initial class entries (literal strings or callables)

        Returns:
            The registered component
        """
        pass

    @abstractmethod
    def has_component(self, key: str) -> bool:
        """Check whether a component is registered under key without creating it."""
        pass


class HasLabel(ABC):
    """
    ABC for elements that can be described by a label.

    The label text comes from the element's description.
    """

    @abstractmethod
    def get_description(self) -> str:
        """Get the caption used as label text."""
        pass


class HasContainer(HasComponents):
    """
    ABC for elements that can be wrapped in a container component.

    Whether the container is actually rendered is controlled by the
    element's "container" option.
    """


class HasError(ABC):
    """
    ABC for elements that carry a validation error.

    The error is computed elsewhere; elements only store the message.
    """

    @abstractmethod
    def get_error(self) -> Optional[str]:
        """
        Get the current validation error.

        Returns:
            Error message, or None if the element is valid
        """
        pass

    @abstractmethod
    def set_error(self, error: Optional[str]) -> None:
        """
        Set or clear the validation error.

        Args:
            error: Error message. None clears the error.
        """
        pass


class HasValidationScript(ABC):
    """ABC for elements that emit client-side validation script."""

    @abstractmethod
    def render_validation_script(self) -> Optional[str]:
        """
        Render the validation script for this element.

        Returns:
            Markup of a script node, or None if no script is needed
        """
        pass
