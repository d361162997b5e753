"""
Element registry with metaclass auto-registration.

Elements auto-register when their classes are defined, eliminating manual
registration boilerplate. Extensions (e.g. framework specific elements) can
also register an element under an id by class or by dotted import path;
dotted paths are resolved on first lookup.

Design:
- ElementMeta metaclass handles auto-registration
- ELEMENT_IMPLEMENTATIONS: Global registry of element ids
- ELEMENT_CAPABILITIES: Tracks which capability ABCs each element implements
- Fail-loud on lookup of an unknown id
"""

from abc import ABCMeta
from importlib import import_module
from typing import Dict, Type, Set, Union
import logging

logger = logging.getLogger(__name__)

# Global registry of element implementations
# Maps element_id -> element class (or dotted path, resolved lazily)
ELEMENT_IMPLEMENTATIONS: Dict[str, Union[Type, str]] = {}

# Track which ABCs each element implements
# Maps element class -> set of ABC classes
ELEMENT_CAPABILITIES: Dict[Type, Set[Type]] = {}


def _track_capabilities(element_class: Type) -> Set[Type]:
    from html_formgen.protocols import (
        HasComponents, HasLabel, HasContainer, HasError, HasValidationScript
    )

    abc_types = {HasComponents, HasLabel, HasContainer, HasError, HasValidationScript}
    capabilities = {abc_type for abc_type in abc_types if issubclass(element_class, abc_type)}
    ELEMENT_CAPABILITIES[element_class] = capabilities
    return capabilities


class ElementMeta(ABCMeta):
    """
    Metaclass for automatic element registration.

    1. Only registers concrete implementations (no abstract methods)
    2. Requires an _element_id attribute declared on the class itself, so
       subclasses do not silently take over their parent's id
    3. Auto-populates ELEMENT_IMPLEMENTATIONS
    4. Tracks capabilities (which ABCs implemented)

    Example:
        class Textarea(Control):
            _element_id = "textarea"

    The element auto-registers in ELEMENT_IMPLEMENTATIONS["textarea"] when
    the class is defined.
    """

    def __new__(cls, name, bases, attrs):
        new_class = super().__new__(cls, name, bases, attrs)

        if getattr(new_class, '__abstractmethods__', None):
            logger.debug(
                f"Skipping registration for {name} - abstract methods remaining: "
                f"{new_class.__abstractmethods__}"
            )
            return new_class

        element_id = attrs.get('_element_id')
        if element_id is None:
            logger.debug(f"Skipping registration for {name} - no _element_id attribute")
            return new_class

        if element_id in ELEMENT_IMPLEMENTATIONS:
            existing = ELEMENT_IMPLEMENTATIONS[element_id]
            logger.warning(
                f"Element ID '{element_id}' already registered to {existing!r}. "
                f"Overwriting with {name}."
            )

        ELEMENT_IMPLEMENTATIONS[element_id] = new_class
        capabilities = _track_capabilities(new_class)

        logger.debug(
            f"Auto-registered {name} as '{element_id}' with capabilities: "
            f"{sorted(c.__name__ for c in capabilities)}"
        )
        return new_class


def register_element(element_id: str, target: Union[Type, str], replace: bool = True) -> None:
    """
    Register an element class under an id.

    Args:
        element_id: The element identifier (e.g. "bootstrap/fileinput")
        target: Element class, or dotted path "package.module.ClassName"
        replace: Overwrite an existing registration. When False an existing
            registration is kept.
    """
    if element_id in ELEMENT_IMPLEMENTATIONS and not replace:
        logger.debug(f"Element ID '{element_id}' already registered, keeping existing")
        return

    ELEMENT_IMPLEMENTATIONS[element_id] = target
    logger.debug(f"Registered element '{element_id}' -> {target!r}")


def get_element_class(element_id: str) -> Type:
    """
    Get element class by ID.

    Args:
        element_id: The element identifier (e.g., "input")

    Returns:
        The element class

    Raises:
        KeyError: If element_id not registered
    """
    if element_id not in ELEMENT_IMPLEMENTATIONS:
        raise KeyError(
            f"No element registered with ID '{element_id}'. "
            f"Available elements: {list(ELEMENT_IMPLEMENTATIONS.keys())}"
        )

    target = ELEMENT_IMPLEMENTATIONS[element_id]
    if isinstance(target, str):
        module_name, _, class_name = target.rpartition('.')
        target = getattr(import_module(module_name), class_name)
        ELEMENT_IMPLEMENTATIONS[element_id] = target
        if target not in ELEMENT_CAPABILITIES:
            _track_capabilities(target)

    return target


def get_element_capabilities(element_class: Type) -> Set[Type]:
    """
    Get the ABCs that an element class implements.

    Args:
        element_class: The element class to query

    Returns:
        Set of ABC classes the element implements
    """
    return ELEMENT_CAPABILITIES.get(element_class, set())


def list_elements_with_capability(capability: Type) -> list[Type]:
    """
    Find all registered elements that implement a specific ABC.

    Args:
        capability: The ABC class to search for (e.g., HasError)

    Returns:
        List of element classes implementing the ABC

    Example:
        >>> from html_formgen.protocols import HasError
        >>> elements = list_elements_with_capability(HasError)
        >>> print(sorted(e.__name__ for e in elements))
        ['Input', 'Select', 'Textarea']
    """
    return [
        element_class
        for element_class, capabilities in ELEMENT_CAPABILITIES.items()
        if capability in capabilities
    ]
