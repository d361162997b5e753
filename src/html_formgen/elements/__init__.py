"""
Form element tree.

Elements auto-register by id when their classes are defined.
"""

from .element_registry import (
    ElementMeta,
    ELEMENT_IMPLEMENTATIONS,
    ELEMENT_CAPABILITIES,
    register_element,
    get_element_class,
    get_element_capabilities,
    list_elements_with_capability,
)
from .base import Element, Component, ComponentOwner
from .controls import Control, Input, Textarea, Select, Button, BUTTON_INPUT_TYPES, CHECKABLE_INPUT_TYPES
from .groups import Group, Fieldset, Form
from .element_dispatcher import ElementDispatcher

__all__ = [
    "ElementMeta",
    "ELEMENT_IMPLEMENTATIONS",
    "ELEMENT_CAPABILITIES",
    "register_element",
    "get_element_class",
    "get_element_capabilities",
    "list_elements_with_capability",
    "Element",
    "Component",
    "ComponentOwner",
    "Control",
    "Input",
    "Textarea",
    "Select",
    "Button",
    "BUTTON_INPUT_TYPES",
    "CHECKABLE_INPUT_TYPES",
    "Group",
    "Fieldset",
    "Form",
    "ElementDispatcher",
]
