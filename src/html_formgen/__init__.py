"""
html-formgen: decorate form element trees with CSS framework presentation.

Builds an in-memory tree of form elements and renders it to HTML. Framework
styling (Bootstrap 3) is attached by decorators, so element classes never
know about a particular visual framework.

Architecture:
- Tier 1 (Core): Markup rendering and lazily evaluated class lists
- Tier 2 (Protocols): Element capability ABCs and configuration
- Tier 3 (Elements): Element tree, components and element registry
- Tier 4 (Decorators): Decorator contract and the Bootstrap decorator
- Tier 5 (Forms): Factory creating elements and decorators by id

Key Features:
- Late-bound styling: class and content decisions are evaluated at render time
- ABC-based capabilities (no duck typing)
- Named, lazily created components (label, container, help, addons)
- Deep decoration of element trees
"""

__version__ = "0.1.0"

from html_formgen.elements import (
    Element, Component, Control, Input, Textarea, Select, Button, Group, Fieldset, Form
)
from html_formgen.decorators import Decorator
from html_formgen.decorators.bootstrap import Bootstrap, icon
from html_formgen.exceptions import ConfigurationError, ComponentConflictError
from html_formgen.forms import build_element, build_decorator

__all__ = [
    "__version__",
    "Element",
    "Component",
    "Control",
    "Input",
    "Textarea",
    "Select",
    "Button",
    "Group",
    "Fieldset",
    "Form",
    "Decorator",
    "Bootstrap",
    "icon",
    "ConfigurationError",
    "ComponentConflictError",
    "build_element",
    "build_decorator",
]
