"""
Bootstrap 3 styling for form elements.

Optionally uses features from Jasny Bootstrap (labeled buttons, file inputs).
"""

from .decorator import Bootstrap, SUPPORTED_VERSION
from .classification import (
    is_button,
    is_labeled_button,
    is_form_control,
    button_style_classes,
    parse_grid,
    offset_class,
)
from .icons import icon

__all__ = [
    "Bootstrap",
    "SUPPORTED_VERSION",
    "is_button",
    "is_labeled_button",
    "is_form_control",
    "button_style_classes",
    "parse_grid",
    "offset_class",
    "icon",
]
