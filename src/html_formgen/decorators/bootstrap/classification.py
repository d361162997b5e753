"""
Pure classification helpers for Bootstrap styling.

All helpers are side-effect free and accept any value; anything that is not
an element is classified as "no".
"""

import logging
import re
from typing import Any, Optional, Tuple

from html_formgen.elements import (
    Element, Input, Select, Textarea, Button, BUTTON_INPUT_TYPES, CHECKABLE_INPUT_TYPES
)

logger = logging.getLogger(__name__)

_COLUMN_SIZE = re.compile(r'-(\d+)\b')


def is_button(element: Any) -> bool:
    """
    Check if element is a button.

    True for a Button, an Input of type button/submit/reset, an element that
    already has the "btn" class, or an element with a "btn" or "btn-style"
    option. Non-element values (e.g. markup strings) are never buttons.
    """
    if not isinstance(element, Element):
        return False

    return (
        isinstance(element, Button)
        or (isinstance(element, Input) and element.get_type() in BUTTON_INPUT_TYPES)
        or element.has_class("btn")
        or bool(element.get_option("btn"))
        or bool(element.get_option("btn-style"))
    )


def is_labeled_button(element: Any) -> bool:
    """Check if element is a button styled with label spans ("btn-labeled")."""
    return is_button(element) and element.has_class("btn-labeled")


def is_form_control(element: Any) -> bool:
    """Check if element is a text-like control styled with "form-control"."""
    return (
        (isinstance(element, Input) and element.get_type() not in CHECKABLE_INPUT_TYPES)
        or isinstance(element, (Textarea, Select))
    )


def button_style_classes(element: Any) -> str:
    """
    Style classes of a button, one "btn-<token>" per whitespace separated token.

    The style is read from the "btn" option, then "btn-style", and defaults
    to "default".
    """
    style = element.get_option("btn") or element.get_option("btn-style")
    if not isinstance(style, str) or not style.strip():
        style = "default"
    return " ".join(f"btn-{token}" for token in style.split())


def parse_grid(grid: Any) -> Optional[Tuple[str, str]]:
    """
    Normalize a grid option to (label column class, control column class).

    Accepts a two item sequence or a mapping with "label" and "control" keys.
    Anything else is ignored.
    """
    if not grid:
        return None

    if isinstance(grid, dict):
        label_class, control_class = grid.get("label"), grid.get("control")
    elif isinstance(grid, (list, tuple)) and len(grid) == 2:
        label_class, control_class = grid
    else:
        logger.warning(f"Ignoring invalid grid option {grid!r}, expected (label, control) classes")
        return None

    return (label_class or ""), (control_class or "")


def offset_class(column_class: str) -> str:
    """Turn column sizes into offsets, e.g. "col-sm-2" into "col-sm-offset-2"."""
    return _COLUMN_SIZE.sub(r'-offset-\1', column_class)
