"""
Form controls: elements that hold a value and can be labeled.

Controls implement the label, container, error and validation script
capabilities. Buttons only implement the component and container
capabilities; they have no label and no validation error.
"""

import json
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from html_formgen.core import render_tag, escape
from html_formgen.protocols import (
    HasContainer, HasLabel, HasError, HasValidationScript, get_form_config
)
from html_formgen.elements.base import Element, ComponentOwner

# Input types rendered as buttons
BUTTON_INPUT_TYPES = frozenset({"button", "submit", "reset"})

# Input types with a checked state instead of a text value
CHECKABLE_INPUT_TYPES = frozenset({"checkbox", "radio"})

MATCH_SCRIPT = (
    "(function(){"
    "var el=document.getElementById(%(id)s),other=document.getElementById(%(other)s);"
    "if(!el||!other)return;"
    "var check=function(){el.setCustomValidity(el.value===other.value?\"\":%(message)s);};"
    "el.addEventListener(\"input\",check);other.addEventListener(\"input\",check);"
    "})();"
)


def _js_string(value: str) -> str:
    return json.dumps(value).replace("</", "<\\/")


class Control(Element, ComponentOwner, HasContainer, HasLabel, HasError, HasValidationScript):
    """
    Base class for value-holding form controls.

    Options:
        container: Wrap the control in a container component
        required-suffix: Text appended to the label of a required control
        match: Id (or element) of a control whose value this one must equal
        validation-message: Message shown when the match check fails
    """

    def __init__(self, name: Optional[str] = None, description: Optional[str] = None,
                 options: Optional[Mapping[str, Any]] = None,
                 attrs: Optional[Mapping[str, Any]] = None):
        config = get_form_config()
        defaults = {
            "container": config.container_by_default,
            "required-suffix": config.required_suffix,
        }
        super().__init__(description, {**defaults, **self.default_options, **(options or {})}, attrs)
        if name is not None:
            self.attrs["name"] = name
        self.error: Optional[str] = None
        # Ids are fixed at creation so rendering never changes attributes
        self.get_id()

    def get_name(self) -> Optional[str]:
        return self.attrs.get("name")

    def get_value(self) -> Any:
        return self.attrs.get("value")

    def set_value(self, value: Any) -> "Control":
        self.attrs["value"] = value
        return self

    def get_error(self) -> Optional[str]:
        return self.error

    def set_error(self, error: Optional[str]) -> None:
        self.error = error or None

    def render_validation_script(self) -> Optional[str]:
        match = self.get_option("match")
        if not match:
            return None

        other_id = match.get_id() if isinstance(match, Element) else str(match)
        message = self.get_option("validation-message") or f"Value must match {other_id}"
        script = MATCH_SCRIPT % {
            "id": _js_string(self.get_id()),
            "other": _js_string(other_id),
            "message": _js_string(message),
        }
        return render_tag("script", {"type": "text/javascript"}, script)


class Input(Control):
    """
    An <input> element.

    Hidden inputs are not wrapped in a container unless the "container"
    option is set explicitly.
    """

    _element_id = "input"
    tag = "input"
    default_attrs = {"type": "text"}

    def __init__(self, name: Optional[str] = None, description: Optional[str] = None,
                 options: Optional[Mapping[str, Any]] = None,
                 attrs: Optional[Mapping[str, Any]] = None, input_type: Optional[str] = None):
        attrs = dict(attrs or {})
        if input_type is not None:
            attrs["type"] = input_type
        options = dict(options or {})
        if attrs.get("type") == "hidden":
            options.setdefault("container", False)
        super().__init__(name, description, options, attrs)

    def get_type(self) -> str:
        return self.attrs.get("type") or "text"

    def get_value(self) -> Any:
        if self.get_type() in CHECKABLE_INPUT_TYPES:
            return self.attrs.get("value", "on") if self.attrs.get("checked") else None
        return self.attrs.get("value")

    def set_value(self, value: Any) -> "Input":
        if self.get_type() in CHECKABLE_INPUT_TYPES:
            self.attrs["checked"] = bool(value)
        else:
            self.attrs["value"] = value
        return self


class Textarea(Control):
    """A <textarea> element. The value is rendered as escaped content."""

    _element_id = "textarea"
    tag = "textarea"

    def __init__(self, name: Optional[str] = None, description: Optional[str] = None,
                 options: Optional[Mapping[str, Any]] = None,
                 attrs: Optional[Mapping[str, Any]] = None):
        super().__init__(name, description, options, attrs)
        self.value = self.attrs.pop("value", None)

    def get_value(self) -> Any:
        return self.value

    def set_value(self, value: Any) -> "Textarea":
        self.value = value
        return self

    def get_content(self) -> str:
        return escape(self.value)


SelectItems = Union[Mapping[Any, Any], Iterable[Union[Tuple[Any, Any], Any]]]


class Select(Control):
    """
    A <select> element.

    Items are given as a mapping of value to text, or as an iterable of
    (value, text) pairs or plain values. The "placeholder" option adds an
    empty first option.
    """

    _element_id = "select"
    tag = "select"

    def __init__(self, name: Optional[str] = None, description: Optional[str] = None,
                 items: Optional[SelectItems] = None,
                 options: Optional[Mapping[str, Any]] = None,
                 attrs: Optional[Mapping[str, Any]] = None):
        super().__init__(name, description, options, attrs)
        self.value = self.attrs.pop("value", None)
        self.items = self._normalize_items(items)

    @staticmethod
    def _normalize_items(items: Optional[SelectItems]) -> list:
        if items is None:
            return []
        if isinstance(items, Mapping):
            return list(items.items())
        return [item if isinstance(item, tuple) else (item, item) for item in items]

    def get_value(self) -> Any:
        return self.value

    def set_value(self, value: Any) -> "Select":
        self.value = value
        return self

    def _is_selected(self, value: Any) -> bool:
        if isinstance(self.value, (list, tuple, set, frozenset)):
            return str(value) in {str(v) for v in self.value}
        return self.value is not None and str(value) == str(self.value)

    def get_content(self) -> str:
        parts = []
        placeholder = self.get_option("placeholder")
        if placeholder:
            parts.append(render_tag("option", {"value": ""}, escape(placeholder)))
        for value, text in self.items:
            attrs = {"value": value, "selected": self._is_selected(value)}
            parts.append(render_tag("option", attrs, escape(text)))
        return "".join(parts)


class Button(Element, ComponentOwner, HasContainer):
    """
    A <button> element. The description is inserted as markup, so it may
    contain icons.

    Buttons are not wrapped in a container unless the "container" option is set.
    """

    _element_id = "button"
    tag = "button"
    default_attrs = {"type": "button"}
    default_options = {"container": False}

    def __init__(self, description: Optional[str] = None,
                 options: Optional[Mapping[str, Any]] = None,
                 attrs: Optional[Mapping[str, Any]] = None, name: Optional[str] = None):
        super().__init__(description, options, attrs)
        if name is not None:
            self.attrs["name"] = name

    def get_type(self) -> str:
        return self.attrs.get("type") or "button"

    def get_content(self) -> str:
        return self.get_description()
