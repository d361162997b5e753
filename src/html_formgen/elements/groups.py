"""
Group elements: elements that contain other elements.

Deep decorators applied to a group are applied to every descendant, and to
children added later.
"""

import logging
from typing import Any, List, Mapping, Optional

from html_formgen.core import render_tag
from html_formgen.elements.base import Element

logger = logging.getLogger(__name__)


class Group(Element):
    """A <div> holding child elements, rendered in order."""

    _element_id = "group"
    tag = "div"

    def __init__(self, description: Optional[str] = None,
                 options: Optional[Mapping[str, Any]] = None,
                 attrs: Optional[Mapping[str, Any]] = None,
                 children: Optional[List[Element]] = None):
        super().__init__(description, options, attrs)
        self.children: List[Element] = []
        for child in children or []:
            self.add(child)

    def add(self, child: Element) -> "Group":
        """
        Append a child element.

        Deep decorators already applied to this group are applied to the child.
        """
        child.parent = self
        self.children.append(child)
        for decorator in self.decorators:
            if decorator.is_deep():
                child.add_decorator(decorator)
        return self

    def get_children(self) -> List[Element]:
        return list(self.children)

    def iter_descendants(self):
        """Depth-first iteration over all descendants, each visited once."""
        seen = set()
        stack = list(reversed(self.children))
        while stack:
            element = stack.pop()
            if id(element) in seen:
                continue
            seen.add(id(element))
            yield element
            if isinstance(element, Group):
                stack.extend(reversed(element.children))

    def _decorate_descendants(self, decorator: Any) -> None:
        for child in self.children:
            child.add_decorator(decorator)
        logger.debug(f"Applied deep {type(decorator).__name__} to children of {self!r}")

    def get_content(self) -> str:
        return "".join(child.render() for child in self.children)


class Fieldset(Group):
    """A <fieldset>, with the description rendered as <legend>."""

    _element_id = "fieldset"
    tag = "fieldset"

    def get_content(self) -> str:
        description = self.get_description()
        legend = render_tag("legend", None, description) if description else ""
        return legend + super().get_content()


class Form(Group):
    """A <form> element."""

    _element_id = "form"
    tag = "form"
    default_attrs = {"method": "post"}

    def __init__(self, action: Optional[str] = None,
                 options: Optional[Mapping[str, Any]] = None,
                 attrs: Optional[Mapping[str, Any]] = None,
                 children: Optional[List[Element]] = None):
        super().__init__(None, options, attrs, children)
        if action is not None:
            self.attrs["action"] = action

    def get_control(self, name: str) -> Optional[Element]:
        """Find a descendant by its name attribute."""
        for element in self.iter_descendants():
            if element.attrs.get("name") == name:
                return element
        return None
