"""
Base form element and component types.

An Element is a node of the form tree. It carries options (configuration such
as "label", "grid" or "help"), attributes (rendered HTML attributes), a class
list whose entries may be evaluated lazily, and the decorators applied to it.

Rendering runs in two stages:
1. render_element() produces the bare control markup. Decorators may rewrite
   the inner content on the way through render_content().
2. render() passes that markup through each decorator's render() hook, which
   may wrap it in labels, containers and other components.

Components are named child nodes owned by an element (label, container,
help block, ...). They are created on first request and cached per key.
"""

import itertools
import logging
import re
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from html_formgen.core import ClassList, ClassEntry, render_tag
from html_formgen.exceptions import ComponentConflictError
from html_formgen.protocols import HasComponents
from html_formgen.elements.element_registry import ElementMeta

logger = logging.getLogger(__name__)

# Content item of a component: markup, a child node, or a callable taking the
# component and returning one of those
ContentItem = Union[str, "Element", Callable[["Component"], Any], None]

_id_counter = itertools.count(1)

# Tag used for components created on first request, by key
DEFAULT_COMPONENT_TAGS: Dict[str, str] = {
    "label": "label",
    "container": "div",
    "help": "span",
    "prepend": "span",
    "append": "span",
    "input-group": "div",
}


def _generate_id(base: Optional[str]) -> str:
    base = re.sub(r'[^\w-]+', '-', base or "").strip('-')
    return f"{base or 'element'}-{next(_id_counter)}"


class Element(metaclass=ElementMeta):
    """
    A node of the form tree.

    Subclasses declare _element_id to auto-register with the element
    registry, and may set tag, default_options and default_attrs.
    """

    tag: str = "div"
    default_options: Dict[str, Any] = {}
    default_attrs: Dict[str, Any] = {}

    def __init__(self, description: Optional[str] = None,
                 options: Optional[Mapping[str, Any]] = None,
                 attrs: Optional[Mapping[str, Any]] = None):
        """
        Initialize the element.

        Args:
            description: Caption of the element (label text, button text, legend)
            options: Configuration options, overriding the class defaults
            attrs: HTML attributes, overriding the class defaults
        """
        self.description = description
        self.options: Dict[str, Any] = {**self.default_options, **(options or {})}
        self.attrs: Dict[str, Any] = {**self.default_attrs, **(attrs or {})}
        class_attr = self.attrs.pop("class", None) or ()
        self.classes = ClassList(class_attr.split() if isinstance(class_attr, str) else class_attr)
        self.parent: Optional["Element"] = None
        self.decorators: List[Any] = []

    # ---- classes -----------------------------------------------------------

    def add_class(self, entry: ClassEntry) -> "Element":
        """
        Add a class entry.

        Args:
            entry: Literal class name(s), or a callable taking this node and
                returning class name(s) or None. Callables are evaluated at
                render time.
        """
        self.classes.add(entry)
        return self

    def get_classes(self) -> List[str]:
        """Resolve the class list against the current state."""
        return self.classes.resolve(self)

    def has_class(self, name: str) -> bool:
        return name in self.get_classes()

    # ---- options and attributes -------------------------------------------

    def get_option(self, name: str, default: Any = None) -> Any:
        """
        Get an option, falling back to the parent's option.

        Options set on a group (e.g. "grid") apply to all its descendants
        unless a descendant sets the option itself.
        """
        if name in self.options:
            return self.options[name]
        if self.parent is not None:
            return self.parent.get_option(name, default)
        return default

    def set_option(self, name: str, value: Any) -> "Element":
        self.options[name] = value
        return self

    def get_attr(self, name: str, default: Any = None) -> Any:
        if name == "class":
            return " ".join(self.get_classes())
        return self.attrs.get(name, default)

    def set_attr(self, name: str, value: Any) -> "Element":
        if name == "class":
            self.add_class(value)
        else:
            self.attrs[name] = value
        return self

    def get_id(self) -> str:
        """Get the id attribute, generating and storing one if not set."""
        if not self.attrs.get("id"):
            self.attrs["id"] = _generate_id(self.attrs.get("name"))
        return self.attrs["id"]

    def get_description(self) -> str:
        """
        Get the caption of the element.

        Falls back to the "label" option when it holds text.
        """
        if self.description is not None:
            return self.description
        label = self.options.get("label")
        if isinstance(label, str) and label != "inside":
            return label
        return ""

    def get_render_attrs(self) -> Dict[str, Any]:
        """Attributes to render, with the resolved class list first."""
        return {"class": self.get_classes(), **self.attrs}

    # ---- decorators --------------------------------------------------------

    def has_decorator(self, decorator: Any) -> bool:
        return any(applied is decorator for applied in self.decorators)

    def add_decorator(self, decorator: Any) -> "Element":
        """
        Apply a decorator to this element.

        A decorator is applied at most once per element. Deep decorators are
        also applied to all descendants.
        """
        if self.has_decorator(decorator):
            logger.debug(f"{type(decorator).__name__} already applied to {self!r}, skipping")
            return self

        self.decorators.append(decorator)
        decorator.apply(self)

        if decorator.is_deep():
            self._decorate_descendants(decorator)
        return self

    def _decorate_descendants(self, decorator: Any) -> None:
        """Apply a deep decorator to child elements. Leaf elements have none."""

    # ---- rendering ---------------------------------------------------------

    def get_content(self) -> str:
        """Inner markup of the element before decorators see it."""
        return ""

    def render_content(self) -> str:
        html = self.get_content()
        for decorator in self.decorators:
            html = decorator.render_content(self, html)
        return html

    def render_element(self) -> str:
        """Render the bare element, without decorator wrapping."""
        return render_tag(self.tag, self.get_render_attrs(), self.render_content())

    def render(self) -> str:
        """Render the element through all applied decorators."""
        html = self.render_element()
        for decorator in self.decorators:
            html = decorator.render(self, html)
        return html

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        name = self.attrs.get("name")
        return f"<{type(self).__name__}{' ' + repr(name) if name else ''}>"


class Component(Element):
    """
    A named sub-element owned by another element.

    Components hold a list of content items. Strings are inserted as markup,
    elements are rendered, and callables are called with the component at
    render time.
    """

    def __init__(self, owner: Element, key: Optional[str], tag: str = "div",
                 attrs: Optional[Mapping[str, Any]] = None, classes: Iterable[ClassEntry] = ()):
        super().__init__(attrs=attrs)
        self.owner = owner
        self.key = key
        self.tag = tag
        self.fixed_attrs: Dict[str, Any] = dict(attrs or {})
        for entry in classes:
            self.add_class(entry)
        self._content: List[ContentItem] = []

    def set_content(self, value: ContentItem) -> "Component":
        """Replace the content with a single item (or nothing for None)."""
        self._content = [] if value is None else [value]
        return self

    def add(self, child: ContentItem) -> "Component":
        """Append a content item."""
        if child is not None:
            self._content.append(child)
        return self

    def clear(self) -> "Component":
        self._content = []
        return self

    def get_content_items(self) -> List[Any]:
        """Content items with callables evaluated against the current state."""
        items = []
        for item in self._content:
            if callable(item):
                item = item(self)
            if item is not None and item != "":
                items.append(item)
        return items

    def get_content(self) -> str:
        return "".join(str(item) for item in self.get_content_items())

    def render(self) -> str:
        return self.render_element()

    def __repr__(self) -> str:
        return f"<Component {self.key!r} of {self.owner!r}>"


class ComponentOwner(HasComponents):
    """
    Mixin implementing HasComponents with a per-element component map.

    Re-requesting a key returns the same component instance.
    """

    _components: Dict[str, Component]

    def _get_components(self) -> Dict[str, Component]:
        if "_components" not in self.__dict__:
            self._components = {}
        return self._components

    def get_component(self, key: str) -> Component:
        components = self._get_components()
        if key not in components:
            components[key] = Component(self, key, DEFAULT_COMPONENT_TAGS.get(key, "div"))
        return components[key]

    def new_component(self, key: Optional[str], tag: str = "div",
                      attrs: Optional[Mapping[str, Any]] = None,
                      classes: Iterable[ClassEntry] = ()) -> Component:
        """
        Register a component.

        A None key creates an anonymous component that is not cached.
        Registering an existing key again with the same tag and attributes
        returns the existing component unchanged.

        Raises:
            ComponentConflictError: If key exists with a different tag or attributes
        """
        if key is None:
            return Component(self, None, tag, attrs, classes)

        components = self._get_components()
        existing = components.get(key)
        if existing is not None:
            if existing.tag != tag or existing.fixed_attrs != dict(attrs or {}):
                raise ComponentConflictError(
                    f"Component '{key}' of {self!r} already registered as "
                    f"<{existing.tag}> {existing.fixed_attrs}, cannot register as <{tag}> {dict(attrs or {})}"
                )
            return existing

        component = Component(self, key, tag, attrs, classes)
        components[key] = component
        return component

    def has_component(self, key: str) -> bool:
        return key in self._get_components()
