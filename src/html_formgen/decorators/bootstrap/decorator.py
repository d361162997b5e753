"""
Bootstrap 3 decorator.

Styles form elements for Bootstrap and assembles the markup around them:
labels, form groups, grid columns, input groups with prepend/append addons,
help blocks and inline errors.

Decoration registers components and adds class entries once. Every class
decision that depends on state (error, options, addon content) is a lazy
entry, so re-rendering after the state changed needs no re-decoration.

Render order for an element with a container:
    container (form-group [has-error])
      label (control-label [grid label column])     -- unless label is "inside"
      grid column wrapper                           -- only with a grid option
        input-group                                 -- only with prepend/append
          prepend addon, control, append addon
        help block
        error block
      validation script
"""

import logging
from functools import partial
from typing import Any, Optional, Union

from html_formgen.decorators.base import Decorator
from html_formgen.decorators.decorator_registry import register_decorator
from html_formgen.decorators.bootstrap.classification import (
    is_button, is_labeled_button, is_form_control, button_style_classes,
    parse_grid, offset_class,
)
from html_formgen.decorators.bootstrap.icons import icon
from html_formgen.elements import Component, Control, Input, register_element
from html_formgen.exceptions import ConfigurationError
from html_formgen.protocols import (
    HasComponents, HasContainer, HasError, HasLabel, HasValidationScript, get_form_config
)

logger = logging.getLogger(__name__)

SUPPORTED_VERSION = 3

LABEL_INSIDE = "inside"


def _major_version(version: Union[int, str]) -> int:
    try:
        return int(str(version).split(".")[0])
    except ValueError:
        raise ConfigurationError(f"Invalid Bootstrap version {version!r}") from None


def _can_have_label(element: Any) -> bool:
    if not isinstance(element, HasLabel) or not isinstance(element, HasComponents):
        return False
    return not (isinstance(element, Input) and element.get_type() == "hidden")


def _label_classes(label: Component) -> Optional[str]:
    element = label.owner
    if element.get_option("label") == LABEL_INSIDE:
        return None

    grid = parse_grid(element.get_option("grid"))
    return f"control-label {grid[0]}" if grid else "control-label"


def _container_error_class(container: Component) -> Optional[str]:
    element = container.owner
    if isinstance(element, HasError) and element.get_error():
        return "has-error"
    return None


def _help_content(help_block: Component) -> Any:
    return help_block.owner.get_option("help")


def _addon_classes(placement: str, addon: Component) -> Optional[str]:
    element = addon.owner
    if is_labeled_button(element):
        return "btn-label btn-label-right" if placement == "append" else "btn-label"

    if isinstance(element, Input) and not is_button(element):
        content = addon.get_content_items()
        return "input-group-btn" if any(is_button(item) for item in content) else "input-group-addon"

    return None


class Bootstrap(Decorator):
    """
    Render elements for use with Bootstrap 3.

    Options (per element):
        label: Caption text or True to render a label, "inside" to wrap the
            control in its label (checkboxes and radios)
        grid: (label column class, control column class) for horizontal forms
        help: Help text rendered below the control
        prepend / append: Addon content around the control
        btn: Button style(s), e.g. "primary" or "primary lg"
        container: Wrap the element in a form-group
    """

    icon = staticmethod(icon)

    def __init__(self, version: Optional[Union[int, str]] = None):
        """
        Initialize the decorator.

        Args:
            version: Bootstrap major version. Defaults to the configured
                bootstrap_version.

        Raises:
            ConfigurationError: If a version other than 3 is requested
        """
        if version is None:
            version = get_form_config().bootstrap_version

        if version is None:
            logger.warning("You should specify which version of Bootstrap is used.")
        elif _major_version(version) != SUPPORTED_VERSION:
            raise ConfigurationError(
                f"Only Bootstrap version {SUPPORTED_VERSION} is supported, got {version!r}"
            )

        self.version = version

    def is_deep(self) -> bool:
        """Bootstrap styling applies to all descendants."""
        return True

    # ---- decoration --------------------------------------------------------

    def apply(self, element: Any) -> None:
        """Add Bootstrap classes and register the components used when rendering."""
        self._apply_to_element(element)

        if not isinstance(element, HasComponents):
            return

        self._apply_to_addon(element, "prepend")
        self._apply_to_addon(element, "append")
        self._apply_to_input_group(element)
        self._apply_to_label(element)
        self._apply_to_container(element)
        self._apply_to_help(element)

    def _apply_to_element(self, element: Any) -> None:
        if is_button(element):
            element.add_class("btn")
            element.add_class(button_style_classes)
        elif is_form_control(element):
            element.add_class("form-control")

    def _apply_to_addon(self, element: Any, placement: str) -> None:
        element.get_component(placement).add_class(partial(_addon_classes, placement))

    def _apply_to_input_group(self, element: Any) -> None:
        if isinstance(element, Input) and not is_button(element):
            element.new_component("input-group", "div", classes=["input-group"])

    def _apply_to_label(self, element: Any) -> None:
        if not _can_have_label(element):
            return
        element.get_component("label").add_class(_label_classes)

    def _apply_to_container(self, element: Any) -> None:
        if not isinstance(element, HasContainer):
            return
        container = element.get_component("container")
        container.add_class("form-group")
        container.add_class(_container_error_class)

    def _apply_to_help(self, element: Any) -> None:
        help_block = element.get_component("help")
        help_block.add_class("help-block")
        help_block.set_content(_help_content)

    # ---- rendering ---------------------------------------------------------

    def render_content(self, element: Any, html: str) -> str:
        """Fold prepend/append into the content of a labeled button."""
        if not is_labeled_button(element) or not isinstance(element, HasComponents):
            return html
        if isinstance(element, Input):
            if element.get_option("prepend") or element.get_option("append"):
                logger.debug(f"Addons of labeled input button {element.get_id()!r} dropped, <input> has no content")
            return html

        prepend = self._get_addon(element, "prepend")
        append = self._get_addon(element, "append")
        return (prepend.render() if prepend else "") + html + (append.render() if append else "")

    def render(self, element: Any, html: str) -> str:
        """
        Assemble the container, label, grid column and control.

        Elements without a container (or with the "container" option off)
        are returned unchanged.
        """
        if not isinstance(element, HasContainer) or not element.get_option("container"):
            return html
        if not element.has_component("container"):
            return html

        container = element.get_component("container")
        container.clear()

        label_option = element.get_option("label")
        label_visible = bool(label_option) and label_option != LABEL_INSIDE and _can_have_label(element)
        if label_visible:
            container.add(self._render_label(element, self._label_text(element)))

        target = container
        grid = parse_grid(element.get_option("grid"))
        if grid:
            label_class, control_class = grid
            classes = [control_class] if label_visible else [offset_class(label_class), control_class]
            target = element.new_component(None, "div", classes=classes)
            container.add(target)

        self.render_control(element, html, target)

        if isinstance(element, HasValidationScript):
            container.add(element.render_validation_script())

        return container.render()

    def render_control(self, element: Any, html: str, target: Component) -> Component:
        """
        Add addons, the control, help and error blocks to target.

        Args:
            element: The element being rendered
            html: Bare control markup
            target: Component receiving the nodes (container or grid column)

        Returns:
            target
        """
        label_option = element.get_option("label")
        has_addons = bool(element.get_option("prepend") or element.get_option("append"))

        parent = target
        if element.has_component("input-group") and has_addons and label_option != LABEL_INSIDE:
            input_group = element.get_component("input-group")
            input_group.clear()
            target.add(input_group)
            parent = input_group

        labeled_button = is_labeled_button(element)

        if not labeled_button:
            parent.add(self._get_control_addon(element, "prepend"))

        if label_option == LABEL_INSIDE and _can_have_label(element):
            text = self._label_text(element)
            parent.add(self._render_label(element, html + (f" {text}" if text else "")))
        else:
            parent.add(html)

        if not labeled_button:
            parent.add(self._get_control_addon(element, "append"))

        if element.get_option("help"):
            target.add(element.get_component("help"))

        error = element.get_error() if isinstance(element, HasError) else None
        if error:
            target.add(element.new_component(None, "span", classes=["help-block error"]).set_content(error))

        return target

    def _get_addon(self, element: Any, placement: str) -> Optional[Component]:
        value = element.get_option(placement)
        if not value:
            return None
        return element.get_component(placement).set_content(value)

    def _get_control_addon(self, element: Any, placement: str) -> Any:
        # Only text inputs get addon spans, other controls take the raw value
        if isinstance(element, Input) and not is_button(element):
            return self._get_addon(element, placement)
        return element.get_option(placement) or None

    def _label_text(self, element: Any) -> str:
        text = element.get_description()
        if isinstance(element, Control) and element.get_attr("required"):
            text += element.get_option("required-suffix") or ""
        return text

    def _render_label(self, element: Any, content: str) -> Component:
        label = element.get_component("label")
        label.set_attr("for", element.get_id())
        label.set_content(content)
        return label

    # ---- registration ------------------------------------------------------

    @classmethod
    def register(cls) -> None:
        """Register the Bootstrap decorator and elements."""
        register_decorator("bootstrap", cls)

        register_element(
            "bootstrap/fileinput",
            "html_formgen.decorators.bootstrap.elements.Fileinput",
            replace=False,
        )
        register_element(
            "bootstrap/imageinput",
            "html_formgen.decorators.bootstrap.elements.Imageinput",
            replace=False,
        )
