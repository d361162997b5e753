"""
Form factory with explicit id-based dispatch.

Creates elements and decorators by their registered string ids.

Design:
- Element ids come from ElementMeta auto-registration and register_element()
- Decorator ids come from register_decorator() (e.g. Bootstrap.register())
- Fail-loud if an id is not registered
"""

from typing import Any, Iterable, Union
import logging

from html_formgen.decorators import Decorator, DECORATOR_IMPLEMENTATIONS, get_decorator_class
from html_formgen.elements import Element, get_element_class

logger = logging.getLogger(__name__)


def _init_builtin_registrations() -> None:
    """
    Register the bundled decorators.

    Lazy initialization so that importing the factory does not import
    every framework module.
    """
    if "bootstrap" in DECORATOR_IMPLEMENTATIONS:
        return

    from html_formgen.decorators.bootstrap import Bootstrap
    Bootstrap.register()
    logger.debug("Registered bundled decorators")


def build_decorator(decorator_id: str, **options: Any) -> Decorator:
    """
    Create a decorator by id.

    Args:
        decorator_id: Registered decorator id (e.g. "bootstrap")
        **options: Constructor options of the decorator (e.g. version=3)

    Returns:
        The decorator instance

    Raises:
        KeyError: If decorator_id is not registered
    """
    _init_builtin_registrations()
    decorator_class = get_decorator_class(decorator_id)
    return decorator_class(**options)


def build_element(element_id: str, *args: Any,
                  decorators: Iterable[Union[str, Decorator]] = (), **kwargs: Any) -> Element:
    """
    Create an element by id and apply decorators to it.

    Args:
        element_id: Registered element id (e.g. "input", "bootstrap/fileinput")
        *args: Positional constructor arguments of the element
        decorators: Decorator instances, or ids of decorators to create with
            default options
        **kwargs: Keyword constructor arguments of the element

    Returns:
        The decorated element

    Raises:
        KeyError: If an element or decorator id is not registered
    """
    _init_builtin_registrations()
    element = get_element_class(element_id)(*args, **kwargs)

    for decorator in decorators:
        if isinstance(decorator, str):
            decorator = build_decorator(decorator)
        element.add_decorator(decorator)

    return element
