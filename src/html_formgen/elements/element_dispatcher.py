"""
Element dispatcher with fail-loud ABC checking.

Replaces duck typing (hasattr checks) with explicit isinstance checks against
the capability ABCs. All methods fail loud if the element doesn't implement
the required ABC.

Decorator render hooks do not use this module: they check capabilities with
isinstance themselves and skip elements that lack them.
"""

from typing import Any, Optional

from html_formgen.protocols import HasComponents, HasError, HasLabel, HasValidationScript


class ElementDispatcher:
    """
    ABC-based element dispatch - NO DUCK TYPING.

    Example:
        # BEFORE (duck typing):
        if hasattr(element, 'get_error'):
            error = element.get_error()

        # AFTER (ABC-based):
        error = ElementDispatcher.get_error(element)  # Raises TypeError if not HasError
    """

    @staticmethod
    def get_error(element: Any) -> Optional[str]:
        """
        Get the validation error using explicit ABC check.

        Raises:
            TypeError: If element doesn't implement HasError ABC
        """
        if not isinstance(element, HasError):
            raise TypeError(
                f"Element {type(element).__name__} does not implement HasError ABC. "
                f"Add HasError to element's base classes and implement get_error() method."
            )
        return element.get_error()

    @staticmethod
    def set_error(element: Any, error: Optional[str]) -> None:
        """
        Set the validation error using explicit ABC check.

        Raises:
            TypeError: If element doesn't implement HasError ABC
        """
        if not isinstance(element, HasError):
            raise TypeError(
                f"Element {type(element).__name__} does not implement HasError ABC. "
                f"Add HasError to element's base classes and implement set_error() method."
            )
        element.set_error(error)

    @staticmethod
    def get_component(element: Any, key: str) -> Any:
        """
        Get (or create) a component using explicit ABC check.

        Raises:
            TypeError: If element doesn't implement HasComponents ABC
        """
        if not isinstance(element, HasComponents):
            raise TypeError(
                f"Element {type(element).__name__} does not implement HasComponents ABC. "
                f"Add HasComponents to element's base classes."
            )
        return element.get_component(key)

    @staticmethod
    def get_label_text(element: Any) -> str:
        """
        Get the label caption using explicit ABC check.

        Raises:
            TypeError: If element doesn't implement HasLabel ABC
        """
        if not isinstance(element, HasLabel):
            raise TypeError(
                f"Element {type(element).__name__} does not implement HasLabel ABC."
            )
        return element.get_description()

    @staticmethod
    def render_validation_script(element: Any) -> Optional[str]:
        """
        Render validation script using explicit ABC check.

        Raises:
            TypeError: If element doesn't implement HasValidationScript ABC
        """
        if not isinstance(element, HasValidationScript):
            raise TypeError(
                f"Element {type(element).__name__} does not implement HasValidationScript ABC."
            )
        return element.render_validation_script()
