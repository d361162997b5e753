"""
Element capability protocols and configuration.

ABC-based element contracts that eliminate duck typing in favor of
explicit, inheritance-based capability checks.
"""

from .element_protocols import (
    HasComponents,
    HasLabel,
    HasContainer,
    HasError,
    HasValidationScript,
)
from .form_config import FormGenConfig, set_form_config, get_form_config

__all__ = [
    "HasComponents",
    "HasLabel",
    "HasContainer",
    "HasError",
    "HasValidationScript",
    "FormGenConfig",
    "set_form_config",
    "get_form_config",
]
