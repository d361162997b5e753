"""Base configuration class for form generation.

Provides hooks for applications to customize form generation behavior.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class FormGenConfig:
    """Base configuration for form generation behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        default_fontset: Prefix used by the icon helper when none is given
        bootstrap_version: Bootstrap major version used when a decorator is
            created without an explicit version
        required_suffix: Text appended to labels of required controls
        container_by_default: Whether controls are wrapped in a container
            unless their "container" option says otherwise
    """

    default_fontset: str = "glyphicon"
    bootstrap_version: Optional[int] = None
    required_suffix: str = ""
    container_by_default: bool = True


# Global config instance (set by application)
_form_config: Optional[FormGenConfig] = None


def set_form_config(config: Optional[FormGenConfig]) -> None:
    """Set the global form generation configuration.

    Args:
        config: FormGenConfig instance, or None to restore the defaults
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormGenConfig:
    """Get the current form generation configuration.

    Returns:
        Current FormGenConfig or default if not set
    """
    if _form_config is None:
        return FormGenConfig()
    return _form_config
