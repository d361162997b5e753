"""Markup for font icons (Glyphicons, Font Awesome, ...)."""

from typing import Optional

from html_formgen.core import render_tag
from html_formgen.protocols import get_form_config


def icon(name: str, fontset: Optional[str] = None) -> str:
    """
    HTML for a font icon.

    Args:
        name: Icon name, or several whitespace separated names
        fontset: Class prefix of the font. Defaults to the configured default_fontset.

    Returns:
        Markup like <i class="glyphicon glyphicon-ok"></i>

    Example:
        >>> icon("ok circle", "fa")
        '<i class="fa fa-ok fa-circle"></i>'
    """
    if fontset is None:
        fontset = get_form_config().default_fontset

    classes = [fontset] + [f"{fontset}-{part}" for part in name.split()]
    return render_tag("i", {"class": classes})
