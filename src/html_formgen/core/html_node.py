"""Render a tag name, attributes and content to HTML markup."""

import html
from typing import Any, Iterable, List, Mapping, Optional

# Elements that never have content or a closing tag
VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
})


def unique_classes(names: Iterable[str]) -> List[str]:
    """Split class strings on whitespace and drop duplicates, keeping first occurrence."""
    result: List[str] = []
    for name in names:
        for token in str(name).split():
            if token not in result:
                result.append(token)
    return result


def render_attrs(attrs: Optional[Mapping[str, Any]]) -> str:
    """
    Render an attribute mapping.

    True renders a bare attribute name, False and None omit the attribute.
    A list or tuple value for "class" is joined and de-duplicated.

    Args:
        attrs: Attribute name to value mapping

    Returns:
        Attribute string with a leading space, or "" when there is nothing to render
    """
    if not attrs:
        return ""

    parts = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(name)
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(unique_classes(value))
        if name == "class" and value == "":
            continue
        parts.append(f'{name}="{html.escape(str(value), quote=True)}"')

    return (" " + " ".join(parts)) if parts else ""


def render_tag(tag: str, attrs: Optional[Mapping[str, Any]] = None, content: str = "",
               self_closing: Optional[bool] = None) -> str:
    """
    Render a single HTML node.

    Content is inserted as markup; callers escape text themselves.

    Args:
        tag: Tag name
        attrs: Attributes (see render_attrs)
        content: Inner markup
        self_closing: Force or suppress void rendering. Defaults to whether
            tag is an HTML void element.

    Returns:
        Markup of the node
    """
    if self_closing is None:
        self_closing = tag in VOID_ELEMENTS

    attr_str = render_attrs(attrs)
    if self_closing:
        return f"<{tag}{attr_str}>"
    return f"<{tag}{attr_str}>{content}</{tag}>"


def escape(text: Any) -> str:
    """Escape text for use as node content."""
    return html.escape("" if text is None else str(text), quote=False)
