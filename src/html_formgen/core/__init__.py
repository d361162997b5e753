"""
Core markup utilities.

Foundational helpers with no framework-specific logic: the HTML node
renderer and class lists with deferred entries.
"""

from .html_node import render_tag, render_attrs, unique_classes, escape, VOID_ELEMENTS
from .class_list import ClassList, ClassEntry, LazyClass

__all__ = [
    "render_tag",
    "render_attrs",
    "unique_classes",
    "escape",
    "VOID_ELEMENTS",
    "ClassList",
    "ClassEntry",
    "LazyClass",
]
