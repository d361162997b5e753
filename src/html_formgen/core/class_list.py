"""
Class lists with deferred entries.

Each entry is either a literal class string or a callable taking the node
the list belongs to and returning a class string (or None). Callables are
evaluated every time the list is resolved, so a class list built once during
decoration still reflects the node's state at render time.
"""

from typing import Any, Callable, Iterator, List, Optional, Union

from html_formgen.core.html_node import unique_classes

LazyClass = Callable[[Any], Optional[str]]
ClassEntry = Union[str, LazyClass]


class ClassList:
    """
    Append-only list of class entries, resolved against an owner node.

    Example:
        classes = ClassList()
        classes.add("form-group")
        classes.add(lambda node: "has-error" if node.owner.get_error() else None)
        classes.resolve(container)  # ["form-group"] or ["form-group", "has-error"]
    """

    def __init__(self, entries=()):
        self._entries: List[ClassEntry] = []
        for entry in entries:
            self.add(entry)

    def add(self, entry: Optional[ClassEntry]) -> None:
        """
        Append an entry.

        Empty strings and None are ignored. Duplicates are kept and
        removed when the list is resolved.
        """
        if entry is None or entry == "":
            return
        if not callable(entry) and not isinstance(entry, str):
            raise TypeError(
                f"Class entry must be a string or a callable, got {type(entry).__name__}"
            )
        self._entries.append(entry)

    def resolve(self, owner: Any) -> List[str]:
        """
        Evaluate all entries against owner.

        Args:
            owner: Node passed to callable entries

        Returns:
            De-duplicated class names in insertion order
        """
        values = []
        for entry in self._entries:
            value = entry(owner) if callable(entry) else entry
            if value:
                values.append(value)
        return unique_classes(values)

    def __iter__(self) -> Iterator[ClassEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
