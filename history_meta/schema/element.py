"""Schema fragment tree.

A SchemaElement is a named node with ordered attributes and children.
Fragments shared between relations are templates: callers clone() them
before renaming or prefixing anything.
"""

from __future__ import annotations

import copy
from typing import Any


class SchemaElement:
    """A node of a historical-table schema definition."""

    def __init__(self, tag: str, attributes: dict[str, Any] | None = None) -> None:
        self.tag = tag
        self.attributes: dict[str, str] = {}
        for name, value in (attributes or {}).items():
            self.set(name, value)
        self._children: list[SchemaElement] = []
        self._parent: SchemaElement | None = None

    def __repr__(self) -> str:
        return f"SchemaElement({self.tag!r}, {self.attributes!r}, children={len(self._children)})"

    @property
    def parent(self) -> SchemaElement | None:
        return self._parent

    @property
    def children(self) -> list[SchemaElement]:
        """Snapshot of the child elements, in document order."""
        return list(self._children)

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def set(self, name: str, value: Any) -> None:
        """Set an attribute; booleans are stored as 'true' / 'false'."""
        if isinstance(value, bool):
            value = "true" if value else "false"
        self.attributes[name] = str(value)

    def add_element(self, tag: str, **attributes: Any) -> SchemaElement:
        """Create a child element and append it."""
        child = SchemaElement(tag)
        for name, value in attributes.items():
            child.set(name, value)
        return self.add(child)

    def add(self, child: SchemaElement) -> SchemaElement:
        """Append a detached element as the last child."""
        if child._parent is not None:
            raise ValueError(f"Element <{child.tag}> already belongs to <{child._parent.tag}>")
        child._parent = self
        self._children.append(child)
        return child

    def detach(self) -> SchemaElement:
        """Remove this element from its parent."""
        if self._parent is not None:
            self._parent._children.remove(self)
            self._parent = None
        return self

    def elements(self, tag: str | None = None) -> list[SchemaElement]:
        """Direct children, optionally filtered by tag."""
        if tag is None:
            return list(self._children)
        return [child for child in self._children if child.tag == tag]

    def clone(self) -> SchemaElement:
        """Deep copy of this element and its subtree, detached from any parent."""
        parent = self._parent
        self._parent = None
        try:
            return copy.deepcopy(self)
        finally:
            self._parent = parent

    def to_dict(self) -> dict[str, Any]:
        """Plain-data view of the subtree, for comparison and debugging."""
        return {
            "tag": self.tag,
            "attributes": dict(self.attributes),
            "children": [child.to_dict() for child in self._children],
        }
