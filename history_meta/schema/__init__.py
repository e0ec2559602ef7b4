"""Schema fragments for historical tables."""

from __future__ import annotations

from history_meta.schema.element import SchemaElement
from history_meta.schema.tools import column_elements, prefix_names_in_property_element

__all__ = [
    "SchemaElement",
    "column_elements",
    "prefix_names_in_property_element",
]
