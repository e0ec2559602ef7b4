"""Helpers that rename and prefix schema fragments in place."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from history_meta.schema.element import SchemaElement

_PREFIXED_TAGS = ("property", "many-to-one")


def column_elements(element: SchemaElement) -> list[SchemaElement]:
    """All column elements found under the property children of element."""
    columns: list[SchemaElement] = []
    for prop in element.elements():
        if prop.tag in _PREFIXED_TAGS:
            columns.extend(prop.elements("column"))
    return columns


def _change_names_in_column_element(element: SchemaElement, column_names: Iterator[str]) -> None:
    for column in element.elements("column"):
        if column.get("name") is not None:
            # Keep the template's name once the live columns run out
            column.set("name", next(column_names, column.get("name")))


def prefix_names_in_property_element(
    element: SchemaElement,
    prefix: str,
    column_names: Iterable[str],
    change_to_key: bool,
    insertable: bool,
) -> None:
    """Prefix property names and rebind columns of a cloned id fragment.

    Args:
        element: Fragment whose property children are rewritten in place.
        prefix: Relation prefix prepended to every property name.
        column_names: Physical column names, consumed in document order.
        change_to_key: Rename "property" to "key-property" (and
            "many-to-one" to "key-many-to-one").
        insertable: Value written to the "insert" attribute of properties.
    """
    columns = iter(column_names)
    for prop in element.elements():
        if prop.tag not in _PREFIXED_TAGS:
            continue
        name = prop.get("name")
        if name is not None:
            prop.set("name", prefix + name)
        _change_names_in_column_element(prop, columns)
        if change_to_key:
            prop.tag = "key-" + prop.tag
        if prop.tag == "property":
            prop.set("insert", insertable)
