"""Naming helpers shared by the relation metadata generators."""

from __future__ import annotations


def create_to_one_relation_prefix(property_name: str, separator: str = "_") -> str:
    """Prefix under which a to-one relation stores the referenced identifier.

    Both sides of a one-to-one derive it independently from the owning
    property name, so it must depend on nothing else.
    """
    return property_name + separator
