"""Mapper protocols.

Value mappers copy one property between an entity instance and an audit
row dict. Identifier mappers do the same for an entity's identifier and
can be re-namespaced under a prefix.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from history_meta.model.properties import PropertyData


@runtime_checkable
class IdMapper(Protocol):
    """Maps an entity identifier to and from audit row data."""

    def map_to_map_from_id(self, data: dict[str, Any], obj_id: Any) -> None:
        """Write an identifier value into data."""
        ...

    def map_to_map_from_entity(self, data: dict[str, Any], entity: Any) -> None:
        """Write the identifier of entity (or nulls when entity is None) into data."""
        ...

    def map_to_id_from_map(self, data: dict[str, Any]) -> Any:
        """Read an identifier value from data, None when it is absent."""
        ...

    def map_to_id_from_entity(self, entity: Any) -> Any:
        """Read the identifier value of entity."""
        ...

    def prefix_mapped_properties(self, prefix: str) -> IdMapper:
        """Return a copy whose mapped property names are prefixed."""
        ...


class AuditReader(Protocol):
    """Runtime lookups a mapper needs when restoring an audited snapshot."""

    def find(self, entity_name: str, primary_key: Any, revision: Any) -> Any:
        """Load entity_name with primary_key as of revision, or None."""
        ...

    def find_by_owner(
        self,
        entity_name: str,
        owning_property_name: str,
        owner_id: Any,
        revision: Any,
    ) -> Any:
        """Load the entity_name whose owning_property_name references owner_id."""
        ...


@runtime_checkable
class PropertyMapper(Protocol):
    """Extracts and injects one property while building or restoring a snapshot."""

    def map_to_map_from_entity(
        self,
        data: dict[str, Any],
        new_obj: Any,
        old_obj: Any,
    ) -> bool:
        """Write audit data for the property; return True if it changed."""
        ...

    def map_to_entity_from_map(
        self,
        obj: Any,
        data: dict[str, Any],
        primary_key: Any,
        reader: AuditReader,
        revision: Any,
    ) -> None:
        """Set the property on obj from audit data."""
        ...


class CompositeMapperBuilder(Protocol):
    """Collects the value mappers of one entity."""

    def has(self, property_name: str) -> bool:
        """Whether a mapper is already registered for property_name."""
        ...

    def add(self, property_data: PropertyData) -> None:
        """Register a plain value property."""
        ...

    def add_composite(self, property_data: PropertyData, mapper: PropertyMapper) -> None:
        """Register a mapper for a composite or relation property."""
        ...
