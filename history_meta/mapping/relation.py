"""Value mappers for to-one relations.

Three strategies share one capability: record or restore the identity of
the entity a to-one property references.

- ToOneIdMapper stores the referenced identifier in dedicated columns.
- OneToOneNotOwningMapper stores nothing; the value is found through the
  owning side's property.
- OneToOnePrimaryKeyJoinColumnMapper stores nothing; the value shares the
  owner's primary key.
"""

from __future__ import annotations

from typing import Any

from history_meta.mapping.protocol import AuditReader, IdMapper
from history_meta.model.properties import PropertyData


class ToOneIdMapper:
    """Owning-side mapper writing the referenced identifier under prefixed keys."""

    def __init__(
        self,
        delegate: IdMapper,
        property_data: PropertyData,
        referenced_entity_name: str,
        non_insertable_fake: bool,
    ) -> None:
        self.delegate = delegate
        self.property_data = property_data
        self.referenced_entity_name = referenced_entity_name
        self.non_insertable_fake = non_insertable_fake

    def __repr__(self) -> str:
        return (
            f"ToOneIdMapper({self.property_data.name!r} -> {self.referenced_entity_name!r}, "
            f"non_insertable_fake={self.non_insertable_fake})"
        )

    def map_to_map_from_entity(self, data: dict[str, Any], new_obj: Any, old_obj: Any) -> bool:
        # A non-insertable fake always records the unchanged value; the
        # collection side is responsible for recording real changes.
        self.delegate.map_to_map_from_entity(data, old_obj if self.non_insertable_fake else new_obj)
        if self.non_insertable_fake:
            return False
        return self.delegate.map_to_id_from_entity(new_obj) != self.delegate.map_to_id_from_entity(
            old_obj
        )

    def map_to_entity_from_map(
        self,
        obj: Any,
        data: dict[str, Any],
        primary_key: Any,
        reader: AuditReader,
        revision: Any,
    ) -> None:
        entity_id = self.delegate.map_to_id_from_map(data)
        value = None
        if entity_id is not None:
            value = reader.find(self.referenced_entity_name, entity_id, revision)
        self.property_data.set_value(obj, value)


class OneToOneNotOwningMapper:
    """Inverse-side mapper resolving the value through the owning property."""

    def __init__(
        self,
        entity_name: str,
        referenced_entity_name: str,
        owning_property_name: str,
        property_data: PropertyData,
    ) -> None:
        self.entity_name = entity_name
        self.referenced_entity_name = referenced_entity_name
        self.owning_property_name = owning_property_name
        self.property_data = property_data

    def __repr__(self) -> str:
        return (
            f"OneToOneNotOwningMapper({self.property_data.name!r} -> "
            f"{self.referenced_entity_name}.{self.owning_property_name})"
        )

    def map_to_map_from_entity(self, data: dict[str, Any], new_obj: Any, old_obj: Any) -> bool:
        return False

    def map_to_entity_from_map(
        self,
        obj: Any,
        data: dict[str, Any],
        primary_key: Any,
        reader: AuditReader,
        revision: Any,
    ) -> None:
        value = reader.find_by_owner(
            self.referenced_entity_name,
            self.owning_property_name,
            primary_key,
            revision,
        )
        self.property_data.set_value(obj, value)


class OneToOnePrimaryKeyJoinColumnMapper:
    """Shared-primary-key mapper resolving the value by the owner's own key."""

    def __init__(
        self,
        entity_name: str,
        referenced_entity_name: str,
        property_data: PropertyData,
    ) -> None:
        self.entity_name = entity_name
        self.referenced_entity_name = referenced_entity_name
        self.property_data = property_data

    def __repr__(self) -> str:
        return (
            f"OneToOnePrimaryKeyJoinColumnMapper({self.property_data.name!r} -> "
            f"{self.referenced_entity_name!r})"
        )

    def map_to_map_from_entity(self, data: dict[str, Any], new_obj: Any, old_obj: Any) -> bool:
        return False

    def map_to_entity_from_map(
        self,
        obj: Any,
        data: dict[str, Any],
        primary_key: Any,
        reader: AuditReader,
        revision: Any,
    ) -> None:
        value = None
        if primary_key is not None:
            value = reader.find(self.referenced_entity_name, primary_key, revision)
        self.property_data.set_value(obj, value)
