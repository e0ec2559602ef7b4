"""Per-entity audit configuration.

An EntityConfiguration is created once per audited entity and filled in
as each of its properties is processed during the build pass.
"""

from __future__ import annotations

from dataclasses import dataclass

from history_meta.core.enums import RelationType
from history_meta.core.exceptions import DuplicateRelationError
from history_meta.mapping.composite import MultiPropertyMapper
from history_meta.mapping.protocol import IdMapper
from history_meta.schema.element import SchemaElement


@dataclass(frozen=True)
class IdMappingData:
    """Identifier mapping of one entity.

    xml_relation_mapping is a shared template. Relations referencing the
    entity must clone() it before renaming anything.
    """

    id_mapper: IdMapper
    xml_mapping: SchemaElement
    xml_relation_mapping: SchemaElement


@dataclass(frozen=True)
class RelationDescription:
    """A relation registered on an entity configuration."""

    from_property_name: str
    relation_type: RelationType
    to_entity_name: str
    mapped_by_property_name: str | None
    id_mapper: IdMapper
    insertable: bool
    ignore_not_found: bool


class EntityConfiguration:
    """Audit configuration of a single entity."""

    def __init__(
        self,
        versions_entity_name: str,
        id_mapping_data: IdMappingData | None,
        property_mapper: MultiPropertyMapper | None = None,
        parent_entity_name: str | None = None,
    ) -> None:
        self.versions_entity_name = versions_entity_name
        self._id_mapping_data = id_mapping_data
        self.property_mapper = property_mapper if property_mapper is not None else MultiPropertyMapper()
        self.parent_entity_name = parent_entity_name
        self._relations: dict[str, RelationDescription] = {}

    def get_id_mapping_data(self) -> IdMappingData | None:
        return self._id_mapping_data

    def get_id_mapper(self) -> IdMapper | None:
        if self._id_mapping_data is None:
            return None
        return self._id_mapping_data.id_mapper

    def _add_relation(self, description: RelationDescription) -> None:
        if description.from_property_name in self._relations:
            raise DuplicateRelationError(self.versions_entity_name, description.from_property_name)
        self._relations[description.from_property_name] = description

    def add_to_one_relation(
        self,
        from_property_name: str,
        to_entity_name: str,
        id_mapper: IdMapper,
        insertable: bool,
        ignore_not_found: bool,
    ) -> None:
        """Register an owning to-one relation."""
        self._add_relation(
            RelationDescription(
                from_property_name=from_property_name,
                relation_type=RelationType.TO_ONE,
                to_entity_name=to_entity_name,
                mapped_by_property_name=None,
                id_mapper=id_mapper,
                insertable=insertable,
                ignore_not_found=ignore_not_found,
            )
        )

    def add_to_one_not_owning_relation(
        self,
        from_property_name: str,
        mapped_by_property_name: str,
        to_entity_name: str,
        id_mapper: IdMapper,
        ignore_not_found: bool,
    ) -> None:
        """Register the inverse side of a one-to-one relation."""
        self._add_relation(
            RelationDescription(
                from_property_name=from_property_name,
                relation_type=RelationType.TO_ONE_NOT_OWNING,
                to_entity_name=to_entity_name,
                mapped_by_property_name=mapped_by_property_name,
                id_mapper=id_mapper,
                insertable=True,
                ignore_not_found=ignore_not_found,
            )
        )

    def has_relation(self, property_name: str) -> bool:
        """Whether any relation is registered under property_name."""
        return property_name in self._relations

    def is_relation(self, property_name: str) -> bool:
        """Whether property_name is an owning to-one relation."""
        description = self._relations.get(property_name)
        return description is not None and description.relation_type is RelationType.TO_ONE

    def get_relation_description(self, property_name: str) -> RelationDescription | None:
        return self._relations.get(property_name)

    @property
    def relations(self) -> list[RelationDescription]:
        """Registered relations, in registration order."""
        return list(self._relations.values())
