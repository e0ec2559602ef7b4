"""Audit metadata for to-one relations (reference-valued properties).

Each entry point resolves the identifier mapping of one side of the
relation, registers a relation description on the entity configuration
and attaches a value mapper to the entity's composite mapper. Owning
references also splice the referenced identifier columns into the
historical-table fragment.

All lookups and checks run before the first mutation, so a failing call
leaves the configuration, the mapper builder and the fragment untouched.
"""

from __future__ import annotations

import logging

from history_meta.core.entities import EntityConfiguration, IdMappingData
from history_meta.core.exceptions import (
    ColumnCollisionError,
    ColumnMismatchError,
    ConfigurationError,
    DuplicateRelationError,
    NonAuditedEntityError,
)
from history_meta.mapping.protocol import CompositeMapperBuilder, IdMapper
from history_meta.mapping.relation import (
    OneToOneNotOwningMapper,
    OneToOnePrimaryKeyJoinColumnMapper,
    ToOneIdMapper,
)
from history_meta.metadata.context import MetadataBuildContext
from history_meta.metadata.tools import create_to_one_relation_prefix
from history_meta.model.properties import PropertyAuditingData
from history_meta.model.values import OneToOne, ToOne, ignore_not_found
from history_meta.schema.element import SchemaElement
from history_meta.schema.tools import column_elements, prefix_names_in_property_element

logger = logging.getLogger(__name__)


class ToOneRelationMetadataGenerator:
    """Generates metadata for to-one relations of audited entities.

    Args:
        context: The build pass this generator registers relations into.
    """

    def __init__(self, context: MetadataBuildContext) -> None:
        self._context = context

    def relation_prefix(self, property_name: str) -> str:
        """Prefix for the identifier columns stored for property_name."""
        return create_to_one_relation_prefix(
            property_name, self._context.config.relation_prefix_separator
        )

    def _configuration_for(
        self,
        entity_name: str,
        property_name: str,
        mapper: CompositeMapperBuilder,
    ) -> EntityConfiguration:
        configuration = self._context.entities_configurations.require(entity_name)
        if configuration.has_relation(property_name) or mapper.has(property_name):
            raise DuplicateRelationError(entity_name, property_name)
        return configuration

    def _resolve_owning_side(
        self,
        property_auditing_data: PropertyAuditingData,
        value: ToOne,
        mapper: CompositeMapperBuilder,
        entity_name: str,
    ) -> tuple[IdMappingData, EntityConfiguration, IdMapper]:
        id_mapping = self._context.get_referenced_id_mapping_data(
            entity_name,
            value.referenced_entity_name,
            property_auditing_data,
            self._context.config.allow_not_audited_target,
        )
        configuration = self._configuration_for(entity_name, property_auditing_data.name, mapper)
        rel_mapper = id_mapping.id_mapper.prefix_mapped_properties(
            self.relation_prefix(property_auditing_data.name)
        )
        return id_mapping, configuration, rel_mapper

    def _relation_properties(
        self,
        id_mapping: IdMappingData,
        property_auditing_data: PropertyAuditingData,
        value: ToOne,
        insertable: bool,
    ) -> SchemaElement:
        properties = id_mapping.xml_relation_mapping.clone()
        properties.set("name", property_auditing_data.name)

        expected = len(column_elements(properties))
        if self._context.config.strict_columns and len(value.column_names) < expected:
            raise ColumnMismatchError(property_auditing_data.name, expected, len(value.column_names))

        prefix_names_in_property_element(
            properties,
            self.relation_prefix(property_auditing_data.name),
            value.column_names,
            False,
            insertable,
        )
        return properties

    def _check_column_collisions(
        self,
        parent: SchemaElement,
        properties: SchemaElement,
        entity_name: str,
        property_name: str,
    ) -> None:
        taken = {child.get("name") for child in parent.children if child.get("name") is not None}
        for element in properties.children:
            name = element.get("name")
            if name is not None and name in taken:
                raise ColumnCollisionError(entity_name, property_name, name)
            taken.add(name)

    def add_to_one(
        self,
        parent: SchemaElement,
        property_auditing_data: PropertyAuditingData,
        value: ToOne,
        mapper: CompositeMapperBuilder,
        entity_name: str,
        insertable: bool,
    ) -> None:
        """Add an owning to-one relation.

        The referenced entity's identifier columns are appended to parent
        under names prefixed by the property name.

        Raises:
            NonAuditedEntityError: If the referenced entity (or entity_name
                itself) has no audit configuration.
            DuplicateRelationError: If the property is already registered.
            ColumnMismatchError: If value maps too few columns.
            ColumnCollisionError: If a prefixed column name is already used
                in parent.
        """
        referenced_entity_name = value.referenced_entity_name
        id_mapping, configuration, rel_mapper = self._resolve_owning_side(
            property_auditing_data, value, mapper, entity_name
        )

        # A non-insertable many-to-one backed by an owning collection is
        # still recorded; the collection side records real changes.
        non_insertable_fake = not insertable and property_auditing_data.force_insertable
        if non_insertable_fake:
            insertable = True

        properties = self._relation_properties(id_mapping, property_auditing_data, value, insertable)
        self._check_column_collisions(parent, properties, entity_name, property_auditing_data.name)

        configuration.add_to_one_relation(
            property_auditing_data.name,
            referenced_entity_name,
            rel_mapper,
            insertable,
            ignore_not_found(value),
        )

        for element in properties.children:
            parent.add(element.detach())

        property_data = property_auditing_data.property_data
        mapper.add_composite(
            property_data,
            ToOneIdMapper(rel_mapper, property_data, referenced_entity_name, non_insertable_fake),
        )
        logger.debug(
            "Added to-one relation %s.%s -> %s (insertable=%s, non_insertable_fake=%s)",
            entity_name,
            property_auditing_data.name,
            referenced_entity_name,
            insertable,
            non_insertable_fake,
        )

    def add_one_to_one_not_owning(
        self,
        property_auditing_data: PropertyAuditingData,
        value: OneToOne,
        mapper: CompositeMapperBuilder,
        entity_name: str,
    ) -> None:
        """Add the inverse side of a one-to-one relation.

        No columns are produced: the value is looked up through the owning
        side's property when an audited snapshot is read.

        Raises:
            NonAuditedEntityError: If entity_name has no audit configuration
                or no identifier mapping.
            DuplicateRelationError: If the property is already registered.
        """
        owning_reference_property_name = value.referenced_property_name
        if owning_reference_property_name is None:
            raise ConfigurationError(
                f"{entity_name}.{property_auditing_data.name} is not the inverse side of a one-to-one"
            )

        configuration = self._context.entities_configurations.get(entity_name)
        if configuration is None:
            raise NonAuditedEntityError(entity_name)

        owned_id_mapping = configuration.get_id_mapping_data()
        if owned_id_mapping is None:
            raise NonAuditedEntityError(entity_name)

        if configuration.has_relation(property_auditing_data.name) or mapper.has(
            property_auditing_data.name
        ):
            raise DuplicateRelationError(entity_name, property_auditing_data.name)

        referenced_entity_name = value.referenced_entity_name
        owned_id_mapper = owned_id_mapping.id_mapper.prefix_mapped_properties(
            self.relation_prefix(owning_reference_property_name)
        )

        configuration.add_to_one_not_owning_relation(
            property_auditing_data.name,
            owning_reference_property_name,
            referenced_entity_name,
            owned_id_mapper,
            ignore_not_found(value),
        )

        property_data = property_auditing_data.property_data
        mapper.add_composite(
            property_data,
            OneToOneNotOwningMapper(
                entity_name, referenced_entity_name, owning_reference_property_name, property_data
            ),
        )
        logger.debug(
            "Added not-owning one-to-one %s.%s -> %s.%s",
            entity_name,
            property_auditing_data.name,
            referenced_entity_name,
            owning_reference_property_name,
        )

    def add_one_to_one_primary_key_join_column(
        self,
        property_auditing_data: PropertyAuditingData,
        value: ToOne,
        mapper: CompositeMapperBuilder,
        entity_name: str,
        insertable: bool,
    ) -> None:
        """Add a one-to-one relation sharing the owner's primary key.

        Registers the relation like add_to_one but produces no columns: the
        referenced identity is the owning row's own primary key.

        Raises:
            NonAuditedEntityError: If the referenced entity (or entity_name
                itself) has no audit configuration.
            DuplicateRelationError: If the property is already registered.
        """
        referenced_entity_name = value.referenced_entity_name
        _, configuration, rel_mapper = self._resolve_owning_side(
            property_auditing_data, value, mapper, entity_name
        )

        # TODO: confirm with the audit reader whether a shared-key target can
        # legitimately be missing; the flag is only carried through for now.
        configuration.add_to_one_relation(
            property_auditing_data.name,
            referenced_entity_name,
            rel_mapper,
            insertable,
            ignore_not_found(value),
        )

        property_data = property_auditing_data.property_data
        mapper.add_composite(
            property_data,
            OneToOnePrimaryKeyJoinColumnMapper(entity_name, referenced_entity_name, property_data),
        )
        logger.debug(
            "Added shared-primary-key one-to-one %s.%s -> %s",
            entity_name,
            property_auditing_data.name,
            referenced_entity_name,
        )
