"""Metadata build context.

One MetadataBuildContext is created per build pass. It owns the entity
configuration registries the relation generators read and write, so
several independent passes can run in the same process.
"""

from __future__ import annotations

import logging

from history_meta.core.config import GeneratorConfig
from history_meta.core.entities import EntityConfiguration, IdMappingData
from history_meta.core.enums import RelationTargetAuditMode
from history_meta.core.exceptions import NonAuditedEntityError
from history_meta.core.registry import EntitiesConfigurations
from history_meta.model.properties import PropertyAuditingData

logger = logging.getLogger(__name__)


class MetadataBuildContext:
    """Shared state of one audit metadata build pass.

    Args:
        config: Generator settings. Defaults to GeneratorConfig().
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()
        self.entities_configurations = EntitiesConfigurations()
        self.not_audited_entities_configurations = EntitiesConfigurations()

    def register_entity(
        self,
        entity_name: str,
        id_mapping_data: IdMappingData,
        parent_entity_name: str | None = None,
    ) -> EntityConfiguration:
        """Create and register the configuration of an audited entity."""
        configuration = EntityConfiguration(
            versions_entity_name=entity_name,
            id_mapping_data=id_mapping_data,
            parent_entity_name=parent_entity_name,
        )
        self.entities_configurations.add(entity_name, configuration)
        logger.debug("Registered audited entity %s", entity_name)
        return configuration

    def register_not_audited_entity(
        self,
        entity_name: str,
        id_mapping_data: IdMappingData,
    ) -> EntityConfiguration:
        """Register an entity that may be referenced but is not audited itself."""
        configuration = EntityConfiguration(
            versions_entity_name=entity_name,
            id_mapping_data=id_mapping_data,
        )
        self.not_audited_entities_configurations.add(entity_name, configuration)
        logger.debug("Registered not-audited entity %s", entity_name)
        return configuration

    def get_referenced_id_mapping_data(
        self,
        entity_name: str,
        referenced_entity_name: str,
        property_auditing_data: PropertyAuditingData,
        allow_not_audited_target: bool,
    ) -> IdMappingData:
        """Identifier mapping of the entity a relation points at.

        A not-audited target is accepted only when allow_not_audited_target
        is set and the property explicitly declares its target as not
        audited.

        Raises:
            NonAuditedEntityError: If the target has no usable configuration.
        """
        configuration = self.entities_configurations.get(referenced_entity_name)
        if configuration is None:
            configuration = self.not_audited_entities_configurations.get(referenced_entity_name)
            declared_not_audited = (
                property_auditing_data.relation_target_audit_mode
                is RelationTargetAuditMode.NOT_AUDITED
            )
            if configuration is None or not allow_not_audited_target or not declared_not_audited:
                detail = (
                    f"An audited relation from {entity_name}.{property_auditing_data.name} "
                    f"to a non-audited entity {referenced_entity_name}!"
                )
                if allow_not_audited_target:
                    detail += (
                        " Such mapping is possible, but the property has to declare its"
                        " target audit mode as NOT_AUDITED."
                    )
                raise NonAuditedEntityError(referenced_entity_name, detail)

        id_mapping_data = configuration.get_id_mapping_data()
        if id_mapping_data is None:
            raise NonAuditedEntityError(referenced_entity_name)
        return id_mapping_data
