"""history-meta - audit metadata for to-one relations of versioned entities."""

from __future__ import annotations

from history_meta.core.config import GeneratorConfig
from history_meta.core.entities import EntityConfiguration, IdMappingData, RelationDescription
from history_meta.core.enums import AccessType, RelationTargetAuditMode, RelationType
from history_meta.core.exceptions import (
    ColumnCollisionError,
    ColumnMismatchError,
    ConfigurationError,
    DuplicatePropertyError,
    DuplicateRelationError,
    HistoryMetaError,
    MappingError,
    NonAuditedEntityError,
)
from history_meta.core.registry import EntitiesConfigurations
from history_meta.mapping import (
    MultiPropertyMapper,
    OneToOneNotOwningMapper,
    OneToOnePrimaryKeyJoinColumnMapper,
    ToOneIdMapper,
)
from history_meta.metadata import (
    IdProperty,
    MetadataBuildContext,
    ToOneRelationMetadataGenerator,
    build_id_mapping_data,
    create_to_one_relation_prefix,
)
from history_meta.model import ManyToOne, OneToOne, PropertyAuditingData, PropertyData
from history_meta.schema import SchemaElement

__all__ = [
    # Config
    "GeneratorConfig",
    # Build pass
    "MetadataBuildContext",
    "ToOneRelationMetadataGenerator",
    "create_to_one_relation_prefix",
    "IdProperty",
    "build_id_mapping_data",
    # Registry
    "EntitiesConfigurations",
    "EntityConfiguration",
    "IdMappingData",
    "RelationDescription",
    # Model
    "PropertyData",
    "PropertyAuditingData",
    "ManyToOne",
    "OneToOne",
    "SchemaElement",
    # Mappers
    "MultiPropertyMapper",
    "ToOneIdMapper",
    "OneToOneNotOwningMapper",
    "OneToOnePrimaryKeyJoinColumnMapper",
    # Enums
    "AccessType",
    "RelationType",
    "RelationTargetAuditMode",
    # Exceptions
    "HistoryMetaError",
    "ConfigurationError",
    "NonAuditedEntityError",
    "DuplicateRelationError",
    "ColumnMismatchError",
    "ColumnCollisionError",
    "MappingError",
    "DuplicatePropertyError",
]
