"""Audit metadata generation."""

from __future__ import annotations

from history_meta.metadata.context import MetadataBuildContext
from history_meta.metadata.id_generator import IdProperty, build_id_mapping_data
from history_meta.metadata.to_one import ToOneRelationMetadataGenerator
from history_meta.metadata.tools import create_to_one_relation_prefix

__all__ = [
    "MetadataBuildContext",
    "ToOneRelationMetadataGenerator",
    "IdProperty",
    "build_id_mapping_data",
    "create_to_one_relation_prefix",
]
