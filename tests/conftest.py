"""Shared test fixtures."""

from __future__ import annotations

import pytest

from history_meta.core.entities import IdMappingData
from history_meta.mapping.composite import MultiPropertyMapper
from history_meta.metadata.context import MetadataBuildContext
from history_meta.metadata.id_generator import IdProperty, build_id_mapping_data
from history_meta.metadata.to_one import ToOneRelationMetadataGenerator
from history_meta.model.properties import PropertyData
from history_meta.schema.element import SchemaElement


@pytest.fixture
def id_mapping():
    """Helper building identifier mapping data.

    Usage:
        id_mapping("id")                      -> single identifier column "id"
        id_mapping("order_id", "line_no")     -> composite identifier
    """

    def _build(*names: str) -> IdMappingData:
        return build_id_mapping_data(
            [IdProperty(PropertyData(name), name, "long") for name in names or ("id",)]
        )

    return _build


@pytest.fixture
def context(id_mapping) -> MetadataBuildContext:
    """Build context with audited Customer, Order and Shipper entities."""
    ctx = MetadataBuildContext()
    ctx.register_entity("Customer", id_mapping("id"))
    ctx.register_entity("Order", id_mapping("id"))
    ctx.register_entity("Shipper", id_mapping("id"))
    return ctx


@pytest.fixture
def generator(context: MetadataBuildContext) -> ToOneRelationMetadataGenerator:
    return ToOneRelationMetadataGenerator(context)


@pytest.fixture
def mapper() -> MultiPropertyMapper:
    return MultiPropertyMapper()


@pytest.fixture
def parent() -> SchemaElement:
    """Historical-table fragment owning relations are spliced into."""
    return SchemaElement("class", {"entity-name": "Order_AUD"})
