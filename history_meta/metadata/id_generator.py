"""Identifier mapping data for audited entities."""

from __future__ import annotations

from dataclasses import dataclass

from history_meta.core.entities import IdMappingData
from history_meta.mapping.id import MultipleIdMapper, SingleIdMapper
from history_meta.mapping.protocol import IdMapper
from history_meta.model.properties import PropertyData
from history_meta.schema.element import SchemaElement

ORIGINAL_ID_PROPERTY_NAME = "originalId"


@dataclass(frozen=True)
class IdProperty:
    """One identifier property of an entity and the column it is stored in."""

    property_data: PropertyData
    column_name: str
    type_name: str | None = None


def _property_element(parent: SchemaElement, tag: str, id_property: IdProperty) -> SchemaElement:
    element = parent.add_element(tag, name=id_property.property_data.name)
    if id_property.type_name is not None:
        element.set("type", id_property.type_name)
    element.add_element("column", name=id_property.column_name)
    return element


def build_id_mapping_data(id_properties: list[IdProperty]) -> IdMappingData:
    """Build the identifier mapping of an entity.

    A single identifier property gets a SingleIdMapper, several get a
    MultipleIdMapper. The relation template holds one "property" element
    per identifier column, wrapped in a "properties" element.
    """
    if not id_properties:
        raise ValueError("An audited entity needs at least one identifier property")

    id_mapper: IdMapper
    if len(id_properties) == 1:
        id_mapper = SingleIdMapper(id_properties[0].property_data)
    else:
        id_mapper = MultipleIdMapper([prop.property_data for prop in id_properties])

    xml_mapping = SchemaElement("composite-id", {"name": ORIGINAL_ID_PROPERTY_NAME})
    xml_relation_mapping = SchemaElement("properties")
    for id_property in id_properties:
        _property_element(xml_mapping, "key-property", id_property)
        relation_property = _property_element(xml_relation_mapping, "property", id_property)
        relation_property.set("insert", True)
        relation_property.set("update", False)

    return IdMappingData(
        id_mapper=id_mapper,
        xml_mapping=xml_mapping,
        xml_relation_mapping=xml_relation_mapping,
    )
