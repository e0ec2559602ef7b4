"""Identifier mappers for single and composite identifiers."""

from __future__ import annotations

from typing import Any

from history_meta.model.properties import PropertyData


def _prefixed(property_data: PropertyData, prefix: str) -> PropertyData:
    return PropertyData(
        name=prefix + property_data.name,
        bean_name=property_data.attribute_name,
        access_type=property_data.access_type,
    )


class SingleIdMapper:
    """Maps an identifier made of one property.

    The key written to audit data is the (possibly prefixed) property name;
    the entity attribute read is always the original one.
    """

    def __init__(self, property_data: PropertyData) -> None:
        self._property_data = property_data

    def __repr__(self) -> str:
        return f"SingleIdMapper({self._property_data.name!r})"

    @property
    def property_data(self) -> PropertyData:
        return self._property_data

    @property
    def mapped_names(self) -> list[str]:
        return [self._property_data.name]

    def map_to_map_from_id(self, data: dict[str, Any], obj_id: Any) -> None:
        data[self._property_data.name] = obj_id

    def map_to_map_from_entity(self, data: dict[str, Any], entity: Any) -> None:
        if entity is None:
            data[self._property_data.name] = None
        else:
            data[self._property_data.name] = self._property_data.get_value(entity)

    def map_to_id_from_map(self, data: dict[str, Any]) -> Any:
        return data.get(self._property_data.name)

    def map_to_id_from_entity(self, entity: Any) -> Any:
        if entity is None:
            return None
        return self._property_data.get_value(entity)

    def prefix_mapped_properties(self, prefix: str) -> SingleIdMapper:
        return SingleIdMapper(_prefixed(self._property_data, prefix))


class MultipleIdMapper:
    """Maps a composite identifier.

    Identifier values are dicts keyed by the unprefixed attribute name of
    each identifier property.
    """

    def __init__(self, properties: list[PropertyData]) -> None:
        self._mappers = [SingleIdMapper(prop) for prop in properties]

    def __repr__(self) -> str:
        return f"MultipleIdMapper({self.mapped_names!r})"

    @property
    def mapped_names(self) -> list[str]:
        return [mapper.property_data.name for mapper in self._mappers]

    def map_to_map_from_id(self, data: dict[str, Any], obj_id: Any) -> None:
        for mapper in self._mappers:
            value = None if obj_id is None else obj_id.get(mapper.property_data.attribute_name)
            mapper.map_to_map_from_id(data, value)

    def map_to_map_from_entity(self, data: dict[str, Any], entity: Any) -> None:
        for mapper in self._mappers:
            mapper.map_to_map_from_entity(data, entity)

    def map_to_id_from_map(self, data: dict[str, Any]) -> dict[str, Any] | None:
        obj_id: dict[str, Any] = {}
        for mapper in self._mappers:
            value = mapper.map_to_id_from_map(data)
            if value is None:
                return None
            obj_id[mapper.property_data.attribute_name] = value
        return obj_id

    def map_to_id_from_entity(self, entity: Any) -> dict[str, Any] | None:
        if entity is None:
            return None
        return {
            mapper.property_data.attribute_name: mapper.map_to_id_from_entity(entity)
            for mapper in self._mappers
        }

    def prefix_mapped_properties(self, prefix: str) -> MultipleIdMapper:
        return MultipleIdMapper([_prefixed(m.property_data, prefix) for m in self._mappers])
