"""Composite value mapper for one audited entity."""

from __future__ import annotations

import logging
from typing import Any

from history_meta.core.exceptions import DuplicatePropertyError
from history_meta.mapping.protocol import AuditReader, PropertyMapper
from history_meta.model.properties import PropertyData

logger = logging.getLogger(__name__)


class SinglePropertyMapper:
    """Copies a plain value property as-is."""

    def __init__(self, property_data: PropertyData) -> None:
        self._property_data = property_data

    def map_to_map_from_entity(self, data: dict[str, Any], new_obj: Any, old_obj: Any) -> bool:
        name = self._property_data.name
        new_value = None if new_obj is None else self._property_data.get_value(new_obj)
        old_value = None if old_obj is None else self._property_data.get_value(old_obj)
        data[name] = new_value
        return new_value != old_value

    def map_to_entity_from_map(
        self,
        obj: Any,
        data: dict[str, Any],
        primary_key: Any,
        reader: AuditReader,
        revision: Any,
    ) -> None:
        self._property_data.set_value(obj, data.get(self._property_data.name))


class MultiPropertyMapper:
    """Holds one value mapper per audited property of an entity.

    Relation mappers receive the referenced entities (the property values)
    when audit data is built; plain properties receive the owning entities.
    """

    def __init__(self) -> None:
        self._mappers: dict[str, PropertyMapper] = {}
        self._relations: set[str] = set()
        self._property_datas: dict[str, PropertyData] = {}

    def _register(self, property_data: PropertyData, mapper: PropertyMapper) -> None:
        if property_data.name in self._mappers:
            raise DuplicatePropertyError(property_data.name)
        self._mappers[property_data.name] = mapper
        self._property_datas[property_data.name] = property_data

    def add(self, property_data: PropertyData) -> None:
        self._register(property_data, SinglePropertyMapper(property_data))

    def add_composite(self, property_data: PropertyData, mapper: PropertyMapper) -> None:
        self._register(property_data, mapper)
        self._relations.add(property_data.name)
        logger.debug("Registered %s for property '%s'", type(mapper).__name__, property_data.name)

    def has(self, property_name: str) -> bool:
        return property_name in self._mappers

    def get(self, property_name: str) -> PropertyMapper | None:
        return self._mappers.get(property_name)

    @property
    def properties(self) -> dict[PropertyData, PropertyMapper]:
        """Registered mappers keyed by their property descriptor, in registration order."""
        return {self._property_datas[name]: mapper for name, mapper in self._mappers.items()}

    def map_to_map_from_entity(self, data: dict[str, Any], new_obj: Any, old_obj: Any) -> bool:
        """Build audit data for every property; True if any property changed."""
        changed = False
        for name, mapper in self._mappers.items():
            if name in self._relations:
                property_data = self._property_datas[name]
                new_value = None if new_obj is None else property_data.get_value(new_obj)
                old_value = None if old_obj is None else property_data.get_value(old_obj)
                changed |= mapper.map_to_map_from_entity(data, new_value, old_value)
            else:
                changed |= mapper.map_to_map_from_entity(data, new_obj, old_obj)
        return changed

    def map_to_entity_from_map(
        self,
        obj: Any,
        data: dict[str, Any],
        primary_key: Any,
        reader: AuditReader,
        revision: Any,
    ) -> None:
        for mapper in self._mappers.values():
            mapper.map_to_entity_from_map(obj, data, primary_key, reader, revision)
