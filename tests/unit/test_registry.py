"""Unit tests for EntitiesConfigurations and EntityConfiguration."""

from __future__ import annotations

import pytest

from history_meta.core.entities import EntityConfiguration
from history_meta.core.enums import RelationType
from history_meta.core.exceptions import DuplicateRelationError, NonAuditedEntityError
from history_meta.core.registry import EntitiesConfigurations
from history_meta.mapping.composite import MultiPropertyMapper
from history_meta.mapping.id import SingleIdMapper
from history_meta.model.properties import PropertyData


class TestEntitiesConfigurations:
    def test_add_and_get(self, id_mapping) -> None:
        registry = EntitiesConfigurations()
        configuration = EntityConfiguration("Order", id_mapping("id"))
        registry.add("Order", configuration)
        assert registry.get("Order") is configuration
        assert registry.has("Order") is True

    def test_get_missing_returns_none(self) -> None:
        registry = EntitiesConfigurations()
        assert registry.get("Order") is None
        assert registry.has("Order") is False

    def test_require_missing(self) -> None:
        with pytest.raises(NonAuditedEntityError, match="non-audited entity Order"):
            EntitiesConfigurations().require("Order")

    def test_entity_names_sorted(self, id_mapping) -> None:
        registry = EntitiesConfigurations()
        for name in ("Shipper", "Customer", "Order"):
            registry.add(name, EntityConfiguration(name, id_mapping("id")))
        assert registry.entity_names == ["Customer", "Order", "Shipper"]
        assert list(registry) == ["Shipper", "Customer", "Order"]
        assert len(registry) == 3

    def test_empty(self) -> None:
        registry = EntitiesConfigurations()
        assert len(registry) == 0
        assert registry.entity_names == []


class TestEntityConfiguration:
    def _id_mapper(self) -> SingleIdMapper:
        return SingleIdMapper(PropertyData("customer_id", bean_name="id"))

    def test_defaults(self, id_mapping) -> None:
        data = id_mapping("id")
        configuration = EntityConfiguration("Order", data)
        assert configuration.get_id_mapping_data() is data
        assert configuration.get_id_mapper() is data.id_mapper
        assert isinstance(configuration.property_mapper, MultiPropertyMapper)
        assert configuration.relations == []

    def test_without_id_mapping(self) -> None:
        configuration = EntityConfiguration("Order", None)
        assert configuration.get_id_mapping_data() is None
        assert configuration.get_id_mapper() is None

    def test_add_to_one_relation(self) -> None:
        configuration = EntityConfiguration("Order", None)
        id_mapper = self._id_mapper()
        configuration.add_to_one_relation("customer", "Customer", id_mapper, False, True)
        relation = configuration.get_relation_description("customer")
        assert relation.relation_type is RelationType.TO_ONE
        assert relation.mapped_by_property_name is None
        assert relation.id_mapper is id_mapper
        assert relation.insertable is False
        assert relation.ignore_not_found is True
        assert configuration.is_relation("customer") is True

    def test_add_not_owning_relation(self) -> None:
        configuration = EntityConfiguration("Customer", None)
        configuration.add_to_one_not_owning_relation("order", "customer", "Order", self._id_mapper(), False)
        relation = configuration.get_relation_description("order")
        assert relation.relation_type is RelationType.TO_ONE_NOT_OWNING
        assert relation.mapped_by_property_name == "customer"
        assert configuration.has_relation("order") is True
        assert configuration.is_relation("order") is False

    def test_duplicate_relation(self) -> None:
        configuration = EntityConfiguration("Order", None)
        configuration.add_to_one_relation("customer", "Customer", self._id_mapper(), True, False)
        with pytest.raises(DuplicateRelationError, match="Order"):
            configuration.add_to_one_not_owning_relation(
                "customer", "order", "Customer", self._id_mapper(), False
            )

    def test_relation_description_frozen(self) -> None:
        configuration = EntityConfiguration("Order", None)
        configuration.add_to_one_relation("customer", "Customer", self._id_mapper(), True, False)
        relation = configuration.get_relation_description("customer")
        with pytest.raises(AttributeError):
            relation.insertable = False  # type: ignore[misc]
