"""Unit tests for identifier mappers and identifier mapping data."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from history_meta.mapping.id import MultipleIdMapper, SingleIdMapper
from history_meta.mapping.protocol import IdMapper
from history_meta.metadata.id_generator import IdProperty, build_id_mapping_data
from history_meta.model.properties import PropertyData


@dataclass
class Customer:
    id: int
    name: str = ""


@dataclass
class OrderLine:
    order_id: int
    line_no: int


class TestSingleIdMapper:
    def test_protocol(self) -> None:
        assert isinstance(SingleIdMapper(PropertyData("id")), IdMapper)

    def test_map_from_entity(self) -> None:
        data: dict = {}
        SingleIdMapper(PropertyData("id")).map_to_map_from_entity(data, Customer(id=4))
        assert data == {"id": 4}

    def test_map_from_none_entity(self) -> None:
        data: dict = {}
        SingleIdMapper(PropertyData("id")).map_to_map_from_entity(data, None)
        assert data == {"id": None}

    def test_prefixed_keys_read_original_attribute(self) -> None:
        mapper = SingleIdMapper(PropertyData("id")).prefix_mapped_properties("customer_")
        data: dict = {}
        mapper.map_to_map_from_entity(data, Customer(id=4))
        assert data == {"customer_id": 4}
        assert mapper.map_to_id_from_map(data) == 4
        assert mapper.map_to_id_from_entity(Customer(id=9)) == 9

    def test_prefix_returns_copy(self) -> None:
        original = SingleIdMapper(PropertyData("id"))
        original.prefix_mapped_properties("customer_")
        assert original.mapped_names == ["id"]

    def test_map_from_id(self) -> None:
        data: dict = {}
        SingleIdMapper(PropertyData("customer_id", bean_name="id")).map_to_map_from_id(data, 7)
        assert data == {"customer_id": 7}


class TestMultipleIdMapper:
    def _mapper(self) -> MultipleIdMapper:
        return MultipleIdMapper([PropertyData("order_id"), PropertyData("line_no")])

    def test_map_from_entity(self) -> None:
        data: dict = {}
        self._mapper().prefix_mapped_properties("line_").map_to_map_from_entity(
            data, OrderLine(order_id=1, line_no=2)
        )
        assert data == {"line_order_id": 1, "line_line_no": 2}

    def test_id_round_keys(self) -> None:
        mapper = self._mapper().prefix_mapped_properties("line_")
        data: dict = {}
        mapper.map_to_map_from_id(data, {"order_id": 1, "line_no": 2})
        assert data == {"line_order_id": 1, "line_line_no": 2}
        assert mapper.map_to_id_from_map(data) == {"order_id": 1, "line_no": 2}

    def test_partial_id_is_none(self) -> None:
        assert self._mapper().map_to_id_from_map({"order_id": 1}) is None

    def test_none_id_writes_nulls(self) -> None:
        data: dict = {}
        self._mapper().map_to_map_from_id(data, None)
        assert data == {"order_id": None, "line_no": None}

    def test_id_from_entity(self) -> None:
        mapper = self._mapper()
        assert mapper.map_to_id_from_entity(OrderLine(order_id=3, line_no=4)) == {
            "order_id": 3,
            "line_no": 4,
        }
        assert mapper.map_to_id_from_entity(None) is None


class TestBuildIdMappingData:
    def test_single_identifier(self) -> None:
        data = build_id_mapping_data([IdProperty(PropertyData("id"), "id", "long")])
        assert isinstance(data.id_mapper, SingleIdMapper)
        assert data.xml_mapping.tag == "composite-id"
        assert data.xml_mapping.get("name") == "originalId"
        assert data.xml_mapping.children[0].tag == "key-property"

        relation = data.xml_relation_mapping
        assert relation.tag == "properties"
        prop = relation.children[0]
        assert prop.attributes == {"name": "id", "type": "long", "insert": "true", "update": "false"}
        assert prop.elements("column")[0].get("name") == "id"

    def test_composite_identifier(self) -> None:
        data = build_id_mapping_data(
            [IdProperty(PropertyData("order_id"), "order_id"), IdProperty(PropertyData("line_no"), "line")]
        )
        assert isinstance(data.id_mapper, MultipleIdMapper)
        assert [c.get("name") for c in data.xml_relation_mapping.children] == ["order_id", "line_no"]
        assert data.xml_relation_mapping.children[1].get("type") is None

    def test_requires_identifier(self) -> None:
        with pytest.raises(ValueError, match="identifier"):
            build_id_mapping_data([])

    def test_id_mapping_data_frozen(self) -> None:
        data = build_id_mapping_data([IdProperty(PropertyData("id"), "id")])
        with pytest.raises(AttributeError):
            data.id_mapper = None  # type: ignore[misc]
