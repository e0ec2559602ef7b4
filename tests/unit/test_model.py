"""Unit tests for property descriptors and live mapping values."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass

import pytest

from history_meta.core.enums import AccessType, RelationTargetAuditMode
from history_meta.model.properties import PropertyAuditingData, PropertyData
from history_meta.model.values import ManyToOne, OneToOne, ToOne, ignore_not_found


@dataclass(frozen=True)
class FrozenOrder:
    id: int
    customer: object = None


class Invoice:
    def __init__(self) -> None:
        self._order = None
        self.writes = 0

    @property
    def order(self) -> object:
        return self._order

    @order.setter
    def order(self, value: object) -> None:
        self.writes += 1
        self._order = value


class TestPropertyData:
    def test_frozen(self) -> None:
        data = PropertyData("customer")
        with pytest.raises(AttributeError):
            data.name = "other"  # type: ignore[misc]

    def test_bean_name(self) -> None:
        data = PropertyData("customer_id", bean_name="id")
        assert data.attribute_name == "id"
        assert PropertyData("id").attribute_name == "id"

    def test_field_access_on_frozen_dataclass(self) -> None:
        order = FrozenOrder(id=1)
        PropertyData("customer").set_value(order, "c")
        assert order.customer == "c"

    def test_property_access_uses_setter(self) -> None:
        invoice = Invoice()
        PropertyData("order", access_type=AccessType.PROPERTY).set_value(invoice, "o")
        assert invoice.order == "o"
        assert invoice.writes == 1

    def test_property_access_on_frozen_dataclass_fails(self) -> None:
        with pytest.raises(FrozenInstanceError):
            PropertyData("customer", access_type=AccessType.PROPERTY).set_value(FrozenOrder(id=1), "c")

    def test_get_value(self) -> None:
        assert PropertyData("id").get_value(FrozenOrder(id=3)) == 3


class TestPropertyAuditingData:
    def test_defaults(self) -> None:
        data = PropertyAuditingData(name="customer")
        assert data.force_insertable is False
        assert data.relation_target_audit_mode is RelationTargetAuditMode.AUDITED

    def test_property_data(self) -> None:
        data = PropertyAuditingData(name="customer", bean_name="client", access_type=AccessType.PROPERTY)
        assert data.property_data == PropertyData("customer", "client", AccessType.PROPERTY)
        assert data.property_data is data.property_data


class TestValues:
    def test_ignore_not_found_many_to_one(self) -> None:
        assert ignore_not_found(ManyToOne("Customer", ["customer_id"], ignore_not_found=True)) is True
        assert ignore_not_found(ManyToOne("Customer", ["customer_id"])) is False

    def test_ignore_not_found_other_values(self) -> None:
        assert ignore_not_found(OneToOne("Order", referenced_property_name="customer")) is False
        assert ignore_not_found(ToOne("Order")) is False

    def test_one_to_one_defaults(self) -> None:
        value = OneToOne("Order")
        assert value.referenced_property_name is None
        assert value.constrained is False
        assert value.column_names == ()

    def test_values_are_hashable(self) -> None:
        value = ManyToOne("Customer", ["customer_id"])
        assert value.column_names == ("customer_id",)
        assert hash(value) == hash(ManyToOne("Customer", ("customer_id",)))
        assert len({value, ManyToOne("Customer", ["customer_id"])}) == 1
