"""
Example 01: To-One Relations

This example builds audit metadata for an Order -> Customer many-to-one,
its inverse one-to-one on Customer, and an Invoice sharing Order's primary key.
"""

import logging

from history_meta import (
    IdProperty,
    ManyToOne,
    MetadataBuildContext,
    OneToOne,
    PropertyAuditingData,
    PropertyData,
    SchemaElement,
    ToOneRelationMetadataGenerator,
    build_id_mapping_data,
)


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    context = MetadataBuildContext()
    for entity_name in ("Customer", "Order", "Invoice"):
        context.register_entity(
            entity_name, build_id_mapping_data([IdProperty(PropertyData("id"), "id", "long")])
        )

    generator = ToOneRelationMetadataGenerator(context)

    # Owning side: Order.customer stores Customer's id in customer_id
    order = context.entities_configurations.get("Order")
    order_table = SchemaElement("class", {"entity-name": "Order_AUD"})
    generator.add_to_one(
        order_table,
        PropertyAuditingData(name="customer"),
        ManyToOne(referenced_entity_name="Customer", column_names=["customer_id"]),
        order.property_mapper,
        "Order",
        True,
    )

    # Inverse side: Customer.order is resolved through Order.customer
    customer = context.entities_configurations.get("Customer")
    generator.add_one_to_one_not_owning(
        PropertyAuditingData(name="order"),
        OneToOne(referenced_entity_name="Order", referenced_property_name="customer"),
        customer.property_mapper,
        "Customer",
    )

    # Shared primary key: Invoice.order has the same id as its Invoice
    invoice = context.entities_configurations.get("Invoice")
    generator.add_one_to_one_primary_key_join_column(
        PropertyAuditingData(name="order"),
        OneToOne(referenced_entity_name="Order", constrained=True),
        invoice.property_mapper,
        "Invoice",
        True,
    )

    print("Order_AUD fragment:")
    for element in order_table.children:
        print(f"  {element.to_dict()}")

    for entity_name in context.entities_configurations.entity_names:
        configuration = context.entities_configurations.get(entity_name)
        for relation in configuration.relations:
            print(
                f"{entity_name}.{relation.from_property_name} -> {relation.to_entity_name} "
                f"({relation.relation_type.value}, mapped_by={relation.mapped_by_property_name})"
            )


if __name__ == "__main__":
    main()
