"""Tests for the read-only order view.

Builds orders in memory and checks the DTO handed to display code.
"""

from decimal import Decimal

from ordermodel.application.describe_order import describe_order
from ordermodel.domain.model.order import Order, OrderItem, OrderStatus, PaymentStatus


def _setup() -> Order:
    """Order with two lines, shipping, tax and a discount."""
    order = Order(customer_id="cust-7")
    order.add_item(OrderItem(sku="A1", name="Widget", quantity=3, unit_price=Decimal("15.00")))
    order.add_item(OrderItem(sku="B2", name="Gadget", quantity=1, unit_price=Decimal("25.00")))
    order.shipping_amount = Decimal("4.99")
    order.tax_amount = Decimal("7.00")
    order.apply_discount(Decimal("10.00"))
    return order


class TestDescribeOrderHappyPath:

    def test_formats_money(self):
        dto = describe_order(_setup())
        assert dto.subtotal == "$70.00"
        assert dto.shipping_amount == "$4.99"
        assert dto.tax_amount == "$7.00"
        assert dto.discount_amount == "$10.00"
        assert dto.total == "$71.99"

    def test_maps_items_in_order(self):
        dto = describe_order(_setup())
        assert [(i.sku, i.quantity, i.unit_price, i.line_total) for i in dto.items] == [
            ("A1", 3, "$15.00", "$45.00"),
            ("B2", 1, "$25.00", "$25.00"),
        ]

    def test_identity_status_and_timestamps(self):
        order = _setup()
        order.status = OrderStatus.SHIPPED
        order.payment_status = PaymentStatus.COMPLETED
        dto = describe_order(order)
        assert dto.order_id == str(order.order_id)
        assert dto.customer_id == "cust-7"
        assert dto.status == "SHIPPED"
        assert dto.payment_status == "COMPLETED"
        assert dto.created_at == order.created_at.isoformat()
        assert dto.updated_at == order.updated_at.isoformat()

    def test_valid_order_has_no_errors(self):
        dto = describe_order(_setup())
        assert dto.is_valid is True
        assert dto.errors == []


class TestDescribeOrderEdgeCases:

    def test_untouched_order(self):
        dto = describe_order(Order())
        assert dto.updated_at is None
        assert dto.items == []
        assert dto.total == "$0.00"

    def test_reports_validation_messages(self):
        order = _setup()
        order.items[1].sku = ""
        dto = describe_order(order)
        assert dto.is_valid is False
        assert dto.errors == ["items[1].sku: String should have at least 1 character"]

    def test_does_not_modify_order(self):
        order = _setup()
        stamp = order.updated_at
        describe_order(order)
        assert order.updated_at == stamp
        assert len(order.items) == 2
