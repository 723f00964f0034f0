"""Read-only view of an Order (query side).

Maps the aggregate to an ``OrderDTO``. Validation is run as part of the
mapping so that a caller rendering the order also sees what is wrong
with it; the order itself is never modified.
"""

from __future__ import annotations

from ordermodel.application.dto import OrderDTO, OrderItemDTO
from ordermodel.domain.model.order import Order
from ordermodel.domain.model.value_objects import format_money


def describe_order(order: Order) -> OrderDTO:
    is_valid, errors = order.validate()
    return OrderDTO(
        order_id=str(order.order_id),
        customer_id=order.customer_id,
        status=order.status.value,
        payment_status=order.payment_status.value,
        items=[
            OrderItemDTO(
                sku=item.sku,
                name=item.name,
                quantity=item.quantity,
                unit_price=format_money(item.unit_price),
                line_total=format_money(item.line_total),
            )
            for item in order.items
        ],
        subtotal=format_money(order.subtotal),
        shipping_amount=format_money(order.shipping_amount),
        tax_amount=format_money(order.tax_amount),
        discount_amount=format_money(order.discount_amount),
        total=format_money(order.total),
        created_at=order.created_at.isoformat(),
        updated_at=order.updated_at.isoformat() if order.updated_at else None,
        is_valid=is_valid,
        errors=[error.message for error in errors],
    )
