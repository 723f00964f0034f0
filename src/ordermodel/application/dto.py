"""Data Transfer Objects: plain containers handed to display code.

DTOs carry an order's state to loggers and renderers without exposing
the mutable aggregate. Money is pre-formatted, timestamps are ISO-8601.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    sku: str | None
    name: str | None
    quantity: int
    unit_price: str  # formatted, e.g. "$4.50"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    order_id: str
    customer_id: str | None
    status: str
    payment_status: str
    items: list[OrderItemDTO]
    subtotal: str
    shipping_amount: str
    tax_amount: str
    discount_amount: str
    total: str
    created_at: str
    updated_at: str | None
    is_valid: bool
    errors: list[str]
