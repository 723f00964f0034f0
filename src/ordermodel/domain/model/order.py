"""Order aggregate and its line items.

The Order is an aggregate root that owns its line items. Preconditions
of the mutating helpers are enforced here (``InvalidArgumentError``);
field-level rules are declared on the fields and checked on demand by
``Order.validate()``.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import Field

from ordermodel.domain.exceptions import InvalidArgumentError
from ordermodel.domain.model.value_objects import (
    ZERO,
    format_money,
    normalize_amount,
    to_amount,
)
from ordermodel.domain.validation import (
    RequiredStr,
    ValidationResult,
    validate_object,
)

logger = logging.getLogger(__name__)


class OrderStatus(Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
    RETURNED = "RETURNED"


class PaymentStatus(Enum):
    NOT_PAID = "NOT_PAID"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_ITEM_QUANTITY = 2**31 - 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class OrderItem:
    """One purchased line: *quantity* units of *sku* at *unit_price*.

    Plain field assignment, no checks on construction. An item with a
    blank SKU or a negative price can exist; ``Order.validate()`` reports
    it.
    """

    sku: RequiredStr
    name: RequiredStr
    quantity: Annotated[int, Field(strict=True, ge=1, le=MAX_ITEM_QUANTITY)] = 1
    unit_price: Annotated[Decimal, Field(strict=True, ge=0)] = ZERO

    def __setattr__(self, name: str, value: object) -> None:
        if name == "unit_price":
            value = normalize_amount(value)
        super().__setattr__(name, value)

    @property
    def line_total(self) -> Decimal:
        return self.quantity * self.unit_price


_IMMUTABLE_FIELDS = frozenset({"order_id", "created_at"})
_AMOUNT_FIELDS = frozenset({"shipping_amount", "tax_amount", "discount_amount"})


@dataclass
class Order:
    """Aggregate root for customer orders.

    ``order_id`` and ``created_at`` are fixed at construction. Passing
    them explicitly is allowed so that an order kept elsewhere can be
    rebuilt; reassigning them afterwards raises ``AttributeError``.

    ``status`` and ``payment_status`` may be set directly: transition
    rules belong to whatever workflow owns the order.
    """

    customer_id: str | None = None
    items: list[OrderItem] = field(default_factory=list)
    shipping_amount: Decimal = ZERO
    tax_amount: Decimal = ZERO
    discount_amount: Decimal = ZERO
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.NOT_PAID
    shipping_address: str | None = None
    billing_address: str | None = None
    order_id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime = field(default_factory=lambda: _utcnow())
    updated_at: datetime | None = None

    def __setattr__(self, name: str, value: object) -> None:
        if name in _IMMUTABLE_FIELDS and name in self.__dict__:
            raise AttributeError(f"{name} cannot be changed once the order exists")
        if name in _AMOUNT_FIELDS:
            value = normalize_amount(value)
        super().__setattr__(name, value)

    # --- Mutations ------------------------------------------------------------

    def add_item(self, item: OrderItem) -> None:
        """Add *item*, merging it into an existing line with the same SKU.

        On a merge the quantities are summed and the incoming unit price
        replaces the stored one (last write wins).
        """
        if item is None:
            raise InvalidArgumentError("Item is required")
        if item.quantity <= 0:
            raise InvalidArgumentError("Quantity must be greater than zero")

        existing = self._find_item(item.sku)
        if existing is not None:
            existing.quantity += item.quantity
            existing.unit_price = item.unit_price  # overwrite, not average
            logger.debug(
                "Order %s: merged %s x%d into existing line (now x%d @ %s)",
                self.order_id, item.sku, item.quantity,
                existing.quantity, existing.unit_price,
            )
        else:
            self.items.append(item)
            logger.debug(
                "Order %s: added %s x%d @ %s",
                self.order_id, item.sku, item.quantity, item.unit_price,
            )
        self._touch()

    def remove_item(self, sku: str, quantity: int | None = None) -> bool:
        """Remove *quantity* units of *sku*, or the whole line if omitted.

        Returns False, without touching the order, when no line has that
        SKU. A quantity at or above the line's quantity deletes the line.
        """
        existing = self._find_item(sku)
        if existing is None:
            return False

        if quantity is not None and quantity < 1:
            raise InvalidArgumentError("Quantity to remove must be at least 1")

        if quantity is None or quantity >= existing.quantity:
            self.items.remove(existing)
            logger.debug("Order %s: removed line %s", self.order_id, sku)
        else:
            existing.quantity -= quantity
            logger.debug(
                "Order %s: removed %d of %s (%d left)",
                self.order_id, quantity, sku, existing.quantity,
            )
        self._touch()
        return True

    def apply_discount(self, amount: str | float | int | Decimal) -> None:
        """Set the discount to exactly *amount* (replaces, never adds)."""
        value = to_amount(amount)
        if value < ZERO:
            raise InvalidArgumentError("Discount cannot be negative")
        self.discount_amount = value
        logger.debug("Order %s: discount set to %s", self.order_id, value)
        self._touch()

    # --- Validation -----------------------------------------------------------

    def validate(self) -> tuple[bool, list[ValidationResult]]:
        """Check the order's own fields, then every item in sequence.

        Returns ``(True, [])`` when nothing is violated, otherwise
        ``(False, errors)`` with one entry per failed constraint.
        """
        errors = validate_object(self)
        for index, item in enumerate(self.items):
            errors.extend(validate_object(item, prefix=f"items[{index}]"))
        if errors:
            logger.debug(
                "Order %s failed validation with %d error(s)",
                self.order_id, len(errors),
            )
        return not errors, errors

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Decimal:
        return sum((item.line_total for item in self.items), ZERO)

    @property
    def total(self) -> Decimal:
        return max(
            ZERO,
            self.subtotal + self.shipping_amount + self.tax_amount - self.discount_amount,
        )

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        customer = self.customer_id if self.customer_id is not None else "N/A"
        return (
            f"Order {self.order_id} - Customer: {customer} "
            f"- Items: {len(self.items)} - Total: {format_money(self.total)}"
        )

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, sku: str | None) -> OrderItem | None:
        for item in self.items:
            if item.sku == sku:
                return item
        return None

    def _touch(self) -> None:
        self.updated_at = _utcnow()
