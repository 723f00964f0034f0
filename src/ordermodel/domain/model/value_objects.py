"""Monetary helpers shared across the domain.

Amounts are plain ``Decimal`` values rather than a wrapping value
object: order fields must be able to *hold* an invalid amount (a
negative unit price, say) so that ``Order.validate()`` can report it.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ordermodel.domain.exceptions import InvalidArgumentError

DEFAULT_CURRENCY_SYMBOL = "$"
ZERO = Decimal("0")


def to_amount(value: str | float | int | Decimal) -> Decimal:
    """Coerce *value* to a finite Decimal safely.

    Floats go through ``str()`` so that ``4.5`` becomes ``Decimal("4.5")``
    and not its binary expansion. NaN and infinities are rejected whatever
    type they arrive as.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid money amount: {value!r}")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidArgumentError(f"Invalid money amount: {value!r}") from exc
    if not amount.is_finite():
        raise InvalidArgumentError(f"Invalid money amount: {value!r}")
    return amount


def normalize_amount(value):
    """Turn int/float amounts into Decimal; leave anything else untouched.

    Used on plain field assignment: a value of any other type is kept
    as-is and left for validation to report. Non-finite floats are
    rejected outright.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return to_amount(value)
    return value


def format_money(amount: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Render *amount* with a currency symbol and two decimals, e.g. ``$17.50``."""
    if amount < ZERO:
        return f"-{symbol}{-amount:,.2f}"
    return f"{symbol}{amount:,.2f}"
